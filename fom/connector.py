"""
FluidDB Connector

Transport for the object model: one HTTP request per call over a shared
requests.Session. Knows nothing about expected status codes; that check
belongs to the call gateway.

Configuration (set in config.json or .env):
  FLUIDDB_URL=https://fluiddb.fluidinfo.com
  FLUIDDB_USERNAME=your_username
  FLUIDDB_PASSWORD=your_password
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

import requests

from fom.exceptions import TransportError
from fom.constants import (
    DEFAULT_CONTENT_TYPE,
    ERROR_CLASS_HEADER,
    MAIN_URL,
    REQUEST_ID_HEADER,
    REQUEST_TIMEOUT_SECONDS,
    SANDBOX_URL,
)

logger = logging.getLogger(__name__)


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass
class FluidResponse:
    """What came back from FluidDB for a single request."""
    status_code: int
    reason: str = ""
    content_type: str = ""
    content: str = ""
    headers: Dict[str, str] = field(default_factory=dict)


# ============================================================================
# FLUIDDB CONNECTOR
# ============================================================================

class FluidConnector:
    """Issue requests against a FluidDB instance."""

    MAIN_URL = MAIN_URL
    SANDBOX_URL = SANDBOX_URL

    def __init__(self, url: str = MAIN_URL, username: str = "", password: str = "",
                 timeout: float = REQUEST_TIMEOUT_SECONDS):
        self.url = url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self._username = ""
        self._password = ""
        self.set_credentials(username, password)

    @classmethod
    def from_config(cls, config) -> "FluidConnector":
        """Build a connector from a fom.config.Config."""
        return cls(
            url=config.get("service.url", MAIN_URL),
            username=config.get("service.username", ""),
            password=config.get("service.password", ""),
            timeout=float(config.get("service.timeout_seconds", REQUEST_TIMEOUT_SECONDS)),
        )

    # ------------------------------------------------------------------
    # Session accessors
    # ------------------------------------------------------------------

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    def set_credentials(self, username: str, password: str) -> None:
        self._username = username or ""
        self._password = password or ""
        if self._username:
            self.session.auth = (self._username, self._password)
        else:
            self.session.auth = None

    def clear_credentials(self) -> None:
        self.set_credentials("", "")

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def issue_request(self, method: Method, path: str, body: str = "",
                      args: Optional[Dict[str, str]] = None,
                      content_type: str = DEFAULT_CONTENT_TYPE) -> FluidResponse:
        """
        Send one request and wrap whatever status came back.

        Raises:
            TransportError: if no HTTP response was received
        """
        url = f"{self.url}{path}"
        headers = {}
        data = None
        if body:
            headers["Content-Type"] = content_type
            data = body.encode("utf-8")

        logger.debug(f"[CONNECTOR] {method.value} {url} args={args or {}}")
        try:
            response = self.session.request(
                method.value,
                url,
                params=args or None,
                data=data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"[CONNECTOR] {method.value} {url} failed: {e}")
            raise TransportError(f"Unable to reach FluidDB at {self.url}: {e}") from e

        logger.debug(f"[CONNECTOR] {method.value} {url} -> {response.status_code}")
        return FluidResponse(
            status_code=response.status_code,
            reason=response.reason or "",
            content_type=response.headers.get("Content-Type", ""),
            content=response.text,
            headers=dict(response.headers),
        )

    def describe_failure(self, response: FluidResponse) -> str:
        """Human readable diagnostic for a response with an unexpected status."""
        headers = response.headers or {}
        error_class = _header(headers, ERROR_CLASS_HEADER)
        request_id = _header(headers, REQUEST_ID_HEADER) or _request_id_from_body(response.content)
        return (
            f"FluidDB returned the following problematic response: "
            f"{response.status_code} ({response.reason}) {error_class} "
            f"- with the request ID: {request_id}"
        )


def _header(headers: Dict[str, str], name: str) -> str:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return ""


def _request_id_from_body(content: str) -> str:
    if not content:
        return ""
    try:
        data = json.loads(content)
    except ValueError:
        return ""
    if isinstance(data, dict):
        return str(data.get("requestId", ""))
    return ""
