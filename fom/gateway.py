"""
Call Gateway

Issues a single request through the connector and checks the status code
against the one the caller expects. Exact match only: a 200 where a 204 was
expected is a failure.
"""

import json
import logging
from typing import Dict, Optional

from fom.connector import FluidConnector, FluidResponse, Method
from fom.exceptions import RemoteCallError, UnsupportedContentTypeError
from fom.constants import DEFAULT_CONTENT_TYPE, JSON_CONTENT_TYPE

logger = logging.getLogger(__name__)


class CallGateway:
    """Status-checked calls shared by every resource handle."""

    def __init__(self, connector: FluidConnector):
        self.connector = connector

    def call(self, method: Method, expected_status: int, body: str = "",
             args: Optional[Dict[str, str]] = None, path: str = "/",
             content_type: str = DEFAULT_CONTENT_TYPE) -> FluidResponse:
        """
        Call FluidDB and return the response when its status matches.

        Args:
            method: HTTP method
            expected_status: the only status code treated as success
            body: JSON (or primitive value) payload, "" for none
            args: query arguments appended to the URL
            path: remote path, e.g. /namespaces/alice
            content_type: Content-Type sent with the body

        Raises:
            RemoteCallError: status code differs from expected_status
            TransportError: from the connector, unchanged
        """
        response = self.connector.issue_request(method, path, body, args or {}, content_type)
        if response.status_code == expected_status:
            return response

        message = self.connector.describe_failure(response)
        logger.warning(
            f"[GATEWAY] {method.value} {path} expected {expected_status}, "
            f"got {response.status_code}"
        )
        raise RemoteCallError(message, response)

    def raise_for(self, response: FluidResponse) -> None:
        """Raise a RemoteCallError built from a response the caller rejected."""
        raise RemoteCallError(self.connector.describe_failure(response), response)


def parse_json(response: FluidResponse):
    """
    Decode a response body as JSON.

    The content type must be exactly application/json; a charset suffix is
    not accepted.

    Raises:
        UnsupportedContentTypeError: for any other content type
    """
    if response.content_type != JSON_CONTENT_TYPE:
        raise UnsupportedContentTypeError(
            f"Unable to convert response to json because the content type is {response.content_type}"
        )
    return json.loads(response.content)
