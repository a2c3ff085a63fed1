"""
Resource Handle Base

A handle is a local projection of one remote FluidDB entity, addressed by a
root path (the resource kind, e.g. /namespaces) and a relative path (the
instance, e.g. alice). Handles hold a CallGateway rather than talking to the
network themselves, so every resource kind shares the same call and
permission behaviour.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from fom import paths
from fom.connector import FluidResponse, Method
from fom.gateway import CallGateway, parse_json
from fom.permissions import Permission, get_permission, set_permission
from fom.constants import DEFAULT_CONTENT_TYPE


class ResourceHandle(ABC):
    """Shared path, call and permission plumbing for resource handles."""

    root_path = ""

    def __init__(self, gateway: CallGateway, id: str = "", path: str = ""):
        self.gateway = gateway
        self._id = id or ""
        self.relative_path = path or ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, path={self.path!r})"

    @property
    def id(self) -> str:
        """FluidDB id; empty until the handle is populated."""
        return self._id

    @property
    def path(self) -> str:
        return paths.resolve_path(self.root_path, self.relative_path)

    @property
    def connector(self):
        return self.gateway.connector

    @abstractmethod
    def get_item(self) -> None:
        """Populate the handle from FluidDB."""

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    def _call(self, method: Method, expected_status: int, body: str = "",
             args: Optional[Dict[str, str]] = None, path: Optional[str] = None,
             content_type: str = DEFAULT_CONTENT_TYPE) -> FluidResponse:
        """Call FluidDB at path, or at this handle's own path when none is given."""
        if path is None:
            path = self.path
        return self.gateway.call(method, expected_status, body, args, path, content_type)

    def _get_permission(self, path: str, action: str = "") -> Optional[Permission]:
        return get_permission(self.gateway, path, action)

    def _set_permission(self, path: str, action: str, permission: Permission) -> None:
        set_permission(self.gateway, path, action, permission)

    @staticmethod
    def _get_json(response: FluidResponse):
        return parse_json(response)

    @staticmethod
    def name_from_path(path: str) -> str:
        return paths.name_from_path(path)
