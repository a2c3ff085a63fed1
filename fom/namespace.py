"""
Namespace

See: http://doc.fluidinfo.com/fluidDB/namespaces.html

Namespaces hold tags and other namespaces. Every user has a root namespace
named after them.
"""

import json
import logging
from enum import Enum
from typing import List, Optional

from fom.base import ResourceHandle
from fom.connector import Method
from fom.exceptions import InvalidNameError
from fom.gateway import CallGateway
from fom.paths import uri_join, validate_path
from fom.permissions import Permission
from fom.constants import NAMESPACES_ROOT, PERMISSIONS_ROOT, TAGS_ROOT
from fom.tag import Tag

logger = logging.getLogger(__name__)

INVALID_NAME_MESSAGE = "Invalid name (incorrect characters or too long)"


class Actions(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    LIST = "list"
    CONTROL = "control"


class Namespace(ResourceHandle):
    """A FluidDB namespace, e.g. /namespaces/alice/books."""

    root_path = NAMESPACES_ROOT
    Actions = Actions

    def __init__(self, gateway: CallGateway, id: str = "", path: str = ""):
        super().__init__(gateway, id, path)
        self._description: Optional[str] = None
        self._namespace_names: Optional[List[str]] = None
        self._tag_names: Optional[List[str]] = None

    @property
    def name(self) -> str:
        return self.name_from_path(self.relative_path)

    def get_item(self) -> None:
        args = {
            "returnDescription": "True",
            "returnNamespaces": "True",
            "returnTags": "True",
        }
        result = self._get_json(self._call(Method.GET, 200, "", args))
        self._id = result["id"]
        self._description = result.get("description", "")
        self._namespace_names = list(result.get("namespaceNames", []))
        self._tag_names = list(result.get("tagNames", []))

    # ------------------------------------------------------------------
    # Fields (fetched from FluidDB on first access)
    # ------------------------------------------------------------------

    @property
    def description(self) -> str:
        if self._description is None:
            self.get_item()
        return self._description

    def set_description(self, description: str) -> None:
        self._call(Method.PUT, 204, json.dumps({"description": description}))
        self._description = description

    @property
    def namespace_names(self) -> List[str]:
        if self._namespace_names is None:
            self.get_item()
        return self._namespace_names

    @property
    def tag_names(self) -> List[str]:
        if self._tag_names is None:
            self.get_item()
        return self._tag_names

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def create_namespace(self, name: str, description: str) -> "Namespace":
        """
        Create a namespace underneath this one.

        Raises:
            InvalidNameError: name has illegal characters or is too long
        """
        if not validate_path(name):
            raise InvalidNameError(INVALID_NAME_MESSAGE)
        body = json.dumps({"name": name, "description": description})
        result = self._get_json(self._call(Method.POST, 201, body))
        child = Namespace(self.gateway, result["id"], uri_join(self.relative_path, name))
        child._description = description
        logger.info(f"[NAMESPACE] Created {child.path}")
        return child

    def create_tag(self, name: str, description: str, indexed: bool = False) -> Tag:
        """
        Create a tag in this namespace.

        Raises:
            InvalidNameError: name has illegal characters or is too long
        """
        if not validate_path(name):
            raise InvalidNameError(INVALID_NAME_MESSAGE)
        body = json.dumps({"name": name, "description": description, "indexed": indexed})
        tags_path = uri_join(TAGS_ROOT, self.relative_path)
        result = self._get_json(self._call(Method.POST, 201, body, path=tags_path))
        tag = Tag(self.gateway, result["id"], uri_join(self.relative_path, name))
        tag._description = description
        tag._indexed = indexed
        logger.info(f"[NAMESPACE] Created tag {tag.path}")
        return tag

    def get_namespace(self, name: str) -> "Namespace":
        child = Namespace(self.gateway, "", uri_join(self.relative_path, name))
        child.get_item()
        return child

    def get_tag(self, name: str) -> Tag:
        tag = Tag(self.gateway, "", uri_join(self.relative_path, name))
        tag.get_item()
        return tag

    def delete(self) -> None:
        self._call(Method.DELETE, 204)
        logger.info(f"[NAMESPACE] Deleted {self.path}")

    # ------------------------------------------------------------------
    # Permissions
    # ------------------------------------------------------------------

    @property
    def permissions_path(self) -> str:
        return uri_join(PERMISSIONS_ROOT, self.path)

    def get_permission(self, action: Actions) -> Optional[Permission]:
        """None if the logged in user may not see this permission."""
        return self._get_permission(self.permissions_path, Actions(action).value)

    def set_permission(self, action: Actions, permission: Permission) -> None:
        self._set_permission(self.permissions_path, Actions(action).value, permission)
