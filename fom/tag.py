"""
Tag

See: http://doc.fluidinfo.com/fluidDB/tags.html

A tag is a named attribute that lives in a namespace and can be attached,
with a value, to any object. Permissions on the tag itself and on the values
it carries are configured separately.
"""

import json
from enum import Enum
from typing import Optional

from fom.base import ResourceHandle
from fom.connector import Method
from fom.gateway import CallGateway
from fom.paths import uri_join
from fom.permissions import Permission
from fom.constants import PERMISSIONS_ROOT, TAGS_ROOT


class TagActions(str, Enum):
    UPDATE = "update"
    DELETE = "delete"
    CONTROL = "control"


class TagValueActions(str, Enum):
    UPDATE = "update"
    READ = "read"
    DELETE = "delete"
    CONTROL = "control"


class Tag(ResourceHandle):
    """A FluidDB tag, e.g. /tags/alice/rating."""

    root_path = TAGS_ROOT
    TagActions = TagActions
    TagValueActions = TagValueActions

    def __init__(self, gateway: CallGateway, id: str = "", path: str = ""):
        super().__init__(gateway, id, path)
        self._description: Optional[str] = None
        self._indexed: Optional[bool] = None

    @property
    def name(self) -> str:
        return self.name_from_path(self.relative_path)

    def get_item(self) -> None:
        response = self._call(Method.GET, 200, "", {"returnDescription": "True"})
        result = self._get_json(response)
        self._id = result["id"]
        self._description = result.get("description", "")
        self._indexed = bool(result.get("indexed", False))

    @property
    def description(self) -> str:
        if self._description is None:
            self.get_item()
        return self._description

    def set_description(self, description: str) -> None:
        self._call(Method.PUT, 204, json.dumps({"description": description}))
        self._description = description

    @property
    def indexed(self) -> bool:
        if self._indexed is None:
            self.get_item()
        return self._indexed

    def delete(self) -> None:
        self._call(Method.DELETE, 204)

    # Permissions on the tag
    def get_permission(self, action: TagActions) -> Optional[Permission]:
        path = uri_join(PERMISSIONS_ROOT, self.path)
        return self._get_permission(path, TagActions(action).value)

    def set_permission(self, action: TagActions, permission: Permission) -> None:
        path = uri_join(PERMISSIONS_ROOT, self.path)
        self._set_permission(path, TagActions(action).value, permission)

    # Permissions on the values of the tag
    def get_tag_value_permission(self, action: TagValueActions) -> Optional[Permission]:
        path = uri_join(PERMISSIONS_ROOT, "tag-values", self.relative_path)
        return self._get_permission(path, TagValueActions(action).value)

    def set_tag_value_permission(self, action: TagValueActions, permission: Permission) -> None:
        path = uri_join(PERMISSIONS_ROOT, "tag-values", self.relative_path)
        self._set_permission(path, TagValueActions(action).value, permission)
