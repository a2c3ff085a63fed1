"""
User

See: http://doc.fluidinfo.com/fluidDB/users.html

Each user has an object in FluidDB holding information about them, a root
namespace named after them, and default policies applied to anything they
create.
"""

from typing import Optional

from fom.base import ResourceHandle
from fom.connector import Method
from fom.gateway import CallGateway
from fom.namespace import Actions as NamespaceActions
from fom.namespace import Namespace
from fom.paths import uri_join
from fom.permissions import Permission
from fom.constants import POLICIES_ROOT, USERS_ROOT
from fom.tag import TagActions, TagValueActions


class User(ResourceHandle):
    """A FluidDB user, addressed as /users/<username>."""

    root_path = USERS_ROOT

    def __init__(self, gateway: CallGateway, id: str = "", path: str = ""):
        super().__init__(gateway, id, path)
        self._username = self.name_from_path(path)
        self._name = ""

    def get_item(self) -> None:
        result = self._get_json(self._call(Method.GET, 200))
        self._id = result["id"]
        self._name = result.get("name", "")

    @property
    def username(self) -> str:
        return self._username

    @property
    def name(self) -> str:
        """The user's real name; empty until populated."""
        return self._name

    def root_namespace(self) -> Namespace:
        namespace = Namespace(self.gateway, "", self._username)
        namespace.get_item()
        return namespace

    # ------------------------------------------------------------------
    # Default policies: /policies/<username>/<category>/<action>
    # ------------------------------------------------------------------

    def _policy_path(self, category: str, action: str) -> str:
        return uri_join(POLICIES_ROOT, self._username, category, action)

    def get_namespace_policy(self, action: NamespaceActions) -> Optional[Permission]:
        return self._get_permission(self._policy_path("namespaces", NamespaceActions(action).value))

    def set_namespace_policy(self, action: NamespaceActions, permission: Permission) -> None:
        self._set_permission(self._policy_path("namespaces", NamespaceActions(action).value), "", permission)

    def get_tag_policy(self, action: TagActions) -> Optional[Permission]:
        return self._get_permission(self._policy_path("tags", TagActions(action).value))

    def set_tag_policy(self, action: TagActions, permission: Permission) -> None:
        self._set_permission(self._policy_path("tags", TagActions(action).value), "", permission)

    def get_tag_value_policy(self, action: TagValueActions) -> Optional[Permission]:
        return self._get_permission(self._policy_path("tag-values", TagValueActions(action).value))

    def set_tag_value_policy(self, action: TagValueActions, permission: Permission) -> None:
        self._set_permission(self._policy_path("tag-values", TagValueActions(action).value), "", permission)
