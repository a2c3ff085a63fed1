"""
Test: User handle and default policies
"""

import json

import pytest

from conftest import json_response
from fom.connector import FluidResponse, Method
from fom.exceptions import InvalidPathError
from fom.namespace import Namespace
from fom.permissions import Permission, Policy
from fom.tag import Tag
from fom.user import User


def test_constructor(gateway):
    user = User(gateway, "id", "alice")
    assert user.id == "id"
    assert user.path == "/users/alice"
    assert user.username == "alice"
    assert user.name == ""


def test_constructor_requires_username(gateway):
    with pytest.raises(InvalidPathError):
        User(gateway, "", "")


def test_get_item(gateway, connector):
    connector.queue(json_response(200, {"id": "user-1", "name": "Alice Liddell"}))
    user = User(gateway, "", "alice")
    user.get_item()

    assert connector.last["method"] == Method.GET
    assert connector.last["path"] == "/users/alice"
    assert user.id == "user-1"
    assert user.name == "Alice Liddell"
    assert user.username == "alice"


def test_root_namespace(gateway, connector):
    connector.queue(json_response(200, {"id": "ns-1", "description": "", "namespaceNames": [], "tagNames": []}))
    namespace = User(gateway, "", "alice").root_namespace()
    assert isinstance(namespace, Namespace)
    assert namespace.path == "/namespaces/alice"
    assert namespace.id == "ns-1"


@pytest.mark.parametrize("getter, setter, action, path", [
    ("get_namespace_policy", "set_namespace_policy", Namespace.Actions.CREATE, "/policies/alice/namespaces/create"),
    ("get_tag_policy", "set_tag_policy", Tag.TagActions.UPDATE, "/policies/alice/tags/update"),
    ("get_tag_value_policy", "set_tag_value_policy", Tag.TagValueActions.UPDATE, "/policies/alice/tag-values/update"),
])
def test_policies(gateway, connector, getter, setter, action, path):
    user = User(gateway, "", "alice")
    permission = Permission(Policy.CLOSED, ["fluidDB", "alice"])

    connector.queue(FluidResponse(status_code=204))
    getattr(user, setter)(action, permission)
    assert connector.last["path"] == path
    assert connector.last["args"] == {}
    assert json.loads(connector.last["body"]) == {"exceptions": ["fluidDB", "alice"], "policy": "closed"}

    connector.queue(json_response(200, {"policy": "closed", "exceptions": ["fluidDB", "alice"]}))
    assert getattr(user, getter)(action) == permission
    assert connector.last["args"] == {}
