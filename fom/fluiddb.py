"""
FluidDB Session

Entry point tying a connector and a gateway together and handing out
resource handles that share them.

Usage:
    from fom.fluiddb import FluidDB
    fdb = FluidDB.from_config()
    fdb.login("alice", "secret")
    home = fdb.get_logged_in_user().root_namespace()
"""

import logging
from typing import Optional

from fom.config import Config, get_config
from fom.connector import FluidConnector
from fom.exceptions import FOMError
from fom.gateway import CallGateway
from fom.namespace import Namespace
from fom.object import FluidObject
from fom.constants import MAIN_URL
from fom.tag import Tag
from fom.user import User

logger = logging.getLogger(__name__)


class FluidDB:
    """A logged in (or anonymous) session against one FluidDB instance."""

    def __init__(self, url: str = MAIN_URL, connector: Optional[FluidConnector] = None):
        self.connector = connector or FluidConnector(url)
        self.gateway = CallGateway(self.connector)

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "FluidDB":
        config = config or get_config()
        return cls(connector=FluidConnector.from_config(config))

    def login(self, username: str, password: str) -> None:
        self.connector.set_credentials(username, password)
        logger.info(f"[FLUIDDB] Logged in as {username} at {self.connector.url}")

    def logout(self) -> None:
        self.connector.clear_credentials()
        logger.info("[FLUIDDB] Logged out")

    def get_logged_in_user(self) -> User:
        if not self.connector.username:
            raise FOMError("No user is logged in")
        return self.get_user(self.connector.username)

    def get_user(self, username: str) -> User:
        user = User(self.gateway, "", username)
        user.get_item()
        return user

    def get_namespace(self, path: str) -> Namespace:
        namespace = Namespace(self.gateway, "", path)
        namespace.get_item()
        return namespace

    def get_tag(self, path: str) -> Tag:
        tag = Tag(self.gateway, "", path)
        tag.get_item()
        return tag

    def get_object(self, id: str) -> FluidObject:
        obj = FluidObject(self.gateway, id)
        obj.get_item()
        return obj

    def create_object(self, about: str = "") -> FluidObject:
        return FluidObject.create(self.gateway, about)
