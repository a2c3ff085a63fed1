"""
FluidDB Object

See: http://doc.fluidinfo.com/fluidDB/objects.html

Objects are not owned by anyone. They carry an optional, unique "about"
value and any number of tags with values.
"""

import json
import logging
from typing import Any, List, Optional

from fom.base import ResourceHandle
from fom.connector import Method
from fom.gateway import CallGateway
from fom.paths import uri_join
from fom.constants import OBJECTS_ROOT, PRIMITIVE_VALUE_CONTENT_TYPE

logger = logging.getLogger(__name__)


class FluidObject(ResourceHandle):
    """A FluidDB object, addressed as /objects/<id>."""

    root_path = OBJECTS_ROOT

    def __init__(self, gateway: CallGateway, id: str = ""):
        super().__init__(gateway, id, id)
        self._about: Optional[str] = None
        self._tag_paths: Optional[List[str]] = None

    @classmethod
    def create(cls, gateway: CallGateway, about: str = "") -> "FluidObject":
        """Create a new object, optionally with an about value."""
        body = json.dumps({"about": about}) if about else "{}"
        response = gateway.call(Method.POST, 201, body, path=OBJECTS_ROOT)
        result = ResourceHandle._get_json(response)
        obj = cls(gateway, result["id"])
        obj._about = about or None
        logger.info(f"[OBJECT] Created {obj.path}")
        return obj

    def get_item(self) -> None:
        result = self._get_json(self._call(Method.GET, 200, "", {"showAbout": "True"}))
        self._about = result.get("about")
        self._tag_paths = list(result.get("tagPaths", []))

    @property
    def about(self) -> Optional[str]:
        if self._about is None and self._tag_paths is None:
            self.get_item()
        return self._about

    @property
    def tag_paths(self) -> List[str]:
        if self._tag_paths is None:
            self.get_item()
        return list(self._tag_paths)

    # ------------------------------------------------------------------
    # Tag values
    # ------------------------------------------------------------------

    def tag(self, tag_path: str, value: Any = None) -> None:
        """Attach a primitive value (None, bool, number, string, list of strings)."""
        self._call(
            Method.PUT,
            204,
            json.dumps(value),
            path=uri_join(self.path, tag_path),
            content_type=PRIMITIVE_VALUE_CONTENT_TYPE,
        )
        if self._tag_paths is not None and tag_path not in self._tag_paths:
            self._tag_paths.append(tag_path)

    def get_tag_value(self, tag_path: str) -> Any:
        """
        Fetch a tag value. Primitive values are decoded; opaque values come
        back as the raw response body.
        """
        response = self._call(Method.GET, 200, path=uri_join(self.path, tag_path))
        if response.content_type == PRIMITIVE_VALUE_CONTENT_TYPE:
            return json.loads(response.content)
        return response.content

    def delete_tag(self, tag_path: str) -> None:
        self._call(Method.DELETE, 204, path=uri_join(self.path, tag_path))
        if self._tag_paths is not None and tag_path in self._tag_paths:
            self._tag_paths.remove(tag_path)
