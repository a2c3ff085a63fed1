"""
Path Resolver

Every resource's identity and REST endpoint are derived from path
composition, so all joining goes through here.

Usage:
    from fom.paths import resolve_path, name_from_path
    resolve_path("/namespaces", "alice")   # "/namespaces/alice"
    name_from_path("/foo/bar/baz/")        # "baz"
"""

import re

from fom.exceptions import InvalidPathError

SEPARATOR = "/"

# Longest path FluidDB accepts
MAX_PATH_LENGTH = 233

_VALID_PATH = re.compile(r"^[A-Za-z0-9/:._\-]+$")


def uri_join(*parts: str) -> str:
    """
    Join path segments with exactly one separator between them.

    A leading separator on the first segment is kept; duplicate and trailing
    separators are dropped. Empty segments are skipped.

    Examples:
        uri_join("/foo", "bar/", "/baz")  # "/foo/bar/baz"
        uri_join("foo", "bar")            # "foo/bar"
    """
    segments = []
    for part in parts:
        if not part:
            continue
        segments.extend(s for s in part.split(SEPARATOR) if s)

    joined = SEPARATOR.join(segments)
    if parts and parts[0] and parts[0].startswith(SEPARATOR):
        joined = SEPARATOR + joined
    return joined


def resolve_path(root: str, relative: str) -> str:
    """Canonical remote path of a handle. An empty relative path yields root alone."""
    if not relative:
        return root
    return uri_join(root, relative)


def name_from_path(path: str) -> str:
    """
    Return the last segment of a path (the name of the thing referenced).

    Raises:
        InvalidPathError: if nothing is left once trailing separators are removed
    """
    trimmed = (path or "").rstrip(SEPARATOR)
    if not trimmed:
        raise InvalidPathError("Cannot determine the name from the supplied path.")
    return trimmed[trimmed.rfind(SEPARATOR) + 1:]


def validate_path(path) -> bool:
    """True if path only holds legal characters and is not too long."""
    if not path or not isinstance(path, str):
        return False
    if len(path) > MAX_PATH_LENGTH:
        return False
    return bool(_VALID_PATH.match(path))
