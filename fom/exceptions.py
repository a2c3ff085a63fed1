"""
FOM Error Taxonomy

Every failure the object model raises derives from FOMError so callers can
catch the whole family at once.

- InvalidPathError / InvalidNameError: local, never reach the network
- TransportError: connectivity or I/O fault below the HTTP layer
- RemoteCallError: FluidDB answered with an unexpected status code
- UnsupportedContentTypeError: JSON requested from a non-JSON response
"""


class FOMError(Exception):
    """Base class for all object model errors."""


class InvalidPathError(FOMError):
    """A path cannot yield a non-empty name."""


class InvalidNameError(FOMError):
    """A name for a new namespace or tag fails validation."""


class TransportError(FOMError):
    """The request never produced an HTTP response."""


class RemoteCallError(FOMError):
    """FluidDB returned a status code other than the expected one."""

    def __init__(self, message: str, response=None):
        super().__init__(message)
        self.response = response
        self.status_code = getattr(response, "status_code", None)


class UnsupportedContentTypeError(FOMError):
    """A response body was requested as JSON but is not application/json."""
