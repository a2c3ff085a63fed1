"""
Constants Module (Centralized Timeouts & Wire Constants)

Constants only. No side effects. No imports from other FOM modules.
Permission policies (open/closed) live in fom.permissions, not here.
"""

# FluidDB instances
MAIN_URL = "https://fluiddb.fluidinfo.com"
SANDBOX_URL = "https://sandbox.fluidinfo.com"

# HTTP timeout for a single round trip (no retries at this layer)
REQUEST_TIMEOUT_SECONDS = 30

# Content types
DEFAULT_CONTENT_TYPE = "application/json; charset=utf-8"
JSON_CONTENT_TYPE = "application/json"
PRIMITIVE_VALUE_CONTENT_TYPE = "application/vnd.fluiddb.value+json"

# Response headers FluidDB uses to describe failures
ERROR_CLASS_HEADER = "X-FluidDB-Error-Class"
REQUEST_ID_HEADER = "X-FluidDB-Request-Id"

# Root paths for each resource kind
NAMESPACES_ROOT = "/namespaces"
TAGS_ROOT = "/tags"
USERS_ROOT = "/users"
OBJECTS_ROOT = "/objects"
PERMISSIONS_ROOT = "/permissions"
POLICIES_ROOT = "/policies"
