"""FOM version registry.

Single source of truth for package versioning.
"""

CURRENT_VERSION = "0.3.0"
CURRENT_MILESTONE = "permissions+objects"
CURRENT_DATE = "2026-10-19"

VERSION_HISTORY = [
    {
        "version": "0.1.0",
        "date": "2026-09-28",
        "notes": "Path resolver, call gateway, namespaces and users",
    },
    {
        "version": "0.2.0",
        "date": "2026-10-06",
        "notes": "Permission and policy codec; tags",
    },
    {
        "version": "0.3.0",
        "date": CURRENT_DATE,
        "notes": "Objects and tag values; env-driven config",
    },
]


def get_version():
    return {
        "version": CURRENT_VERSION,
        "milestone": CURRENT_MILESTONE,
        "date": CURRENT_DATE,
        "history": VERSION_HISTORY,
    }
