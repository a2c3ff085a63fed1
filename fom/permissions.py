"""
Permission Codec

FluidDB permissions are a policy (open or closed) plus a list of users who
are exceptions to it. Under OPEN the exceptions are denied; under CLOSED the
exceptions are allowed.

Wire shape:
    {"policy": "open" | "closed", "exceptions": ["name1", "name2", ...]}

See: http://doc.fluidinfo.com/fluidDB/permissions.html
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from fom.connector import Method
from fom.gateway import CallGateway, parse_json

logger = logging.getLogger(__name__)


class Policy(Enum):
    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class Permission:
    """A policy and the names of the users who are exceptions to it."""
    policy: Policy
    exceptions: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "exceptions", tuple(self.exceptions))


def action_args(action: str) -> Dict[str, str]:
    """Query arguments for an action; none at all for action-less policy queries."""
    if action:
        return {"action": action}
    return {}


def encode_permission(permission: Permission) -> str:
    payload = {
        "exceptions": list(permission.exceptions),
        "policy": permission.policy.value,
    }
    return json.dumps(payload)


def decode_permission(data: dict) -> Permission:
    """
    Build a Permission from a decoded JSON body.

    Only the exact string "open" maps to OPEN; every other policy string
    falls back to CLOSED. null entries in exceptions are dropped.

    Raises:
        ValueError: if policy is not a string or exceptions is not a list
    """
    policy = data.get("policy") if isinstance(data, dict) else None
    if not isinstance(policy, str):
        raise ValueError(f"Permission payload has no string 'policy': {data!r}")
    exceptions = data.get("exceptions")
    if not isinstance(exceptions, list):
        raise ValueError(f"Permission payload has no 'exceptions' array: {data!r}")

    p = Policy.OPEN if policy == "open" else Policy.CLOSED
    return Permission(p, [str(e) for e in exceptions if e is not None])


def get_permission(gateway: CallGateway, path: str, action: str = "") -> Optional[Permission]:
    """
    Fetch the permission at path for action.

    Returns None when FluidDB answers 401: the logged in user lacks the
    CONTROL permission needed to view it.

    Args:
        path: e.g. /permissions/namespaces/foo or /policies/foo/namespaces/create
        action: e.g. create, update, delete, list, control; "" for policies

    Raises:
        RemoteCallError: for any status other than 200 or 401
    """
    response = gateway.connector.issue_request(Method.GET, path, "", action_args(action))
    if response.status_code == 200:
        return decode_permission(parse_json(response))
    if response.status_code == 401:
        logger.debug(f"[PERMISSIONS] Not authorized to view {path} action={action!r}")
        return None
    logger.warning(f"[PERMISSIONS] GET {path} returned {response.status_code}")
    gateway.raise_for(response)


def set_permission(gateway: CallGateway, path: str, action: str, permission: Permission) -> None:
    """
    Replace the permission at path for action.

    Raises:
        RemoteCallError: for any status other than 204
    """
    gateway.call(Method.PUT, 204, encode_permission(permission), action_args(action), path)
    logger.info(
        f"[PERMISSIONS] {path} action={action!r} set to {permission.policy.value} "
        f"with {len(permission.exceptions)} exception(s)"
    )
