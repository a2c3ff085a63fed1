"""
Permission CLI

Read or replace a FluidDB permission or default policy from the shell.

Usage:
    fom-permissions get /permissions/namespaces/alice --action create
    fom-permissions set /policies/alice/namespaces/create --policy closed --exceptions alice,bob
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from fom.config import get_config, load_config
from fom.exceptions import FOMError
from fom.fluiddb import FluidDB
from fom.permissions import Permission, Policy, get_permission, set_permission

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fom-permissions", description="FluidDB permission tool")
    parser.add_argument("--config", default="config.json", help="Path to config.json")
    sub = parser.add_subparsers(dest="command", required=True)

    get_cmd = sub.add_parser("get", help="Show a permission")
    get_cmd.add_argument("path", help="e.g. /permissions/namespaces/alice")
    get_cmd.add_argument("--action", default="", help="create, update, delete, list, control ...")

    set_cmd = sub.add_parser("set", help="Replace a permission")
    set_cmd.add_argument("path")
    set_cmd.add_argument("--action", default="")
    set_cmd.add_argument("--policy", choices=[p.value for p in Policy], required=True)
    set_cmd.add_argument("--exceptions", default="", help="Comma separated user names")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    load_config(args.config)
    config = get_config()
    logging.basicConfig(
        level=str(config.get("system.log_level", "INFO")).upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    fdb = FluidDB.from_config(config)

    try:
        if args.command == "get":
            permission = get_permission(fdb.gateway, args.path, args.action)
            if permission is None:
                print("Not authorized to view this permission.")
                return 0
            print(json.dumps({"policy": permission.policy.value, "exceptions": list(permission.exceptions)}))
            return 0

        exceptions = [name.strip() for name in args.exceptions.split(",") if name.strip()]
        set_permission(fdb.gateway, args.path, args.action, Permission(Policy(args.policy), exceptions))
        print("OK")
        return 0
    except (FOMError, ValueError) as e:
        logger.error(f"[CLI] {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
