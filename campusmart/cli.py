"""
campusmart store maintenance.

Commands:
  init                Create (or upgrade) the store at the configured path
  reset               Drop and recreate both tables (all data is lost)
  create-admin        Add an ADMINISTRATOR account (email must be @mavmart.com)
  stats               Print schema version and row counts
  serve               Run the HTTP API with uvicorn

Usage:
  python -m campusmart.cli --db ./campusmart.db init
"""
from __future__ import annotations

import argparse
import os
import sys

from . import schema
from .db import StorageEngine
from .config import get_db_path
from .domain.models import Account, Role
from .logs import setup_logging
from .services import account_svc, admin_svc


def cmd_init(engine: StorageEngine, args) -> int:
    engine.open()
    print(f"store ready at {engine.db_path} (schema v{engine.user_version()})")
    return 0


def cmd_reset(engine: StorageEngine, args) -> int:
    if not args.yes:
        print("refusing to reset without --yes", file=sys.stderr)
        return 2
    # any version below current triggers the destructive path
    engine.upgrade(0, schema.SCHEMA_VERSION)
    print(f"store reset at {engine.db_path}")
    return 0


def cmd_create_admin(engine: StorageEngine, args) -> int:
    if not account_svc.is_admin_email(args.email):
        print(f"admin email must end with {account_svc.ADMIN_EMAIL_DOMAIN}", file=sys.stderr)
        return 2
    account = Account(
        first=args.first.strip(),
        last=args.last.strip(),
        email=args.email,
        credential=args.credential,
        role=Role.ADMINISTRATOR,
    )
    new_id = account_svc.insert_account(account, engine)
    if new_id is None:
        print(f"email already registered: {args.email}", file=sys.stderr)
        return 1
    print({"message": "ok", "id": new_id})
    return 0


def cmd_stats(engine: StorageEngine, args) -> int:
    ov = admin_svc.admin_overview(engine)
    print(
        {
            "db_path": engine.db_path,
            "schema_version": engine.user_version(),
            "accounts": ov["account_count"],
            "listings": ov["listing_count"],
        }
    )
    return 0


def cmd_serve(engine: StorageEngine, args) -> int:
    import uvicorn

    # the app builds its own engine from config, so point it at the same file
    os.environ["CAMPUSMART_DB_PATH"] = engine.db_path
    engine.close()
    uvicorn.run("campusmart.api:app", host=args.host, port=args.port, reload=False)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="campusmart store maintenance")
    parser.add_argument("--db", default=None, help="database path (default: from config)")
    sub = parser.add_subparsers()

    p_init = sub.add_parser("init", help="create or upgrade the store")
    p_init.set_defaults(func=cmd_init)

    p_reset = sub.add_parser("reset", help="drop and recreate all tables")
    p_reset.add_argument("--yes", action="store_true")
    p_reset.set_defaults(func=cmd_reset)

    p_admin = sub.add_parser("create-admin", help="add an administrator account")
    p_admin.add_argument("--first", required=True)
    p_admin.add_argument("--last", required=True)
    p_admin.add_argument("--email", required=True)
    p_admin.add_argument("--credential", required=True)
    p_admin.set_defaults(func=cmd_create_admin)

    p_stats = sub.add_parser("stats", help="print version and row counts")
    p_stats.set_defaults(func=cmd_stats)

    p_serve = sub.add_parser("serve", help="run the HTTP API")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)
    p_serve.set_defaults(func=cmd_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    setup_logging()
    engine = StorageEngine(args.db or get_db_path())
    try:
        return args.func(engine, args)
    finally:
        engine.close()


if __name__ == "__main__":
    sys.exit(main())
