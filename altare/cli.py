### Description ###
# Altare Planner - Wedding Planning API
# - Management CLI -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Altare Planner Management CLI

Usage:
    python -m altare.cli serve [--host HOST] [--port PORT] [--reload]
    python -m altare.cli init-db
    python -m altare.cli seed-templates
    python -m altare.cli issue-access <vendor_id>
"""

import argparse
import asyncio
import logging
import sys
from datetime import timedelta

from altare.config import get_api_settings
from altare.database import SessionLocal, init_db
from altare.services import PersistenceClient, TableLayoutService, VendorAccessService
from altare.services.errors import ServiceError
from altare.utils import setup_logger

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the API server with uvicorn"""
    import uvicorn

    settings = get_api_settings()
    uvicorn.run(
        "altare.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload,
    )
    return 0


def cmd_init_db(args: argparse.Namespace) -> int:
    """Create all tables"""
    init_db()
    return 0


async def _seed_templates() -> list[dict]:
    db = SessionLocal()
    try:
        return await TableLayoutService(PersistenceClient(db)).seed_predefined_templates()
    finally:
        db.close()


def cmd_seed_templates(args: argparse.Namespace) -> int:
    """Insert missing predefined table templates"""
    init_db()
    added = asyncio.run(_seed_templates())
    if added:
        for template in added:
            print(f"  + {template['name']}")
    print(f"{len(added)} template(s) added")
    return 0


async def _issue_access(vendor_id: str):
    settings = get_api_settings()
    db = SessionLocal()
    try:
        persistence = PersistenceClient(db)
        if not persistence.select("vendors", {"id": vendor_id}):
            return None
        service = VendorAccessService(persistence, ttl=timedelta(days=settings.vendor_access_ttl_days))
        return await service.issue_access(vendor_id)
    finally:
        db.close()


def cmd_issue_access(args: argparse.Namespace) -> int:
    """Issue a temporary vendor login and print it once"""
    settings = get_api_settings()
    init_db()

    try:
        issued = asyncio.run(_issue_access(args.vendor_id))
    except ServiceError as e:
        logger.error(f"Could not issue vendor access: {e.message}")
        return 1

    if issued is None:
        print(f"Vendor {args.vendor_id} not found", file=sys.stderr)
        return 1

    print("\n" + "=" * 70)
    print("  VENDOR ACCESS CREATED")
    print("=" * 70)
    print(f"\n  Login link: {issued.login_link(settings.vendor_login_url)}")
    print(f"  Password:   {issued.password}")
    print(f"  Expires:    {issued.expires_at:%Y-%m-%d %H:%M} UTC\n")
    print("  IMPORTANT: The password will NOT be shown again.")
    print("=" * 70 + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="altare", description="Altare Planner management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", default=None, help="Bind address (default: from settings)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: from settings)")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve.set_defaults(func=cmd_serve)

    init = subparsers.add_parser("init-db", help="Create database tables")
    init.set_defaults(func=cmd_init_db)

    seed = subparsers.add_parser("seed-templates", help="Insert predefined table templates")
    seed.set_defaults(func=cmd_seed_templates)

    issue = subparsers.add_parser("issue-access", help="Issue a temporary vendor login")
    issue.add_argument("vendor_id", help="Vendor profile id")
    issue.set_defaults(func=cmd_issue_access)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_api_settings()
    setup_logger("altare", level=settings.log_level, log_to_file=settings.log_to_file, log_to_console=settings.log_to_console)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
