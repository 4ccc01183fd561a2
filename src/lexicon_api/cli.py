#!/usr/bin/env python3
"""
Operator commands for the lexicon database schema.

Usage:
    lexicon-admin schema status
    lexicon-admin schema create
    lexicon-admin --timeout 120 schema drop-all --yes

Connection settings come from the environment (DGRAPH_URL, DGRAPH_AUTH_TOKEN).
"""

import argparse
import logging
import sys

from .core.config import get_schema_sync_config
from .core.deadline import Deadline
from .core.dependencies import cleanup_connections, get_schema_synchronizer
from .core.logging import setup_logging
from .services.domain.schema import SchemaError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="lexicon-admin", description="Manage the lexicon Dgraph schema")
    ap.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for the database to become ready (default: SCHEMA_SYNC_TIMEOUT)",
    )

    commands = ap.add_subparsers(dest="command", required=True)
    schema = commands.add_parser("schema", help="Schema operations")
    actions = schema.add_subparsers(dest="action", required=True)

    actions.add_parser("status", help="Compare the live schema with the schema document")
    actions.add_parser("create", help="Install the schema document if the live schema differs")
    drop = actions.add_parser("drop-all", help="Drop ALL data and schema")
    drop.add_argument("--yes", action="store_true", help="Confirm the drop")

    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    # stdout carries command output only
    setup_logging(stream="ext://sys.stderr")

    if args.action == "drop-all" and not args.yes:
        print("Refusing to drop all data and schema without --yes", file=sys.stderr)
        return 2

    timeout = args.timeout if args.timeout is not None else get_schema_sync_config().SYNC_TIMEOUT
    deadline = Deadline(timeout=timeout)
    synchronizer = get_schema_synchronizer()

    try:
        if args.action == "status":
            print(synchronizer.status(deadline).value)
        elif args.action == "create":
            synchronizer.create(deadline)
        elif args.action == "drop-all":
            synchronizer.drop_all(deadline)
        return 0

    except SchemaError as e:
        logger.error(f"Schema {args.action} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    finally:
        cleanup_connections()


if __name__ == "__main__":
    sys.exit(main())
