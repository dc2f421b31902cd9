"""
Command-line admin interface for TinyLink.

Operates directly on the store configured by DATABASE_URL (or the PG*
settings when it is unset).

Usage:
    tinylink create <target> [--code CODE]
    tinylink get <code>
    tinylink list [--limit N] [--offset N]
    tinylink delete <code>
    tinylink visit <code>
    tinylink health
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from .common.logging_config import setup_logging
from .config import Config
from .database import create_store
from .errors import LinkRegistryError, StoreUnavailable
from .service import LinkRegistry
from .shortcode import CODE_RULE, ShortCodeGenerator


class TinyLinkCLI:
    """Command-line interface for link administration."""

    def __init__(self, registry: LinkRegistry, out=None, err=None):
        self.registry = registry
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def _emit(self, payload: dict, ok: bool = True) -> int:
        print(json.dumps(payload, indent=2), file=self.out if ok else self.err)
        return 0 if ok else 1

    async def run(self, command: str, args: argparse.Namespace) -> int:
        """Execute one command and return the process exit code."""
        try:
            if command == "create":
                link = await self.registry.create(args.target, args.code)
                return self._emit({"success": True, **link.to_dict()})
            if command == "get":
                link = await self.registry.get_metadata(args.code)
                return self._emit({"success": True, **link.to_dict()})
            if command == "list":
                links = await self.registry.list(args.limit, args.offset)
                return self._emit({
                    "success": True,
                    "count": len(links),
                    "rows": [link.to_dict() for link in links],
                })
            if command == "delete":
                deleted = await self.registry.delete(args.code)
                return self._emit({"success": True, "deleted": deleted})
            if command == "visit":
                target = await self.registry.resolve_and_record_visit(args.code)
                return self._emit({"success": True, "message": "click updated", "target": target})
            if command == "health":
                health = await self.registry.health_check()
                return self._emit({"success": health["overall"], "health": health}, ok=health["overall"])
        except StoreUnavailable:
            return self._emit({"success": False, "error": "store unavailable"}, ok=False)
        except LinkRegistryError as e:
            return self._emit({"success": False, "error": e.message}, ok=False)

        return self._emit({"success": False, "error": f"Unknown command: {command}"}, ok=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinylink",
        description="TinyLink admin CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create a link with a generated code
  %(prog)s create https://example.com/long/url

  # Create with a custom code
  %(prog)s create https://example.com/long/url --code myLink01

  # Inspect and remove
  %(prog)s get myLink01
  %(prog)s list --limit 10
  %(prog)s delete myLink01
        """
    )

    parser.add_argument(
        "--database-url",
        default=None,
        help="Store URL (default: from DATABASE_URL env)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    create_parser = subparsers.add_parser("create", help="Create a short link")
    create_parser.add_argument("target", help="Target URL")
    create_parser.add_argument("--code", help=f"Custom code ({CODE_RULE})")

    get_parser = subparsers.add_parser("get", help="Show link metadata")
    get_parser.add_argument("code", help="Short code")

    list_parser = subparsers.add_parser("list", help="List links, newest first")
    list_parser.add_argument("--limit", default=None, help="Page size (1-100, default 50)")
    list_parser.add_argument("--offset", default=None, help="Rows to skip (default 0)")

    delete_parser = subparsers.add_parser("delete", help="Delete a link")
    delete_parser.add_argument("code", help="Short code")

    visit_parser = subparsers.add_parser("visit", help="Resolve a code, counting a click")
    visit_parser.add_argument("code", help="Short code")

    subparsers.add_parser("health", help="Check store health")

    return parser


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    overrides = {"database_url": args.database_url} if args.database_url else {}
    config = Config(**overrides)
    # Logs go to stderr so stdout stays valid JSON
    logger = setup_logging(level="DEBUG" if args.verbose else "WARNING")
    logger.handlers[0].setStream(sys.stderr)

    registry = LinkRegistry(
        store=create_store(config, logger=logger),
        short_code_generator=ShortCodeGenerator(default_length=config.code_length),
        logger=logger,
        max_generation_attempts=config.max_generation_attempts,
    )

    try:
        return await TinyLinkCLI(registry).run(args.command, args)
    finally:
        await registry.close()


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
