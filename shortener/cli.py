#!/usr/bin/env python3
"""
Command-line interface for URL shortener service.

Usage:
    url-shortener-cli shorten <url>
    url-shortener-cli get <short_code>
    url-shortener-cli update <short_code> <url>
    url-shortener-cli delete <short_code>
    url-shortener-cli stats <short_code>
    url-shortener-cli health
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from .config import load_config
from .database import InMemoryURLStore, PostgresURLStore, RedisCache
from .database.models import URLRecord
from .errors import NotFound, URLShortenerError, ValidationError
from .service import URLShortenerService
from .shortcode import ShortCodeGenerator
from .common.logging_config import setup_logging, shutdown_logging


class URLShortenerCLI:
    """Command-line interface for URL shortener."""

    def __init__(
        self,
        db_url: str,
        database: Optional[str] = None,
        redis_url: Optional[str] = None,
        store_backend: str = "postgres",
        verbose: bool = False,
    ):
        """Initialize CLI."""
        self.db_url = db_url
        self.database = database
        self.redis_url = redis_url
        self.store_backend = store_backend
        self.verbose = verbose
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.service: Optional[URLShortenerService] = None

    async def initialize(self):
        """Initialize store and service."""
        if self.store_backend == "memory":
            store = InMemoryURLStore(logger=self.logger)
        else:
            store = PostgresURLStore(
                db_config=self.db_url,
                database=self.database,
                logger=self.logger,
            )

        cache = None
        if self.redis_url:
            cache = RedisCache(redis_url=self.redis_url, logger=self.logger)
            await cache.connect()

        self.service = URLShortenerService(
            store=store,
            short_code_generator=ShortCodeGenerator(),
            cache=cache,
            logger=self.logger,
        )

    async def cleanup(self):
        """Cleanup resources."""
        if self.service:
            await self.service.close()
        shutdown_logging(self.logger)

    def _ok(self, payload: dict) -> int:
        print(json.dumps({"success": True, **payload}, indent=2))
        return 0

    def _fail(self, error: str) -> int:
        print(json.dumps({"success": False, "error": error}, indent=2), file=sys.stderr)
        return 1

    def _record(self, record: URLRecord) -> int:
        return self._ok({"url": record.to_dict()})

    async def run(self, command: str, args: argparse.Namespace) -> int:
        """Execute one command and report the outcome as JSON."""
        try:
            if command == "shorten":
                return self._record(await self.service.create_short_url(args.url))
            if command == "get":
                record = await self.service.resolve_short_url(args.short_code)
                await self.service.wait_for_pending_increments()
                return self._record(record)
            if command == "update":
                return self._record(await self.service.update_short_url(args.short_code, args.url))
            if command == "delete":
                await self.service.delete_short_url(args.short_code)
                return self._ok({"message": f"Deleted short code '{args.short_code}'"})
            if command == "stats":
                return self._record(await self.service.get_stats(args.short_code))
            if command == "health":
                health = await self.service.health_check()
                print(json.dumps({"success": health["overall"], "health": health}, indent=2))
                return 0 if health["overall"] else 1
        except (ValidationError, NotFound) as e:
            return self._fail(str(e))
        except URLShortenerError as e:
            self.logger.error(f"{command} failed: {e}")
            return self._fail(f"Error: {e}")

        return self._fail(f"Unknown command: {command}")


def build_parser() -> argparse.ArgumentParser:
    config = load_config()

    parser = argparse.ArgumentParser(
        description="URL Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url

  # Resolve a short code (counts as an access)
  %(prog)s get Ab3xY9

  # Point a short code at another URL
  %(prog)s update Ab3xY9 https://example.com/new

  # Get statistics without counting an access
  %(prog)s stats Ab3xY9
        """
    )

    parser.add_argument(
        "--db-url",
        default=config.database_url,
        help="PostgreSQL connection URL (default: from DATABASE_URL env)"
    )
    parser.add_argument(
        "--database",
        default=config.database_name,
        help="Database name (default: from DATABASE_NAME env)"
    )
    parser.add_argument(
        "--store",
        choices=["postgres", "memory"],
        default=config.store_backend,
        help="Record store backend"
    )
    parser.add_argument(
        "--redis-url",
        default=config.redis_url,
        help="Redis connection URL (optional, default: from REDIS_URL env)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")

    get_parser = subparsers.add_parser("get", help="Resolve a short code")
    get_parser.add_argument("short_code", help="Short code to lookup")

    update_parser = subparsers.add_parser("update", help="Change the URL behind a short code")
    update_parser.add_argument("short_code", help="Short code to update")
    update_parser.add_argument("url", help="New URL")

    delete_parser = subparsers.add_parser("delete", help="Delete a short code")
    delete_parser.add_argument("short_code", help="Short code to delete")

    stats_parser = subparsers.add_parser("stats", help="Get URL statistics")
    stats_parser.add_argument("short_code", help="Short code to get stats for")

    subparsers.add_parser("health", help="Check store health")

    return parser


async def async_main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run a single command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = URLShortenerCLI(
        db_url=args.db_url,
        database=args.database,
        redis_url=args.redis_url,
        store_backend=args.store,
        verbose=args.verbose,
    )

    try:
        await cli.initialize()
        return await cli.run(args.command, args)
    finally:
        await cli.cleanup()


def main():
    """Console script entry point."""
    sys.exit(asyncio.run(async_main()))


if __name__ == "__main__":
    main()
