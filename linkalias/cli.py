#!/usr/bin/env python3
"""
Command-line interface for the linkalias service.

Usage:
    linkalias serve
    linkalias shorten <url>
    linkalias resolve <alias>
    linkalias stats
    linkalias health
"""

import argparse
import json
import os
import sys
from typing import Any, Dict, Optional

import requests

from .common.logging_config import setup_logging

DEFAULT_SERVER = "http://localhost:9200"


class LinkAliasCLI:
    """Command-line client for a running linkalias service."""

    def __init__(
        self,
        server: str = DEFAULT_SERVER,
        session: Optional[requests.Session] = None,
        timeout: float = 5.0,
        verbose: bool = False,
    ):
        """Initialize CLI.

        Args:
            server: Base URL of the running service
            session: Optional HTTP session (anything with requests' get/post)
            timeout: Request timeout in seconds
            verbose: Verbose logging
        """
        self.server = server.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING", include_server=False)

    def shorten(self, url: str) -> int:
        """Shorten a URL."""
        try:
            response = self.session.post(
                f"{self.server}/api/shorten",
                json={"url": url},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return self._fail(f"Request failed: {e}")

        if response.status_code != 200:
            return self._fail(self._detail(response))

        data = response.json()
        return self._succeed({
            "alias": data["alias"],
            "original_url": data["original_url"],
            "created_at": data["created_at"],
            "message": f"Successfully shortened URL to: {data['alias']}",
        })

    def resolve(self, alias: str) -> int:
        """Get original URL for an alias."""
        try:
            response = self.session.get(
                f"{self.server}/api/resolve",
                params={"alias": alias},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return self._fail(f"Request failed: {e}")

        if response.status_code != 200:
            return self._fail(self._detail(response))

        return self._succeed(response.json())

    def stats(self) -> int:
        """Get store statistics."""
        return self._get_json("/api/stats", "statistics")

    def health(self) -> int:
        """Check service health."""
        return self._get_json("/api/health", "health")

    def _get_json(self, path: str, key: str) -> int:
        try:
            response = self.session.get(f"{self.server}{path}", timeout=self.timeout)
        except requests.RequestException as e:
            return self._fail(f"Request failed: {e}")

        # An unhealthy service answers 503 with the health body
        if response.status_code != 200 and not (key == "health" and response.status_code == 503):
            return self._fail(self._detail(response))

        data = response.json()
        if key == "health" and data.get("status") != "healthy":
            print(json.dumps({"success": False, key: data}, indent=2), file=sys.stderr)
            return 1

        return self._succeed({key: data})

    @staticmethod
    def _detail(response) -> str:
        try:
            return response.json().get("detail", f"HTTP {response.status_code}")
        except ValueError:
            return f"HTTP {response.status_code}"

    @staticmethod
    def _succeed(payload: Dict[str, Any]) -> int:
        print(json.dumps({"success": True, **payload}, indent=2))
        return 0

    def _fail(self, error: str) -> int:
        self.logger.debug(f"Command failed: {error}")
        print(json.dumps({"success": False, "error": error}, indent=2), file=sys.stderr)
        return 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="linkalias",
        description="linkalias CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the service
  %(prog)s serve

  # Shorten a URL
  %(prog)s shorten https://example.com/long/url

  # Get original URL
  %(prog)s resolve http://short.url/b

  # Store statistics
  %(prog)s stats

  # Check health
  %(prog)s health
        """
    )

    parser.add_argument(
        "--server",
        default=os.getenv("LINKALIAS_SERVER", DEFAULT_SERVER),
        help=f"Service URL (default: from LINKALIAS_SERVER env or {DEFAULT_SERVER})"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("serve", help="Run the HTTP service")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")

    resolve_parser = subparsers.add_parser("resolve", help="Get original URL")
    resolve_parser.add_argument("alias", help="Alias to look up")

    subparsers.add_parser("stats", help="Get store statistics")
    subparsers.add_parser("health", help="Check service health")

    return parser


def main(argv=None, session: Optional[requests.Session] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "serve":
        from .app import main as serve
        return serve()

    cli = LinkAliasCLI(server=args.server, session=session, verbose=args.verbose)

    if args.command == "shorten":
        return cli.shorten(args.url)
    elif args.command == "resolve":
        return cli.resolve(args.alias)
    elif args.command == "stats":
        return cli.stats()
    elif args.command == "health":
        return cli.health()

    parser.print_help()
    return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
