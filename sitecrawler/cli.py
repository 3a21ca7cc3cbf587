"""Command-line interface: crawl a site, print its map and optionally export it."""

from __future__ import annotations

import argparse
import os
import sys
import time
from contextlib import redirect_stdout
from typing import TextIO

from sitecrawler.crawler import CrawlError, crawl_website
from sitecrawler.robots import is_allowed
from sitecrawler.sitemap import export_site_map, print_site_map

VERSION = "1.0.0"
USER_AGENT = "WebsiteCrawler"
DEFAULT_URL = "https://example.com"


class _UsageError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the command."""
    parser = _Parser(
        prog="website-crawler",
        description="A CLI tool to crawl websites and generate a site map",
    )
    parser.add_argument("url", nargs="?", default=DEFAULT_URL, help="site to crawl")
    parser.add_argument("-o", "--output", default="", help="Export site map to file")
    parser.add_argument("-f", "--format", default="json", help="Output format (json or xml)")
    parser.add_argument("-d", "--depth", type=int, default=10, help="Maximum crawl depth")
    parser.add_argument(
        "-c", "--concurrency", type=int, default=10, help="Number of concurrent crawlers"
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s version {VERSION}"
    )
    return parser


def _format_duration(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:g}µs"
    if seconds < 1:
        return f"{seconds * 1e3:g}ms"
    return f"{seconds:g}s"


def _execute(args: argparse.Namespace, out: TextIO, err: TextIO) -> None:
    url = args.url
    if not url.startswith(("http://", "https://")):
        url = "https://" + url

    testing = os.environ.get("TESTING") == "true"
    if not testing and not is_allowed(url, USER_AGENT):
        raise CrawlError(f"crawling {url} is not allowed by robots.txt")

    start = time.monotonic()
    try:
        status_code, response_time, site_map = crawl_website(url, args.depth, args.concurrency)
    finally:
        out.write(f"Crawling took {_format_duration(time.monotonic() - start)}\n")

    out.write(f"[✓] Site: {url}\n\n")
    out.write(f"Status: {status_code} OK\n")
    out.write(f"Response Time: {response_time}ms\n\n")
    out.write("Site Map:\n\n")
    print_site_map(site_map, out)

    if args.output:
        try:
            export_site_map(site_map, args.output, args.format)
        except (ValueError, OSError) as exc:
            err.write(f"Error exporting site map: {exc}\n")
            raise
        out.write(f"Site map exported to {args.output}\n")


def run(argv: list[str] | None = None, stdout: TextIO | None = None, stderr: TextIO | None = None) -> int:
    """Run the command with ``argv`` and return its exit status."""
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    parser = build_parser()
    try:
        with redirect_stdout(out):
            args = parser.parse_args(argv)
    except _UsageError as exc:
        err.write(f"Error: {exc}\n")
        err.write(parser.format_usage())
        return 1
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0

    try:
        _execute(args, out, err)
    except (CrawlError, ValueError, OSError) as exc:
        err.write(f"Error: {exc}\n")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point of the command; returns the process exit status."""
    return run(argv, sys.stdout, sys.stderr)