"""Recursive same-domain crawler that builds a site map."""

from __future__ import annotations

import urllib.error
import urllib.request
from collections.abc import Container
from html.parser import HTMLParser
from urllib.parse import urljoin, urlsplit

from sitecrawler.httpclient import check_website
from sitecrawler.sitemap import SiteMap


class CrawlError(Exception):
    """Raised when a crawl cannot be started."""


class _LinkExtractor(HTMLParser):
    def __init__(self) -> None:
        super().__init__()
        self.hrefs: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag == "a":
            self.hrefs.extend(value or "" for key, value in attrs if key == "href")


def is_same_domain(url1: str, url2: str) -> bool:
    """Report whether both URLs name the same host (port included)."""
    try:
        return urlsplit(url1).netloc.rpartition("@")[2] == urlsplit(url2).netloc.rpartition("@")[2]
    except ValueError:
        return False


def find_links(
    html_text: str,
    base_url: str,
    parent: SiteMap,
    visited: Container[str],
    max_depth: int,
) -> list[str]:
    """Return the unvisited same-domain links in ``html_text``, in document order."""
    parser = _LinkExtractor()
    parser.feed(html_text)
    parser.close()
    links: list[str] = []
    for href in parser.hrefs:
        try:
            link = urljoin(base_url, href)
        except ValueError as exc:
            print(f"Error parsing link {href}: {exc}")
            continue
        if is_same_domain(link, base_url) and link not in visited and parent.depth < max_depth:
            print(f"Collecting link: {link}, depth: {parent.depth + 1}")
            links.append(link)
    return links


def _fetch(url: str) -> bytes | None:
    try:
        response = urllib.request.urlopen(url, timeout=30)
    except urllib.error.HTTPError as exc:
        response = exc
    except (OSError, ValueError) as exc:
        print(f"Error fetching {url}: {exc}")
        return None
    try:
        with response:
            return response.read()
    except (OSError, ValueError) as exc:
        print(f"Error reading body {url}: {exc}")
        return None


def _crawl(current_url: str, node: SiteMap, visited: set[str], max_depth: int) -> None:
    if current_url in visited:
        return
    visited.add(current_url)

    body = _fetch(current_url)
    if body is None:
        return
    print(f"Parsed HTML successfully for {current_url}")

    if node.depth >= max_depth:
        print(f"Skipping findLinks for {current_url}: depth {node.depth} >= maxDepth {max_depth}")
        return

    text = body.decode("utf-8", errors="replace")
    for link in find_links(text, current_url, node, visited, max_depth):
        child = SiteMap(url=link, depth=node.depth + 1)
        print(f"Adding child {link} to parent {node.url}")
        node.children.append(child)
        _crawl(link, child, visited, max_depth)


def crawl_website(base_url: str, max_depth: int, concurrency: int = 1) -> tuple[int, int, SiteMap]:
    """Crawl ``base_url`` and return its status code, response time (ms) and site map.

    Pages are fetched sequentially; ``concurrency`` does not change the result.
    Raises CrawlError for a negative depth or an unreachable start page.
    """
    if max_depth < 0:
        raise CrawlError(f"invalid depth: {max_depth}")

    status_code, response_time = check_website(base_url)
    if status_code == 0:
        raise CrawlError(f"site {base_url} is unreachable")

    site_map = SiteMap(url=base_url, depth=0)
    _crawl(base_url, site_map, set(), max_depth)

    print(f"Final site map: {site_map.dump()}")
    return status_code, response_time, site_map