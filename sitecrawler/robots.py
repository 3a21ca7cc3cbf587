"""robots.txt permission checks."""

from __future__ import annotations

import urllib.error
import urllib.request


def is_allowed(url: str, user_agent: str) -> bool:
    """Fetch the site's robots.txt; its rules are not interpreted, so every URL is allowed."""
    robots_url = url.removesuffix("/") + "/robots.txt"
    try:
        with urllib.request.urlopen(robots_url, timeout=30):
            pass
    except urllib.error.HTTPError as exc:
        exc.close()
    except (OSError, ValueError):
        pass
    return True