"""Reachability checks for web pages."""

from __future__ import annotations

import time
import urllib.error
import urllib.request


def check_website(url: str) -> tuple[int, int]:
    """Return the status code of ``url`` and its response time in ms, or (0, 0) if unreachable."""
    start = time.monotonic()
    try:
        with urllib.request.urlopen(url, timeout=30) as response:
            status = response.status
    except urllib.error.HTTPError as exc:
        status = exc.code
        exc.close()
    except (OSError, ValueError):
        return 0, 0
    return status, int((time.monotonic() - start) * 1000)