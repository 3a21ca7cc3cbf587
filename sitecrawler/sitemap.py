"""Site map tree and its text, JSON and XML renderings."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO

SUPPORTED_FORMATS = ("json", "xml")

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

_XML_ESCAPES = str.maketrans(
    {
        '"': "&#34;",
        "'": "&#39;",
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        "\t": "&#x9;",
        "\n": "&#xA;",
        "\r": "&#xD;",
    }
)


@dataclass
class SiteMap:
    """A crawled page with the pages discovered from it."""

    url: str
    depth: int = 0
    children: list[SiteMap] = field(default_factory=list)

    def dump(self) -> str:
        """Return a one-line debugging representation of the whole tree."""
        inner = ", ".join(child.dump() for child in self.children)
        return f"{{URL: {self.url}, Depth: {self.depth}, Children: [{inner}]}}"

    def to_dict(self) -> dict[str, Any]:
        """Return the tree as plain data; a page without children has ``None``."""
        return {
            "url": self.url,
            "depth": self.depth,
            "children": [child.to_dict() for child in self.children] if self.children else None,
        }

    def to_xml(self) -> str:
        """Return the tree as indented XML with a ``SiteMap`` root element."""
        return "\n".join(self._xml_lines("SiteMap", 0))

    def _xml_lines(self, tag: str, level: int) -> Iterator[str]:
        pad = "  " * level
        inner = "  " * (level + 1)
        yield f"{pad}<{tag}>"
        yield f"{inner}<URL>{self.url.translate(_XML_ESCAPES)}</URL>"
        yield f"{inner}<Depth>{self.depth}</Depth>"
        for child in self.children:
            yield from child._xml_lines("Children", level + 1)
        yield f"{pad}</{tag}>"


def _walk(node: SiteMap, prefix: str) -> Iterator[tuple[str, SiteMap]]:
    yield prefix, node
    for child in node.children:
        yield from _walk(child, prefix + "  ")


def print_site_map(site_map: SiteMap | None, stream: TextIO | None = None) -> None:
    """Write the tree as an indented list of URLs; nothing is written for ``None``."""
    if site_map is None:
        return
    out = stream if stream is not None else sys.stdout
    for prefix, node in _walk(site_map, ""):
        out.write(f"{prefix}- {node.url}\n")


def _to_json(site_map: SiteMap) -> str:
    text = json.dumps(site_map.to_dict(), indent=2, ensure_ascii=False)
    for char, escaped in _JSON_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def export_site_map(site_map: SiteMap | None, filename: str | Path, fmt: str = "json") -> None:
    """Write the tree to ``filename`` as ``json`` or ``xml``.

    Raises ValueError when there is no site map or the format is unknown.
    """
    if site_map is None:
        raise ValueError("site map is nil")
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"unsupported format: {fmt}")
    data = _to_json(site_map) if fmt == "json" else site_map.to_xml()
    Path(filename).write_bytes(data.encode("utf-8"))