"""Locate auto and custom regions in a document.

Markers are matched as raw substrings anywhere in the text, so hand-edited
indentation or markers sharing a line are still recognized. Pairing is
non-greedy: each start marker closes at the next matching end marker.
A start without a later end yields no region.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from argus_engine.merger.markers import AUTO_END, AUTO_START, CUSTOM_END, CUSTOM_START

_AUTO_RE = re.compile(re.escape(AUTO_START) + r"(.*?)" + re.escape(AUTO_END), re.DOTALL)
_CUSTOM_RE = re.compile(re.escape(CUSTOM_START) + r"(.*?)" + re.escape(CUSTOM_END), re.DOTALL)

# H2 only: "# Title" and "### Sub" never name a section
_HEADING_RE = re.compile(r"^## (.+)$", re.MULTILINE)


class RegionKind(Enum):
    AUTO = "auto"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Region:
    """A marker-delimited span of a document.

    ``inner`` excludes both markers. ``start`` is the offset of the start
    marker in the scanned document.
    """

    kind: RegionKind
    inner: str
    name: str = ""
    start: int = 0


def extract_custom(doc: str) -> list[str]:
    """Return every custom span, markers included, in document order."""
    return [CUSTOM_START + m.group(1) + CUSTOM_END for m in _CUSTOM_RE.finditer(doc)]


def parse_all(doc: str) -> list[Region]:
    """Parse a document into typed regions.

    All auto regions come first, then all custom regions, each group in
    document order. Use ``in_document_order`` for true interleaved order.
    """
    regions = [
        Region(kind=RegionKind.AUTO, inner=m.group(1), start=m.start())
        for m in _AUTO_RE.finditer(doc)
    ]
    for m in _CUSTOM_RE.finditer(doc):
        regions.append(Region(
            kind=RegionKind.CUSTOM,
            inner=m.group(1),
            name=extract_section_name(m.group(1)),
            start=m.start(),
        ))
    return regions


def extract_section_name(inner: str) -> str:
    """Return the first ``## heading`` in ``inner``, trimmed, or ''."""
    m = _HEADING_RE.search(inner)
    if not m:
        return ""
    return m.group(1).strip()


def in_document_order(regions: list[Region]) -> list[Region]:
    return sorted(regions, key=lambda r: r.start)
