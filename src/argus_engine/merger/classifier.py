"""Questions about what a document already holds."""

from __future__ import annotations

from argus_engine.merger.markers import ALL_MARKERS, CUSTOM_END, CUSTOM_START, PLACEHOLDER_TEXT
from argus_engine.merger.scanner import extract_custom


# str.isspace() also accepts the \x1c-\x1f separators; those count as content
_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def _is_space(ch: str) -> bool:
    return ch.isspace() and ch not in _SEPARATORS


def trim_space(text: str) -> str:
    """Strip leading and trailing whitespace, keeping \\x1c-\\x1f."""
    start, end = 0, len(text)
    while start < end and _is_space(text[start]):
        start += 1
    while end > start and _is_space(text[end - 1]):
        end -= 1
    return text[start:end]


def has_any_marker(doc: str) -> bool:
    return any(marker in doc for marker in ALL_MARKERS)


def has_meaningful_custom(doc: str) -> bool:
    """True if some custom region holds real user content.

    Empty regions and regions still carrying the placeholder phrase
    do not count.
    """
    for span in extract_custom(doc):
        inner = trim_space(span[len(CUSTOM_START):-len(CUSTOM_END)])
        if PLACEHOLDER_TEXT in inner:
            continue
        if inner:
            return True
    return False


def strip_markers(doc: str) -> str:
    """Remove every marker literal and trim outer whitespace.

    Blank lines left between former regions are kept as they are.
    """
    for marker in ALL_MARKERS:
        doc = doc.replace(marker, "")
    return trim_space(doc)
