"""Render regions back into delimited text."""

from __future__ import annotations

from argus_engine.merger.markers import (
    AUTO_END,
    AUTO_START,
    CUSTOM_END,
    CUSTOM_START,
    PLACEHOLDER_TEXT,
)
from argus_engine.merger.scanner import Region

PLACEHOLDER_SECTION = (
    CUSTOM_START
    + "\n## Custom Notes\n\n"
    + PLACEHOLDER_TEXT
    + ". This section will be preserved when regenerating.\n\n"
    + CUSTOM_END
)


def wrap_auto(body: str) -> str:
    """Wrap a generated body in auto markers, one newline on each side."""
    return AUTO_START + "\n" + body.rstrip("\n\t ") + "\n" + AUTO_END


def format_custom(region: Region) -> str:
    # inner already carries the author's own leading/trailing newlines
    return CUSTOM_START + region.inner + CUSTOM_END


def add_placeholder(body: str) -> str:
    """Append an empty custom region inviting the user to add notes."""
    return body + "\n\n" + PLACEHOLDER_SECTION
