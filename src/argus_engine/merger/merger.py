"""Merge freshly generated content into an existing context file.

Rules, first match wins:
1. Preservation disabled: the generated content replaces the file as is.
2. No markers in the existing file: a blank file just gets the wrapped
   generated content; anything else is treated as user-authored and kept
   in a single "Previous Content" custom region.
3. Markers but no custom region: the wrapped generated content alone.
4. Custom regions present: the wrapped generated content followed by
   every custom region, in the order found, one blank line apart.

Every rule is total. Bytes are decoded as UTF-8 with ``surrogateescape``
so undecodable input passes through unchanged.
"""

from __future__ import annotations

from typing import Callable

from argus_engine.merger.classifier import has_any_marker, trim_space
from argus_engine.merger.emitter import format_custom, wrap_auto
from argus_engine.merger.markers import CUSTOM_END, CUSTOM_START
from argus_engine.merger.scanner import RegionKind, extract_custom, parse_all

PREVIOUS_CONTENT_PREAMBLE = (
    "## Previous Content\n\n"
    "The following content was preserved from your original file:\n\n"
)

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _to_text(doc: bytes | str) -> str:
    if isinstance(doc, bytes):
        return doc.decode(_ENCODING, _ERRORS)
    return doc


def _custom_regions_formatted(doc: str) -> list[str]:
    return [
        format_custom(region)
        for region in parse_all(doc)
        if region.kind is RegionKind.CUSTOM
    ]


class Merger:
    """Policy engine for regenerating a marked-up document.

    Args:
        preserve_custom: When False, ``merge`` hands back the generated
            content untouched, without markers.
    """

    def __init__(self, preserve_custom: bool = True) -> None:
        self.preserve_custom = preserve_custom

    def merge(self, existing: bytes | str, generated: bytes | str) -> bytes | str:
        """Merge using raw custom spans. Output type follows ``generated``."""
        return self._merge(existing, generated, extract_custom)

    def merge_with_sections(self, existing: bytes | str, generated: bytes | str) -> bytes | str:
        """Merge using parsed custom regions re-rendered by ``format_custom``.

        Produces the same bytes as ``merge`` for well-formed input; exists so
        custom regions can later be reordered or renamed by section name.
        """
        return self._merge(existing, generated, _custom_regions_formatted)

    def _merge(
        self,
        existing: bytes | str,
        generated: bytes | str,
        collect: Callable[[str], list[str]],
    ) -> bytes | str:
        if not self.preserve_custom:
            return generated

        old = _to_text(existing)
        result = wrap_auto(_to_text(generated))

        if not has_any_marker(old):
            kept = trim_space(old)
            if kept:
                result += (
                    "\n\n" + CUSTOM_START + "\n" + PREVIOUS_CONTENT_PREAMBLE
                    + kept + "\n" + CUSTOM_END
                )
        else:
            for section in collect(old):
                result += "\n\n" + section

        if isinstance(generated, bytes):
            return result.encode(_ENCODING, _ERRORS)
        return result
