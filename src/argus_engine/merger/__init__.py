"""Marker-based merging of generated context files.

Regenerated files are split into regions:
    <!-- ARGUS:AUTO -->
    ...owned by argus, replaced on every run...
    <!-- /ARGUS:AUTO -->

    <!-- ARGUS:CUSTOM -->
    ...owned by the user, carried forward verbatim...
    <!-- /ARGUS:CUSTOM -->

The marker literals are part of the file format; writer and reader must
agree on them byte for byte.
"""

from argus_engine.merger.markers import (
    ALL_MARKERS,
    AUTO_END,
    AUTO_START,
    CUSTOM_END,
    CUSTOM_START,
    PLACEHOLDER_TEXT,
)
from argus_engine.merger.scanner import (
    Region,
    RegionKind,
    extract_custom,
    extract_section_name,
    in_document_order,
    parse_all,
)
from argus_engine.merger.emitter import add_placeholder, format_custom, wrap_auto
from argus_engine.merger.classifier import (
    has_any_marker,
    has_meaningful_custom,
    strip_markers,
)
from argus_engine.merger.merger import Merger

__all__ = [
    "AUTO_START",
    "AUTO_END",
    "CUSTOM_START",
    "CUSTOM_END",
    "ALL_MARKERS",
    "PLACEHOLDER_TEXT",
    "Region",
    "RegionKind",
    "extract_custom",
    "extract_section_name",
    "in_document_order",
    "parse_all",
    "add_placeholder",
    "format_custom",
    "wrap_auto",
    "has_any_marker",
    "has_meaningful_custom",
    "strip_markers",
    "Merger",
]
