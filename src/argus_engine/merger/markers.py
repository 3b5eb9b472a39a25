"""Marker literals shared by every reader and writer of argus files."""

AUTO_START = "<!-- ARGUS:AUTO -->"
AUTO_END = "<!-- /ARGUS:AUTO -->"
CUSTOM_START = "<!-- ARGUS:CUSTOM -->"
CUSTOM_END = "<!-- /ARGUS:CUSTOM -->"

ALL_MARKERS = (AUTO_START, AUTO_END, CUSTOM_START, CUSTOM_END)

# A custom region containing this phrase is an untouched placeholder
PLACEHOLDER_TEXT = "Add your custom documentation here"
