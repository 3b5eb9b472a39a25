"""argus-engine: keeps generated AI context files in sync with user edits."""

__version__ = "0.1.0"
