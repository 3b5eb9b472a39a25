"""Project path resolution.

Resolves where argus reads its configuration and writes context files.
Uses environment variables when available, falls back to conventional
defaults.

Environment variables:
    ARGUS_PROJECT_DIR: project root (default: current directory)
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILE_NAME = ".argus.yaml"

# Output format → file written relative to the project root
OUTPUT_FILES: dict[str, str] = {
    "claude": "CLAUDE.md",
    "cursor": ".cursorrules",
    "copilot": ".github/copilot-instructions.md",
}


def project_root() -> Path:
    """Return the project root directory."""
    return Path(os.environ.get("ARGUS_PROJECT_DIR", os.getcwd()))


def config_path(directory: Path | str | None = None) -> Path:
    """Return the path to .argus.yaml for a project."""
    base = Path(directory) if directory else project_root()
    return base / CONFIG_FILE_NAME


def output_path(directory: Path | str, fmt: str) -> Path:
    """Return where the given output format is written."""
    return Path(directory) / OUTPUT_FILES[fmt]


def project_dir_for(target: Path | str) -> Path:
    """Return the project root that owns a context file.

    ``ARGUS_PROJECT_DIR`` wins when set; otherwise the file's own directory.
    """
    env = os.environ.get("ARGUS_PROJECT_DIR")
    if env:
        return Path(env)
    return Path(target).parent
