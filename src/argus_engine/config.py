"""Load and save .argus.yaml project configuration."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

import yaml

from argus_engine.paths import OUTPUT_FILES, config_path

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = ["claude"]
DEFAULT_IGNORE = ["node_modules", ".git", "dist", "build", "vendor", "*.log"]

CONFIG_HEADER = "# Argus Configuration\n\n"

CONFIG_TEMPLATE = """# Argus Configuration

# Output formats to generate
# Options: claude, cursor, copilot, all
output:
  - claude
  # - cursor
  # - copilot

# Additional patterns to ignore (beyond .gitignore)
ignore:
  - node_modules
  - .git
  - dist
  - build
  - vendor
  - "*.log"

# Custom conventions to include in generated files
custom_conventions: []
  # - "Use React Query for data fetching"

# Override auto-detected values
# overrides:
#   project_name: "My Project"

# Keep <!-- ARGUS:CUSTOM --> sections when regenerating
merge: true

# Append an empty custom section to files that have none
add_custom: false
"""


@dataclass
class ArgusConfig:
    """Settings read from .argus.yaml."""

    output: list[str] = field(default_factory=lambda: list(DEFAULT_OUTPUT))
    ignore: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORE))
    custom_conventions: list[str] = field(default_factory=list)
    overrides: dict[str, str] = field(default_factory=dict)
    merge: bool = True
    add_custom: bool = False


def _expand_output(raw) -> list[str]:
    if not raw:
        return list(DEFAULT_OUTPUT)
    if isinstance(raw, str):
        raw = [raw]
    formats: list[str] = []
    for fmt in raw:
        if fmt == "all":
            targets = list(OUTPUT_FILES)
        elif fmt in OUTPUT_FILES:
            targets = [fmt]
        else:
            raise ValueError(
                f"Unknown output format '{fmt}' "
                f"(valid: {', '.join(sorted(OUTPUT_FILES))}, all)"
            )
        for t in targets:
            if t not in formats:
                formats.append(t)
    return formats


def _as_list(raw, key: str, default: list[str]) -> list[str]:
    if raw is None:
        return list(default)
    if isinstance(raw, str):
        return [raw]
    if not isinstance(raw, list):
        raise ValueError(f"'{key}' must be a list of strings, got {type(raw).__name__}")
    return [str(item) for item in raw]


def _as_mapping(raw, key: str) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"'{key}' must be a mapping, got {type(raw).__name__}")
    return {str(k): str(v) for k, v in raw.items()}


def load_config(directory: Path | str | None = None) -> ArgusConfig:
    """Read .argus.yaml from a project directory.

    Args:
        directory: Project root. Defaults to ``paths.project_root()``.

    Returns:
        Parsed config, or the defaults when no config file exists.

    Raises:
        ValueError: If the file is not a YAML mapping, names an unknown
            output format, or a field has the wrong shape.
        yaml.YAMLError: If the YAML is malformed.
    """
    path = config_path(directory)
    if not path.is_file():
        logger.debug("No config at %s, using defaults", path)
        return ArgusConfig()

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return ArgusConfig()
    if not isinstance(data, dict):
        raise ValueError(f"{path} is not a YAML mapping")

    logger.debug("Loaded config from %s", path)
    return ArgusConfig(
        output=_expand_output(data.get("output")),
        ignore=_as_list(data.get("ignore"), "ignore", DEFAULT_IGNORE),
        custom_conventions=_as_list(data.get("custom_conventions"), "custom_conventions", []),
        overrides=_as_mapping(data.get("overrides"), "overrides"),
        merge=bool(data.get("merge", True)),
        add_custom=bool(data.get("add_custom", False)),
    )


def save_config(config: ArgusConfig, directory: Path | str | None = None) -> Path:
    """Write a config back to .argus.yaml with a header comment."""
    path = config_path(directory)
    with open(path, "w") as f:
        f.write(CONFIG_HEADER)
        yaml.safe_dump(asdict(config), f, sort_keys=False, default_flow_style=False)
    return path


def config_exists(directory: Path | str | None = None) -> bool:
    return config_path(directory).is_file()
