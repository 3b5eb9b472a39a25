"""Write generated context files without losing user edits.

For each file:
1. Read whatever is on disk (a missing file counts as empty)
2. Merge the freshly generated content, keeping ARGUS:CUSTOM regions
3. Optionally append an empty custom region inviting edits
4. Write it back unless this is a dry run
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from argus_engine.config import ArgusConfig
from argus_engine.merger import CUSTOM_START, Merger, add_placeholder
from argus_engine.paths import OUTPUT_FILES, output_path

logger = logging.getLogger(__name__)


def write_context_file(
    file_path: Path | str,
    generated: str,
    preserve_custom: bool = True,
    add_custom: bool = False,
    sections: bool = False,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Merge generated content into a context file and persist it.

    Returns:
        Dict with ``path``, ``action`` (created, updated or unchanged),
        ``dry_run`` and the final ``content``.
    """
    path = Path(file_path)
    exists = path.is_file()
    # Byte I/O: text mode would rewrite \r\n inside custom regions
    existing = path.read_bytes().decode("utf-8", "surrogateescape") if exists else ""

    merger = Merger(preserve_custom)
    if sections:
        content = merger.merge_with_sections(existing, generated)
    else:
        content = merger.merge(existing, generated)

    if add_custom and CUSTOM_START not in content:
        content = add_placeholder(content)

    if not exists:
        action = "created"
    elif content == existing:
        action = "unchanged"
    else:
        action = "updated"

    logger.debug("%s: %s (preserve_custom=%s)", path, action, preserve_custom)
    if not dry_run and action != "unchanged":
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8", "surrogateescape"))

    return {"path": str(path), "action": action, "dry_run": dry_run, "content": content}


def sync_outputs(
    project_dir: Path | str,
    rendered: dict[str, str],
    config: ArgusConfig | None = None,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Write every configured output format that has rendered content.

    Args:
        project_dir: Project root the output files live under.
        rendered: Output format → freshly generated content.
        config: Project config; defaults to ``ArgusConfig()``.
        dry_run: Report without writing.
    """
    cfg = config or ArgusConfig()
    root = Path(project_dir)

    updated = []
    created = []
    skipped = []
    errors = []

    for fmt in cfg.output:
        if fmt not in OUTPUT_FILES:
            errors.append({"path": fmt, "error": f"Unknown output format: {fmt}"})
            continue
        target = output_path(root, fmt)
        if fmt not in rendered:
            logger.info("No generated content for %s, skipping", fmt)
            skipped.append(str(target))
            continue
        try:
            res = write_context_file(
                target, rendered[fmt],
                preserve_custom=cfg.merge,
                add_custom=cfg.add_custom,
                dry_run=dry_run,
            )
        except OSError as e:
            logger.warning("Failed to write %s: %s", target, e)
            errors.append({"path": str(target), "error": str(e)})
            continue
        if res["action"] == "created":
            created.append(res["path"])
        elif res["action"] == "updated":
            updated.append(res["path"])
        else:
            skipped.append(res["path"])

    return {
        "updated": updated,
        "created": created,
        "skipped": skipped,
        "errors": errors,
        "dry_run": dry_run,
    }
