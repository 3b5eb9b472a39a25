"""Project-level CLI commands (init, sync)."""

import argparse
from pathlib import Path

import yaml


def cmd_init(args: argparse.Namespace) -> int:
    from argus_engine.config import CONFIG_TEMPLATE, config_exists
    from argus_engine.paths import config_path, project_root

    directory = Path(args.path) if args.path else project_root()
    if not directory.is_dir():
        print(f"Directory not found: {directory}")
        return 1

    path = config_path(directory)
    if config_exists(directory) and not args.force:
        print(f"{path} already exists (use --force to overwrite)")
        return 1

    path.write_text(CONFIG_TEMPLATE)
    print(f"Created {path}")
    return 0


def cmd_sync(args: argparse.Namespace) -> int:
    from argus_engine.config import load_config
    from argus_engine.paths import OUTPUT_FILES, project_root
    from argus_engine.writer import sync_outputs

    directory = Path(args.path) if args.path else project_root()
    generated_dir = Path(args.generated_dir)
    if not generated_dir.is_dir():
        print(f"Generated directory not found: {generated_dir}")
        return 1

    try:
        cfg = load_config(directory)
    except (ValueError, yaml.YAMLError) as e:
        print(f"Invalid config: {e}")
        return 1
    rendered = {}
    for fmt in cfg.output:
        source = generated_dir / OUTPUT_FILES[fmt]
        if source.is_file():
            rendered[fmt] = source.read_bytes().decode("utf-8", "surrogateescape")

    result = sync_outputs(directory, rendered, cfg, dry_run=args.dry_run)

    print("Context File Sync Results")
    print("─" * 40)
    print(f"  Updated: {len(result['updated'])}")
    print(f"  Created: {len(result['created'])}")
    print(f"  Skipped: {len(result['skipped'])}")
    if result["errors"]:
        print(f"  Errors:  {len(result['errors'])}")
        for e in result["errors"]:
            print(f"    - {e['path']}: {e['error']}")

    if result.get("dry_run"):
        print("\n[DRY RUN] No files were modified.")

    return 1 if result["errors"] else 0
