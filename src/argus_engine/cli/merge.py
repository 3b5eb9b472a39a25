"""Merge CLI command."""

import argparse
import sys
from pathlib import Path

import yaml


def cmd_merge(args: argparse.Namespace) -> int:
    from argus_engine.config import load_config
    from argus_engine.paths import project_dir_for
    from argus_engine.writer import write_context_file

    target = Path(args.target)
    if args.generated == "-":
        generated = sys.stdin.read()
    else:
        try:
            generated = Path(args.generated).read_bytes().decode("utf-8", "surrogateescape")
        except FileNotFoundError:
            print(f"Generated file not found: {args.generated}")
            return 1

    try:
        cfg = load_config(project_dir_for(target))
    except (ValueError, yaml.YAMLError) as e:
        print(f"Invalid config: {e}")
        return 1
    preserve = cfg.merge and not args.no_merge
    add_custom = cfg.add_custom or args.add_custom

    result = write_context_file(
        target, generated,
        preserve_custom=preserve,
        add_custom=add_custom,
        sections=args.sections,
        dry_run=args.dry_run,
    )

    if args.dry_run:
        print(f"Would write to {result['path']}:")
        print("---")
        print(result["content"])
        print("---")
        return 0

    if result["action"] == "unchanged":
        print(f"Unchanged {result['path']}")
    else:
        print(f"{result['action'].capitalize()} {result['path']}")
    return 0
