"""Read-only CLI commands for inspecting marked-up files."""

import argparse
import json
from pathlib import Path


def _read(path: str) -> str | None:
    try:
        return Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    except FileNotFoundError:
        print(f"File not found: {path}")
        return None


def cmd_strip(args: argparse.Namespace) -> int:
    from argus_engine.merger import strip_markers

    text = _read(args.file)
    if text is None:
        return 1
    print(strip_markers(text))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    from argus_engine.merger import (
        RegionKind,
        has_any_marker,
        has_meaningful_custom,
        parse_all,
    )

    text = _read(args.file)
    if text is None:
        return 1

    regions = parse_all(text)
    report = {
        "file": args.file,
        "has_markers": has_any_marker(text),
        "auto_regions": sum(1 for r in regions if r.kind is RegionKind.AUTO),
        "custom_regions": sum(1 for r in regions if r.kind is RegionKind.CUSTOM),
        "meaningful_custom": has_meaningful_custom(text),
    }

    if args.json:
        print(json.dumps(report, indent=2))
        return 0

    print(f"Marker Check: {args.file}")
    print("─" * 40)
    print(f"  Markers:        {'yes' if report['has_markers'] else 'no'}")
    print(f"  Auto regions:   {report['auto_regions']}")
    print(f"  Custom regions: {report['custom_regions']}")
    print(f"  Custom content: {'yes' if report['meaningful_custom'] else 'no'}")
    return 0


def cmd_sections(args: argparse.Namespace) -> int:
    from argus_engine.merger import in_document_order, parse_all

    text = _read(args.file)
    if text is None:
        return 1

    regions = in_document_order(parse_all(text))
    if not regions:
        print("No regions found.")
        return 0
    for r in regions:
        label = f"  {r.kind.value:<7} @{r.start}"
        if r.name:
            label += f"  {r.name}"
        print(label)
    return 0
