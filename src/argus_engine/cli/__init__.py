"""Command-line interface for argus.

Usage:
    argus init [path] [--force]
    argus merge <target> --generated <file|-> [--no-merge] [--add-custom] [--sections] [--dry-run]
    argus sync [path] --generated-dir <dir> [--dry-run]
    argus strip <file>
    argus check <file> [--json]
    argus sections <file>
"""

import argparse
import logging
import sys

from argus_engine import __version__
from argus_engine.cli.regions import cmd_check, cmd_sections, cmd_strip
from argus_engine.cli.merge import cmd_merge
from argus_engine.cli.project import cmd_init, cmd_sync


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="argus",
        description="Regenerate AI context files while keeping your custom sections",
    )
    parser.add_argument("--version", action="version", version=f"argus {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # init
    init = sub.add_parser("init", help="Create a .argus.yaml config")
    init.add_argument("path", nargs="?", default=None, help="Project directory")
    init.add_argument(
        "--force", action="store_true",
        help="Overwrite an existing config",
    )

    # merge
    mrg = sub.add_parser(
        "merge", help="Merge generated content into a context file",
        description=(
            "Merge generated content into a context file. .argus.yaml is read "
            "from $ARGUS_PROJECT_DIR when set, else from the target's directory."
        ),
    )
    mrg.add_argument("target", help="Context file to update")
    mrg.add_argument(
        "--generated", required=True,
        help="File holding the freshly generated content ('-' for stdin)",
    )
    mrg.add_argument(
        "--no-merge", action="store_true",
        help="Replace the file outright instead of preserving custom sections",
    )
    mrg.add_argument(
        "--add-custom", action="store_true",
        help="Append a custom section placeholder if none exists",
    )
    mrg.add_argument(
        "--sections", action="store_true",
        help="Rebuild custom sections from parsed regions",
    )
    mrg.add_argument(
        "--dry-run", action="store_true",
        help="Print the result without writing",
    )

    # sync
    syn = sub.add_parser(
        "sync", help="Write every configured output from pre-rendered files",
    )
    syn.add_argument("path", nargs="?", default=None, help="Project directory")
    syn.add_argument(
        "--generated-dir", required=True,
        help="Directory holding freshly generated files, laid out like the project",
    )
    syn.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    # inspection
    strip = sub.add_parser("strip", help="Print a file with all markers removed")
    strip.add_argument("file")

    chk = sub.add_parser("check", help="Report markers and custom content in a file")
    chk.add_argument("file")
    chk.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )

    sec = sub.add_parser("sections", help="List regions in document order")
    sec.add_argument("file")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        "init": cmd_init,
        "merge": cmd_merge,
        "sync": cmd_sync,
        "strip": cmd_strip,
        "check": cmd_check,
        "sections": cmd_sections,
    }

    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
