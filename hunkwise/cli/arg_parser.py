"""Argument parsing for the hunkwise CLI."""

import argparse
from pathlib import Path


def add_input_arg(parser: argparse.ArgumentParser) -> None:
    """Add the optional input file argument (stdin when omitted or '-')."""
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="File containing git output (default: read stdin)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="hunkwise",
        description="Inspect git diff and status output, extract single hunks as patches",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Config file to use instead of ~/.hunkwise and ./.hunkwise layers",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # diff - full rendering
    diff_parser = subparsers.add_parser(
        "diff",
        help="Render a diff file by file, hunk by hunk",
    )
    add_input_arg(diff_parser)
    diff_parser.add_argument(
        "--no-line-numbers",
        action="store_true",
        help="Hide old/new line number gutters",
    )

    # stat - per-file summary
    stat_parser = subparsers.add_parser(
        "stat",
        help="Summarize additions and deletions per file",
    )
    add_input_arg(stat_parser)

    # hunk - serialize one hunk for partial apply
    hunk_parser = subparsers.add_parser(
        "hunk",
        help="Print one hunk as a standalone patch (for git apply --cached)",
    )
    hunk_parser.add_argument("file_index", type=int, help="0-based index of the file in the diff")
    hunk_parser.add_argument("hunk_index", type=int, help="0-based index of the hunk in that file")
    add_input_arg(hunk_parser)

    # status - grouped working-tree summary
    status_parser = subparsers.add_parser(
        "status",
        help="Group `git status --porcelain` output into staging sections",
    )
    add_input_arg(status_parser)
    status_parser.add_argument(
        "--lines",
        action="store_true",
        help="Input is newline-delimited (no -z); overrides config status.format",
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
