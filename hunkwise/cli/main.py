"""Entry point for the hunkwise command-line interface.

Reads git output from a file or stdin, parses it and prints the result.
This is the only layer that formats text for the user; the parsers
themselves never print or log user-facing messages.
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from hunkwise.cli.arg_parser import parse_args
from hunkwise.cli.log_setup import configure_cli_logging
from hunkwise.config.loader import load_config
from hunkwise.config.schema import Config
from hunkwise.core.errors import HunkwiseError, LoadError
from hunkwise.display.console import get_console
from hunkwise.display.render import render_diff_stat, render_file_diffs, render_status
from hunkwise.patch.parser import parse_diff
from hunkwise.patch.serializer import file_diff_to_patch
from hunkwise.status.parser import parse_status, parse_status_lines
from hunkwise.status.types import WorkingTreeStatus

logger = logging.getLogger(__name__)


def read_input(source: str) -> str:
    """Read all text from a file path, or from stdin when source is '-'.

    Raises:
        LoadError: If the file cannot be read.
    """
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise LoadError(f"Failed to read {source}: {e}") from e


def _cmd_diff(args: argparse.Namespace, config: Config, console: Console) -> int:
    diffs = parse_diff(read_input(args.input))
    display = config.display
    if args.no_line_numbers:
        display = display.model_copy(update={"line_numbers": False})
    render_file_diffs(console, diffs, display)
    return 0


def _cmd_stat(args: argparse.Namespace, config: Config, console: Console) -> int:
    render_diff_stat(console, parse_diff(read_input(args.input)))
    return 0


def _cmd_hunk(args: argparse.Namespace, config: Config, console: Console) -> int:
    diffs = parse_diff(read_input(args.input))
    if not 0 <= args.file_index < len(diffs):
        raise HunkwiseError(
            f"File index {args.file_index} out of range ({len(diffs)} files in diff)"
        )
    try:
        patch = file_diff_to_patch(diffs[args.file_index], args.hunk_index)
    except IndexError as e:
        raise HunkwiseError(str(e)) from e
    # Raw text, no console styling: this output is piped to git apply
    sys.stdout.write(patch)
    return 0


def _cmd_status(args: argparse.Namespace, config: Config, console: Console) -> int:
    text = read_input(args.input)
    if args.lines or config.status.format == "lines":
        files = parse_status_lines(text)
    else:
        files = parse_status(text)
    render_status(console, WorkingTreeStatus.from_files(files))
    return 0


_COMMANDS = {
    "diff": _cmd_diff,
    "stat": _cmd_stat,
    "hunk": _cmd_hunk,
    "status": _cmd_status,
}


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Run the CLI and return a process exit code.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:]).
        console: Console to render to (default: the shared console).
    """
    args = parse_args(argv)
    configure_cli_logging(args.verbose)

    try:
        config = load_config(path=args.config)
        if console is None:
            if args.no_color or not config.display.color:
                console = Console(highlight=False, markup=False, no_color=True)
            else:
                console = get_console()
        logger.debug("Running command: %s", args.command)
        return _COMMANDS[args.command](args, config, console)
    except HunkwiseError as e:
        print(f"hunkwise: {e.message}", file=sys.stderr)
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
