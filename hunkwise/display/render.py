"""Rendering of parsed diffs and status entries to a Rich console.

All text is built from rich.text.Text segments, so paths and line content
are never interpreted as console markup.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from hunkwise.config.schema import DisplayConfig
from hunkwise.core.constants import NO_NEWLINE_MARKER
from hunkwise.display.theme import DEFAULT_THEME, Theme
from hunkwise.patch.types import ChangeType, DiffHunk, DiffLine, FileDiff, LineType
from hunkwise.status.types import FileStatus, WorkingTreeStatus

_GUTTER_WIDTH = 5


def describe_path(path: str, old_path: str | None) -> str:
    """Path label, ``old -> new`` when the file moved."""
    if old_path:
        return f"{old_path} -> {path}"
    return path


def _badge(change_type: ChangeType, theme: Theme) -> Text:
    return Text(change_type.value, style=theme.badge(change_type))


def _file_header(diff: FileDiff, display: DisplayConfig, theme: Theme) -> Text:
    header = Text()
    header.append_text(_badge(diff.change_type, theme))
    header.append(" ")
    header.append(describe_path(diff.path, diff.old_path), style=theme.file_header)

    details: list[str] = []
    if diff.similarity is not None and diff.change_type in (
        ChangeType.RENAMED,
        ChangeType.COPIED,
    ):
        details.append(f"{diff.similarity}% similar")
    if diff.old_mode and diff.new_mode and diff.old_mode != diff.new_mode:
        details.append(f"mode {diff.old_mode} -> {diff.new_mode}")
    elif diff.new_mode and diff.change_type in (ChangeType.ADDED, ChangeType.DELETED):
        details.append(f"mode {diff.new_mode}")
    if display.show_hashes and diff.old_hash and diff.new_hash:
        details.append(f"{diff.old_hash}..{diff.new_hash}")
    if details:
        header.append(f"  ({', '.join(details)})", style=theme.gutter)
    return header


def _gutter(line: DiffLine) -> str:
    old = "" if line.old_line_number is None else str(line.old_line_number)
    new = "" if line.new_line_number is None else str(line.new_line_number)
    return f"{old:>{_GUTTER_WIDTH}} {new:>{_GUTTER_WIDTH}} "


def render_hunk(
    console: Console,
    hunk: DiffHunk,
    display: DisplayConfig,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Print one hunk: header line, then each line with optional gutters."""
    console.print(Text(hunk.raw_header or hunk.header_line, style=theme.hunk_header))
    for line in hunk.lines:
        text = Text()
        if display.line_numbers:
            text.append(_gutter(line), style=theme.gutter)
        text.append(line.prefix + line.content, style=theme.line_style(line.type))
        console.print(text)
        if not line.has_newline:
            console.print(Text(NO_NEWLINE_MARKER, style=theme.marker))


def render_file_diffs(
    console: Console,
    diffs: Sequence[FileDiff],
    display: DisplayConfig,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Print every file diff with its hunks."""
    if not diffs:
        console.print(Text("No changes", style=theme.marker))
        return

    for index, diff in enumerate(diffs):
        if index:
            console.print()
        console.print(_file_header(diff, display, theme))
        if diff.is_binary:
            console.print(Text("(binary file)", style=theme.marker))
            continue
        for hunk in diff.hunks:
            render_hunk(console, hunk, display, theme)


def render_diff_stat(
    console: Console,
    diffs: Sequence[FileDiff],
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Print a one-line summary per file and a totals line."""
    total_additions = 0
    total_deletions = 0
    for diff in diffs:
        row = Text()
        row.append_text(_badge(diff.change_type, theme))
        row.append(" ")
        row.append(describe_path(diff.path, diff.old_path))
        row.append("  ")
        if diff.is_binary:
            row.append("binary", style=theme.marker)
        else:
            row.append(f"+{diff.additions}", style=theme.line_style(LineType.ADDITION))
            row.append(" ")
            row.append(f"-{diff.deletions}", style=theme.line_style(LineType.DELETION))
        console.print(row)
        total_additions += diff.additions
        total_deletions += diff.deletions

    noun = "file" if len(diffs) == 1 else "files"
    console.print(
        f"{len(diffs)} {noun} changed, "
        f"{total_additions} insertions(+), {total_deletions} deletions(-)"
    )


def _status_row(entry: FileStatus, change_type: ChangeType | None, theme: Theme) -> Text:
    row = Text("  ")
    row.append_text(_badge(change_type or entry.display_change_type, theme))
    row.append(" ")
    row.append(describe_path(entry.path, entry.original_path))
    return row


def render_status(
    console: Console,
    status: WorkingTreeStatus,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Print working-tree entries grouped into staging sections."""
    if status.is_clean:
        console.print(Text("Working tree clean", style=theme.marker))
        return

    sections = (
        ("Conflicts", status.conflicted, None),
        ("Staged changes", status.staged, "index"),
        ("Unstaged changes", status.unstaged, "work_tree"),
        ("Untracked files", status.untracked, None),
    )
    for title, entries, side in sections:
        if not entries:
            continue
        console.print(Text(f"{title} ({len(entries)})", style=theme.section))
        for entry in entries:
            if side == "index":
                change_type = entry.index_status
            elif side == "work_tree":
                change_type = entry.work_tree_status
            else:
                change_type = None
            console.print(_status_row(entry, change_type, theme))
