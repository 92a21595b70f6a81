"""Terminal display of parsed git output."""

from hunkwise.display.console import get_console, set_console
from hunkwise.display.render import (
    describe_path,
    render_diff_stat,
    render_file_diffs,
    render_hunk,
    render_status,
)
from hunkwise.display.theme import DEFAULT_THEME, Theme

__all__ = [
    "DEFAULT_THEME",
    "Theme",
    "describe_path",
    "get_console",
    "render_diff_stat",
    "render_file_diffs",
    "render_hunk",
    "render_status",
    "set_console",
]
