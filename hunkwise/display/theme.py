"""Theme definitions for hunkwise terminal output."""

from dataclasses import dataclass, field

from hunkwise.patch.types import ChangeType, LineType


@dataclass
class Theme:
    """Visual theme configuration.

    All styling in one place for easy customization.
    """

    # Rich style strings per hunk line type
    lines: dict[LineType, str] = field(default_factory=lambda: {
        LineType.ADDITION: "green",
        LineType.DELETION: "red",
        LineType.CONTEXT: "",
    })

    # Badge colors per change type
    badges: dict[ChangeType, str] = field(default_factory=lambda: {
        ChangeType.ADDED: "bold green",
        ChangeType.MODIFIED: "bold yellow",
        ChangeType.DELETED: "bold red",
        ChangeType.RENAMED: "bold cyan",
        ChangeType.COPIED: "bold cyan",
        ChangeType.UNMERGED: "bold magenta",
        ChangeType.TYPE_CHANGED: "bold blue",
        ChangeType.UNTRACKED: "dim",
        ChangeType.IGNORED: "dim",
    })

    file_header: str = "bold"
    hunk_header: str = "cyan"
    gutter: str = "dim"
    marker: str = "dim italic"
    section: str = "bold underline"

    def line_style(self, line_type: LineType) -> str:
        return self.lines.get(line_type, "")

    def badge(self, change_type: ChangeType) -> str:
        return self.badges.get(change_type, "bold")


# Default theme instance
DEFAULT_THEME = Theme()
