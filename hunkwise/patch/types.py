"""Types for structured git diff representation.

This module provides immutable dataclasses for lines, hunks and per-file
diffs. Instances are produced by the diff parser and never mutated
afterwards; derived values such as addition counts are computed on access.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from enum import Enum

from hunkwise.core.utils import split_path
from hunkwise.patch.hunk_header import format_hunk_header


def _new_id() -> str:
    return uuid.uuid4().hex


class LineType(Enum):
    """Kind of a line inside a hunk, valued by its diff marker."""

    CONTEXT = " "
    ADDITION = "+"
    DELETION = "-"

    @property
    def prefix(self) -> str:
        """Marker character written in front of the line content."""
        return self.value


class ChangeType(Enum):
    """Type of change for a file, valued by its git status character."""

    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UNMERGED = "U"
    TYPE_CHANGED = "T"
    UNTRACKED = "?"
    IGNORED = "!"

    @classmethod
    def from_char(cls, char: str) -> ChangeType | None:
        """Map a single git status character to a change type, None if unknown."""
        try:
            return cls(char)
        except ValueError:
            return None

    @property
    def description(self) -> str:
        """Human-readable label."""
        return _CHANGE_DESCRIPTIONS[self]


_CHANGE_DESCRIPTIONS = {
    ChangeType.ADDED: "Added",
    ChangeType.MODIFIED: "Modified",
    ChangeType.DELETED: "Deleted",
    ChangeType.RENAMED: "Renamed",
    ChangeType.COPIED: "Copied",
    ChangeType.UNMERGED: "Conflict",
    ChangeType.TYPE_CHANGED: "Type Changed",
    ChangeType.UNTRACKED: "Untracked",
    ChangeType.IGNORED: "Ignored",
}


@dataclass(frozen=True)
class DiffLine:
    """A single line inside a hunk.

    Attributes:
        content: Line text without the leading +/-/space marker.
        type: Context, addition or deletion.
        old_line_number: Line number in the old file (context and deletions).
        new_line_number: Line number in the new file (context and additions).
        has_newline: False when git reported "No newline at end of file".
        raw_line: Original line including its marker, for exact reproduction;
            not part of equality.
        id: Stable identity for UI selection; not part of equality.
    """

    content: str
    type: LineType
    old_line_number: int | None = None
    new_line_number: int | None = None
    has_newline: bool = True
    raw_line: str | None = field(default=None, compare=False)
    id: str = field(default_factory=_new_id, compare=False)

    def __post_init__(self) -> None:
        if self.raw_line is None:
            object.__setattr__(self, "raw_line", self.type.prefix + self.content)

    @property
    def prefix(self) -> str:
        """Marker character for this line type."""
        return self.type.prefix

    def with_no_newline(self) -> DiffLine:
        """Copy of this line flagged as missing its trailing newline."""
        return replace(self, has_newline=False)


@dataclass(frozen=True)
class DiffHunk:
    """A contiguous block of changes within a file.

    The start/count fields are taken from the ``@@`` header as-is. Git can
    emit hunks whose line counts disagree with their header, so they are
    never cross-checked against ``lines``; use compute_counts() for the
    counts implied by the lines themselves.

    Attributes:
        old_start: Start line in the old file (0 for pure additions).
        old_count: Number of old-file lines the hunk claims to cover.
        new_start: Start line in the new file.
        new_count: Number of new-file lines the hunk claims to cover.
        header: Trailer text after the second @@ (e.g. function name).
        lines: Ordered hunk lines.
        raw_header: The header line exactly as git printed it.
        id: Stable identity for UI selection; not part of equality.
    """

    old_start: int
    old_count: int
    new_start: int
    new_count: int
    header: str = ""
    lines: tuple[DiffLine, ...] = ()
    raw_header: str = ""
    id: str = field(default_factory=_new_id, compare=False)

    @property
    def addition_count(self) -> int:
        """Number of added lines."""
        return sum(1 for line in self.lines if line.type is LineType.ADDITION)

    @property
    def deletion_count(self) -> int:
        """Number of deleted lines."""
        return sum(1 for line in self.lines if line.type is LineType.DELETION)

    @property
    def context_count(self) -> int:
        """Number of unchanged context lines."""
        return sum(1 for line in self.lines if line.type is LineType.CONTEXT)

    def compute_counts(self) -> tuple[int, int]:
        """Compute (old_count, new_count) from the lines actually present.

        old_count = context + deletions, new_count = context + additions.
        """
        context = self.context_count
        return (context + self.deletion_count, context + self.addition_count)

    @property
    def header_line(self) -> str:
        """Header line rebuilt from the stored fields."""
        return format_hunk_header(
            self.old_start, self.old_count, self.new_start, self.new_count, self.header
        )


@dataclass(frozen=True)
class FileDiff:
    """The diff of a single file path.

    Attributes:
        path: Current path (the new path for renames and copies).
        old_path: Original path, only set when it differs from path.
        change_type: Added, modified, deleted, renamed or copied.
        is_binary: True when git reported "Binary files ... differ".
        hunks: Ordered hunks (empty for binary files and pure renames).
        old_mode: Mode before the change (from "old mode").
        new_mode: Mode after the change (new/deleted/changed file mode).
        old_hash: Abbreviated blob hash before the change.
        new_hash: Abbreviated blob hash after the change.
        similarity: Rename/copy similarity percentage (0-100).
        id: Stable identity for UI selection; not part of equality.
    """

    path: str
    old_path: str | None = None
    change_type: ChangeType = ChangeType.MODIFIED
    is_binary: bool = False
    hunks: tuple[DiffHunk, ...] = ()
    old_mode: str | None = None
    new_mode: str | None = None
    old_hash: str | None = None
    new_hash: str | None = None
    similarity: int | None = None
    id: str = field(default_factory=_new_id, compare=False)

    @property
    def additions(self) -> int:
        """Total added lines across all hunks."""
        return sum(hunk.addition_count for hunk in self.hunks)

    @property
    def deletions(self) -> int:
        """Total deleted lines across all hunks."""
        return sum(hunk.deletion_count for hunk in self.hunks)

    @property
    def file_name(self) -> str:
        """File name without directory."""
        return split_path(self.path)[1]

    @property
    def directory(self) -> str:
        """Directory containing the file, "" at repository root."""
        return split_path(self.path)[0]

    @property
    def has_changes(self) -> bool:
        """Whether there is anything to display for this file."""
        return bool(self.hunks) or self.is_binary

    @classmethod
    def empty(cls, path: str, change_type: ChangeType = ChangeType.MODIFIED) -> FileDiff:
        """Diff for a file with no hunks."""
        return cls(path=path, change_type=change_type)

    @classmethod
    def binary(cls, path: str, change_type: ChangeType = ChangeType.MODIFIED) -> FileDiff:
        """Diff for a binary file."""
        return cls(path=path, change_type=change_type, is_binary=True)
