"""Types for working-tree status entries."""

from __future__ import annotations

from dataclasses import dataclass

from hunkwise.core.utils import split_path
from hunkwise.patch.types import ChangeType

UNTRACKED_CODE = "?"
IGNORED_CODE = "!"
NO_CHANGE_CODE = " "

# Status codes whose record is followed by the rename/copy source path
SOURCE_PATH_CODES = frozenset({"R", "C"})


@dataclass(frozen=True)
class FileStatus:
    """Status of a single path in the working tree.

    Attributes:
        path: Path relative to the repository root.
        index_status: Change staged in the index, None if unchanged there.
        work_tree_status: Unstaged change in the work tree, None if unchanged.
        original_path: Rename/copy source path.
    """

    path: str
    index_status: ChangeType | None = None
    work_tree_status: ChangeType | None = None
    original_path: str | None = None

    @classmethod
    def from_codes(
        cls,
        index_char: str,
        work_tree_char: str,
        path: str,
        original_path: str | None = None,
    ) -> FileStatus:
        """Create a FileStatus from the two porcelain status characters.

        ``??`` marks an untracked file and ``!!`` an ignored one. Otherwise
        each character is mapped on its own, with a space meaning no change
        in that area.
        """
        index_status: ChangeType | None
        work_tree_status: ChangeType | None

        if index_char == UNTRACKED_CODE and work_tree_char == UNTRACKED_CODE:
            index_status = work_tree_status = ChangeType.UNTRACKED
        elif index_char == IGNORED_CODE and work_tree_char == IGNORED_CODE:
            index_status = work_tree_status = ChangeType.IGNORED
        else:
            index_status = (
                None if index_char == NO_CHANGE_CODE else ChangeType.from_char(index_char)
            )
            work_tree_status = (
                None if work_tree_char == NO_CHANGE_CODE else ChangeType.from_char(work_tree_char)
            )

        return cls(
            path=path,
            index_status=index_status,
            work_tree_status=work_tree_status,
            original_path=original_path,
        )

    @property
    def file_name(self) -> str:
        return split_path(self.path)[1]

    @property
    def directory(self) -> str:
        return split_path(self.path)[0]

    @property
    def is_staged(self) -> bool:
        """Whether the index holds a change for this path."""
        return self.index_status not in (None, ChangeType.UNTRACKED, ChangeType.IGNORED)

    @property
    def is_unstaged(self) -> bool:
        """Whether the work tree holds a change not yet staged."""
        return self.work_tree_status not in (None, ChangeType.UNTRACKED, ChangeType.IGNORED)

    @property
    def is_untracked(self) -> bool:
        return ChangeType.UNTRACKED in (self.index_status, self.work_tree_status)

    @property
    def has_conflict(self) -> bool:
        return ChangeType.UNMERGED in (self.index_status, self.work_tree_status)

    @property
    def display_change_type(self) -> ChangeType:
        """Change type to show, preferring the index side when staged."""
        if self.is_staged and self.index_status is not None:
            return self.index_status
        if self.work_tree_status is not None:
            return self.work_tree_status
        return ChangeType.MODIFIED


@dataclass(frozen=True)
class WorkingTreeStatus:
    """Working-tree entries grouped the way a staging UI lists them."""

    staged: tuple[FileStatus, ...] = ()
    unstaged: tuple[FileStatus, ...] = ()
    untracked: tuple[FileStatus, ...] = ()
    conflicted: tuple[FileStatus, ...] = ()

    @classmethod
    def empty(cls) -> WorkingTreeStatus:
        return cls()

    @classmethod
    def from_files(cls, files: list[FileStatus]) -> WorkingTreeStatus:
        """Group status entries.

        Conflicted files go only to conflicted and untracked files only to
        untracked. Any other file lands in staged, unstaged or both.
        Ignored files are dropped.
        """
        staged: list[FileStatus] = []
        unstaged: list[FileStatus] = []
        untracked: list[FileStatus] = []
        conflicted: list[FileStatus] = []

        for file in files:
            if file.has_conflict:
                conflicted.append(file)
            elif file.is_untracked:
                untracked.append(file)
            else:
                if file.is_staged:
                    staged.append(file)
                if file.is_unstaged:
                    unstaged.append(file)

        return cls(
            staged=tuple(staged),
            unstaged=tuple(unstaged),
            untracked=tuple(untracked),
            conflicted=tuple(conflicted),
        )

    @property
    def is_clean(self) -> bool:
        return self.total_changed_files == 0

    @property
    def total_changed_files(self) -> int:
        return len(self.staged) + len(self.unstaged) + len(self.untracked) + len(self.conflicted)

    @property
    def has_staged(self) -> bool:
        return bool(self.staged)

    @property
    def has_unstaged(self) -> bool:
        return bool(self.unstaged)

    @property
    def has_untracked(self) -> bool:
        return bool(self.untracked)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicted)
