"""Serialize a single hunk back into a standalone patch.

The output is meant for ``git apply --cached --unidiff-zero`` (forward to
stage a hunk, ``--reverse`` to unstage it), so it contains exactly the
lines of the chosen hunk and nothing from its siblings.
"""

from enum import Enum

from hunkwise.core.constants import NO_NEWLINE_MARKER
from hunkwise.patch.types import DiffHunk, FileDiff


class ApplyDirection(Enum):
    """How the command layer should feed a serialized hunk to git apply."""

    STAGE = "stage"  # Forward apply to the index
    UNSTAGE = "unstage"  # Reverse apply to the index

    @property
    def is_reverse(self) -> bool:
        return self is ApplyDirection.UNSTAGE


def hunk_to_patch(hunk: DiffHunk, file_path: str) -> str:
    """Render one hunk as standalone unified diff text.

    The header line is rebuilt from the hunk's start/count fields rather
    than copied from raw_header, so hunks constructed in code serialize
    the same way as parsed ones.

    Args:
        hunk: The hunk to serialize.
        file_path: Repository-relative path the hunk belongs to.

    Returns:
        Patch text with synthetic ``--- a/`` and ``+++ b/`` headers, every
        line newline-terminated.
    """
    parts = [
        f"--- a/{file_path}\n",
        f"+++ b/{file_path}\n",
        f"{hunk.header_line}\n",
    ]
    for line in hunk.lines:
        parts.append(f"{line.prefix}{line.content}\n")
        if not line.has_newline:
            parts.append(f"{NO_NEWLINE_MARKER}\n")
    return "".join(parts)


def file_diff_to_patch(file_diff: FileDiff, hunk_index: int) -> str:
    """Serialize the hunk at hunk_index of a file diff against its path.

    Raises:
        IndexError: If the file diff has no hunk at that index.
    """
    if not 0 <= hunk_index < len(file_diff.hunks):
        raise IndexError(
            f"Hunk index {hunk_index} out of range for {file_diff.path} "
            f"({len(file_diff.hunks)} hunks)"
        )
    return hunk_to_patch(file_diff.hunks[hunk_index], file_diff.path)


def wrap_as_git_diff(patch: str, file_path: str) -> str:
    """Prefix a serialized hunk with a ``diff --git`` line.

    The result can be fed back through parse_diff().
    """
    return f"diff --git a/{file_path} b/{file_path}\n{patch}"
