"""Parser for git unified diff output.

This module converts the text printed by ``git diff`` (and ``git show``)
into FileDiff records. Parsing is a single pass over the input: each line
is classified once (see classifier.py) and then dispatched to at most two
open builders, one for the current file and one for the current hunk.
Builders are frozen into immutable records when the next ``diff --git``,
the next ``@@`` or the end of input closes them.

The parser never raises on malformed or truncated input. Diff text is
often hand-edited or cut short for display, and a partial result is more
useful than an error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from hunkwise.core.constants import NULL_DEVICE
from hunkwise.patch.classifier import LineKind, classify_line
from hunkwise.patch.hunk_header import parse_hunk_header
from hunkwise.patch.types import ChangeType, DiffHunk, DiffLine, FileDiff, LineType

logger = logging.getLogger(__name__)

# Pattern for git extended diff format; greedy so the split is the last " b/"
GIT_DIFF_RE = re.compile(r"^diff --git a/(.+) b/(.+)$")


def _strip_path_prefix(path: str, prefix: str) -> str:
    """Strip one leading a/ or b/ prefix and git's trailing tab if present."""
    path = path.rstrip("\t")
    if path.startswith(prefix):
        return path[len(prefix):]
    return path


def _parse_percentage(value: str) -> int | None:
    try:
        return int(value.strip().removesuffix("%"))
    except ValueError:
        return None


class _HunkBuilder:
    """Accumulates the lines of one hunk while tracking line numbers."""

    def __init__(self, header_line: str) -> None:
        self.raw_header = header_line
        self.lines: list[DiffLine] = []
        parsed = parse_hunk_header(header_line)
        if parsed is None:
            # Keep the hunk with zeroed positions rather than dropping its lines
            logger.debug("Malformed hunk header: %r", header_line)
            self.old_start = self.old_count = self.new_start = self.new_count = 0
            self.header = ""
        else:
            self.old_start, self.old_count, self.new_start, self.new_count, self.header = parsed
        self._old_line = self.old_start
        self._new_line = self.new_start

    def add_line(self, line_type: LineType, content: str, raw_line: str) -> None:
        old_number: int | None = None
        new_number: int | None = None
        if line_type is LineType.CONTEXT:
            old_number = self._old_line
            new_number = self._new_line
            self._old_line += 1
            self._new_line += 1
        elif line_type is LineType.ADDITION:
            new_number = self._new_line
            self._new_line += 1
        else:
            old_number = self._old_line
            self._old_line += 1

        self.lines.append(
            DiffLine(
                content=content,
                type=line_type,
                old_line_number=old_number,
                new_line_number=new_number,
                raw_line=raw_line,
            )
        )

    def mark_no_newline(self) -> None:
        """Flag the most recent line as lacking a trailing newline."""
        if self.lines:
            self.lines[-1] = self.lines[-1].with_no_newline()

    def build(self) -> DiffHunk:
        return DiffHunk(
            old_start=self.old_start,
            old_count=self.old_count,
            new_start=self.new_start,
            new_count=self.new_count,
            header=self.header,
            lines=tuple(self.lines),
            raw_header=self.raw_header,
        )


class _FileDiffBuilder:
    """Accumulates header metadata and hunks for one ``diff --git`` block."""

    def __init__(self, header_line: str) -> None:
        self.path = ""
        self.old_path: str | None = None
        self.change_type = ChangeType.MODIFIED
        self.is_binary = False
        self.hunks: list[DiffHunk] = []
        self.old_mode: str | None = None
        self.new_mode: str | None = None
        self.old_hash: str | None = None
        self.new_hash: str | None = None
        self.similarity: int | None = None

        match = GIT_DIFF_RE.match(header_line)
        if match:
            self.old_path = match.group(1)
            self.path = match.group(2)
        else:
            logger.debug("Unparseable diff header: %r", header_line)

    def set_index(self, value: str) -> None:
        # Format: abc123..def456 100644
        hash_part = value.split(" ", 1)[0]
        old_hash, sep, new_hash = hash_part.partition("..")
        if sep:
            self.old_hash = old_hash
            self.new_hash = new_hash

    def build(self) -> FileDiff:
        change_type = self.change_type
        # No explicit signal but the paths differ: treat as a rename
        if change_type is ChangeType.MODIFIED and self.old_path is not None:
            if self.old_path != self.path:
                change_type = ChangeType.RENAMED

        return FileDiff(
            path=self.path,
            old_path=self.old_path if self.old_path != self.path else None,
            change_type=change_type,
            is_binary=self.is_binary,
            hunks=tuple(self.hunks),
            old_mode=self.old_mode,
            new_mode=self.new_mode,
            old_hash=self.old_hash,
            new_hash=self.new_hash,
            similarity=self.similarity,
        )


def iter_lines(text: str) -> Iterator[str]:
    """Yield the lines of text split on "\\n", without copying the whole input.

    A trailing newline does not produce a final empty line. Carriage
    returns are kept as part of the line content.
    """
    start = 0
    length = len(text)
    while start < length:
        end = text.find("\n", start)
        if end == -1:
            yield text[start:]
            return
        yield text[start:end]
        start = end + 1


def parse_diff_iter(lines: Iterable[str]) -> Iterator[FileDiff]:
    """Parse diff lines, yielding each FileDiff as soon as it is complete.

    A file is complete when the next ``diff --git`` line or the end of
    input is reached. Output order matches the order of ``diff --git``
    blocks in the input.

    Args:
        lines: Diff output lines without line terminators.

    Yields:
        FileDiff records, one per ``diff --git`` block.
    """
    current_file: _FileDiffBuilder | None = None
    current_hunk: _HunkBuilder | None = None

    for line in lines:
        kind, value, raw = classify_line(line, in_hunk=current_hunk is not None)

        if kind is LineKind.FILE_HEADER:
            if current_file is not None:
                if current_hunk is not None:
                    current_file.hunks.append(current_hunk.build())
                yield current_file.build()
            current_file = _FileDiffBuilder(value)
            current_hunk = None
            continue

        if current_file is None:
            # Nothing before the first "diff --git" belongs to a file
            continue

        if kind is LineKind.OLD_MODE:
            current_file.old_mode = value
        elif kind is LineKind.NEW_MODE:
            current_file.new_mode = value
        elif kind is LineKind.DELETED_FILE_MODE:
            current_file.new_mode = value
            current_file.change_type = ChangeType.DELETED
        elif kind is LineKind.NEW_FILE_MODE:
            current_file.new_mode = value
            current_file.change_type = ChangeType.ADDED
        elif kind is LineKind.SIMILARITY:
            similarity = _parse_percentage(value)
            if similarity is not None:
                current_file.similarity = similarity
        elif kind is LineKind.DISSIMILARITY:
            dissimilarity = _parse_percentage(value)
            if dissimilarity is not None:
                current_file.similarity = 100 - dissimilarity
        elif kind is LineKind.RENAME_FROM:
            current_file.old_path = value
            current_file.change_type = ChangeType.RENAMED
        elif kind is LineKind.RENAME_TO:
            current_file.path = value
        elif kind is LineKind.COPY_FROM:
            current_file.old_path = value
            current_file.change_type = ChangeType.COPIED
        elif kind is LineKind.COPY_TO:
            current_file.path = value
        elif kind is LineKind.INDEX:
            current_file.set_index(value)
        elif kind is LineKind.BINARY:
            current_file.is_binary = True
        elif kind is LineKind.OLD_PATH:
            if value != NULL_DEVICE:
                current_file.old_path = _strip_path_prefix(value, "a/")
        elif kind is LineKind.NEW_PATH:
            if value == NULL_DEVICE:
                current_file.change_type = ChangeType.DELETED
            else:
                current_file.path = _strip_path_prefix(value, "b/")
        elif kind is LineKind.HUNK_HEADER:
            if current_hunk is not None:
                current_file.hunks.append(current_hunk.build())
            current_hunk = _HunkBuilder(value)
        elif current_hunk is not None:
            if kind is LineKind.ADDITION:
                current_hunk.add_line(LineType.ADDITION, value, raw)
            elif kind is LineKind.DELETION:
                current_hunk.add_line(LineType.DELETION, value, raw)
            elif kind is LineKind.CONTEXT:
                current_hunk.add_line(LineType.CONTEXT, value, raw)
            elif kind is LineKind.NO_NEWLINE:
                current_hunk.mark_no_newline()

    if current_file is not None:
        if current_hunk is not None:
            current_file.hunks.append(current_hunk.build())
        yield current_file.build()


def parse_diff(text: str) -> list[FileDiff]:
    """Parse git diff output into FileDiff records.

    Handles:
    - ``diff --git`` blocks, one FileDiff each, in input order
    - Mode changes, new and deleted files, renames, copies and
      (dis)similarity indexes
    - Index hashes and binary file markers
    - Context lines (space prefix), deletions (-), additions (+)
    - '\\ No newline at end of file' marker

    Args:
        text: Raw diff output, possibly empty, truncated or malformed.

    Returns:
        List of FileDiff objects. Empty input gives an empty list.

    Example:
        >>> diff_text = '''diff --git a/file.py b/file.py
        ... --- a/file.py
        ... +++ b/file.py
        ... @@ -1,2 +1,2 @@
        ...  context
        ... -removed
        ... +added
        ... '''
        >>> files = parse_diff(diff_text)
        >>> files[0].path, files[0].additions, files[0].deletions
        ('file.py', 1, 1)
    """
    if not text:
        return []

    result = list(parse_diff_iter(iter_lines(text)))
    logger.debug("Parsed %d file diff(s)", len(result))
    return result
