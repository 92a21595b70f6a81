"""Parsers for ``git status --porcelain`` (v1) output.

Two input shapes are supported:

- ``parse_status`` for ``-z`` output: records are NUL-delimited, and a
  rename or copy record is followed by an extra record holding the source
  path.
- ``parse_status_lines`` for newline-delimited output, where a rename or
  copy is written inline as ``source -> destination``.

Both classify entries identically. Neither raises; records too short to
hold a status code and a path are skipped.
"""

import logging

from hunkwise.status.types import SOURCE_PATH_CODES, FileStatus

logger = logging.getLogger(__name__)

RENAME_ARROW = " -> "


def parse_status(text: str) -> list[FileStatus]:
    """Parse NUL-delimited porcelain status records.

    Args:
        text: Output of ``git status --porcelain -z``.

    Returns:
        One FileStatus per entry. Rename/copy source records are consumed
        into the preceding entry, so there can be fewer entries than records.
    """
    if not text:
        return []

    files: list[FileStatus] = []
    records = text.split("\0")
    i = 0
    while i < len(records):
        record = records[i]
        i += 1
        if len(record) < 3:
            if record:
                logger.debug("Skipping short status record: %r", record)
            continue

        index_char, work_tree_char, path = record[0], record[1], record[3:]
        original_path = None
        if index_char in SOURCE_PATH_CODES and i < len(records):
            original_path = records[i]
            i += 1

        files.append(
            FileStatus.from_codes(index_char, work_tree_char, path, original_path)
        )

    return files


def parse_status_lines(text: str) -> list[FileStatus]:
    """Parse newline-delimited porcelain status lines.

    Args:
        text: Output of ``git status --porcelain`` without ``-z``.

    Returns:
        One FileStatus per line.
    """
    if not text:
        return []

    files: list[FileStatus] = []
    for line in text.splitlines():
        if len(line) < 3:
            continue

        index_char, work_tree_char, path = line[0], line[1], line[3:]
        original_path = None
        # Format: "R  old_name -> new_name"
        if index_char in SOURCE_PATH_CODES and RENAME_ARROW in path:
            original_path, path = path.split(RENAME_ARROW, 1)

        files.append(
            FileStatus.from_codes(index_char, work_tree_char, path, original_path)
        )

    return files
