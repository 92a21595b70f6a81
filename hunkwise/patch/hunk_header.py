"""Codec for unified diff hunk header lines.

A hunk header has the fixed grammar::

    @@ -<old_start>[,<old_count>] +<new_start>[,<new_count>] @@[ <trailer>]

where an omitted count means 1 and the optional trailer is whatever context
the diff tool printed after the second ``@@`` (typically a function name).
"""

import re
from typing import NamedTuple

# Pattern for hunk header: @@ -old_start[,old_count] +new_start[,new_count] @@ [context]
HUNK_HEADER_RE = re.compile(
    r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@(.*)$"
)


class HunkHeader(NamedTuple):
    """Fields decoded from a hunk header line."""

    old_start: int
    old_count: int
    new_start: int
    new_count: int
    trailer: str = ""


def parse_hunk_header(line: str) -> HunkHeader | None:
    """Parse a hunk header line.

    Args:
        line: Line starting with @@

    Returns:
        HunkHeader with the decoded fields, or None if the line does not
        follow the hunk header grammar. A non-match is not an error; callers
        treat it as "this line is not a hunk header".
    """
    match = HUNK_HEADER_RE.match(line)
    if not match:
        return None

    old_start = int(match.group(1))
    # Count defaults to 1 if omitted (e.g., @@ -1 +1,2 @@)
    old_count = int(match.group(2)) if match.group(2) else 1
    new_start = int(match.group(3))
    new_count = int(match.group(4)) if match.group(4) else 1
    trailer = match.group(5).strip()

    return HunkHeader(old_start, old_count, new_start, new_count, trailer)


def format_hunk_header(
    old_start: int,
    old_count: int,
    new_start: int,
    new_count: int,
    trailer: str = "",
) -> str:
    """Render a hunk header line from its fields.

    Counts are always written explicitly, so ``@@ -1 +1 @@`` comes back as
    ``@@ -1,1 +1,1 @@``. Both forms decode to the same fields.
    """
    header = f"@@ -{old_start},{old_count} +{new_start},{new_count} @@"
    if trailer:
        header = f"{header} {trailer}"
    return header
