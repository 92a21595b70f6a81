"""Parser for ``git blame --porcelain`` output.

Porcelain blame prints, for every line, a header
``<hash> <original-line> <final-line> [<group-size>]`` followed by
metadata lines (``author``, ``author-mail``, ``author-time``, ...) and
finally the content prefixed with a tab. Metadata is only printed the
first time a commit appears, so it is remembered per commit here.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone

from hunkwise.core.constants import UNCOMMITTED_HASH_PREFIX
from hunkwise.records.types import BlameLine

logger = logging.getLogger(__name__)

# SHA-1 (40) or SHA-256 (64) object names
BLAME_HEADER_RE = re.compile(r"^([0-9a-f]{40}|[0-9a-f]{64}) (\d+) (\d+)(?: \d+)?$")


@dataclass
class _CommitInfo:
    author: str = ""
    author_email: str = ""
    date: datetime | None = None


def parse_blame(text: str) -> list[BlameLine]:
    """Parse porcelain blame output into one BlameLine per file line.

    Never raises; unrecognized lines are ignored.
    """
    if not text:
        return []

    lines: list[BlameLine] = []
    commits: dict[str, _CommitInfo] = {}
    current_hash = ""
    current = _CommitInfo()
    line_number = 0

    for line in text.split("\n"):
        header = BLAME_HEADER_RE.match(line)
        if header:
            current_hash = header.group(1)
            line_number = int(header.group(3))
            current = commits.setdefault(current_hash, _CommitInfo())
        elif line.startswith("author-mail "):
            current.author_email = line[len("author-mail "):].strip("<>")
        elif line.startswith("author-time "):
            try:
                current.date = datetime.fromtimestamp(
                    int(line[len("author-time "):]), tz=timezone.utc
                )
            except (ValueError, OverflowError, OSError):
                logger.debug("Invalid blame author-time: %r", line)
        elif line.startswith("author "):
            current.author = line[len("author "):]
        elif line.startswith("\t"):
            lines.append(
                BlameLine(
                    commit_hash=current_hash,
                    author=current.author,
                    author_email=current.author_email,
                    date=current.date,
                    line_number=line_number,
                    content=line[1:],
                    is_uncommitted=current_hash.startswith(UNCOMMITTED_HASH_PREFIX),
                )
            )

    return lines
