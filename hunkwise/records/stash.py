"""Parser for ``git stash list --format=<STASH_FORMAT>`` output."""

import re

from hunkwise.core.constants import PIPE_SEPARATOR
from hunkwise.core.utils import parse_iso8601
from hunkwise.records.types import Stash

STASH_REF_RE = re.compile(r"stash@\{(\d+)\}")

# "On <branch>: <message>" for `git stash push -m`, "WIP on ..." otherwise
_BRANCH_MESSAGE_RES = (
    re.compile(r"^On ([^:]+): (.+)$"),
    re.compile(r"^WIP on ([^:]+): (.+)$"),
)


def _extract_branch(message: str) -> tuple[str | None, str]:
    for pattern in _BRANCH_MESSAGE_RES:
        match = pattern.match(message)
        if match:
            return match.group(1), match.group(2)
    return None, message


def parse_stashes(text: str) -> list[Stash]:
    """Parse pipe-delimited stash lines.

    Each line is ``stash@{N}|hash|subject|date``. Lines with fewer than
    three fields are skipped. The index falls back to the entry's position
    when the ref name is not ``stash@{N}``, and the date is None when
    absent or unparseable.
    """
    if not text:
        return []

    stashes: list[Stash] = []
    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed:
            continue

        parts = trimmed.split(PIPE_SEPARATOR)
        if len(parts) < 3:
            continue

        ref_name, commit_hash, message = parts[0], parts[1], parts[2]
        ref_match = STASH_REF_RE.search(ref_name)
        index = int(ref_match.group(1)) if ref_match else len(stashes)
        branch, clean_message = _extract_branch(message)
        date = parse_iso8601(parts[3]) if len(parts) > 3 else None

        stashes.append(
            Stash(
                index=index,
                commit_hash=commit_hash,
                message=clean_message,
                branch=branch,
                date=date,
            )
        )

    return stashes
