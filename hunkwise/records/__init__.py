"""Parsers for commit log, tag, stash, remote and blame output."""

from hunkwise.records.blame import parse_blame
from hunkwise.records.log import parse_log
from hunkwise.records.remotes import parse_remotes
from hunkwise.records.stash import parse_stashes
from hunkwise.records.tags import parse_tags
from hunkwise.records.types import BlameLine, Commit, Remote, Stash, Tag

__all__ = [
    "BlameLine",
    "Commit",
    "Remote",
    "Stash",
    "Tag",
    "parse_blame",
    "parse_log",
    "parse_remotes",
    "parse_stashes",
    "parse_tags",
]
