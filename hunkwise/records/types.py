"""Record types produced by the auxiliary git output parsers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from urllib.parse import urlparse

from hunkwise.core.constants import SHORT_HASH_LENGTH

_SSH_HOST_RE = re.compile(r"git@([^:]+):")


@dataclass(frozen=True)
class Commit:
    """A commit as listed by ``git log``."""

    hash: str
    subject: str
    author_name: str
    author_email: str
    author_date: datetime
    body: str = ""
    short_hash: str = ""
    committer_name: str = ""
    committer_email: str = ""
    commit_date: datetime | None = None
    parent_hashes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.short_hash:
            object.__setattr__(self, "short_hash", self.hash[:SHORT_HASH_LENGTH])
        # Committer fields fall back to the author when not given
        if not self.committer_name:
            object.__setattr__(self, "committer_name", self.author_name)
        if not self.committer_email:
            object.__setattr__(self, "committer_email", self.author_email)
        if self.commit_date is None:
            object.__setattr__(self, "commit_date", self.author_date)

    @property
    def is_merge(self) -> bool:
        return len(self.parent_hashes) > 1

    @property
    def full_message(self) -> str:
        """Subject and body separated by a blank line."""
        if not self.body:
            return self.subject
        return f"{self.subject}\n\n{self.body}"


@dataclass(frozen=True)
class Tag:
    """A tag. Annotated tags carry a message; lightweight ones do not."""

    name: str
    commit_hash: str
    message: str | None = None
    tagger_name: str | None = None
    tagger_email: str | None = None
    tag_date: datetime | None = None

    @property
    def is_annotated(self) -> bool:
        return self.message is not None

    @classmethod
    def lightweight(cls, name: str, commit_hash: str) -> Tag:
        return cls(name=name, commit_hash=commit_hash)


@dataclass(frozen=True)
class Stash:
    """An entry of ``git stash list``."""

    index: int
    commit_hash: str
    message: str
    branch: str | None = None
    date: datetime | None = None

    @property
    def ref_name(self) -> str:
        return f"stash@{{{self.index}}}"


@dataclass(frozen=True)
class Remote:
    """A configured remote with its fetch and push URLs."""

    name: str
    fetch_url: str
    push_url: str = ""

    def __post_init__(self) -> None:
        if not self.push_url:
            object.__setattr__(self, "push_url", self.fetch_url)

    @property
    def is_ssh(self) -> bool:
        return self.fetch_url.startswith("git@") or "ssh://" in self.fetch_url

    @property
    def is_https(self) -> bool:
        return self.fetch_url.startswith(("https://", "http://"))

    @property
    def host(self) -> str | None:
        """Host part of the fetch URL, for both scp-style and URL remotes."""
        match = _SSH_HOST_RE.match(self.fetch_url)
        if match:
            return match.group(1)
        return urlparse(self.fetch_url).hostname


@dataclass(frozen=True)
class BlameLine:
    """One line of ``git blame --porcelain`` output.

    Attributes:
        commit_hash: Full hash of the commit that last touched the line.
        author: Author name.
        author_email: Author email without angle brackets.
        date: Author time (UTC), None if git did not report one.
        line_number: Line number in the final file.
        content: Line text.
        is_uncommitted: True for lines not yet committed (all-zero hash).
    """

    commit_hash: str
    author: str
    author_email: str
    date: datetime | None
    line_number: int
    content: str
    is_uncommitted: bool = False
    short_hash: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.short_hash:
            object.__setattr__(self, "short_hash", self.commit_hash[:SHORT_HASH_LENGTH])
