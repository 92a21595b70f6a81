"""Parser for ``git log`` output in the hunkwise record format.

The command layer runs ``git log --format=<LOG_FORMAT>``: fields are
separated by ASCII RS (0x1E) and records terminated by ASCII US (0x1F),
characters that never occur in commit metadata.

Unlike the diff and status parsers, this parser is strict. A record with
missing fields or an unreadable date raises ParseError carrying the raw
fragment.
"""

import logging

from hunkwise.core.constants import LOG_FIELD_SEPARATOR, LOG_RECORD_SEPARATOR
from hunkwise.core.errors import ParseError
from hunkwise.core.utils import parse_iso8601
from hunkwise.records.types import Commit

logger = logging.getLogger(__name__)

# hash, short hash, subject, body, author name/email/date, committer name/email/date
_REQUIRED_FIELDS = 10

_LINE_WHITESPACE = " \t\r\n"


def parse_log(text: str) -> list[Commit]:
    """Parse log records into Commit objects.

    Args:
        text: Raw ``git log`` output using LOG_FORMAT.

    Returns:
        Commits in output order. Empty input gives an empty list.

    Raises:
        ParseError: If a record has fewer than the required fields or a
            date is not ISO 8601.
    """
    if not text:
        return []

    commits: list[Commit] = []
    for record in text.split(LOG_RECORD_SEPARATOR):
        # str.strip() would also eat the separators, which count as whitespace
        trimmed = record.strip(_LINE_WHITESPACE)
        if not trimmed:
            continue

        fields = trimmed.split(LOG_FIELD_SEPARATOR)
        if len(fields) < _REQUIRED_FIELDS:
            raise ParseError("Invalid commit record", raw=record)

        (
            hash_,
            short_hash,
            subject,
            body,
            author_name,
            author_email,
            author_date_str,
            committer_name,
            committer_email,
            committer_date_str,
        ) = fields[:_REQUIRED_FIELDS]
        parents = fields[_REQUIRED_FIELDS] if len(fields) > _REQUIRED_FIELDS else ""

        author_date = parse_iso8601(author_date_str)
        if author_date is None:
            raise ParseError("Invalid author date", raw=author_date_str)

        commit_date = parse_iso8601(committer_date_str)
        if commit_date is None:
            raise ParseError("Invalid committer date", raw=committer_date_str)

        commits.append(
            Commit(
                hash=hash_,
                short_hash=short_hash,
                subject=subject,
                body=body.strip(_LINE_WHITESPACE),
                author_name=author_name,
                author_email=author_email,
                author_date=author_date,
                committer_name=committer_name,
                committer_email=committer_email,
                commit_date=commit_date,
                parent_hashes=tuple(parents.split()),
            )
        )

    logger.debug("Parsed %d commit(s)", len(commits))
    return commits
