"""Tests for git log record parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from hunkwise.core.constants import LOG_FIELD_SEPARATOR, LOG_FORMAT, LOG_RECORD_SEPARATOR
from hunkwise.core.errors import ParseError
from hunkwise.records.log import parse_log

HASH_A = "a" * 40
HASH_B = "b" * 40
HASH_C = "c" * 40


def _record(
    hash_: str = HASH_A,
    subject: str = "Fix parser",
    body: str = "",
    author_date: str = "2024-03-01T12:30:00+02:00",
    committer_date: str = "2024-03-02T08:00:00Z",
    parents: str = HASH_B,
) -> str:
    fields = [
        hash_,
        hash_[:7],
        subject,
        body,
        "Ada Lovelace",
        "ada@example.com",
        author_date,
        "Grace Hopper",
        "grace@example.com",
        committer_date,
        parents,
    ]
    # git terminates each record and then prints a newline
    return LOG_FIELD_SEPARATOR.join(fields) + LOG_RECORD_SEPARATOR + "\n"


class TestParseLog:
    """Tests for parse_log function."""

    def test_empty(self) -> None:
        """Test empty and whitespace-only input."""
        assert parse_log("") == []
        assert parse_log("\n\n") == []

    def test_single_commit(self) -> None:
        """Test every field of a single record."""
        commits = parse_log(_record())

        assert len(commits) == 1
        commit = commits[0]
        assert commit.hash == HASH_A
        assert commit.short_hash == "aaaaaaa"
        assert commit.subject == "Fix parser"
        assert commit.body == ""
        assert commit.author_name == "Ada Lovelace"
        assert commit.author_email == "ada@example.com"
        assert commit.author_date == datetime(
            2024, 3, 1, 12, 30, tzinfo=timezone(timedelta(hours=2))
        )
        assert commit.committer_name == "Grace Hopper"
        assert commit.committer_email == "grace@example.com"
        assert commit.commit_date == datetime(2024, 3, 2, 8, 0, tzinfo=timezone.utc)
        assert commit.parent_hashes == (HASH_B,)
        assert commit.is_merge is False

    def test_multiple_commits_in_order(self) -> None:
        """Test several records keep their output order."""
        text = _record(hash_=HASH_A, subject="second") + _record(hash_=HASH_B, subject="first")
        commits = parse_log(text)

        assert [c.subject for c in commits] == ["second", "first"]

    def test_multiline_body_trimmed(self) -> None:
        """Test that the body keeps inner newlines but loses outer blank lines."""
        commits = parse_log(_record(body="Line one\n\nLine two\n\n"))

        assert commits[0].body == "Line one\n\nLine two"
        assert commits[0].full_message == "Fix parser\n\nLine one\n\nLine two"

    def test_merge_commit(self) -> None:
        """Test space-separated parent hashes."""
        commits = parse_log(_record(parents=f"{HASH_B} {HASH_C}"))

        assert commits[0].parent_hashes == (HASH_B, HASH_C)
        assert commits[0].is_merge is True

    def test_root_commit(self) -> None:
        """Test a commit without parents."""
        commits = parse_log(_record(parents=""))
        assert commits[0].parent_hashes == ()

    def test_missing_parent_field(self) -> None:
        """Test that a record with only the ten required fields parses."""
        fields = _record().split(LOG_FIELD_SEPARATOR)[:10]
        text = LOG_FIELD_SEPARATOR.join(fields) + LOG_RECORD_SEPARATOR
        commits = parse_log(text)

        assert commits[0].parent_hashes == ()

    def test_fractional_seconds(self) -> None:
        """Test timestamps with fractional seconds."""
        commits = parse_log(_record(author_date="2024-03-01T12:30:00.250000+00:00"))
        assert commits[0].author_date.microsecond == 250000

    def test_too_few_fields(self) -> None:
        """Test that a truncated record raises ParseError with the fragment."""
        text = LOG_FIELD_SEPARATOR.join([HASH_A, "aaaaaaa", "subject"]) + LOG_RECORD_SEPARATOR
        with pytest.raises(ParseError) as exc_info:
            parse_log(text)

        assert "Invalid commit record" in exc_info.value.message
        assert HASH_A in exc_info.value.raw

    def test_invalid_author_date(self) -> None:
        """Test an unreadable author date."""
        with pytest.raises(ParseError) as exc_info:
            parse_log(_record(author_date="yesterday"))

        assert "Invalid author date" in exc_info.value.message
        assert exc_info.value.raw == "yesterday"

    def test_invalid_committer_date(self) -> None:
        """Test an unreadable committer date."""
        with pytest.raises(ParseError, match="Invalid committer date"):
            parse_log(_record(committer_date="2024-13-45"))


class TestLogFormat:
    """Tests for the git log format string."""

    def test_field_layout(self) -> None:
        """Test the format yields eleven fields and one record terminator."""
        assert LOG_FORMAT.endswith(LOG_RECORD_SEPARATOR)
        assert LOG_FORMAT.count(LOG_RECORD_SEPARATOR) == 1
        fields = LOG_FORMAT.rstrip(LOG_RECORD_SEPARATOR).split(LOG_FIELD_SEPARATOR)
        assert fields[0] == "%H"
        assert fields[-1] == "%P"
        assert len(fields) == 11
