"""Tests for tag, stash and remote parsing."""

from datetime import datetime, timezone

from hunkwise.core.constants import PIPE_SEPARATOR, STASH_FORMAT, TAG_FORMAT
from hunkwise.records.remotes import parse_remotes
from hunkwise.records.stash import parse_stashes
from hunkwise.records.tags import parse_tags
from hunkwise.records.types import Remote


class TestParseTags:
    """Tests for parse_tags function."""

    def test_format_has_four_fields(self) -> None:
        """Test the tag format matches the parsed layout."""
        assert len(TAG_FORMAT.split(PIPE_SEPARATOR)) == 4

    def test_empty(self) -> None:
        """Test empty input."""
        assert parse_tags("") == []

    def test_annotated_and_lightweight(self) -> None:
        """Test that a dereferenced hash with a subject marks an annotated tag."""
        text = "v1.0|1111111|abcdef0|Release 1.0\nnightly|2222222||\n"
        tags = {tag.name: tag for tag in parse_tags(text)}

        assert tags["v1.0"].is_annotated is True
        assert tags["v1.0"].commit_hash == "abcdef0"
        assert tags["v1.0"].message == "Release 1.0"
        assert tags["nightly"].is_annotated is False
        assert tags["nightly"].commit_hash == "2222222"

    def test_name_and_hash_only(self) -> None:
        """Test a line with just two fields."""
        tags = parse_tags("v0.1|3333333\n")

        assert len(tags) == 1
        assert tags[0].commit_hash == "3333333"
        assert tags[0].message is None

    def test_short_lines_skipped(self) -> None:
        """Test lines with a single field are ignored."""
        assert parse_tags("lonely\n\n") == []

    def test_natural_descending_order(self) -> None:
        """Test version-like names sort numerically, highest first."""
        text = "v1.9|a\nv1.10|b\nv1.2|c\nV2.0|d\n"
        assert [tag.name for tag in parse_tags(text)] == ["V2.0", "v1.10", "v1.9", "v1.2"]


class TestParseStashes:
    """Tests for parse_stashes function."""

    def test_format_has_four_fields(self) -> None:
        """Test the stash format matches the parsed layout."""
        assert len(STASH_FORMAT.split(PIPE_SEPARATOR)) == 4

    def test_empty(self) -> None:
        """Test empty input."""
        assert parse_stashes("") == []

    def test_wip_and_named(self) -> None:
        """Test both message forms git writes."""
        text = (
            "stash@{0}|aaaa|On main: try new layout|2024-05-01T10:00:00+00:00\n"
            "stash@{1}|bbbb|WIP on feature/x: 1234567 Add thing|2024-04-30T09:00:00+00:00\n"
        )
        stashes = parse_stashes(text)

        assert [s.index for s in stashes] == [0, 1]
        assert stashes[0].branch == "main"
        assert stashes[0].message == "try new layout"
        assert stashes[0].date == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
        assert stashes[1].branch == "feature/x"
        assert stashes[1].message == "1234567 Add thing"
        assert stashes[1].ref_name == "stash@{1}"

    def test_unrecognized_message_kept(self) -> None:
        """Test a message without a branch prefix."""
        stashes = parse_stashes("stash@{0}|aaaa|custom text\n")

        assert stashes[0].branch is None
        assert stashes[0].message == "custom text"
        assert stashes[0].date is None

    def test_index_falls_back_to_position(self) -> None:
        """Test entries whose ref name has no index."""
        stashes = parse_stashes("refs/stash|aaaa|one\nrefs/stash|bbbb|two\n")
        assert [s.index for s in stashes] == [0, 1]

    def test_bad_date_is_none(self) -> None:
        """Test that an unparseable date is dropped, not raised."""
        stashes = parse_stashes("stash@{3}|aaaa|msg|not a date\n")

        assert stashes[0].index == 3
        assert stashes[0].date is None

    def test_short_lines_skipped(self) -> None:
        """Test lines with fewer than three fields."""
        assert parse_stashes("stash@{0}|aaaa\n") == []


class TestParseRemotes:
    """Tests for parse_remotes function."""

    def test_empty(self) -> None:
        """Test empty input."""
        assert parse_remotes("") == []

    def test_fetch_and_push_merged(self) -> None:
        """Test one remote per name, sorted by name."""
        text = (
            "upstream\thttps://github.com/org/repo.git (fetch)\n"
            "upstream\tno_push (push)\n"
            "origin\tgit@github.com:me/repo.git (fetch)\n"
            "origin\tgit@github.com:me/repo.git (push)\n"
        )
        remotes = parse_remotes(text)

        assert [r.name for r in remotes] == ["origin", "upstream"]
        assert remotes[0].fetch_url == "git@github.com:me/repo.git"
        assert remotes[1].fetch_url == "https://github.com/org/repo.git"
        assert remotes[1].push_url == "no_push"

    def test_push_defaults_to_fetch(self) -> None:
        """Test a remote listed only with a fetch URL."""
        remotes = parse_remotes("origin\t/srv/git/repo.git (fetch)\n")
        assert remotes[0].push_url == "/srv/git/repo.git"

    def test_push_only_dropped(self) -> None:
        """Test that a remote without a fetch URL is not returned."""
        assert parse_remotes("mirror\thttps://example.com/r.git (push)\n") == []

    def test_lines_without_tab_skipped(self) -> None:
        """Test malformed lines."""
        assert parse_remotes("origin https://example.com/r.git (fetch)\n") == []


class TestRemote:
    """Tests for Remote URL helpers."""

    def test_ssh_remote(self) -> None:
        """Test scp-style SSH URLs."""
        remote = Remote(name="origin", fetch_url="git@gitlab.com:group/proj.git")

        assert remote.is_ssh is True
        assert remote.is_https is False
        assert remote.host == "gitlab.com"

    def test_https_remote(self) -> None:
        """Test HTTPS URLs."""
        remote = Remote(name="origin", fetch_url="https://github.com/org/repo.git")

        assert remote.is_https is True
        assert remote.is_ssh is False
        assert remote.host == "github.com"

    def test_ssh_scheme_remote(self) -> None:
        """Test ssh:// URLs."""
        remote = Remote(name="o", fetch_url="ssh://git@example.org:2222/repo.git")

        assert remote.is_ssh is True
        assert remote.host == "example.org"

    def test_local_path_has_no_host(self) -> None:
        """Test file system remotes."""
        assert Remote(name="o", fetch_url="/srv/git/repo.git").host is None
