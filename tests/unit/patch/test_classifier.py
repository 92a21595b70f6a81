"""Tests for diff line classification."""

import pytest

from hunkwise.patch.classifier import ClassifiedLine, LineKind, classify_line


class TestHeaderLines:
    """Tests for extended header classification."""

    @pytest.mark.parametrize(
        ("line", "kind", "value"),
        [
            ("old mode 100644", LineKind.OLD_MODE, "100644"),
            ("new mode 100755", LineKind.NEW_MODE, "100755"),
            ("deleted file mode 100644", LineKind.DELETED_FILE_MODE, "100644"),
            ("new file mode 100644", LineKind.NEW_FILE_MODE, "100644"),
            ("similarity index 87%", LineKind.SIMILARITY, "87%"),
            ("dissimilarity index 60%", LineKind.DISSIMILARITY, "60%"),
            ("rename from src/a.py", LineKind.RENAME_FROM, "src/a.py"),
            ("rename to src/b.py", LineKind.RENAME_TO, "src/b.py"),
            ("copy from lib/x.c", LineKind.COPY_FROM, "lib/x.c"),
            ("copy to lib/y.c", LineKind.COPY_TO, "lib/y.c"),
            ("index abc1234..def5678 100644", LineKind.INDEX, "abc1234..def5678 100644"),
            ("--- a/file.py", LineKind.OLD_PATH, "a/file.py"),
            ("+++ b/file.py", LineKind.NEW_PATH, "b/file.py"),
        ],
    )
    def test_prefix_payload(self, line: str, kind: LineKind, value: str) -> None:
        """Test that header prefixes are recognized and stripped."""
        result = classify_line(line, in_hunk=False)
        assert result == ClassifiedLine(kind, value, line)

    def test_file_header_keeps_whole_line(self) -> None:
        """Test that diff --git lines carry the full line as payload."""
        line = "diff --git a/x b/x"
        assert classify_line(line, in_hunk=True) == ClassifiedLine(
            LineKind.FILE_HEADER, line, line
        )

    @pytest.mark.parametrize(
        "line",
        ["Binary files a/img.png and b/img.png differ", "GIT binary patch"],
    )
    def test_binary_markers(self, line: str) -> None:
        """Test both binary marker forms."""
        assert classify_line(line, in_hunk=False).kind is LineKind.BINARY

    def test_hunk_header(self) -> None:
        """Test that @@ lines are hunk headers inside and outside hunks."""
        line = "@@ -1,3 +1,4 @@ def foo():"
        assert classify_line(line, in_hunk=False).kind is LineKind.HUNK_HEADER
        assert classify_line(line, in_hunk=True).kind is LineKind.HUNK_HEADER


class TestContentLines:
    """Tests for hunk content classification."""

    def test_addition(self) -> None:
        """Test addition lines lose their marker."""
        assert classify_line("+new", in_hunk=True) == ClassifiedLine(
            LineKind.ADDITION, "new", "+new"
        )

    def test_deletion(self) -> None:
        """Test deletion lines lose their marker."""
        assert classify_line("-old", in_hunk=True) == ClassifiedLine(
            LineKind.DELETION, "old", "-old"
        )

    def test_context(self) -> None:
        """Test context lines lose their leading space."""
        assert classify_line(" same", in_hunk=True) == ClassifiedLine(
            LineKind.CONTEXT, "same", " same"
        )

    def test_empty_line_is_context(self) -> None:
        """Test that a fully empty line inside a hunk is empty context."""
        assert classify_line("", in_hunk=True) == ClassifiedLine(LineKind.CONTEXT, "", "")

    def test_no_newline_marker(self) -> None:
        """Test the no-newline marker."""
        line = "\\ No newline at end of file"
        assert classify_line(line, in_hunk=True).kind is LineKind.NO_NEWLINE

    def test_content_outside_hunk_unrecognized(self) -> None:
        """Test that content markers mean nothing before a hunk opens."""
        for line in ("+x", "-x", " x", "", "\\ No newline at end of file"):
            assert classify_line(line, in_hunk=False).kind is LineKind.UNRECOGNIZED

    def test_unknown_line_in_hunk(self) -> None:
        """Test that lines without a known marker are unrecognized."""
        assert classify_line("garbage", in_hunk=True).kind is LineKind.UNRECOGNIZED


class TestPriority:
    """Tests for the order in which prefixes are checked."""

    def test_path_lines_win_over_content(self) -> None:
        """Test that --- and +++ are path lines even inside a hunk."""
        assert classify_line("--- a/f", in_hunk=True).kind is LineKind.OLD_PATH
        assert classify_line("+++ b/f", in_hunk=True).kind is LineKind.NEW_PATH

    def test_deleted_file_mode_not_confused(self) -> None:
        """Test that 'deleted file mode' is not read as anything else."""
        result = classify_line("deleted file mode 100755", in_hunk=False)
        assert result.kind is LineKind.DELETED_FILE_MODE
        assert result.value == "100755"

    def test_indented_header_is_context(self) -> None:
        """Test that a header-looking line with a leading space is context."""
        result = classify_line(" index abc..def", in_hunk=True)
        assert result.kind is LineKind.CONTEXT
        assert result.value == "index abc..def"


class TestCarriageReturns:
    """Tests for CRLF-terminated lines."""

    @pytest.mark.parametrize(
        ("line", "kind", "value"),
        [
            ("diff --git a/f b/f\r", LineKind.FILE_HEADER, "diff --git a/f b/f"),
            ("index abc..def 100644\r", LineKind.INDEX, "abc..def 100644"),
            ("--- a/f\r", LineKind.OLD_PATH, "a/f"),
            ("+++ b/f\r", LineKind.NEW_PATH, "b/f"),
            ("@@ -1 +1 @@\r", LineKind.HUNK_HEADER, "@@ -1 +1 @@"),
        ],
    )
    def test_header_payload_drops_carriage_return(
        self, line: str, kind: LineKind, value: str
    ) -> None:
        """Test that header payloads lose the CR while raw keeps it."""
        assert classify_line(line, in_hunk=True) == ClassifiedLine(kind, value, line)

    def test_no_newline_marker(self) -> None:
        """Test the marker is recognized with a trailing CR."""
        result = classify_line("\\ No newline at end of file\r", in_hunk=True)
        assert result.kind is LineKind.NO_NEWLINE

    def test_content_keeps_carriage_return(self) -> None:
        """Test that content payloads are left untouched."""
        assert classify_line("+a\r", in_hunk=True).value == "a\r"
        assert classify_line(" b\r", in_hunk=True).value == "b\r"
