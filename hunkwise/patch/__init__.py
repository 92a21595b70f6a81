"""Patch module for parsing git diff output and serializing single hunks.

Main components:
- Types: DiffLine, DiffHunk, FileDiff - immutable representation of a diff
- Hunk header codec: parse_hunk_header() / format_hunk_header()
- Classifier: classify_line() - tag one raw diff line with its meaning
- Parser: parse_diff() - convert diff text to FileDiff records
- Serializer: hunk_to_patch() - render one hunk for partial application

ApplyDirection is not used inside hunkwise. It is exported for the caller
that runs ``git apply --cached`` on a serialized hunk, to record whether the
patch stages (forward) or unstages (``--reverse``) it. Serialized text is the
same in both directions.

Example usage:
    >>> from hunkwise.patch import parse_diff, hunk_to_patch
    >>> diff_text = '''diff --git a/file.py b/file.py
    ... --- a/file.py
    ... +++ b/file.py
    ... @@ -1,3 +1,4 @@
    ...  line1
    ... -line2
    ... +new_line
    ... +another_line
    ...  line3
    ... '''
    >>> files = parse_diff(diff_text)
    >>> files[0].hunks[0].new_count
    4
    >>> print(hunk_to_patch(files[0].hunks[0], files[0].path), end="")
    --- a/file.py
    +++ b/file.py
    @@ -1,3 +1,4 @@
     line1
    -line2
    +new_line
    +another_line
     line3
"""

from hunkwise.patch.classifier import ClassifiedLine, LineKind, classify_line
from hunkwise.patch.hunk_header import HunkHeader, format_hunk_header, parse_hunk_header
from hunkwise.patch.parser import iter_lines, parse_diff, parse_diff_iter
from hunkwise.patch.serializer import (
    ApplyDirection,
    file_diff_to_patch,
    hunk_to_patch,
    wrap_as_git_diff,
)
from hunkwise.patch.types import ChangeType, DiffHunk, DiffLine, FileDiff, LineType

__all__ = [
    # Types
    "ChangeType",
    "DiffHunk",
    "DiffLine",
    "FileDiff",
    "LineType",
    # Hunk header codec
    "HunkHeader",
    "format_hunk_header",
    "parse_hunk_header",
    # Classifier
    "ClassifiedLine",
    "LineKind",
    "classify_line",
    # Parser
    "iter_lines",
    "parse_diff",
    "parse_diff_iter",
    # Serializer
    "ApplyDirection",
    "file_diff_to_patch",
    "hunk_to_patch",
    "wrap_as_git_diff",
]
