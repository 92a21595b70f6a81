"""Line classification for git diff output.

Each raw diff line is classified exactly once into a LineKind by fixed
prefix matching. The order of the checks below is significant: extended
header lines are tested before hunk content, so a line such as
``--- a/file`` is always a path line, even inside a hunk.
"""

from enum import Enum
from typing import NamedTuple

from hunkwise.core.constants import NO_NEWLINE_MARKER


class LineKind(Enum):
    """What a single line of git diff output means to the parser."""

    FILE_HEADER = "file_header"
    OLD_MODE = "old_mode"
    NEW_MODE = "new_mode"
    DELETED_FILE_MODE = "deleted_file_mode"
    NEW_FILE_MODE = "new_file_mode"
    SIMILARITY = "similarity"
    DISSIMILARITY = "dissimilarity"
    RENAME_FROM = "rename_from"
    RENAME_TO = "rename_to"
    COPY_FROM = "copy_from"
    COPY_TO = "copy_to"
    INDEX = "index"
    BINARY = "binary"
    OLD_PATH = "old_path"
    NEW_PATH = "new_path"
    HUNK_HEADER = "hunk_header"
    ADDITION = "addition"
    DELETION = "deletion"
    CONTEXT = "context"
    NO_NEWLINE = "no_newline"
    UNRECOGNIZED = "unrecognized"


class ClassifiedLine(NamedTuple):
    """A diff line tagged with its kind.

    Attributes:
        kind: Classification result.
        value: Payload after the matched prefix. For content lines this is
            the text after the marker; for file headers, hunk headers and
            binary markers it is the whole line less any trailing "\\r";
            for unrecognized lines it is the line as read.
        raw: The line exactly as read.
    """

    kind: LineKind
    value: str
    raw: str


# (prefix, kind) pairs checked in order; payload is the text after the prefix
_HEADER_PREFIXES: tuple[tuple[str, LineKind], ...] = (
    ("old mode ", LineKind.OLD_MODE),
    ("new mode ", LineKind.NEW_MODE),
    ("deleted file mode ", LineKind.DELETED_FILE_MODE),
    ("new file mode ", LineKind.NEW_FILE_MODE),
    ("similarity index ", LineKind.SIMILARITY),
    ("dissimilarity index ", LineKind.DISSIMILARITY),
    ("rename from ", LineKind.RENAME_FROM),
    ("rename to ", LineKind.RENAME_TO),
    ("copy from ", LineKind.COPY_FROM),
    ("copy to ", LineKind.COPY_TO),
    ("index ", LineKind.INDEX),
)

_BINARY_PREFIXES = ("Binary files", "GIT binary patch")


def classify_line(line: str, in_hunk: bool) -> ClassifiedLine:
    """Classify one line of git diff output.

    Header, hunk header and no-newline lines are matched without a trailing
    carriage return, so CRLF-terminated diffs parse like LF ones. Content
    lines keep theirs.

    Args:
        line: A single line without its terminating newline.
        in_hunk: Whether a hunk is currently open. Content lines (+, -,
            space, empty) and the no-newline marker only mean something
            inside a hunk; outside one they are UNRECOGNIZED.

    Returns:
        ClassifiedLine for the line. Never raises.
    """
    header = line.rstrip("\r")
    if header.startswith("diff --git"):
        return ClassifiedLine(LineKind.FILE_HEADER, header, line)

    for prefix, kind in _HEADER_PREFIXES:
        if header.startswith(prefix):
            return ClassifiedLine(kind, header[len(prefix):], line)

    if header.startswith(_BINARY_PREFIXES):
        return ClassifiedLine(LineKind.BINARY, header, line)
    if header.startswith("--- "):
        return ClassifiedLine(LineKind.OLD_PATH, header[4:], line)
    if header.startswith("+++ "):
        return ClassifiedLine(LineKind.NEW_PATH, header[4:], line)
    if header.startswith("@@"):
        return ClassifiedLine(LineKind.HUNK_HEADER, header, line)

    if not in_hunk:
        return ClassifiedLine(LineKind.UNRECOGNIZED, line, line)

    if line.startswith("+"):
        return ClassifiedLine(LineKind.ADDITION, line[1:], line)
    if line.startswith("-"):
        return ClassifiedLine(LineKind.DELETION, line[1:], line)
    if line.startswith(" ") or not line:
        return ClassifiedLine(LineKind.CONTEXT, line[1:], line)
    if header == NO_NEWLINE_MARKER:
        return ClassifiedLine(LineKind.NO_NEWLINE, header, line)

    return ClassifiedLine(LineKind.UNRECOGNIZED, line, line)
