"""Core constants and paths for hunkwise.

Single source of truth for format strings and separators shared between the
parsers and whatever layer invokes git to produce their input.
"""

from pathlib import Path

HUNKWISE_DIR_NAME = ".hunkwise"
CONFIG_FILE_NAME = "config.json"

# Path git prints in place of a file that does not exist on one side
NULL_DEVICE = "/dev/null"

NO_NEWLINE_MARKER = "\\ No newline at end of file"

# Log records use ASCII control characters that never appear in commit text
LOG_FIELD_SEPARATOR = "\x1e"
LOG_RECORD_SEPARATOR = "\x1f"

LOG_FORMAT = LOG_FIELD_SEPARATOR.join(
    ["%H", "%h", "%s", "%b", "%an", "%ae", "%aI", "%cn", "%ce", "%cI", "%P"]
) + LOG_RECORD_SEPARATOR

# Tag, stash records are pipe-delimited, one per line
PIPE_SEPARATOR = "|"
TAG_FORMAT = "%(refname:short)|%(objectname:short)|%(*objectname:short)|%(contents:subject)"
STASH_FORMAT = "%gd|%H|%gs|%aI"

# Hash prefix git blame uses for lines not yet committed
UNCOMMITTED_HASH_PREFIX = "0000000"

SHORT_HASH_LENGTH = 7


def get_hunkwise_dir() -> Path:
    """Get ~/.hunkwise (global config directory)."""
    return Path.home() / HUNKWISE_DIR_NAME
