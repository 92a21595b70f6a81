"""Reading JSON objects from config files.

load_json_file() is for files that must exist, load_json_file_optional()
for config layers that may be absent.
"""

import json
import logging
from pathlib import Path
from typing import Any

from hunkwise.core.errors import LoadError

logger = logging.getLogger(__name__)


def load_json_file(path: Path, error_context: str = "") -> dict[str, Any]:
    """Read a file holding a single JSON object.

    A file that is empty or only whitespace reads as ``{}``. A leading UTF-8
    byte order mark is accepted.

    Args:
        path: File to read.
        error_context: Prefix for error messages (e.g. "config").

    Raises:
        LoadError: If the file is missing or unreadable, is not valid JSON,
            or holds something other than an object.
    """
    label = f"{error_context}: " if error_context else ""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise LoadError(f"{label}File not found: {path}") from e
    except OSError as e:
        raise LoadError(f"{label}Cannot read {path}: {e}") from e

    if not text.strip():
        return {}

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(
            f"{label}Invalid JSON in {path} (line {e.lineno}, column {e.colno}): {e.msg}"
        ) from e

    if not isinstance(data, dict):
        raise LoadError(
            f"{label}Expected a JSON object in {path}, got {type(data).__name__}"
        )
    return data


def load_json_file_optional(path: Path, error_context: str = "") -> dict[str, Any] | None:
    """Like load_json_file(), but a missing file gives None."""
    if not path.is_file():
        logger.debug("No config file at %s", path)
        return None
    logger.debug("Reading config file %s", path)
    return load_json_file(path, error_context)
