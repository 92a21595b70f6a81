"""Shared utility functions."""

import re
from datetime import datetime
from typing import Any

# git's %aI / %cI strict ISO 8601, with and without fractional seconds
ISO8601_FORMATS = ("%Y-%m-%dT%H:%M:%S.%f%z", "%Y-%m-%dT%H:%M:%S%z")

_DIGIT_RUN_RE = re.compile(r"(\d+)")


def parse_iso8601(value: str) -> datetime | None:
    """Parse a git ISO 8601 timestamp into an aware datetime, None if invalid."""
    value = value.strip()
    for fmt in ISO8601_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def natural_sort_key(text: str) -> list[Any]:
    """Sort key comparing digit runs numerically and letters case-insensitively.

    "v1.10" sorts after "v1.9".
    """
    return [
        int(part) if part.isdigit() else part.lower()
        for part in _DIGIT_RUN_RE.split(text)
    ]


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dicts. Override values take precedence.

    Merge rules:
    - Dicts are recursively merged
    - Lists are REPLACED (override wins completely)
    - Other values are overwritten

    Args:
        base: Base dictionary.
        override: Dictionary with values to overlay.

    Returns:
        New merged dictionary (original dicts not modified).
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def split_path(path: str) -> tuple[str, str]:
    """Split a repository-relative path into (directory, file name).

    Directory is "" for top-level files.
    """
    directory, _, name = path.rpartition("/")
    return directory, name
