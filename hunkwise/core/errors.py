"""Typed exception hierarchy for hunkwise."""

from __future__ import annotations


class HunkwiseError(Exception):
    """Base class for all hunkwise errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(HunkwiseError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


class LoadError(HunkwiseError):
    """Base class for loading errors (config files, input files)."""

    pass


class ParseError(HunkwiseError):
    """Raised when structured git output does not match its fixed record schema.

    Only the record parsers with a strict schema (commit log) raise this.
    Diff and status parsing degrade to partial results instead.

    Attributes:
        context: Short description of what failed to parse.
        raw: The offending raw fragment, kept for diagnostics.
    """

    def __init__(self, context: str, raw: str = "") -> None:
        self.context = context
        self.raw = raw
        super().__init__(f"Failed to parse git output: {context}")
