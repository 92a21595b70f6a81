"""Core errors, constants and helpers shared across hunkwise."""

from hunkwise.core.errors import ConfigError, HunkwiseError, LoadError, ParseError

__all__ = [
    "ConfigError",
    "HunkwiseError",
    "LoadError",
    "ParseError",
]
