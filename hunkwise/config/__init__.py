"""Configuration loading and validation.

Config.status and Config.display drive the CLI. Config.diff (DiffOptions)
is read by nothing in hunkwise: it holds the settings for the caller that
runs ``git diff`` and produces the text hunkwise parses, and none of them
change how that text is parsed.
"""

from hunkwise.config.loader import load_config
from hunkwise.config.schema import Config, DiffOptions, DisplayConfig, StatusConfig

__all__ = [
    "Config",
    "DiffOptions",
    "DisplayConfig",
    "StatusConfig",
    "load_config",
]
