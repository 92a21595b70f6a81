"""Pydantic models for hunkwise configuration validation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DiffOptions(BaseModel):
    """Options for the git diff invocation that produces parser input.

    hunkwise never runs git itself. These settings are held for the layer
    that does; none of them change how diff text is parsed.

    Example in config.json:
        "diff": {
            "context_lines": 5,
            "ignore_whitespace_at_eol": true
        }
    """

    model_config = ConfigDict(extra="forbid")

    context_lines: int = Field(default=3, ge=0)
    """Number of context lines around each change (-U<n>)."""

    ignore_whitespace: bool = False
    """Ignore all whitespace (-w)."""

    ignore_whitespace_at_eol: bool = False
    """Ignore whitespace at end of line (--ignore-space-at-eol)."""

    ignore_whitespace_change: bool = False
    """Ignore changes in amount of whitespace (-b)."""

    ignore_blank_lines: bool = False
    """Ignore changes whose lines are all blank (--ignore-blank-lines)."""

    detect_renames: bool = True
    """Detect renames (-M)."""

    detect_copies: bool = False
    """Detect copies (-C)."""


class StatusConfig(BaseModel):
    """How working-tree status input is delimited."""

    model_config = ConfigDict(extra="forbid")

    format: Literal["nul", "lines"] = "nul"
    """'nul' for `git status --porcelain -z`, 'lines' for plain porcelain."""


class DisplayConfig(BaseModel):
    """Terminal rendering options for the CLI."""

    model_config = ConfigDict(extra="forbid")

    line_numbers: bool = True
    """Show old/new line number gutters next to hunk lines."""

    show_hashes: bool = False
    """Show index blob hashes in file headers."""

    color: bool = True
    """Colorize output. Overridden by --no-color."""


class Config(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    diff: DiffOptions = DiffOptions()
    status: StatusConfig = StatusConfig()
    display: DisplayConfig = DisplayConfig()
