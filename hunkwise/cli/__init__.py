"""Command-line interface."""

from hunkwise.cli.main import main, run

__all__ = ["main", "run"]
