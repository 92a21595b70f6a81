"""Shared pytest fixtures."""

import io

import pytest
from rich.console import Console


@pytest.fixture
def console() -> Console:
    """Uncolored console writing to an in-memory buffer (read via console.file)."""
    return Console(file=io.StringIO(), no_color=True, highlight=False, width=120)
