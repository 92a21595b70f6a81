"""Process-wide Rich console used by the CLI."""

from rich.console import Console

_shared: Console | None = None


def get_console() -> Console:
    """Return the shared console, created on first use.

    Markup and highlighting are off: everything printed is git output or paths.
    """
    global _shared
    if _shared is None:
        _shared = Console(highlight=False, markup=False)
    return _shared


def set_console(console: Console) -> None:
    """Replace the shared console (tests swap in one backed by a buffer)."""
    global _shared
    _shared = console
