"""Logging configuration for the hunkwise CLI."""

import logging
import sys

LOGGER_NAME = "hunkwise"


def configure_cli_logging(verbose: bool = False) -> logging.Logger:
    """Send hunkwise log records to stderr.

    Args:
        verbose: DEBUG level when True, WARNING otherwise.

    Returns:
        The configured ``hunkwise`` namespace logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    ))

    hunkwise_logger = logging.getLogger(LOGGER_NAME)
    hunkwise_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates on reconfigure
    hunkwise_logger.handlers.clear()
    hunkwise_logger.addHandler(console_handler)

    # Don't propagate to root logger
    hunkwise_logger.propagate = False
    return hunkwise_logger
