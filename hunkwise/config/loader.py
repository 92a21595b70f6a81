"""Layered configuration loading.

Two optional layers are merged, the second overriding the first:

1. ``~/.hunkwise/config.json``
2. ``<cwd>/.hunkwise/config.json``

An explicit path replaces both layers. With nothing to read, the model
defaults apply.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from hunkwise.config.load_utils import load_json_file, load_json_file_optional
from hunkwise.config.schema import Config
from hunkwise.core.constants import CONFIG_FILE_NAME, HUNKWISE_DIR_NAME, get_hunkwise_dir
from hunkwise.core.errors import ConfigError, LoadError
from hunkwise.core.utils import deep_merge

logger = logging.getLogger(__name__)


def _config_layers(cwd: Path) -> list[Path]:
    global_layer = get_hunkwise_dir() / CONFIG_FILE_NAME
    local_layer = cwd / HUNKWISE_DIR_NAME / CONFIG_FILE_NAME
    # From the home directory both layers are the same file
    if local_layer.resolve() == global_layer.resolve():
        return [global_layer]
    return [global_layer, local_layer]


def _read(path: Path, required: bool) -> dict[str, Any] | None:
    try:
        if required:
            return load_json_file(path, error_context="config")
        return load_json_file_optional(path, error_context="config")
    except LoadError as e:
        raise ConfigError(e.message) from e


def _validate(data: dict[str, Any], source: str) -> Config:
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed ({source}): {e}") from e


def load_config(path: Path | None = None, cwd: Path | None = None) -> Config:
    """Load and validate configuration.

    Args:
        path: Config file to use instead of the layers. Must exist.
        cwd: Directory holding the local layer (default: Path.cwd()).

    Raises:
        ConfigError: If a file cannot be read, is not a JSON object, or the
            result fails validation.
    """
    if path is not None:
        return _validate(_read(path, required=True) or {}, str(path))

    merged: dict[str, Any] = {}
    sources: list[str] = []
    for layer in _config_layers(cwd or Path.cwd()):
        data = _read(layer, required=False)
        if data:
            merged = deep_merge(merged, data)
            sources.append(str(layer))

    if not sources:
        logger.debug("No config files found, using defaults")
        return Config()

    logger.debug("Config merged from %s", ", ".join(sources))
    return _validate(merged, "merged from " + ", ".join(sources))
