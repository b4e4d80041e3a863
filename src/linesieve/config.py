"""Config directory and application settings for linesieve."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from linesieve.errors import BadFilterDefinitionError
from linesieve.models import AppConfig, SearchType, search_type_by_name

CONFIG_DIR_ENV = "LINESIEVE_CONFIG_DIR"
CONFIG_FILE = "config.toml"

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the linesieve config directory.

    Respects the LINESIEVE_CONFIG_DIR environment variable if set.
    """
    if override := os.environ.get(CONFIG_DIR_ENV):
        return Path(override)
    return Path(user_config_dir("linesieve"))


def get_sessions_dir() -> Path:
    """Get the sessions directory, creating it if needed."""
    d = get_config_dir() / "sessions"
    d.mkdir(parents=True, exist_ok=True)
    return d


def configured_search_type(config: AppConfig) -> SearchType:
    """Resolve the search type named by the config's ``default_search_type``."""
    return search_type_by_name(config.default_search_type)


def load_config() -> AppConfig:
    """Load settings from disk.

    A missing file gives the defaults, and so does a file that is unreadable
    or not valid TOML. A search type or log level that is not recognised is
    reset to its default on its own; every fallback is logged as a warning.
    """
    path = get_config_dir() / CONFIG_FILE
    if not path.exists():
        return AppConfig()
    try:
        data: dict[str, Any] = tomllib.loads(path.read_text())
        config = AppConfig(**data)
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Could not read %s, using defaults: %s", path, e)
        return AppConfig()

    defaults = AppConfig()
    try:
        configured_search_type(config)
    except BadFilterDefinitionError as e:
        logger.warning("Ignoring default_search_type in %s: %s", path, e)
        config = config.model_copy(update={"default_search_type": defaults.default_search_type})
    if config.log_level.upper() not in logging.getLevelNamesMapping():
        logger.warning("Ignoring unknown log level %r in %s", config.log_level, path)
        config = config.model_copy(update={"log_level": defaults.log_level})
    return config


def save_config(config: AppConfig) -> None:
    """Save settings to disk, creating the config directory if needed."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / CONFIG_FILE
    path.write_bytes(tomli_w.dumps(config.model_dump()).encode())
