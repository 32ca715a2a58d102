"""Persistent key-value configuration stored in a single JSON file."""

from __future__ import annotations

from loguru import logger

from configstore.core.errors import (
    ConfigParseError,
    ConfigPersistenceError,
    ConfigStoreError,
    InvalidPathError,
)
from configstore.core.models import DEFAULT_DIR_NAME, DEFAULT_FILE_NAME, FileOptions
from configstore.infrastructure.paths import (
    FixedEnvironment,
    SystemEnvironment,
    resolve_settings_path,
)
from configstore.store import ConfigStore

# Silent inside host applications until init_logging() enables it
logger.disable("configstore")

__all__ = [
    "DEFAULT_DIR_NAME",
    "DEFAULT_FILE_NAME",
    "ConfigParseError",
    "ConfigPersistenceError",
    "ConfigStore",
    "ConfigStoreError",
    "FileOptions",
    "FixedEnvironment",
    "InvalidPathError",
    "SystemEnvironment",
    "resolve_settings_path",
]
