"""Error types raised by the configuration store."""

from __future__ import annotations

from pathlib import Path


class ConfigStoreError(Exception):
    """Base class for all configuration store failures."""


class ConfigParseError(ConfigStoreError):
    """Settings file exists but does not hold a JSON object.

    Attributes:
        path: The settings file that failed to parse.
    """

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}\n  Check syntax of the file \"{self.path}\"")


class ConfigPersistenceError(ConfigStoreError):
    """Writing the settings file failed.

    Attributes:
        path: The settings file that could not be written.
    """

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}\n  filePath: \"{self.path}\"")


class InvalidPathError(ConfigStoreError, ValueError):
    """A dot-path cannot address a location in the document."""
