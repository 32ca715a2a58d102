"""Core value types shared by the store and its infrastructure."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Protocol

from loguru import logger

DEFAULT_FILE_NAME = "settings.json"
DEFAULT_DIR_NAME = ".configstore"
DEFAULT_INDENT = 2

# Location selectors, compared case-insensitively
LOCATION_CWD = "cwd"
LOCATION_PORTABLE = "portable"
LOCATION_USER_PROFILE = "userProfile"


class Environment(Protocol):
    """Source of the process locations used to resolve settings paths."""

    def cwd(self) -> Path:
        """Return the current working directory."""
        raise NotImplementedError

    def script_dir(self) -> Path:
        """Return the directory of the running entry-point script."""
        raise NotImplementedError

    def home(self) -> Path:
        """Return the user's home directory."""
        raise NotImplementedError


@dataclass(frozen=True)
class FileOptions:
    """Options used when reading and writing the settings file.

    Attributes:
        indent: Indentation width for the written JSON. None means the default.
        encoding: Text encoding of the file.
        ensure_ascii: Escape non-ASCII characters when writing.
        sort_keys: Write mapping keys in sorted order.
    """

    indent: int | str | None = DEFAULT_INDENT
    encoding: str = "utf-8"
    ensure_ascii: bool = False
    sort_keys: bool = False

    @property
    def effective_indent(self) -> int | str:
        return DEFAULT_INDENT if self.indent is None else self.indent

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "FileOptions":
        """Build options from a plain mapping, ignoring unknown keys."""
        if not raw:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(k for k in raw if k not in known)
        if unknown:
            logger.warning("Ignoring unknown file options: {}", ", ".join(map(str, unknown)))
        return cls(**{k: v for k, v in raw.items() if k in known})


def coerce_file_options(value: FileOptions | Mapping[str, Any] | None) -> FileOptions:
    """Return `value` as `FileOptions`, accepting a mapping or None."""
    if isinstance(value, FileOptions):
        return value
    if value is None or isinstance(value, Mapping):
        return FileOptions.from_mapping(value)
    raise TypeError(f"file_options must be FileOptions or a mapping, not {type(value).__name__}")
