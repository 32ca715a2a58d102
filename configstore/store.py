"""JSON-file backed configuration store with dot-path access.

Example:
    >>> conf = ConfigStore()                      # <cwd>/.configstore/settings.json
    >>> conf.set({"a": [{"b": {"c": 3}}], "d": "D"})
    >>> conf.get("a.0.b.c")
    3
    >>> conf.get(["a", 0, "b", "c"])
    3
    >>> conf.set("o.p.q", "Deep Val")
    >>> conf.store["o"]
    {'p': {'q': 'Deep Val'}}

`set` writes the whole document to disk on every call. `delete` and `clear`
only change the in-memory document; call `save` (or a later `set`) to
persist them.
"""

from __future__ import annotations

from collections.abc import Mapping
import os
from pathlib import Path
from typing import Any

from loguru import logger

from configstore.core.dotpath import KeyPath, get_in, has_in, set_in, to_json_tree, unset_in
from configstore.core.models import Environment, FileOptions, coerce_file_options
from configstore.infrastructure.json_file import load_settings_file, save_settings_file
from configstore.infrastructure.paths import resolve_settings_path


class ConfigStore:
    """Reads and writes configuration values in a single JSON file.

    Args:
        file_name: JSON file name; ".json" is appended if missing. Defaults to
            "settings.json".
        dir_path: "cwd" (default), "portable", "userProfile", or a directory.
        file_options: `FileOptions` or a mapping with keys such as "indent".
        environment: Source of cwd/script/home locations for `dir_path`.

    Raises:
        ConfigParseError: If the existing file is not a JSON object.
    """

    def __init__(
        self,
        file_name: str | None = None,
        *,
        dir_path: str | os.PathLike[str] | None = None,
        file_options: FileOptions | Mapping[str, Any] | None = None,
        environment: Environment | None = None,
    ) -> None:
        self._path = resolve_settings_path(file_name, dir_path, environment)
        self._file_options = coerce_file_options(file_options)
        self._store: dict[str, Any] = load_settings_file(self._path, self._file_options)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"

    def __contains__(self, key_path: object) -> bool:
        return self.has(key_path)  # type: ignore[arg-type]

    @property
    def path(self) -> Path:
        """Absolute path of the backing JSON file."""
        return self._path

    @property
    def file_options(self) -> FileOptions:
        return self._file_options

    @property
    def store(self) -> dict[str, Any]:
        """The live in-memory document."""
        return self._store

    def get(self, key_path: KeyPath | None = None, default: Any = None) -> Any:
        """Return the value at `key_path`, or `default` if it is absent."""
        return get_in(self._store, key_path, default)

    def has(self, key_path: KeyPath | None) -> bool:
        """Return True if `key_path` exists, including keys holding None."""
        return has_in(self._store, key_path)

    def set(self, key_or_mapping: KeyPath | Mapping[str, Any], value: Any = None) -> None:
        """Set a value and write the JSON file.

        A mapping as the first argument replaces the whole document with a
        deep copy of it and `value` is ignored. Otherwise `value` is placed
        at the given path, creating intermediate containers.

        Raises:
            ConfigPersistenceError: If writing fails. The in-memory document
                keeps the change.
        """
        if isinstance(key_or_mapping, Mapping):
            self.replace_all(key_or_mapping)
        else:
            self.set_path(key_or_mapping, value)

    def set_path(self, key_path: KeyPath, value: Any) -> None:
        """Place a JSON-shaped copy of `value` at `key_path` and write the JSON file."""
        set_in(self._store, key_path, to_json_tree(value))
        logger.debug("Set {!r} in {}", key_path, self._path)
        self.save()

    def replace_all(self, document: Mapping[str, Any]) -> None:
        """Replace the document with a JSON-shaped copy of `document` and write it.

        Keys become strings and tuples become lists, as they would be after
        reloading the file.
        """
        if not isinstance(document, Mapping):
            raise TypeError(f"document must be a mapping, not {type(document).__name__}")
        self._store = to_json_tree(document)
        logger.debug("Replaced document of {} ({} keys)", self._path, len(self._store))
        self.save()

    def delete(self, key_path: KeyPath | None) -> bool:
        """Remove the value at `key_path` from memory.

        Returns True if something was removed. The file is not rewritten.
        """
        removed = unset_in(self._store, key_path)
        if removed:
            logger.debug("Deleted {!r} from {}", key_path, self._path)
        return removed

    def clear(self) -> None:
        """Empty the in-memory document. The file is not rewritten."""
        self._store = {}

    def save(self) -> None:
        """Write the current in-memory document to the JSON file."""
        save_settings_file(self._path, self._store, self._file_options)
