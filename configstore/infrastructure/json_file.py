"""JSON persistence for the settings document.

Loading treats a missing file as an empty document. Saving rewrites the
whole document through a sibling temp file so the target is replaced in one
step.
"""

from __future__ import annotations

from collections.abc import Mapping
import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

from configstore.core.errors import ConfigParseError, ConfigPersistenceError
from configstore.core.models import FileOptions


def load_settings_file(path: str | Path, options: FileOptions | None = None) -> dict[str, Any]:
    """Read the settings document at `path`.

    Returns an empty dict if the file does not exist.

    Raises:
        ConfigParseError: If the content is not JSON or its root is not an object.
        OSError: Any other read failure, unchanged.
    """
    opts = options or FileOptions()
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding=opts.encoding)
    except FileNotFoundError:
        logger.debug("Settings file not found, starting empty: {}", file_path)
        return {}

    try:
        data = json.loads(text)
    except json.JSONDecodeError as ex:
        logger.error("Invalid JSON in settings file {}: {}", file_path, ex)
        raise ConfigParseError(file_path, f"JSONDecodeError: {ex}") from ex

    if not isinstance(data, dict):
        logger.error("Settings file {} holds a {}, not an object", file_path, type(data).__name__)
        raise ConfigParseError(
            file_path, f"Expected a JSON object at the root, got {type(data).__name__}"
        )

    logger.debug("Loaded settings file {} ({} keys)", file_path, len(data))
    return data


def save_settings_file(
    path: str | Path, document: Mapping[str, Any], options: FileOptions | None = None
) -> None:
    """Overwrite `path` with the JSON serialization of `document`.

    Raises:
        ConfigPersistenceError: If creating directories, serializing or
            writing fails. The underlying error is chained.
    """
    opts = options or FileOptions()
    file_path = Path(path)
    tmp_path = file_path.with_name(file_path.name + ".tmp")
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(
            document,
            indent=opts.effective_indent,
            ensure_ascii=opts.ensure_ascii,
            sort_keys=opts.sort_keys,
        )
        tmp_path.write_text(text, encoding=opts.encoding)
        os.replace(tmp_path, file_path)
    except (OSError, TypeError, ValueError, RecursionError) as ex:
        logger.error("Failed to save settings file {}: {}", file_path, ex)
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError as cleanup_ex:
            logger.warning("Could not remove temp file {}: {}", tmp_path, cleanup_ex)
        raise ConfigPersistenceError(file_path, f"{type(ex).__name__}: {ex}") from ex

    logger.debug("Saved settings file {}", file_path)
