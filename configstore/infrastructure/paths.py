"""Settings file location resolution.

Maps a file name and a location selector ("cwd", "portable", "userProfile",
or a directory path) to the absolute path of the settings file. Nothing here
touches the filesystem; the directory does not need to exist yet.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import re
import sys

from loguru import logger

from configstore.core.models import (
    DEFAULT_DIR_NAME,
    DEFAULT_FILE_NAME,
    LOCATION_CWD,
    LOCATION_PORTABLE,
    LOCATION_USER_PROFILE,
    Environment,
)

_JSON_SUFFIX = re.compile(r"\.json$", re.IGNORECASE)


class SystemEnvironment:
    """Environment backed by the running process."""

    def cwd(self) -> Path:
        return Path.cwd()

    def script_dir(self) -> Path:
        """Directory of the entry-point script, or cwd when there is none.

        Interactive sessions and `python -c` have no script file.
        """
        main = sys.modules.get("__main__")
        script = getattr(main, "__file__", None) or (sys.argv[0] if sys.argv else "")
        if script and script != "-c":
            return Path(os.path.abspath(script)).parent
        return self.cwd()

    def home(self) -> Path:
        return Path.home()


@dataclass(frozen=True)
class FixedEnvironment:
    """Environment with explicit locations, for embedding and tests."""

    cwd_dir: Path
    script_directory: Path
    home_dir: Path

    def cwd(self) -> Path:
        return Path(self.cwd_dir)

    def script_dir(self) -> Path:
        return Path(self.script_directory)

    def home(self) -> Path:
        return Path(self.home_dir)


def _settings_file_name(file_name: str | None) -> str:
    name = file_name if file_name else DEFAULT_FILE_NAME
    if not _JSON_SUFFIX.search(name):
        name += ".json"
    return name


def _settings_dir(dir_path: str | os.PathLike[str] | None, env: Environment) -> str:
    selector = os.fspath(dir_path) if dir_path is not None else ""
    lowered = selector.lower()
    if not selector or lowered == LOCATION_CWD:
        return os.path.join(env.cwd(), DEFAULT_DIR_NAME)
    if lowered == LOCATION_PORTABLE:
        return os.path.join(env.script_dir(), DEFAULT_DIR_NAME)
    if lowered == LOCATION_USER_PROFILE.lower():
        return os.path.join(env.home(), DEFAULT_DIR_NAME)
    if os.path.isabs(selector):
        return os.path.normpath(selector)
    return os.path.join(env.script_dir(), selector)


def resolve_settings_path(
    file_name: str | None = None,
    dir_path: str | os.PathLike[str] | None = None,
    environment: Environment | None = None,
) -> Path:
    """Return the absolute settings file path for a name and location.

    Args:
        file_name: Base name of the JSON file; ".json" is appended if missing.
            Defaults to "settings.json".
        dir_path: "cwd" (default), "portable", "userProfile" (case-insensitive),
            an absolute directory, or a directory relative to the entry script.
        environment: Source of cwd/script/home locations. Defaults to the
            running process.
    """
    env = environment if environment is not None else SystemEnvironment()
    directory = _settings_dir(dir_path, env)
    resolved = Path(os.path.abspath(os.path.join(directory, _settings_file_name(file_name))))
    logger.debug("Resolved settings path {!r} / {!r} -> {}", file_name, dir_path, resolved)
    return resolved
