"""Shared fixtures for configstore tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from configstore.infrastructure.paths import FixedEnvironment


@pytest.fixture
def env(tmp_path: Path) -> FixedEnvironment:
    """Environment whose cwd, script and home directories live under tmp_path."""
    dirs = {name: tmp_path / name for name in ("cwd", "script", "home")}
    for d in dirs.values():
        d.mkdir()
    return FixedEnvironment(
        cwd_dir=dirs["cwd"], script_directory=dirs["script"], home_dir=dirs["home"]
    )
