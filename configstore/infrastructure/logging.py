"""Logging initialization utilities using loguru."""

from __future__ import annotations

from pathlib import Path

from loguru import logger


def get_log_directory() -> str:
    """Get the default log directory path."""
    return str(Path.home() / ".configstore" / "logs")


def init_logging(log_dir: str | Path | None = None, level: str = "INFO") -> None:
    """Enable configstore logs and write them to a rotating daily file.

    Logs go under `log_dir`, or `get_log_directory()` when it is None.
    """
    if log_dir is None:
        log_dir = get_log_directory()
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.enable("configstore")
    logger.add(
        str(log_path / "configstore_{time:YYYYMMDD}.log"),
        rotation="10 MB",
        retention="10 days",
        compression="zip",
        enqueue=True,
        backtrace=False,
        diagnose=False,
        level=level,
    )
