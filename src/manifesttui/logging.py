"""Application logging helpers."""

from __future__ import annotations

import logging as py_logging
import sys
from pathlib import Path
from typing import TextIO

LEVEL_NAMES = ("DEBUG", "INFO", "WARN", "ERROR")
_LEVELS = {
    "DEBUG": py_logging.DEBUG,
    "INFO": py_logging.INFO,
    "WARN": py_logging.WARNING,
    "ERROR": py_logging.ERROR,
}
LOGGER_NAME = "manifesttui"
DEFAULT_LOG_PATH = Path("~/.config/manifesttui/logs/manifesttui.log")
_FALLBACK_LOG_PATH = Path(".manifesttui/logs/manifesttui.log")
_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s"


def normalize_level(value: str) -> str | None:
    """Canonical level name (``WARNING`` folds into ``WARN``), or ``None``."""
    name = value.strip().upper()
    if name == "WARNING":
        name = "WARN"
    return name if name in _LEVELS else None


def default_log_path() -> Path:
    try:
        resolved = DEFAULT_LOG_PATH.expanduser()
    except RuntimeError:
        return (Path.cwd() / _FALLBACK_LOG_PATH).resolve()
    return resolved if resolved.is_absolute() else resolved.resolve()


def _file_handler(log_file: str | Path, formatter: py_logging.Formatter) -> py_logging.Handler | None:
    # No home directory means ``~`` stays literal.
    try:
        path = Path(log_file).expanduser()
    except RuntimeError:
        path = Path(log_file)
    try:
        path.resolve().parent.mkdir(parents=True, exist_ok=True)
        handler = py_logging.FileHandler(path.resolve(), encoding="utf-8")
    except OSError:
        return None
    handler.setLevel(py_logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    level: str = "INFO",
    stream: TextIO | None = None,
    *,
    log_file: str | Path | None = None,
    console: bool = True,
) -> py_logging.Logger:
    """Configure the ``manifesttui`` logger.

    The file handler always records DEBUG; ``level`` applies to the logger and
    console. ``console=False`` leaves only the file handler, for while the
    full-screen UI owns the terminal. An unusable log file is skipped.
    """
    resolved = _LEVELS[normalize_level(level) or "INFO"]
    formatter = py_logging.Formatter(_FORMAT)

    logger = py_logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    if console:
        console_handler = py_logging.StreamHandler(stream or sys.stderr)
        console_handler.setLevel(resolved)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    file_handler = _file_handler(log_file, formatter) if log_file else None
    if file_handler is not None:
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(py_logging.NullHandler())
    logger.propagate = False
    return logger
