"""Logging setup for the TUI process.

The terminal belongs to the renderer, so log records go to a file in the user
log directory, and only when a level is requested. Otherwise a
``NullHandler`` swallows them.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_DIR_ENV = "DIRPANES_LOG_DIR"
LOG_LEVEL_ENV = "DIRPANES_LOG_LEVEL"
LOG_FILENAME = "dirpanes.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def get_logger(name: str = APP_NAME) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(
    level: str | None = None,
    *,
    log_dir: Path | None = None,
    filename: str = LOG_FILENAME,
) -> Path | None:
    """Attach a handler to the package logger and return the log file path.

    ``level`` falls back to ``$DIRPANES_LOG_LEVEL``; the directory falls back
    to ``$DIRPANES_LOG_DIR`` and then the platform user log dir. With no level
    at all, logging is disabled and ``None`` is returned.
    """
    level = level or os.environ.get(LOG_LEVEL_ENV)
    logger = get_logger()
    if not level:
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        return None

    level_value = getattr(logging, level.strip().upper(), logging.INFO)
    if log_dir is None:
        env_dir = os.environ.get(LOG_DIR_ENV)
        log_dir = Path(env_dir) if env_dir else Path(user_log_dir(APP_NAME, appauthor=False))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / filename

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.setLevel(level_value)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    return log_path
