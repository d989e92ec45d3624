"""File logging for Pomodoro TUI.

The terminal belongs to the full-screen display while the timer runs, so
records never go to stderr: they are written to ``pomodoro.log`` under the
platformdirs user log directory.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomodoro_tui"
_LOG_FILE = "pomodoro.log"
_MAX_BYTES = 1 * 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2
_FORMAT = "%(asctime)s %(levelname)-8s [%(threadName)s] %(message)s"

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Where the application log is written."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def find_file_handler(
    logger: logging.Logger, path: Path
) -> logging.handlers.RotatingFileHandler | None:
    """Return the rotating handler already writing to ``path``, if any."""
    target = os.path.abspath(path)
    for handler in logger.handlers:
        if (
            isinstance(handler, logging.handlers.RotatingFileHandler)
            and handler.baseFilename == target
        ):
            return handler
    return None


def _make_file_handler(path: Path) -> logging.handlers.RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger() -> logging.Logger:
    """Return the application logger, attaching its file handler on first call.

    Handlers installed by someone else (test log capture, for instance) are
    left alone; only a rotating handler for our own log file counts as
    already configured.
    """
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    path = log_file_path()
    if find_file_handler(logger, path) is None:
        logger.addHandler(_make_file_handler(path))

    _logger = logger
    return _logger
