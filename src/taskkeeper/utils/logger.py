"""Application-wide logger writing to platformdirs user_log_dir.

Module loggers created with ``logging.getLogger(__name__)`` inside the
package are children of the ``taskkeeper`` logger and end up in its file.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "taskkeeper"
LOG_FILE = "taskkeeper.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def _file_handlers(logger: logging.Logger) -> list[logging.handlers.RotatingFileHandler]:
    return [
        h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
    ]


def log_file_path() -> Path:
    """Location of the current log file."""
    return Path(user_log_dir(APP_NAME)) / LOG_FILE


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    Handlers installed by other tools (pytest's capture handler, for one) are
    left in place; only our own rotating file handler is added once.
    """
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if not _file_handlers(logger):
        path = log_file_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
        logger.addHandler(handler)

    _logger = logger
    return _logger


def close_logger() -> None:
    """Detach and close the file handler so the next call starts afresh."""
    global _logger
    logger = logging.getLogger(APP_NAME)
    for handler in _file_handlers(logger):
        logger.removeHandler(handler)
        handler.close()
    _logger = None
