"""File logging for taskmirror.

Everything the application logs goes to one rotating file under the
platformdirs user log directory. Modules log through ``get_logger()`` or a
child of it (``get_logger().getChild("repository")``), so a single handler
covers the whole package and nothing is written to the terminal.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "taskmirror"
LOG_FILE_NAME = "taskmirror.log"
DEFAULT_LEVEL = logging.INFO

_ROTATE_AT_BYTES = 5 * 1024 * 1024
_KEEP_FILES = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    return Path(user_log_dir(LOGGER_NAME)) / LOG_FILE_NAME


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=_ROTATE_AT_BYTES, backupCount=_KEEP_FILES, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger() -> logging.Logger:
    """Return the package logger, attaching the file handler on first use."""
    global _logger
    if _logger is None:
        logger = logging.getLogger(LOGGER_NAME)
        # Other handlers (log capture in tests) may already be attached
        if not any(
            isinstance(handler, logging.handlers.RotatingFileHandler)
            for handler in logger.handlers
        ):
            logger.addHandler(_file_handler(log_file_path()))
            logger.setLevel(DEFAULT_LEVEL)
        logger.propagate = False
        _logger = logger
    return _logger


def set_log_level(level: str) -> None:
    """Change the package log level by name; unknown names mean INFO."""
    get_logger().setLevel(
        logging.getLevelNamesMapping().get(level.upper(), DEFAULT_LEVEL)
    )
