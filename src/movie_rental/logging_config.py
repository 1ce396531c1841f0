"""Logging configuration for MovieRental."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from movie_rental.config import (
    DEFAULT_LOG_LEVEL,
    LOG_BACKUP_COUNT,
    LOG_FILENAME,
    LOG_MAX_BYTES,
)
from movie_rental.paths import get_logs_dir


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure file logging plus a warnings-only console handler.

    The console handler writes to stderr and stays at WARNING or above so
    log lines do not interleave with the interactive menu on stdout.
    """
    log_file = get_logs_dir() / LOG_FILENAME
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(numeric_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(max(numeric_level, logging.WARNING))

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    def handle_exception(
        exc_type: type[BaseException],
        exc: BaseException,
        traceback: object,
    ) -> None:
        root_logger.error("Unhandled exception", exc_info=(exc_type, exc, traceback))

    sys.excepthook = handle_exception


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger."""
    return logging.getLogger(name)
