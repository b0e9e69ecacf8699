"""Logging utilities."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .constants import LOG_FORMAT, LOGGER_NAME


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logger(
    log_path: Optional[Path] = None,
    *,
    console: bool = True,
    level: int = logging.INFO,
) -> logging.Logger:
    """Reset the package logger and attach file and console handlers."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        try:
            handler.flush()
            handler.close()
        finally:
            logger.removeHandler(handler)

    fmt = logging.Formatter(LOG_FORMAT)
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(fmt)
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
