"""Logging configuration; curses owns the terminal so logs only go to a file."""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from config import (
    DEFAULT_LOG_LEVEL,
    LOG_BACKUP_COUNT,
    LOG_FORMAT,
    LOG_MAX_BYTES,
    LOGGER_NAME,
)


def setup_logging(log_file: Optional[str] = None, level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Attach a rotating file handler to the 'procmon' logger, or a NullHandler without a file."""
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fh = RotatingFileHandler(log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT)
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(fh)
    else:
        logger.addHandler(logging.NullHandler())

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    # stderr belongs to curses while the UI runs
    logger.propagate = False
    return logger
