"""Logging helpers for the application.

`get_logger` hands out loggers that share one stream handler and one
rotating file handler, so every module writes in the same format to the
console and to `logs/coach.log`.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from core.config import settings

LOG_DIR = settings.log_dir
os.makedirs(LOG_DIR, exist_ok=True)

LOG_FILE = os.path.join(LOG_DIR, "coach.log")

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

_stream_handler = logging.StreamHandler()
_stream_handler.setFormatter(_formatter)

_file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3)
_file_handler.setFormatter(_formatter)


def get_logger(name: str = __name__, level: str = None) -> logging.Logger:
    """Return a logger wired to the shared stream and file handlers.

    Calling this repeatedly for the same name never stacks handlers.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level or settings.log_level)
        logger.addHandler(_stream_handler)
        logger.addHandler(_file_handler)
        logger.propagate = False
    return logger
