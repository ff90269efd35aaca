# Logging setup
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from config.settings import (LOG_LEVEL, LOG_FORMAT, LOG_TO_FILE, LOG_DIR,
                             LOG_FILE, LOG_MAX_BYTES, LOG_BACKUP_COUNT)


def setup_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Return a configured logger.

    Handlers are attached to the root logger once, so module loggers created
    with logging.getLogger(__name__) share the same output.
    """
    root = logging.getLogger()
    if not root.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

        if LOG_TO_FILE:
            LOG_DIR.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(LOG_FILE, maxBytes=LOG_MAX_BYTES,
                                               backupCount=LOG_BACKUP_COUNT, encoding='utf-8')
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

        root.setLevel(LOG_LEVEL)

    logger = logging.getLogger(name)
    if level:
        logger.setLevel(level)
    return logger
