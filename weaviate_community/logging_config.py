# weaviate_community/logging_config.py
from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import Settings

LOGGER_NAME = "weaviate_community"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def configure_logging(level: str | int | None = None, log_file: str | Path | None = None) -> logging.Logger:
    """Attach handlers to the package logger.

    The package never calls this on import; applications opt in. Calling it
    again only updates the level. Without ``level`` the
    ``WEAVIATE_LOG_LEVEL`` setting is used (``INFO`` when unset).
    """
    logger = logging.getLogger(LOGGER_NAME)
    if level is None:
        level = Settings().log_level
    logger.setLevel(level)
    # the package installs a NullHandler on import; only real handlers count
    if not any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        fmt = logging.Formatter(LOG_FORMAT)

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(fmt)
        logger.addHandler(stream_handler)

        if log_file is not None:
            path = Path(log_file)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = RotatingFileHandler(path, maxBytes=5 * 1024 * 1024, backupCount=5)
                file_handler.setFormatter(fmt)
                logger.addHandler(file_handler)
            except OSError as exc:
                logger.warning("Failed to initialize file logging at %s: %s", path, exc)

    logger.propagate = False
    return logger
