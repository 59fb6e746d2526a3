import logging
import os
from logging.handlers import RotatingFileHandler

__all__ = ["get_logger"]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def get_logger(name: str = "backend") -> logging.Logger:
    """Return a configured logger. Safe to call multiple times (won't duplicate handlers).

    Configurable via environment variables:
    - LOG_LEVEL: default INFO
    - BACKEND_LOG_FILE: optional path to enable rotating file logging
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = getattr(logging, LOG_LEVEL, logging.INFO)
    logger.setLevel(level)

    fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    log_file = os.getenv("BACKEND_LOG_FILE")
    if log_file:
        try:
            fh = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
            fh.setFormatter(fmt)
            logger.addHandler(fh)
        except OSError:
            # Keep console logging when the file handler can't be created.
            logger.exception("Failed to create file log handler for %s", log_file)

    return logger
