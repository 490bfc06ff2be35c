"""Structured logging for agency events (subscribe, unsubscribe, publish, deliver)."""

import logging
import sys
from typing import Optional

from newsagency import config


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a configured logger for observability. Records go to stderr; stdout carries notifications."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
            )
        )
        logger.addHandler(handler)
        logger.setLevel(level if level is not None else config.log_level())
    return logger
