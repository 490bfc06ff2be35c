"""Environment-driven settings. Entry points call load_dotenv() before reading these."""

import logging
import os

DEFAULT_AGENCY_NAME = "Global News Network (GNN)"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SEPARATOR_WIDTH = 70


def agency_name() -> str:
    return (os.environ.get("NEWS_AGENCY_NAME") or "").strip() or DEFAULT_AGENCY_NAME


def log_level() -> int:
    """Level from NEWS_LOG_LEVEL; unknown names fall back to INFO."""
    name = (os.environ.get("NEWS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.INFO
    return level


def separator_width() -> int:
    try:
        width = int(os.environ.get("NEWS_SEPARATOR_WIDTH", DEFAULT_SEPARATOR_WIDTH))
    except (ValueError, TypeError):
        width = DEFAULT_SEPARATOR_WIDTH
    return max(1, width)
