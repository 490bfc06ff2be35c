"""Observability: logging and metrics for the news agency."""

from newsagency.observability.logger import get_logger
from newsagency.observability.metrics import Metrics

__all__ = ["get_logger", "Metrics"]
