"""Observability – structlog configuration and logger access."""
from flood_commons.observability.logging.factory import JsonLoggerFactory
from flood_commons.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
