"""Observability – structured logging helpers."""
from utc_clock.observability.logging.factory import JsonLoggerFactory
from utc_clock.observability.logging.processors import ClockTimeStamper, get_logger

__all__ = ["ClockTimeStamper", "JsonLoggerFactory", "get_logger"]
