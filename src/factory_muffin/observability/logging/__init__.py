"""Observability – structured logging helpers."""
from factory_muffin.observability.logging.factory import JsonLoggerFactory, configure_logging
from factory_muffin.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "configure_logging",
    "get_logger",
]
