"""Observability module for Eventfold.

Provides structured logging: configure_logging, get_logger.
"""

from eventfold.observability.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
