"""Logging, OpenTelemetry instrumentation and pagination observers."""

from menu_pagination.observability.config import configure_logging, setup_observability
from menu_pagination.observability.decorators import traced
from menu_pagination.observability.observer import LoggingPaginationObserver, PaginationObserver

__all__ = [
    "setup_observability",
    "configure_logging",
    "traced",
    "PaginationObserver",
    "LoggingPaginationObserver",
]
