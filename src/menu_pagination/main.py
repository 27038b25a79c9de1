"""Application wiring for menu pagination.

Renderers embed the engine through create_pagination_service(), which
configures logging and observability and reads settings from the
environment.
"""

import logging
import os

from menu_pagination.config import PaginationSettings
from menu_pagination.observability import (
    LoggingPaginationObserver,
    PaginationObserver,
    configure_logging,
    setup_observability,
)
from menu_pagination.services.pagination_service import PaginationService

logger = logging.getLogger(__name__)


def create_observer() -> PaginationObserver:
    """Create the pagination observer selected by the environment.

    PAGINATION_DIAGNOSTICS=false keeps the packing loop silent.

    Returns:
        PaginationObserver to inject into the service
    """
    if os.getenv("PAGINATION_DIAGNOSTICS", "true").lower() == "true":
        return LoggingPaginationObserver()
    return PaginationObserver()


def create_pagination_service() -> PaginationService:
    """Create and configure the pagination service with all dependencies.

    This factory function:
    1. Configures logging
    2. Sets up observability
    3. Loads pagination settings
    4. Creates the service with its observer

    Returns:
        Configured PaginationService instance
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    enable_exporters = os.getenv("OTEL_EXPORTERS_ENABLED", "true").lower() == "true"
    setup_observability(enable_exporters=enable_exporters)

    settings = PaginationSettings.from_env()
    service = PaginationService(settings=settings, observer=create_observer())

    logger.info("Menu pagination service initialized successfully")
    return service
