"""Pagination observers.

The page organizer reports its decisions through an observer. The base
class is a no-op.
"""

import logging

from menu_pagination.models.layout_models import Page, RenderSurfaceProfile
from menu_pagination.models.menu_models import MenuCategory
from menu_pagination.observability.metrics import (
    record_category_overflow,
    record_pagination_run,
)

logger = logging.getLogger(__name__)


class PaginationObserver:
    """Receives pagination events. Every hook defaults to doing nothing."""

    def on_category_placed(
        self,
        profile: RenderSurfaceProfile,
        category: MenuCategory,
        category_height: float,
        page_height: float,
        budget: float,
    ) -> None:
        """Called after a category is assigned to the current page."""

    def on_page_closed(self, profile: RenderSurfaceProfile, page: Page) -> None:
        """Called when a page is complete."""

    def on_category_overflow(
        self,
        profile: RenderSurfaceProfile,
        category: MenuCategory,
        category_height: float,
        budget: float,
    ) -> None:
        """Called when a category alone is taller than its page budget."""

    def on_pagination_complete(self, profile: RenderSurfaceProfile, pages: list[Page]) -> None:
        """Called once per run with the final pages."""


class LoggingPaginationObserver(PaginationObserver):
    """Observer that logs pagination decisions and records metrics."""

    def on_category_placed(
        self,
        profile: RenderSurfaceProfile,
        category: MenuCategory,
        category_height: float,
        page_height: float,
        budget: float,
    ) -> None:
        logger.debug(
            f"{profile.name} pagination - category: {category.name}, "
            f"items: {len(category.items)}, height: {category_height}, "
            f"page height: {page_height}, available: {budget}"
        )

    def on_page_closed(self, profile: RenderSurfaceProfile, page: Page) -> None:
        logger.debug(
            f"{profile.name} pagination - page {page.page_number} closed with "
            f"{len(page.categories)} categories ({page.estimated_height}/{page.budget})"
        )

    def on_category_overflow(
        self,
        profile: RenderSurfaceProfile,
        category: MenuCategory,
        category_height: float,
        budget: float,
    ) -> None:
        record_category_overflow(profile.name)

    def on_pagination_complete(self, profile: RenderSurfaceProfile, pages: list[Page]) -> None:
        record_pagination_run(profile.name, len(pages))
        logger.info(f"Paginated menu onto {len(pages)} {profile.name} pages")
