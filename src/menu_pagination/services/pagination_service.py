"""Pagination service used by the export and preview renderers."""

import logging
from collections.abc import Sequence

from menu_pagination.adapters.base_renderer import SurfaceRenderer
from menu_pagination.adapters.outline_renderer import PageOutlineRenderer
from menu_pagination.config import PaginationSettings
from menu_pagination.models.layout_models import (
    Page,
    PageBreakInfo,
    PaginationResult,
    RenderSurfaceProfile,
)
from menu_pagination.models.menu_models import MenuCategory, MenuDocument
from menu_pagination.observability.decorators import traced
from menu_pagination.observability.observer import PaginationObserver
from menu_pagination.services.consistency_checker import ConsistencyChecker, ConsistencyReport
from menu_pagination.services.page_break_locator import PageBreakLocator
from menu_pagination.services.page_organizer import paginate

logger = logging.getLogger(__name__)

EXPORT_SURFACE = "export"
SCREEN_SURFACE = "screen"


class PaginationService:
    """Service computing page partitions for both surfaces.

    Both surfaces share one packing algorithm and one page budget; they differ
    only in their profiles. Partitions are recomputed on every call so the
    preview can never hold a stale copy of the export's page breaks.
    """

    def __init__(
        self,
        settings: PaginationSettings | None = None,
        observer: PaginationObserver | None = None,
        consistency_checker: ConsistencyChecker | None = None,
    ) -> None:
        """Initialize the PaginationService.

        Args:
            settings: Profiles and page budget (compiled-in defaults when omitted)
            observer: Receives pagination events (no-op when omitted)
            consistency_checker: Checker used by check_consistency
        """
        self.settings = settings or PaginationSettings()
        self.observer = observer or PaginationObserver()
        self.consistency_checker = consistency_checker or ConsistencyChecker()

    def profile_for(self, surface: str) -> RenderSurfaceProfile:
        """Get the profile for a surface name.

        Args:
            surface: "export" or "screen"

        Returns:
            RenderSurfaceProfile for the surface

        Raises:
            ValueError: If the surface is unknown
        """
        if surface == EXPORT_SURFACE:
            return self.settings.export_profile
        if surface == SCREEN_SURFACE:
            return self.settings.screen_profile
        raise ValueError(f"Unknown surface '{surface}'")

    def paginate(self, categories: Sequence[MenuCategory], surface: str) -> PaginationResult:
        """Paginate categories for a named surface.

        Args:
            categories: Categories in display order
            surface: "export" or "screen"

        Returns:
            PaginationResult with pages, page breaks and warnings
        """
        return paginate(
            categories,
            self.profile_for(surface),
            self.settings.budget,
            self.observer,
        )

    @traced("paginate_for_export")
    def paginate_for_export(self, categories: Sequence[MenuCategory]) -> list[Page]:
        """Pages for the PDF export.

        Args:
            categories: Categories in display order

        Returns:
            list[Page]: Pages in order, never empty
        """
        return self.paginate(categories, EXPORT_SURFACE).pages

    @traced("paginate_for_preview")
    def paginate_for_preview(self, categories: Sequence[MenuCategory]) -> PaginationResult:
        """Pages and page-break indices for the on-screen preview.

        Args:
            categories: Categories in display order

        Returns:
            PaginationResult computed with the screen profile
        """
        return self.paginate(categories, SCREEN_SURFACE)

    def page_break_locator(
        self, categories: Sequence[MenuCategory], surface: str = SCREEN_SURFACE
    ) -> PageBreakLocator:
        """Build a locator for repeated page-info lookups during one render."""
        return PageBreakLocator(self.paginate(categories, surface).pages)

    def get_category_page_info(
        self,
        categories: Sequence[MenuCategory],
        index: int,
        surface: str = SCREEN_SURFACE,
    ) -> PageBreakInfo:
        """Page information for one category.

        Args:
            categories: Categories in display order
            index: 0-based category index
            surface: Surface whose partition to consult (screen by default)

        Returns:
            PageBreakInfo for categories[index]

        Raises:
            IndexError: If index is outside the category list
        """
        return self.page_break_locator(categories, surface).info(index)

    def check_consistency(
        self,
        document: MenuDocument,
        export_renderer: SurfaceRenderer | None = None,
        screen_renderer: SurfaceRenderer | None = None,
    ) -> ConsistencyReport:
        """Compare the two surfaces for a document.

        Without explicit renderers the page outlines of both profiles are
        compared, which reports where their page boundaries disagree.

        Args:
            document: The menu to render
            export_renderer: Output producer for the PDF export
            screen_renderer: Output producer for the on-screen preview

        Returns:
            ConsistencyReport with structured findings
        """
        export_renderer = export_renderer or PageOutlineRenderer(
            self.settings.export_profile, self.settings.budget
        )
        screen_renderer = screen_renderer or PageOutlineRenderer(
            self.settings.screen_profile, self.settings.budget
        )
        return self.consistency_checker.compare(document, export_renderer, screen_renderer)
