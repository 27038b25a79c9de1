"""Page placement lookups for the preview's page-break markers.

The locator only reads a partition produced by the page organizer. Callers
must build it from the same profile they render with; mixing an export
partition with a screen lookup defeats the purpose.
"""

from collections.abc import Sequence

from menu_pagination.config import DEFAULT_PAGE_BUDGET
from menu_pagination.models.layout_models import (
    Page,
    PageBreakInfo,
    PageBudget,
    RenderSurfaceProfile,
)
from menu_pagination.models.menu_models import MenuCategory
from menu_pagination.services.page_organizer import organize_into_pages


class PageBreakLocator:
    """Per-category page information for a computed partition.

    The table is built once, so repeated lookups while rendering a preview
    are constant time.
    """

    def __init__(self, pages: Sequence[Page]) -> None:
        """Initialize the locator.

        Args:
            pages: Partition from organize_into_pages
        """
        self.pages = list(pages)
        self._infos: list[PageBreakInfo] = []
        for page in self.pages:
            last_position = len(page.categories) - 1
            for position in range(len(page.categories)):
                self._infos.append(
                    PageBreakInfo(
                        page_number=page.page_number,
                        is_first_on_page=position == 0,
                        is_last_on_page=position == last_position,
                    )
                )

    @classmethod
    def for_categories(
        cls,
        categories: Sequence[MenuCategory],
        profile: RenderSurfaceProfile,
        budget: PageBudget = DEFAULT_PAGE_BUDGET,
    ) -> "PageBreakLocator":
        """Paginate categories with a profile and build a locator for the result."""
        return cls(organize_into_pages(categories, profile, budget))

    @property
    def category_count(self) -> int:
        """Number of categories covered by the partition."""
        return len(self._infos)

    @property
    def page_breaks(self) -> list[int]:
        """Category indices that start a page."""
        return [i for i, info in enumerate(self._infos) if info.is_first_on_page]

    def info(self, index: int) -> PageBreakInfo:
        """Get page information for the category at index.

        Args:
            index: 0-based category index in the original list

        Returns:
            PageBreakInfo for the category

        Raises:
            IndexError: If index is outside the partitioned categories
        """
        if index < 0 or index >= len(self._infos):
            raise IndexError(
                f"Category index {index} out of range for {len(self._infos)} categories"
            )
        return self._infos[index]

    def starts_page(self, index: int) -> bool:
        """Whether a page-break marker should be drawn above the category."""
        return self.info(index).is_first_on_page


def get_category_page_info(
    categories: Sequence[MenuCategory],
    index: int,
    profile: RenderSurfaceProfile,
    budget: PageBudget = DEFAULT_PAGE_BUDGET,
    pages: Sequence[Page] | None = None,
) -> PageBreakInfo:
    """Get page information for one category.

    Args:
        categories: Categories in display order
        index: 0-based index of the category to locate
        profile: Surface profile the partition is computed with
        budget: Page geometry
        pages: Precomputed partition for the same categories and profile

    Returns:
        PageBreakInfo for categories[index]

    Raises:
        IndexError: If index is outside the category list
    """
    if pages is None:
        pages = organize_into_pages(categories, profile, budget)
    return PageBreakLocator(pages).info(index)
