"""Greedy bin packing of menu categories onto pages.

One algorithm serves both surfaces; only the profile and budget differ.

Algorithm:
    1. Estimate each category's height with the surface profile
    2. Check it against the budget of the page it would land on
    3. Start a new page when it would overflow a non-empty page
    4. Never reorder, duplicate or split categories

Budget rules:
    - While no page has been closed yet the first-page budget applies (header)
    - Later pages use the interior budget (no header, no footer)
    - The last category always uses the footer-aware budget: the single-page
      budget while still on the first page, otherwise min(interior, last)
    - Equality fits; only strictly exceeding the budget breaks the page
"""

import logging
from collections.abc import Sequence

from menu_pagination.config import DEFAULT_PAGE_BUDGET
from menu_pagination.models.layout_models import (
    Page,
    PageBudget,
    PaginationResult,
    RenderSurfaceProfile,
)
from menu_pagination.models.menu_models import MenuCategory
from menu_pagination.observability.observer import PaginationObserver
from menu_pagination.services.height_estimator import estimate_category_height

logger = logging.getLogger(__name__)


def placement_budget(budget: PageBudget, on_first_page: bool, is_last_category: bool) -> float:
    """Usable height a category is checked against.

    Args:
        budget: Page geometry
        on_first_page: Whether no page has been closed yet
        is_last_category: Whether this is the final category of the menu

    Returns:
        float: Budget for the page the category would land on
    """
    if is_last_category:
        if on_first_page:
            return budget.single_page
        return min(budget.interior_page, budget.last_page)
    if on_first_page:
        return budget.first_page
    return budget.interior_page


def paginate(
    categories: Sequence[MenuCategory],
    profile: RenderSurfaceProfile,
    budget: PageBudget = DEFAULT_PAGE_BUDGET,
    observer: PaginationObserver | None = None,
) -> PaginationResult:
    """Assign categories to pages for one surface.

    Args:
        categories: Categories in display order
        profile: Surface constants used for height estimation
        budget: Page geometry
        observer: Receives placement events (no-op when omitted)

    Returns:
        PaginationResult with at least one page. Pages hold the original
        category objects.
    """
    observer = observer or PaginationObserver()

    pages: list[Page] = []
    page_breaks: list[int] = []
    warnings: list[str] = []

    current: list[MenuCategory] = []
    current_height: float = 0
    last_index = len(categories) - 1

    for i, category in enumerate(categories):
        category_height = estimate_category_height(category, profile)
        available = placement_budget(budget, not pages, i == last_index)

        if current_height + category_height > available and current:
            page = Page(
                index=len(pages),
                categories=tuple(current),
                estimated_height=current_height,
                budget=budget.first_page if not pages else budget.interior_page,
            )
            pages.append(page)
            observer.on_page_closed(profile, page)

            current = [category]
            current_height = category_height
            page_breaks.append(i)
            # The category now sits on a later page with its own budget
            available = placement_budget(budget, False, i == last_index)
        else:
            if not current:
                page_breaks.append(i)
            current.append(category)
            current_height += category_height

        observer.on_category_placed(profile, category, category_height, current_height, available)

        if category_height > available:
            message = (
                f'Category "{category.name}" is taller than a {profile.name} page '
                f"({category_height} > {available}) and will overflow"
            )
            logger.warning(message)
            warnings.append(message)
            observer.on_category_overflow(profile, category, category_height, available)

    if current or not pages:
        page = Page(
            index=len(pages),
            categories=tuple(current),
            estimated_height=current_height,
            budget=budget.single_page if not pages else min(budget.interior_page, budget.last_page),
        )
        pages.append(page)
        observer.on_page_closed(profile, page)

    observer.on_pagination_complete(profile, pages)

    return PaginationResult(
        profile=profile,
        pages=pages,
        page_breaks=page_breaks,
        warnings=warnings,
    )


def organize_into_pages(
    categories: Sequence[MenuCategory],
    profile: RenderSurfaceProfile,
    budget: PageBudget = DEFAULT_PAGE_BUDGET,
    observer: PaginationObserver | None = None,
) -> list[Page]:
    """Split categories into pages for one surface.

    An empty menu yields a single empty page so renderers always have a page
    for their empty state.

    Args:
        categories: Categories in display order
        profile: Surface constants used for height estimation
        budget: Page geometry
        observer: Receives placement events (no-op when omitted)

    Returns:
        list[Page]: Pages in order, never empty
    """
    return paginate(categories, profile, budget, observer).pages
