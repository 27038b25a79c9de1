"""Layout models for menu pagination.

Profiles and budgets are validated configuration values. Pages and page-break
information are derived results, recomputed on every pagination run and never
persisted.
"""

from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from menu_pagination.models.menu_models import MenuCategory


def available_height(
    page_height: float,
    margin: float,
    has_header: bool,
    has_footer: bool,
    header_height: float = 0,
    footer_height: float = 0,
) -> float:
    """Calculate the content height left on a page.

    The first page carries the menu header, the last page carries the footer
    and interior pages carry neither. A single-page document carries both, so
    callers pass has_header=True and has_footer=True for that case.

    Args:
        page_height: Full page height
        margin: Margin applied at both top and bottom
        has_header: Whether the page carries the menu header
        has_footer: Whether the page carries the menu footer
        header_height: Height of the menu header
        footer_height: Height of the menu footer

    Returns:
        float: Remaining height for categories (may be negative for bad geometry)
    """
    height = page_height - 2 * margin
    if has_header:
        height -= header_height
    if has_footer:
        height -= footer_height
    return height


class RenderSurfaceProfile(BaseModel):
    """Height and column constants for one rendering surface.

    The export (PDF) surface and the screen (preview) surface use different
    fonts, paddings and column counts, so each gets its own profile. The bin
    packing algorithm is shared and only these values differ.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Surface name (e.g., 'export', 'screen')")
    columns: Literal[1, 2] = Field(..., description="Number of item columns")
    item_row_height: float = Field(..., description="Height of one row of items", ge=0)
    category_header_height: float = Field(..., description="Height of a category heading", ge=0)
    description_extra_height: float = Field(
        default=0, description="Extra height per row of described items", ge=0
    )

    def scaled(self, factor: float, name: str | None = None) -> "RenderSurfaceProfile":
        """Return a copy with every height multiplied by factor.

        Args:
            factor: Positive multiplier
            name: Optional name for the new profile

        Returns:
            RenderSurfaceProfile: Scaled profile with the same column count
        """
        if factor <= 0:
            raise ValueError(f"factor must be positive: {factor}")
        return RenderSurfaceProfile(
            name=name or self.name,
            columns=self.columns,
            item_row_height=self.item_row_height * factor,
            category_header_height=self.category_header_height * factor,
            description_extra_height=self.description_extra_height * factor,
        )


class PageBudget(BaseModel):
    """Page geometry shared by both surfaces.

    Exposes the usable content height for each page-position class.
    """

    model_config = ConfigDict(frozen=True)

    page_height: float = Field(..., description="Full page height", gt=0)
    margin: float = Field(default=0, description="Margin applied at top and bottom", ge=0)
    header_height: float = Field(default=0, description="Menu header on the first page", ge=0)
    footer_height: float = Field(default=0, description="Menu footer on the last page", ge=0)

    @model_validator(mode="after")
    def validate_usable_height(self) -> "PageBudget":
        """Validate that a page carrying both header and footer keeps usable space."""
        if self.single_page <= 0:
            raise ValueError("Margins, header and footer exceed page height")
        return self

    def available_height(self, has_header: bool, has_footer: bool) -> float:
        """Usable content height for a page with the given decorations."""
        return available_height(
            self.page_height,
            self.margin,
            has_header,
            has_footer,
            header_height=self.header_height,
            footer_height=self.footer_height,
        )

    @property
    def first_page(self) -> float:
        """First page: header, no footer."""
        return self.available_height(has_header=True, has_footer=False)

    @property
    def interior_page(self) -> float:
        """Interior page: neither header nor footer."""
        return self.available_height(has_header=False, has_footer=False)

    @property
    def last_page(self) -> float:
        """Last page: footer, no header."""
        return self.available_height(has_header=False, has_footer=True)

    @property
    def single_page(self) -> float:
        """A document with exactly one page carries both header and footer."""
        return self.available_height(has_header=True, has_footer=True)


@dataclass(frozen=True)
class Page:
    """Categories assigned to one printable surface.

    Attributes:
        index: Page number (0-indexed)
        categories: The original category objects, in input order
        estimated_height: Sum of the predicted category heights
        budget: Usable height the last placement was checked against
    """

    index: int
    categories: tuple[MenuCategory, ...]
    estimated_height: float = 0
    budget: float = 0

    @property
    def page_number(self) -> int:
        """1-based page number."""
        return self.index + 1

    @property
    def is_empty(self) -> bool:
        """Check if page has no categories."""
        return len(self.categories) == 0

    def __len__(self) -> int:
        return len(self.categories)


@dataclass(frozen=True)
class PageBreakInfo:
    """Page placement of a single category.

    Attributes:
        page_number: 1-based page containing the category
        is_first_on_page: Whether the category starts its page
        is_last_on_page: Whether the category ends its page
    """

    page_number: int
    is_first_on_page: bool
    is_last_on_page: bool


@dataclass
class PaginationResult:
    """Pages plus derived page-break data for one surface.

    Attributes:
        profile: Profile the pages were computed with
        pages: Pages in order; never empty
        page_breaks: Category indices that start a page
        warnings: Oversized-category notices
    """

    profile: RenderSurfaceProfile
    pages: list[Page]
    page_breaks: list[int] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        """Number of pages."""
        return len(self.pages)

    @property
    def categories(self) -> list[MenuCategory]:
        """All categories across pages, in order."""
        return [category for page in self.pages for category in page.categories]
