"""Page outline renderer.

Renders the pagination of a menu as lightweight markup: one section per page,
category headings and rendered items. Two outline renderers built with
different profiles produce identical output exactly when their page
boundaries agree, which makes partition drift visible to the consistency
checker.
"""

import logging
from html import escape

from menu_pagination.adapters.base_renderer import SurfaceRenderer
from menu_pagination.config import DEFAULT_PAGE_BUDGET
from menu_pagination.models.layout_models import PageBudget, RenderSurfaceProfile
from menu_pagination.models.menu_models import MenuCategory, MenuDocument, MenuItem
from menu_pagination.observability.observer import PaginationObserver
from menu_pagination.services.height_estimator import valid_items
from menu_pagination.services.page_organizer import organize_into_pages

logger = logging.getLogger(__name__)


class PageOutlineRenderer(SurfaceRenderer):
    """Renders a menu's page partition for one surface profile."""

    def __init__(
        self,
        profile: RenderSurfaceProfile,
        budget: PageBudget = DEFAULT_PAGE_BUDGET,
        observer: PaginationObserver | None = None,
    ) -> None:
        """Initialize the outline renderer.

        Args:
            profile: Surface profile used to paginate
            budget: Page geometry
            observer: Passed through to the page organizer
        """
        super().__init__(profile.name)
        self.profile = profile
        self.budget = budget
        self.observer = observer

    def render(self, document: MenuDocument) -> str:
        """Render the paginated outline of a menu.

        Only valid items are rendered. The surface name is not part of the
        markup, so outlines of different surfaces are comparable.

        Args:
            document: The menu to render

        Returns:
            str: Outline markup
        """
        pages = organize_into_pages(document.categories, self.profile, self.budget, self.observer)
        direction = "rtl" if document.is_rtl else "ltr"

        parts = [
            f'<div class="menu" dir="{direction}" lang="{escape(document.language)}"'
            f"{self._style_attribute(document)}>"
        ]
        parts.append(f"<header><h1>{escape(document.restaurant_name)}</h1></header>")
        for page in pages:
            parts.append(f'<section class="page" data-page="{page.page_number}">')
            for category in page.categories:
                parts.append(self._render_category(category, document.currency))
            parts.append("</section>")
        parts.append(f"<footer>{escape(document.restaurant_name)}</footer>")
        parts.append("</div>")

        logger.debug(f"Rendered {self.surface_name} outline with {len(pages)} pages")
        return "\n".join(parts)

    def _style_attribute(self, document: MenuDocument) -> str:
        declarations = []
        if document.font_family:
            declarations.append(f"font-family: {document.font_family}")
        if document.background:
            declarations.append(f"background: {document.background}")
        if not declarations:
            return ""
        style = escape("; ".join(declarations))
        return f' style="{style}"'

    def _render_category(self, category: MenuCategory, currency: str | None) -> str:
        """Render one category block."""
        lines = [f'<article class="category" data-category-id="{escape(category.id)}">']
        lines.append(f"<h2>{escape(category.name)}</h2>")
        if category.description:
            lines.append(f"<p>{escape(category.description)}</p>")
        items = valid_items(category)
        if items:
            lines.append("<ul>")
            lines.extend(self._render_item(item, currency) for item in items)
            lines.append("</ul>")
        lines.append("</article>")
        return "\n".join(lines)

    def _render_item(self, item: MenuItem, currency: str | None) -> str:
        """Render one item row."""
        price = f"{item.price:.2f}"
        if currency:
            price = f"{price} {escape(currency)}"
        description = (
            f'<span class="description">{escape(item.description or "")}</span>'
            if item.has_description
            else ""
        )
        return (
            f'<li data-item-id="{escape(item.id)}">'
            f"<span class=\"name\">{escape(item.name)}</span>"
            f"{description}"
            f'<span class="price">{price}</span>'
            "</li>"
        )
