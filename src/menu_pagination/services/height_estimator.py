"""Predict the rendered height of a menu category without a layout pass."""

import math

from menu_pagination.models.layout_models import RenderSurfaceProfile
from menu_pagination.models.menu_models import MenuCategory, MenuItem


def is_valid_item(item: MenuItem) -> bool:
    """Check whether an item takes part in layout.

    An item is rendered only when it has an id and a name, is available, and
    carries a numeric price. Anything else is a transient editor state and is
    skipped.

    Args:
        item: Item to check

    Returns:
        bool: True if the item is rendered
    """
    return bool(item.id) and bool(item.name) and item.available and item.price is not None


def valid_items(category: MenuCategory) -> list[MenuItem]:
    """Return the rendered items of a category, in order."""
    return [item for item in category.items if is_valid_item(item)]


def estimate_category_height(category: MenuCategory, profile: RenderSurfaceProfile) -> float:
    """Estimate the height a category occupies on a surface.

    Items are laid out in profile.columns columns. Descriptions add height in
    whole-row increments: one unit of description_extra_height for every row
    of described items, not per item.

    Args:
        category: Category to measure
        profile: Surface constants

    Returns:
        float: Predicted height in the surface's units
    """
    items = valid_items(category)
    if not items:
        return profile.category_header_height

    rows_needed = math.ceil(len(items) / profile.columns)
    items_height = rows_needed * profile.item_row_height

    described = sum(1 for item in items if item.has_description)
    description_bonus = math.ceil(described / profile.columns) * profile.description_extra_height

    return profile.category_header_height + items_height + description_bonus
