"""Shared pytest fixtures and configuration for all tests."""

from collections.abc import Callable

import pytest

from menu_pagination.models.layout_models import PageBudget, RenderSurfaceProfile
from menu_pagination.models.menu_models import MenuCategory, MenuDocument, MenuItem


def _make_item(item_id: str, description: str | None = None, **overrides: object) -> MenuItem:
    """Build a valid menu item; overrides replace any field."""
    data: dict[str, object] = {
        "id": item_id,
        "name": f"Item {item_id}",
        "description": description,
        "price": 9.5,
        "available": True,
    }
    data.update(overrides)
    return MenuItem(**data)


def _make_category(category_id: str, item_count: int = 0, described: int = 0) -> MenuCategory:
    """Build a category with item_count valid items, the first `described` carrying descriptions."""
    items = [
        _make_item(f"{category_id}_{n}", description="House special" if n < described else None)
        for n in range(item_count)
    ]
    return MenuCategory(id=category_id, name=f"Category {category_id}", items=items)


@pytest.fixture
def make_item() -> Callable[..., MenuItem]:
    """Factory fixture for valid menu items."""
    return _make_item


@pytest.fixture
def make_category() -> Callable[..., MenuCategory]:
    """Factory fixture for categories with a given number of valid and described items."""
    return _make_category


@pytest.fixture
def unit_profile() -> RenderSurfaceProfile:
    """Single-column profile where a category with n valid items is 100 * (n + 1) tall."""
    return RenderSurfaceProfile(
        name="unit",
        columns=1,
        item_row_height=100,
        category_header_height=100,
        description_extra_height=0,
    )


@pytest.fixture
def flat_budget() -> PageBudget:
    """700-unit pages with no header or footer, so every page class has the same budget."""
    return PageBudget(page_height=700, margin=0, header_height=0, footer_height=0)


@pytest.fixture
def sample_categories() -> list[MenuCategory]:
    """Fixture providing a small realistic menu."""
    return [
        MenuCategory(
            id="appetizers",
            name="Appetizers",
            description="Start your meal with our delicious appetizers",
            items=[
                MenuItem(
                    id="item-1",
                    name="Bruschetta",
                    description="Toasted bread with tomatoes and herbs",
                    price=12.99,
                    dietary_tags=["Vegetarian"],
                    featured=True,
                ),
                MenuItem(
                    id="item-2",
                    name="Calamari",
                    description="Crispy fried squid with marinara sauce",
                    price=16.99,
                    dietary_tags=["Seafood"],
                ),
            ],
        ),
        MenuCategory(
            id="main-courses",
            name="Main Courses",
            description="Our signature main dishes",
            items=[
                MenuItem(
                    id="item-3",
                    name="Grilled Salmon",
                    description="Fresh Atlantic salmon with seasonal vegetables",
                    price=28.99,
                    dietary_tags=["Seafood", "Gluten-Free"],
                ),
            ],
        ),
        MenuCategory(
            id="desserts",
            name="Desserts",
            description=None,
            items=[
                MenuItem(id="item-4", name="Tiramisu", price=8.5),
                MenuItem(id="item-5", name="Gelato", price=6.0),
                MenuItem(id="item-6", name="Seasonal Tart", price=None),
            ],
        ),
    ]


@pytest.fixture
def sample_document(sample_categories: list[MenuCategory]) -> MenuDocument:
    """Fixture providing a menu document for renderer tests."""
    return MenuDocument(
        restaurant_name="Test Restaurant",
        categories=sample_categories,
        language="en",
        currency="USD",
    )
