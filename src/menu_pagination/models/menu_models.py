"""Menu data models.

These models represent menu items and categories as committed by the menu
editor. The editor may hold transiently incomplete items, so construction is
lenient: a null id, name or flag and a price that is not a finite number are
stored as empty values, null item entries are dropped, and such items are
later treated as invalid rather than rejected.
"""

import math
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

RTL_LANGUAGES = frozenset({"ar", "fa", "he", "ur"})


class MenuItem(BaseModel):
    """Menu item model."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default="", description="Unique identifier for the menu item")
    name: str = Field(default="", description="Item name")
    description: str | None = Field(None, description="Item description")
    price: float | None = Field(None, description="Item price")
    available: bool = Field(
        default=True,
        description="Whether item is currently available",
        validation_alias=AliasChoices("available", "is_available"),
    )
    featured: bool = Field(
        default=False,
        description="Whether item is highlighted on the menu",
        validation_alias=AliasChoices("featured", "is_featured"),
    )
    dietary_tags: list[str] = Field(
        default_factory=list,
        description="Dietary labels in display order",
        validation_alias=AliasChoices("dietary_tags", "dietary_info"),
    )
    image_url: str | None = Field(None, description="URL to item image")

    @field_validator("id", "name", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Store a missing id or name as an empty string."""
        if v is None:
            return ""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("available", "featured", mode="before")
    @classmethod
    def coerce_flag(cls, v: Any) -> bool:
        """Treat a null flag as unset."""
        return False if v is None else v

    @field_validator("dietary_tags", mode="before")
    @classmethod
    def coerce_tags(cls, v: Any) -> list[str]:
        return [] if v is None else v

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, v: Any) -> float | None:
        """Store anything that is not a finite number as a missing price."""
        if isinstance(v, bool) or not isinstance(v, int | float | Decimal):
            return None
        value = float(v)
        if not math.isfinite(value):
            return None
        return value

    @property
    def has_description(self) -> bool:
        """Whether the item carries a non-blank description."""
        return bool(self.description and self.description.strip())


class MenuCategory(BaseModel):
    """Menu category model."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., description="Unique identifier for the category")
    name: str = Field(..., description="Category name")
    description: str | None = Field(None, description="Category description")
    items: list[MenuItem] = Field(
        default_factory=list,
        description="Items in display order",
        validation_alias=AliasChoices("items", "menu_items"),
    )
    background_image_url: str | None = Field(None, description="Optional section background")

    @field_validator("items", mode="before")
    @classmethod
    def drop_missing_items(cls, v: Any) -> list[Any]:
        """Skip null entries left behind by the editor."""
        if v is None:
            return []
        return [item for item in v if item is not None]


class MenuDocument(BaseModel):
    """A complete menu as handed to the surface renderers."""

    model_config = ConfigDict(frozen=True)

    restaurant_name: str = Field(..., description="Restaurant name shown in the menu header")
    categories: list[MenuCategory] = Field(default_factory=list, description="Categories in order")
    language: str = Field(default="en", description="Menu language code")
    currency: str | None = Field(None, description="Currency label printed next to prices")
    font_family: str | None = Field(None, description="Font family for menu text")
    background: str | None = Field(None, description="CSS background for the menu pages")

    @property
    def is_rtl(self) -> bool:
        """Whether the menu language is written right to left."""
        return self.language.split("-")[0].lower() in RTL_LANGUAGES
