"""Pagination settings and the compiled-in surface constants.

Heights are in PDF points (A4 is 842 x 595). The screen profile is looser
than the export profile because the preview uses larger type, more padding
and a single column.
"""

import logging
import os

from pydantic import BaseModel, ConfigDict, Field

from menu_pagination.models.layout_models import PageBudget, RenderSurfaceProfile

logger = logging.getLogger(__name__)

A4_HEIGHT = 842
A4_WIDTH = 595

DEFAULT_PAGE_BUDGET = PageBudget(
    page_height=A4_HEIGHT,
    margin=40,
    header_height=120,
    footer_height=60,
)

EXPORT_PROFILE = RenderSurfaceProfile(
    name="export",
    columns=2,
    item_row_height=25,
    category_header_height=60,
    description_extra_height=10,
)

SCREEN_PROFILE = RenderSurfaceProfile(
    name="screen",
    columns=1,
    item_row_height=80,
    category_header_height=120,
    description_extra_height=0,
)


class PaginationSettings(BaseModel):
    """Tunable pagination parameters: both surface profiles plus the shared page budget."""

    model_config = ConfigDict(frozen=True)

    budget: PageBudget = Field(default=DEFAULT_PAGE_BUDGET)
    export_profile: RenderSurfaceProfile = Field(default=EXPORT_PROFILE)
    screen_profile: RenderSurfaceProfile = Field(default=SCREEN_PROFILE)

    @classmethod
    def from_env(cls) -> "PaginationSettings":
        """Build settings from environment variables.

        Unset variables fall back to the compiled-in constants.

        Returns:
            PaginationSettings: Validated settings

        Raises:
            ValueError: If a variable is not a number or the geometry is invalid
        """
        budget = PageBudget(
            page_height=_env_number("MENU_PAGE_HEIGHT", DEFAULT_PAGE_BUDGET.page_height),
            margin=_env_number("MENU_PAGE_MARGIN", DEFAULT_PAGE_BUDGET.margin),
            header_height=_env_number("MENU_HEADER_HEIGHT", DEFAULT_PAGE_BUDGET.header_height),
            footer_height=_env_number("MENU_FOOTER_HEIGHT", DEFAULT_PAGE_BUDGET.footer_height),
        )
        settings = cls(
            budget=budget,
            export_profile=_profile_from_env("EXPORT", EXPORT_PROFILE),
            screen_profile=_profile_from_env("SCREEN", SCREEN_PROFILE),
        )
        logger.info(
            f"Pagination settings loaded - page height: {budget.page_height}, "
            f"export columns: {settings.export_profile.columns}, "
            f"screen columns: {settings.screen_profile.columns}"
        )
        return settings


def _env_number(name: str, default: float) -> float:
    """Read a numeric environment variable."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def _env_int(name: str, default: int) -> int:
    """Read a whole-number environment variable."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a whole number, got {raw!r}") from e


def _profile_from_env(prefix: str, default: RenderSurfaceProfile) -> RenderSurfaceProfile:
    """Read a surface profile from PREFIX_* environment variables."""
    return RenderSurfaceProfile(
        name=default.name,
        columns=_env_int(f"{prefix}_COLUMNS", default.columns),
        item_row_height=_env_number(f"{prefix}_ITEM_ROW_HEIGHT", default.item_row_height),
        category_header_height=_env_number(
            f"{prefix}_CATEGORY_HEADER_HEIGHT", default.category_header_height
        ),
        description_extra_height=_env_number(
            f"{prefix}_DESCRIPTION_EXTRA_HEIGHT", default.description_extra_height
        ),
    )
