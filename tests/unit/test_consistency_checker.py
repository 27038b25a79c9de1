"""Unit tests for the consistency checker."""

from unittest.mock import MagicMock

import pytest

from menu_pagination.adapters.base_renderer import SurfaceRenderer
from menu_pagination.adapters.outline_renderer import PageOutlineRenderer
from menu_pagination.config import EXPORT_PROFILE, SCREEN_PROFILE
from menu_pagination.models.menu_models import MenuCategory, MenuDocument, MenuItem
from menu_pagination.services.consistency_checker import (
    ConsistencyChecker,
    build_sample_document,
    default_cases,
    normalize_markup,
)


class FixedRenderer(SurfaceRenderer):
    """Renderer returning canned markup."""

    def __init__(self, surface_name: str, markup: str) -> None:
        super().__init__(surface_name)
        self.markup = markup

    def render(self, document: MenuDocument) -> str:
        return self.markup


class BrokenRenderer(SurfaceRenderer):
    """Renderer that always fails."""

    def render(self, document: MenuDocument) -> str:
        raise RuntimeError("font not embedded")


@pytest.fixture
def small_document() -> MenuDocument:
    """A menu that fits a single page on both surfaces."""
    return MenuDocument(
        restaurant_name="Corner Cafe",
        categories=[
            MenuCategory(
                id="drinks",
                name="Drinks",
                items=[MenuItem(id="d1", name="Espresso", price=3)],
            )
        ],
    )


@pytest.mark.unit
class TestNormalizeMarkup:
    """Test suite for normalize_markup."""

    def test_collapses_whitespace_runs(self) -> None:
        """Test that whitespace runs become single spaces."""
        assert normalize_markup("<p>Hot   \n  soup</p>") == "<p>Hot soup</p>"

    def test_drops_whitespace_between_tags(self) -> None:
        """Test that indentation between tags is ignored."""
        assert normalize_markup("  <ul>\n  <li>A</li>\n</ul>\n") == "<ul><li>A</li></ul>"


@pytest.mark.unit
class TestConsistencyChecker:
    """Test suite for ConsistencyChecker."""

    @pytest.fixture
    def checker(self) -> ConsistencyChecker:
        """Create a checker with default marker checks."""
        return ConsistencyChecker()

    def test_same_profile_is_consistent(
        self, checker: ConsistencyChecker, sample_document: MenuDocument
    ) -> None:
        """Test that two renderers with the same profile agree."""
        report = checker.compare(
            sample_document,
            PageOutlineRenderer(EXPORT_PROFILE),
            PageOutlineRenderer(EXPORT_PROFILE),
        )

        assert report.is_consistent is True
        assert report.differences == []
        assert report.warnings == []
        assert report.export_output == report.screen_output

    def test_single_page_menu_is_consistent_across_profiles(
        self, checker: ConsistencyChecker, small_document: MenuDocument
    ) -> None:
        """Test that different profiles agree when the page boundaries agree."""
        report = checker.compare(
            small_document,
            PageOutlineRenderer(EXPORT_PROFILE),
            PageOutlineRenderer(SCREEN_PROFILE),
        )

        assert report.is_consistent is True

    def test_page_boundary_drift_is_reported(
        self, checker: ConsistencyChecker, sample_document: MenuDocument
    ) -> None:
        """Test that partitions that disagree produce structural findings."""
        report = checker.compare(
            sample_document,
            PageOutlineRenderer(EXPORT_PROFILE),
            PageOutlineRenderer(SCREEN_PROFILE),
        )

        assert report.is_consistent is False
        assert report.differences[0] == "Markup structure differs between export and screen"
        assert any("section" in difference for difference in report.differences[1:])

    def test_whitespace_differences_are_ignored(
        self, checker: ConsistencyChecker, small_document: MenuDocument
    ) -> None:
        """Test that formatting alone is not drift."""
        report = checker.compare(
            small_document,
            FixedRenderer("export", "<div>\n  <h1>Corner Cafe</h1>\n</div>"),
            FixedRenderer("screen", "<div><h1>Corner Cafe</h1></div>"),
        )

        assert report.is_consistent is True

    def test_renderer_failure_is_a_finding(
        self, checker: ConsistencyChecker, small_document: MenuDocument
    ) -> None:
        """Test that a failing renderer is reported instead of raised."""
        report = checker.compare(
            small_document,
            BrokenRenderer("export"),
            FixedRenderer("screen", "<div>Corner Cafe</div>"),
        )

        assert report.is_consistent is False
        assert report.differences == ["export renderer failed: RuntimeError: font not embedded"]
        assert report.export_output == ""

    def test_marker_mismatch_is_a_warning(
        self, checker: ConsistencyChecker, small_document: MenuDocument
    ) -> None:
        """Test presence checks for presentation markers."""
        report = checker.compare(
            small_document,
            FixedRenderer("export", '<p style="font-family: Cairo">Corner Cafe</p>'),
            FixedRenderer("screen", "<p>Corner Cafe</p>"),
        )

        assert "Font family consistency: export (True) vs screen (False)" in report.warnings
        assert not any(w.startswith("Text content") for w in report.warnings)

    def test_missing_restaurant_name_is_a_warning(
        self, checker: ConsistencyChecker, small_document: MenuDocument
    ) -> None:
        """Test that the restaurant name must appear on both surfaces."""
        report = checker.compare(
            small_document,
            FixedRenderer("export", "<h1>Corner Cafe</h1>"),
            FixedRenderer("screen", "<h1></h1>"),
        )

        assert "Text content consistency: export (True) vs screen (False)" in report.warnings

    def test_long_diffs_are_summarized(self, small_document: MenuDocument) -> None:
        """Test that differences beyond the limit are collapsed."""
        checker = ConsistencyChecker(max_differences=2)
        export = "".join(f"<p>{n}</p><hr>" for n in range(5))
        screen = "".join(f"<p>{n + 100}</p><hr>" for n in range(5))

        report = checker.compare(
            small_document,
            FixedRenderer("export", export),
            FixedRenderer("screen", screen),
        )

        assert len(report.differences) == 1 + 2 + 1
        assert report.differences[-1].endswith("more differing segments")

    def test_compare_does_not_mutate_document(
        self, checker: ConsistencyChecker, sample_document: MenuDocument
    ) -> None:
        """Test that rendering leaves the document untouched."""
        before = sample_document.model_dump()

        checker.compare(
            sample_document,
            PageOutlineRenderer(EXPORT_PROFILE),
            PageOutlineRenderer(SCREEN_PROFILE),
        )

        assert sample_document.model_dump() == before

    def test_run_cases(
        self,
        checker: ConsistencyChecker,
        sample_document: MenuDocument,
        small_document: MenuDocument,
    ) -> None:
        """Test running a named suite."""
        export_renderer = MagicMock(spec=SurfaceRenderer)
        export_renderer.surface_name = "export"
        export_renderer.render.return_value = "<p>same</p>"
        screen_renderer = FixedRenderer("screen", "<p>same</p>")

        reports = checker.run_cases(
            {"full menu": sample_document, "single page": small_document},
            export_renderer,
            screen_renderer,
        )

        assert list(reports) == ["full menu", "single page"]
        assert all(report.is_consistent for report in reports.values())
        assert export_renderer.render.call_count == 2


@pytest.mark.unit
class TestDefaultCases:
    """Test suite for the built-in consistency cases."""

    def test_sample_document_is_arabic_with_presentation_settings(self) -> None:
        """Test the reference menu used by the default cases."""
        document = build_sample_document()

        assert document.is_rtl is True
        assert document.font_family == "Cairo"
        assert [category.id for category in document.categories] == [
            "appetizers",
            "main-courses",
        ]

    def test_default_case_names(self) -> None:
        """Test that the suite covers direction, fonts and backgrounds."""
        cases = default_cases()

        assert list(cases) == [
            "Arabic language with default settings",
            "English language with custom fonts",
            "Solid background color",
            "Gradient background",
        ]
        assert cases["English language with custom fonts"].language == "en"
        assert cases["Gradient background"].background.startswith("linear-gradient")

    def test_outline_renderers_agree_on_every_default_case(self) -> None:
        """Test that the reference menu fits one page on both profiles."""
        reports = ConsistencyChecker().run_default_cases(
            PageOutlineRenderer(EXPORT_PROFILE), PageOutlineRenderer(SCREEN_PROFILE)
        )

        assert len(reports) == 4
        assert all(report.is_consistent for report in reports.values())
        assert all(report.warnings == [] for report in reports.values())

    def test_renderer_without_styles_gets_marker_warnings(self) -> None:
        """Test that a surface dropping fonts and backgrounds is flagged."""
        reports = ConsistencyChecker().run_default_cases(
            PageOutlineRenderer(EXPORT_PROFILE),
            FixedRenderer("screen", "<div><h1>Test Restaurant</h1></div>"),
        )

        warnings = reports["Arabic language with default settings"].warnings
        assert "Font family consistency: export (True) vs screen (False)" in warnings
        assert "Background consistency: export (True) vs screen (False)" in warnings
        assert "RTL/LTR direction consistency: export (True) vs screen (False)" in warnings
