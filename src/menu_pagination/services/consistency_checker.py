"""Consistency checks between the export and screen renderers.

The two surfaces are maintained independently, so their output can drift
silently. The checker renders the same document through both, normalizes
whitespace and reports structural differences. It is advisory: findings are
returned as data and never raised.
"""

import difflib
import logging
import re
from dataclasses import dataclass, field

from menu_pagination.adapters.base_renderer import SurfaceRenderer
from menu_pagination.models.menu_models import MenuCategory, MenuDocument, MenuItem
from menu_pagination.observability.decorators import traced
from menu_pagination.observability.metrics import record_consistency_failure

logger = logging.getLogger(__name__)

# (check name, marker that should be present in both outputs or in neither)
DEFAULT_MARKER_CHECKS: tuple[tuple[str, str], ...] = (
    ("Font family consistency", "font-family"),
    ("Background consistency", "background"),
    ("RTL/LTR direction consistency", "dir="),
)



def build_sample_document() -> MenuDocument:
    """Build the reference menu used by the built-in consistency cases."""
    return MenuDocument(
        restaurant_name="Test Restaurant",
        language="ar",
        currency="ر.س",
        font_family="Cairo",
        background="url(/assets/menu-bg.jpeg)",
        categories=[
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
                        featured=True,
                        dietary_tags=["Vegetarian"],
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
                        featured=True,
                        dietary_tags=["Seafood", "Gluten-Free"],
                    )
                ],
            ),
        ],
    )


def default_cases() -> dict[str, MenuDocument]:
    """Named variations of the reference menu covering direction, fonts and backgrounds."""
    sample = build_sample_document()
    return {
        "Arabic language with default settings": sample,
        "English language with custom fonts": sample.model_copy(
            update={"language": "en", "font_family": "Georgia"}
        ),
        "Solid background color": sample.model_copy(update={"background": "#f0f0f0"}),
        "Gradient background": sample.model_copy(
            update={"background": "linear-gradient(to bottom, #ffffff, #f3f4f6)"}
        ),
    }

@dataclass
class ConsistencyReport:
    """Result of comparing two surfaces.

    Attributes:
        is_consistent: True when the normalized outputs match and both renders succeeded
        differences: Structural findings, most significant first
        warnings: Marker presence mismatches that do not affect structure
        export_output: Raw export markup ("" if the renderer failed)
        screen_output: Raw screen markup ("" if the renderer failed)
    """

    is_consistent: bool
    differences: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    export_output: str = ""
    screen_output: str = ""


def normalize_markup(markup: str) -> str:
    """Collapse whitespace runs and drop whitespace between tags."""
    collapsed = re.sub(r"\s+", " ", markup)
    return re.sub(r">\s+<", "><", collapsed).strip()


class ConsistencyChecker:
    """Compares export and screen renderer output for the same menu."""

    def __init__(
        self,
        marker_checks: tuple[tuple[str, str], ...] = DEFAULT_MARKER_CHECKS,
        max_differences: int = 50,
    ) -> None:
        """Initialize the ConsistencyChecker.

        Args:
            marker_checks: (name, marker) pairs checked for presence on both surfaces
            max_differences: Segment differences listed before the rest are summarized
        """
        self.marker_checks = marker_checks
        self.max_differences = max_differences

    @traced("consistency_compare")
    def compare(
        self,
        document: MenuDocument,
        export_renderer: SurfaceRenderer,
        screen_renderer: SurfaceRenderer,
    ) -> ConsistencyReport:
        """Render a document on both surfaces and diff the results.

        Args:
            document: The menu to render
            export_renderer: Output producer for the PDF export
            screen_renderer: Output producer for the on-screen preview

        Returns:
            ConsistencyReport describing any drift
        """
        differences: list[str] = []
        export_output, export_error = self._render(export_renderer, document)
        screen_output, screen_error = self._render(screen_renderer, document)

        for error in (export_error, screen_error):
            if error:
                differences.append(error)

        if not differences:
            differences.extend(self._structural_differences(export_output, screen_output))

        warnings = self._marker_warnings(document, export_output, screen_output)

        report = ConsistencyReport(
            is_consistent=not differences,
            differences=differences,
            warnings=warnings,
            export_output=export_output,
            screen_output=screen_output,
        )

        if not report.is_consistent:
            record_consistency_failure(len(differences))
            logger.warning(
                f"Surfaces differ for {document.restaurant_name}: "
                f"{len(differences)} differences, {len(warnings)} warnings"
            )

        return report

    def run_cases(
        self,
        cases: dict[str, MenuDocument],
        export_renderer: SurfaceRenderer,
        screen_renderer: SurfaceRenderer,
    ) -> dict[str, ConsistencyReport]:
        """Compare a named suite of documents.

        Args:
            cases: Mapping of case name to document
            export_renderer: Output producer for the PDF export
            screen_renderer: Output producer for the on-screen preview

        Returns:
            Mapping of case name to report, in input order
        """
        reports: dict[str, ConsistencyReport] = {}
        for name, document in cases.items():
            logger.info(f"Running consistency check: {name}")
            reports[name] = self.compare(document, export_renderer, screen_renderer)
        return reports

    def run_default_cases(
        self, export_renderer: SurfaceRenderer, screen_renderer: SurfaceRenderer
    ) -> dict[str, ConsistencyReport]:
        """Compare the built-in reference cases."""
        return self.run_cases(default_cases(), export_renderer, screen_renderer)

    def _render(self, renderer: SurfaceRenderer, document: MenuDocument) -> tuple[str, str | None]:
        """Render a document, turning renderer failures into findings.

        Returns:
            (output, error) where error is None on success
        """
        try:
            return renderer.render(document), None
        except Exception as e:
            logger.exception(f"{renderer.surface_name} renderer failed")
            return "", f"{renderer.surface_name} renderer failed: {type(e).__name__}: {e}"

    def _structural_differences(self, export_output: str, screen_output: str) -> list[str]:
        """List the tag segments that differ between the normalized outputs."""
        normalized_export = normalize_markup(export_output)
        normalized_screen = normalize_markup(screen_output)
        if normalized_export == normalized_screen:
            return []

        differences = ["Markup structure differs between export and screen"]
        export_segments = normalized_export.split(">")
        screen_segments = normalized_screen.split(">")

        matcher = difflib.SequenceMatcher(None, export_segments, screen_segments, autojunk=False)
        segment_differences = [
            f"Segment {i1 + 1}: export {'>'.join(export_segments[i1:i2])!r} "
            f"vs screen {'>'.join(screen_segments[j1:j2])!r}"
            for tag, i1, i2, j1, j2 in matcher.get_opcodes()
            if tag != "equal"
        ]

        differences.extend(segment_differences[: self.max_differences])
        hidden = len(segment_differences) - self.max_differences
        if hidden > 0:
            differences.append(f"... {hidden} more differing segments")
        return differences

    def _marker_warnings(
        self, document: MenuDocument, export_output: str, screen_output: str
    ) -> list[str]:
        """Check that presentation markers appear on both surfaces or on neither."""
        checks = list(self.marker_checks)
        checks.append(("Text content consistency", document.restaurant_name))

        warnings = []
        for name, marker in checks:
            in_export = marker in export_output
            in_screen = marker in screen_output
            if in_export != in_screen:
                warnings.append(f"{name}: export ({in_export}) vs screen ({in_screen})")
        return warnings
