"""Base renderer for menu output surfaces.

This module defines the abstract base class for the output producers the
consistency checker compares. The real export and preview renderers live
outside this package; they plug in by implementing render().
"""

from abc import ABC, abstractmethod

from menu_pagination.models.menu_models import MenuDocument


class SurfaceRenderer(ABC):
    """Abstract base class for surface renderers.

    A renderer turns a menu document into serialized markup for one surface
    (the PDF export or the on-screen preview). Renderers must not mutate the
    document or its categories.
    """

    def __init__(self, surface_name: str) -> None:
        """Initialize the renderer.

        Args:
            surface_name: Name of the surface (e.g., 'export', 'screen')
        """
        self.surface_name = surface_name

    @abstractmethod
    def render(self, document: MenuDocument) -> str:
        """Render a menu document to markup.

        Args:
            document: The menu to render

        Returns:
            str: Serialized output for this surface

        Note:
            Exceptions are allowed to propagate; the consistency checker
            reports them as findings.
        """
        pass
