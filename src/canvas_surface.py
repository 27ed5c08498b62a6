# canvas_surface.py
from abc import ABC, abstractmethod


class CanvasSurface(ABC):
    """
    The drawing target the chart renderers call into. Renderers only read
    `size` and `center` and issue fill calls; they never change surface state.
    """

    @property
    @abstractmethod
    def size(self):
        """(width, height) of the drawing area in pixels."""

    @property
    def center(self):
        width, height = self.size
        return (width / 2.0, height / 2.0)

    @abstractmethod
    def draw_path(self, path, color):
        """Fills a ClosedPath with a solid color (alpha included)."""

    @abstractmethod
    def draw_circle(self, center, radius, color):
        """Fills a circle."""
