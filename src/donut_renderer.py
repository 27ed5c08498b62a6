# donut_renderer.py
from canvas_util import FULL_CIRCLE_DEGREE_ANGLE, Y_AXIS_START_ANGLE, build_annulus_wedge, clamp_progress
from chart_config import DonutConfig
from slice_allocator import allocate_cumulative


class DonutRenderer:
    """
    Draws a single ring split into one wedge per item. While the animation
    runs, each wedge grows and the whole ring rotates into place, starting
    from 12 o'clock.
    """
    def __init__(self, items=(), config=None):
        self.config = config or DonutConfig()
        self._items = list(items)
        self._slices = None

    @property
    def items(self):
        return self._items

    @items.setter
    def items(self, items):
        self._items = list(items)
        self._slices = None

    @property
    def slices(self):
        if self._slices is None:
            self._slices = allocate_cumulative(self._items)
        return self._slices

    def layout(self, width, height):
        """Returns (offset, outer_diameter, inner_diameter) for a drawing area."""
        outer_diameter = max(0.0, min(width, height))
        inner_diameter = outer_diameter * (1.0 - self.config.thickness)
        offset = ((width - outer_diameter) / 2.0, (height - outer_diameter) / 2.0)
        return offset, outer_diameter, inner_diameter

    def wedges(self, width, height, progress):
        """Yields (path, color) for every visible wedge at the given progress."""
        progress = clamp_progress(progress)
        offset, outer_diameter, inner_diameter = self.layout(width, height)
        if outer_diameter <= 0:
            return

        for donut_slice in self.slices:
            sweep_angle = donut_slice.sweep_angle_degrees * progress
            if sweep_angle == 0:
                continue
            slice_start_angle = (donut_slice.start_angle_degrees + FULL_CIRCLE_DEGREE_ANGLE) * progress
            path = build_annulus_wedge(
                offset,
                outer_diameter,
                inner_diameter,
                Y_AXIS_START_ANGLE + slice_start_angle,
                sweep_angle,
            )
            yield path, donut_slice.item.color

    def draw(self, surface, progress):
        width, height = surface.size
        for path, color in self.wedges(width, height, progress):
            surface.draw_path(path, color)
