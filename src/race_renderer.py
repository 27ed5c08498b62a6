# race_renderer.py
import math

from canvas_util import FULL_CIRCLE_DEGREE_ANGLE, Y_AXIS_START_ANGLE, build_annulus_wedge, clamp_progress
from chart_config import RaceConfig
from slice_allocator import allocate_independent

TRACK_ALPHA = 0.02


class Ring:
    """Placement of one concentric ring inside the drawing area."""
    __slots__ = ("offset", "outer_diameter", "inner_diameter")

    def __init__(self, offset, outer_diameter, inner_diameter):
        self.offset = offset
        self.outer_diameter = outer_diameter
        self.inner_diameter = inner_diameter

    @property
    def center(self):
        radius = self.outer_diameter / 2.0
        return (self.offset[0] + radius, self.offset[1] + radius)


class RaceRenderer:
    """
    Draws one concentric ring per item, the first item outermost. Every ring
    shows a faint full track, the progress wedge from 12 o'clock, and two
    marker dots at the start and at the current end of the wedge.
    """
    def __init__(self, items=(), config=None):
        self.config = config or RaceConfig()
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
            self._slices = allocate_independent(self._items, self.config.max_weight)
        return self._slices

    def ring_thickness(self, width, height):
        diameter = max(0.0, min(width, height))
        return diameter / 2.0 * self.config.thickness

    def rings(self, width, height):
        diameter = max(0.0, min(width, height))
        thickness = self.ring_thickness(width, height)
        origin_x = (width - diameter) / 2.0
        origin_y = (height - diameter) / 2.0

        rings = []
        for index in range(len(self._items)):
            step = thickness / 2.0 * index
            rings.append(Ring(
                offset=(origin_x + step, origin_y + step),
                outer_diameter=diameter - index * thickness,
                inner_diameter=max(0.0, diameter - (index + 1) * thickness),
            ))
        return rings

    def draw(self, surface, progress):
        progress = clamp_progress(progress)
        width, height = surface.size
        center_x, center_y = surface.center
        thickness = self.ring_thickness(width, height)
        marker_radius = thickness / 4.0

        for racer, ring in zip(self.slices, self.rings(width, height)):
            if ring.outer_diameter <= 0:
                continue
            color = racer.item.color
            sweep_angle = racer.sweep_angle_degrees * progress

            track = build_annulus_wedge(
                ring.offset, ring.outer_diameter, ring.inner_diameter,
                Y_AXIS_START_ANGLE + 1.0, FULL_CIRCLE_DEGREE_ANGLE,
            )
            surface.draw_path(track, color.with_alpha(TRACK_ALPHA))

            if sweep_angle != 0:
                wedge = build_annulus_wedge(
                    ring.offset, ring.outer_diameter, ring.inner_diameter,
                    racer.start_angle_degrees, sweep_angle,
                )
                surface.draw_path(wedge, color)

            marker_distance = ring.inner_diameter / 2.0 + marker_radius
            surface.draw_circle((center_x, center_y - marker_distance), marker_radius, color)

            sweep_radians = math.radians(sweep_angle)
            surface.draw_circle(
                (center_x + marker_distance * math.sin(sweep_radians),
                 center_y - marker_distance * math.cos(sweep_radians)),
                marker_radius,
                color,
            )
