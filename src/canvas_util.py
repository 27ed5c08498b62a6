# canvas_util.py
import math

FULL_CIRCLE_DEGREE_ANGLE = 360.0
Y_AXIS_START_ANGLE = -90.0

# Segments used for a full turn when an arc is flattened into a polygon.
FLATTEN_SEGMENTS_PER_TURN = 256


class ArcTo:
    """
    A circular arc command. Angles are in degrees, 0 at 3 o'clock and
    increasing clockwise in screen coordinates (y pointing down). A negative
    sweep runs counter-clockwise.
    """
    def __init__(self, center_x, center_y, radius, start_angle_degrees, sweep_angle_degrees):
        self.center_x = center_x
        self.center_y = center_y
        self.radius = radius
        self.start_angle_degrees = start_angle_degrees
        self.sweep_angle_degrees = sweep_angle_degrees

    @property
    def end_angle_degrees(self):
        return self.start_angle_degrees + self.sweep_angle_degrees

    def point_at(self, angle_degrees):
        angle = math.radians(angle_degrees)
        return (self.center_x + self.radius * math.cos(angle),
                self.center_y + self.radius * math.sin(angle))

    def __repr__(self):
        return (f"ArcTo(center=({self.center_x}, {self.center_y}), radius={self.radius}, "
                f"start={self.start_angle_degrees}, sweep={self.sweep_angle_degrees})")


class Close:
    def __repr__(self):
        return "Close()"


class ClosedPath:
    """
    An ordered list of drawing commands. Each arc is joined to the previous
    command by a straight segment, and close() joins the last point back to
    the first one.
    """
    def __init__(self):
        self.commands = []

    def arc_to(self, left, top, diameter, start_angle_degrees, sweep_angle_degrees):
        """Appends an arc inscribed in the square (left, top, diameter)."""
        radius = diameter / 2.0
        self.commands.append(ArcTo(left + radius, top + radius, radius,
                                   start_angle_degrees, sweep_angle_degrees))
        return self

    def close(self):
        self.commands.append(Close())
        return self

    @property
    def arcs(self):
        return [cmd for cmd in self.commands if isinstance(cmd, ArcTo)]

    def __iter__(self):
        return iter(self.commands)

    def __len__(self):
        return len(self.commands)

    def flatten(self, segments_per_turn=FLATTEN_SEGMENTS_PER_TURN):
        """Returns the outline as a list of (x, y) points."""
        points = []
        for arc in self.arcs:
            steps = max(1, int(math.ceil(abs(arc.sweep_angle_degrees) / FULL_CIRCLE_DEGREE_ANGLE * segments_per_turn)))
            for i in range(steps + 1):
                points.append(arc.point_at(arc.start_angle_degrees + arc.sweep_angle_degrees * i / steps))
        return points

    def area(self, segments_per_turn=FLATTEN_SEGMENTS_PER_TURN):
        """Absolute enclosed area of the flattened outline (shoelace formula)."""
        points = self.flatten(segments_per_turn)
        if len(points) < 3:
            return 0.0
        twice_area = 0.0
        for (x1, y1), (x2, y2) in zip(points, points[1:] + points[:1]):
            twice_area += x1 * y2 - x2 * y1
        return abs(twice_area) / 2.0


def build_annulus_wedge(offset, outer_diameter, inner_diameter, start_angle_degrees, sweep_angle_degrees):
    """
    Builds the closed outline of an annulus wedge.

    The outer arc is inscribed in the square of side `outer_diameter` placed
    at `offset`. The inner arc is traced backwards from the end angle inside
    a concentric square of side `inner_diameter`, shifted inward by the
    radius difference so both arcs share a center. An inner diameter of 0
    gives a pie wedge.

    Diameters are clamped so that 0 <= inner <= outer; this is called once
    per frame and must not raise.
    """
    offset_x, offset_y = offset
    outer_diameter = max(0.0, outer_diameter)
    inner_diameter = min(max(0.0, inner_diameter), outer_diameter)

    radius_diff = (outer_diameter - inner_diameter) / 2.0

    path = ClosedPath()
    # outer bow
    path.arc_to(offset_x, offset_y, outer_diameter, start_angle_degrees, sweep_angle_degrees)
    # inner bow
    path.arc_to(offset_x + radius_diff, offset_y + radius_diff, inner_diameter,
                start_angle_degrees + sweep_angle_degrees, -sweep_angle_degrees)
    return path.close()


def clamp_progress(progress):
    """Keeps an animation value inside [0, 1]; NaN counts as 0."""
    if math.isnan(progress):
        return 0.0
    return min(max(progress, 0.0), 1.0)
