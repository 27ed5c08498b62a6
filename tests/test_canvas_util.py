import math

import pytest

from canvas_util import (ArcTo, Close, FULL_CIRCLE_DEGREE_ANGLE, Y_AXIS_START_ANGLE,
                         build_annulus_wedge, clamp_progress)


def test_constants():
    assert FULL_CIRCLE_DEGREE_ANGLE == 360.0
    assert Y_AXIS_START_ANGLE == -90.0


def test_wedge_traces_outer_arc_then_inner_arc_backwards_then_closes():
    path = build_annulus_wedge((10.0, 20.0), 100.0, 60.0, 30.0, 45.0)

    outer, inner, close = path.commands
    assert isinstance(outer, ArcTo) and isinstance(inner, ArcTo) and isinstance(close, Close)

    assert (outer.center_x, outer.center_y, outer.radius) == (60.0, 70.0, 50.0)
    assert (outer.start_angle_degrees, outer.sweep_angle_degrees) == (30.0, 45.0)

    # concentric with the outer arc, shifted inward by the radius difference
    assert (inner.center_x, inner.center_y, inner.radius) == (60.0, 70.0, 30.0)
    assert (inner.start_angle_degrees, inner.sweep_angle_degrees) == (75.0, -45.0)


def test_equal_diameters_enclose_zero_area():
    path = build_annulus_wedge((0.0, 0.0), 100.0, 100.0, 0.0, 120.0)
    assert path.area() == pytest.approx(0.0, abs=1e-9)


def test_full_sweep_without_hole_is_a_disk():
    path = build_annulus_wedge((0.0, 0.0), 100.0, 0.0, Y_AXIS_START_ANGLE, 360.0)
    assert path.area() == pytest.approx(math.pi * 50.0 ** 2, rel=1e-3)


def test_pie_wedge_area():
    path = build_annulus_wedge((0.0, 0.0), 100.0, 0.0, 0.0, 90.0)
    assert path.arcs[1].radius == 0.0
    assert path.area() == pytest.approx(math.pi * 50.0 ** 2 / 4, rel=1e-3)


def test_annulus_wedge_area():
    path = build_annulus_wedge((5.0, 5.0), 100.0, 50.0, -90.0, 180.0)
    expected = (math.pi * 50.0 ** 2 - math.pi * 25.0 ** 2) / 2
    assert path.area() == pytest.approx(expected, rel=1e-3)


def test_zero_sweep_has_no_area():
    path = build_annulus_wedge((0.0, 0.0), 100.0, 40.0, 10.0, 0.0)
    assert path.area() == pytest.approx(0.0, abs=1e-9)


def test_out_of_range_diameters_are_clamped():
    path = build_annulus_wedge((0.0, 0.0), 80.0, 120.0, 0.0, 90.0)
    assert path.arcs[1].radius == path.arcs[0].radius == 40.0

    path = build_annulus_wedge((0.0, 0.0), -10.0, -20.0, 0.0, 90.0)
    assert [arc.radius for arc in path.arcs] == [0.0, 0.0]
    assert path.area() == 0.0


def test_arc_points_follow_screen_coordinates():
    arc = ArcTo(0.0, 0.0, 10.0, Y_AXIS_START_ANGLE, 90.0)
    x, y = arc.point_at(arc.start_angle_degrees)
    assert (x, y) == pytest.approx((0.0, -10.0))
    x, y = arc.point_at(arc.end_angle_degrees)
    assert (x, y) == pytest.approx((10.0, 0.0))


@pytest.mark.parametrize("value, expected", [(-0.5, 0.0), (0.25, 0.25), (3.0, 1.0), (float("nan"), 0.0)])
def test_clamp_progress(value, expected):
    assert clamp_progress(value) == expected
