import struct

import pytest

cairo = pytest.importorskip("cairo")

from cairo_surface import CairoSurface, render_png
from chart_config import DonutConfig, RaceConfig
from chart_item import BLUE, GREEN, MAGENTA, RED, ChartItem
from donut_renderer import DonutRenderer
from race_renderer import RaceRenderer

SIZE = 200


def demo_items():
    return [ChartItem(data=v, value=v, label=str(v), color=c)
            for v, c in zip((10, 20, 30, 40), (RED, BLUE, GREEN, MAGENTA))]


def paint(renderer, progress=1.0):
    image = cairo.ImageSurface(cairo.FORMAT_ARGB32, SIZE, SIZE)
    renderer.draw(CairoSurface(cairo.Context(image), SIZE, SIZE), progress)
    image.flush()
    return image


def pixel(image, x, y):
    """Returns (r, g, b, a) of a premultiplied ARGB32 pixel."""
    offset = y * image.get_stride() + x * 4
    (value,) = struct.unpack_from("=I", image.get_data(), offset)
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, value >> 24)


def test_donut_fills_wedges_in_item_colors():
    image = paint(DonutRenderer(demo_items(), DonutConfig(thickness=0.5)))

    # mid-ring, 18 degrees clockwise from 12 o'clock: first item
    assert pixel(image, 123, 28) == (255, 0, 0, 255)
    # mid-ring, 288 degrees clockwise from 12 o'clock: last item
    assert pixel(image, 28, 76) == (255, 0, 255, 255)
    # the hole stays empty
    assert pixel(image, SIZE // 2, SIZE // 2)[3] == 0


def test_donut_at_zero_progress_paints_nothing():
    image = paint(DonutRenderer(demo_items()), 0.0)
    assert not any(image.get_data())


def test_full_thickness_donut_fills_the_center():
    image = paint(DonutRenderer(demo_items(), DonutConfig(thickness=1.0)))
    assert pixel(image, SIZE // 2 + 2, SIZE // 2 - 20)[3] == 255


def test_race_outer_ring_progress_wedge():
    image = paint(RaceRenderer(demo_items(), RaceConfig(max_weight=50, thickness=0.3)))
    # outer ring spans radii 85..100; first item sweeps 72 degrees
    assert pixel(image, 100 + 55, 100 - 70) == (255, 0, 0, 255)
    # past the end of the wedge only the faint track remains
    assert pixel(image, 100 + 70, 100 + 55)[3] < 16


def test_render_png_lays_charts_side_by_side(tmp_path):
    target = tmp_path / "charts.png"
    renderers = [DonutRenderer(demo_items()), RaceRenderer(demo_items(), RaceConfig(thickness=0.3))]

    assert render_png(renderers, target, cell_size=100, padding=10) == target
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    image = cairo.ImageSurface.create_from_png(str(target))
    assert (image.get_width(), image.get_height()) == (2 * 100 + 3 * 10, 100 + 2 * 10)


def test_render_png_without_charts_writes_an_empty_cell(tmp_path):
    target = tmp_path / "empty.png"
    render_png([], target, cell_size=50, padding=5)
    image = cairo.ImageSurface.create_from_png(str(target))
    assert (image.get_width(), image.get_height()) == (60, 60)
