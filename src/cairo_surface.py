# cairo_surface.py
import logging
import math

import cairo

from canvas_surface import CanvasSurface
from canvas_util import ArcTo, Close

logger = logging.getLogger(__name__)


class CairoSurface(CanvasSurface):
    """CanvasSurface backed by a cairo.Context (a GTK draw function or an ImageSurface)."""

    def __init__(self, ctx, width, height):
        self.ctx = ctx
        self._width = width
        self._height = height

    @property
    def size(self):
        return (self._width, self._height)

    def _append_path(self, path):
        ctx = self.ctx
        ctx.new_path()
        for command in path:
            if isinstance(command, ArcTo):
                if command.radius <= 0:
                    # A zero-radius arc collapses to its center point.
                    if ctx.has_current_point(): ctx.line_to(command.center_x, command.center_y)
                    else: ctx.move_to(command.center_x, command.center_y)
                    continue
                start = math.radians(command.start_angle_degrees)
                end = math.radians(command.end_angle_degrees)
                if command.sweep_angle_degrees >= 0:
                    ctx.arc(command.center_x, command.center_y, command.radius, start, end)
                else:
                    ctx.arc_negative(command.center_x, command.center_y, command.radius, start, end)
            elif isinstance(command, Close):
                ctx.close_path()

    def draw_path(self, path, color):
        self.ctx.save()
        self._append_path(path)
        self.ctx.set_source_rgba(color.red, color.green, color.blue, color.alpha)
        self.ctx.fill()
        self.ctx.restore()

    def draw_circle(self, center, radius, color):
        if radius <= 0: return
        self.ctx.save()
        self.ctx.new_path()
        self.ctx.arc(center[0], center[1], radius, 0, 2 * math.pi)
        self.ctx.set_source_rgba(color.red, color.green, color.blue, color.alpha)
        self.ctx.fill()
        self.ctx.restore()


def render_png(renderers, path, cell_size=200, progress=1.0, padding=16):
    """
    Renders chart renderers side by side into a PNG, each in a square cell
    of `cell_size` pixels, and returns the file path.
    """
    count = max(1, len(renderers))
    width = count * cell_size + (count + 1) * padding
    height = cell_size + 2 * padding

    image = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
    ctx = cairo.Context(image)
    for index, renderer in enumerate(renderers):
        ctx.save()
        ctx.translate(padding + index * (cell_size + padding), padding)
        renderer.draw(CairoSurface(ctx, cell_size, cell_size), progress)
        ctx.restore()

    image.write_to_png(str(path))
    logger.info("Snapshot of %d chart(s) written to %s", len(renderers), path)
    return path
