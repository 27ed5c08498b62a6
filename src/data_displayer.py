# data_displayer.py
import logging
from abc import ABC, abstractmethod

import gi
gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from cairo_surface import CairoSurface
from chart_config import ConfigOption, populate_defaults_from_model
from glib_scheduler import GLibScheduler

logger = logging.getLogger(__name__)


class ChartDisplayer(ABC):
    """
    Hosts one Chart in a Gtk.DrawingArea. Realizing the widget mounts the
    chart (which starts its animation), unrealizing it unmounts the chart and
    removes every timer the displayer owns.
    """
    def __init__(self, config, data_source=None, scheduler=None):
        self.config = config
        self.data_source = data_source
        self._scheduler = scheduler or GLibScheduler()
        self._poll_timer_id = None
        populate_defaults_from_model(self.config, self.get_config_model())

        items = data_source.get_items_safe() if data_source else []
        self.drawing_area = None
        self.chart = self._create_chart(items)
        self.widget = self._create_widget()

        self.drawing_area.connect("realize", self._on_realize)
        self.drawing_area.connect("unrealize", self._on_unrealize)

    @abstractmethod
    def _create_chart(self, items):
        pass

    def _create_widget(self):
        size = int(float(self.config.get("chart_size", 200)))
        self.drawing_area = Gtk.DrawingArea(hexpand=True, vexpand=True)
        self.drawing_area.set_size_request(size, size)
        self.drawing_area.set_draw_func(self.on_draw)

        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=4)
        title = self.config.get("title_text", "")
        if title:
            box.append(Gtk.Label(label=title))
        box.append(self.drawing_area)
        return box

    def get_widget(self):
        return self.widget

    @staticmethod
    def get_config_model():
        return {
            "Panel": [
                ConfigOption("title_text", "string", "Title:", ""),
                ConfigOption("chart_size", "spinner", "Chart Size (px):", 200, 50, 2000, 10, 0),
            ]
        }

    def _on_frame(self, progress):
        if self.drawing_area is not None:
            self.drawing_area.queue_draw()

    def _on_realize(self, widget=None):
        logger.debug("Mounting chart %s", self.config.get("id", "N/A"))
        self.chart.mount()
        self._start_poll_timer()

    def _on_unrealize(self, widget=None):
        self._stop_poll_timer()
        self.chart.unmount()

    def _start_poll_timer(self):
        self._stop_poll_timer()
        if self.data_source is None:
            return
        interval_ms = self.data_source.get_update_interval_ms()
        if interval_ms > 0:
            self._poll_timer_id = self._scheduler.timeout_add(interval_ms, self._poll_tick)

    def _stop_poll_timer(self):
        if self._poll_timer_id is not None:
            self._scheduler.source_remove(self._poll_timer_id)
            self._poll_timer_id = None

    def _poll_tick(self):
        if not self.chart.is_mounted:
            self._poll_timer_id = None
            return False
        self.chart.set_items(self.data_source.get_items_safe())
        self.drawing_area.queue_draw()
        return True

    def on_draw(self, area, ctx, width_float, height_float):
        width, height = int(width_float), int(height_float)
        if width <= 0 or height <= 0: return
        self.chart.draw(CairoSurface(ctx, width, height))

    def restart_animation(self):
        self.chart.restart()

    def close(self):
        """Stops the animation and polling timers; the displayer is unusable afterwards."""
        self._stop_poll_timer()
        self.chart.unmount()
