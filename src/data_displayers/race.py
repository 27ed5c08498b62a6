# data_displayers/race.py
import gi
gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from chart import race_chart
from chart_config import RaceConfig
from data_displayer import ChartDisplayer


class RaceDisplayer(ChartDisplayer):
    """
    One concentric ring per item, each filled up to its share of the full
    ring weight. Clicking the chart replays the animation.
    """
    def _create_chart(self, items):
        config = RaceConfig.from_config(self.config)
        return race_chart(items, self._scheduler, config, on_frame=self._on_frame)

    def _create_widget(self):
        widget = super()._create_widget()
        click = Gtk.GestureClick.new()
        click.connect("pressed", self._on_drawing_area_clicked)
        self.drawing_area.add_controller(click)
        return widget

    def _on_drawing_area_clicked(self, gesture, n_press, x, y):
        self.restart_animation()

    @staticmethod
    def get_config_model():
        model = ChartDisplayer.get_config_model()
        model.update(RaceConfig.get_config_model())
        return model
