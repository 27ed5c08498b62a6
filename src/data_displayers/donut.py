# data_displayers/donut.py
from chart import donut_chart
from chart_config import DonutConfig
from data_displayer import ChartDisplayer


class DonutDisplayer(ChartDisplayer):
    """
    A single ring split between the items in proportion to their values.
    The ring sweeps into place from 12 o'clock when the panel appears.
    """
    def _create_chart(self, items):
        config = DonutConfig.from_config(self.config)
        return donut_chart(items, self._scheduler, config, on_frame=self._on_frame)

    @staticmethod
    def get_config_model():
        model = ChartDisplayer.get_config_model()
        model.update(DonutConfig.get_config_model())
        return model
