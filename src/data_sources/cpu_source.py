# data_sources/cpu_source.py
import psutil

from chart_config import ConfigOption
from chart_item import ChartItem
from data_source import DataSource
from utils import default_item_color, parse_color


class CPUDataSource(DataSource):
    """
    Per-core CPU usage, one item per core, for a race chart whose full ring
    is 100%.
    """
    def __init__(self, config):
        super().__init__(config)
        # The first non-blocking call only primes psutil's counters and returns zeros.
        psutil.cpu_percent(interval=None, percpu=True)

    def get_items(self):
        per_core = psutil.cpu_percent(interval=None, percpu=True)
        limit = int(float(self.config.get("cpu_max_cores", 0)))
        if limit > 0:
            per_core = per_core[:limit]
        return [
            ChartItem(data=i, value=percent, label=f"Core {i}", desc=f"{percent:.1f}%",
                      color=parse_color(default_item_color(i)))
            for i, percent in enumerate(per_core)
        ]

    def get_chart_defaults(self):
        return {"max_weight": "100"}

    @staticmethod
    def get_config_model():
        model = DataSource.get_config_model()
        model["Data Source & Update"] = [
            ConfigOption("update_interval_seconds", "scale", "Update Interval (sec):", "2.0", 0, 60, 0.5, 1),
            ConfigOption("cpu_max_cores", "spinner", "Max Cores Shown (0 = all):", "0", 0, 256, 1, 0),
        ]
        return model
