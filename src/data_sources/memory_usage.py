# data_sources/memory_usage.py
import psutil

from chart_config import ConfigOption
from chart_item import ChartItem
from data_source import DataSource
from utils import parse_color

GIB = 1024 ** 3


class MemoryUsageDataSource(DataSource):
    """Splits virtual memory into used and available slices, in GiB."""

    def get_items(self):
        mem = psutil.virtual_memory()
        used_gb = mem.used / GIB
        available_gb = mem.available / GIB
        return [
            ChartItem(data=mem, value=used_gb, label="Used",
                      desc=f"{used_gb:.1f} GB ({mem.percent:.1f}%)",
                      color=parse_color(self.config.get("mem_used_color"))),
            ChartItem(data=mem, value=available_gb, label="Available",
                      desc=f"{available_gb:.1f} GB",
                      color=parse_color(self.config.get("mem_available_color"))),
        ]

    @staticmethod
    def get_config_model():
        model = DataSource.get_config_model()
        model["Data Source & Update"][0] = ConfigOption("update_interval_seconds", "scale", "Update Interval (sec):", "2.0", 0, 60, 0.5, 1)
        model["Colors"] = [
            ConfigOption("mem_used_color", "color", "Used Color:", "rgba(255,99,71,1)"),
            ConfigOption("mem_available_color", "color", "Available Color:", "rgba(60,179,113,1)"),
        ]
        return model
