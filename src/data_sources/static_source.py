# data_sources/static_source.py
from data_source import DataSource
from utils import items_from_config


class StaticDataSource(DataSource):
    """
    Items typed into the chart's configuration: item_count plus numbered
    item<N>_value / _label / _desc / _color keys.
    """
    def get_items(self):
        return items_from_config(self.config)
