# data_source.py
import logging
from abc import ABC, abstractmethod

from chart_config import ConfigOption, populate_defaults_from_model

logger = logging.getLogger(__name__)


class DataSource(ABC):
    """
    Abstract base class for all chart data sources. Each subclass turns a
    specific piece of data (configured values, memory, CPU load) into a list
    of ChartItems and defines its own configuration options.
    """
    def __init__(self, config):
        self.config = config
        populate_defaults_from_model(self.config, self.get_config_model())
        self._last_items = []

    @abstractmethod
    def get_items(self):
        """
        Returns the current list of ChartItems. Runs on the main loop, so it
        must not block.
        """
        pass

    def get_items_safe(self):
        """
        Like get_items(), but a failing source keeps its previous items
        instead of breaking the panel.
        """
        try:
            self._last_items = list(self.get_items())
        except Exception as e:
            logger.error("Error fetching items for chart %s: %s", self.config.get("id", "N/A"), e)
        return self._last_items

    def get_update_interval_ms(self):
        """Polling interval in milliseconds, 0 for sources that never change."""
        try:
            return max(0, int(float(self.config.get("update_interval_seconds", 0)) * 1000))
        except (TypeError, ValueError):
            return 0

    def get_chart_defaults(self):
        """Config values the source suggests for its chart (e.g. a fixed max_weight)."""
        return {}

    @staticmethod
    def get_config_model():
        """
        Returns the configuration model (a dictionary of ConfigOption objects)
        for this data source.
        """
        return {
            "Data Source & Update": [
                ConfigOption("update_interval_seconds", "scale", "Update Interval (sec):", "0", 0, 60, 0.5, 1,
                             tooltip="0 keeps the items fixed."),
            ]
        }
