# config_manager.py
import configparser
import logging
import os
import uuid

from gi.repository import GLib

logger = logging.getLogger(__name__)

config_home = GLib.get_user_config_dir()
if config_home:
    APP_CONFIG_DIR = os.path.join(config_home, "gRadial")
else:
    APP_CONFIG_DIR = os.path.expanduser("~/.config/gRadial")

DEFAULT_CONFIG_FILE = os.path.join(APP_CONFIG_DIR, "charts.ini")
CHART_SECTION_PREFIX = "chart_"


def _new_parser():
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str
    return parser


class ConfigManager:
    """
    Keeps the chart layout in an INI file. Every chart is one
    [chart_<id>] section holding its type, data source and options.
    """
    def __init__(self, config_file=DEFAULT_CONFIG_FILE):
        self.config_file = config_file
        self.config = _new_parser()
        self.load()

    def load(self, filepath=None):
        load_path = filepath if filepath else self.config_file
        current_config_backup = self.config
        self.config = _new_parser()

        if os.path.exists(load_path):
            try:
                self.config.read(load_path, encoding='utf-8')
                logger.info("Configuration loaded from %s", load_path)
                if filepath:
                    self.config_file = filepath
                return True
            except configparser.Error as e:
                logger.error("Error reading config file %s: %s. Restoring previous config.", load_path, e)
                self.config = current_config_backup
                return False
        else:
            if filepath:
                logger.error("Config file not found: %s", load_path)
                self.config = current_config_backup
                return False
            logger.info("Config file %s not found. A new default configuration will be created on save.", load_path)
            return True

    def save(self, filepath=None):
        save_path = filepath if filepath else self.config_file
        try:
            os.makedirs(os.path.dirname(os.path.abspath(save_path)), exist_ok=True)
            with open(save_path, "w", encoding='utf-8') as f:
                self.config.write(f)
            logger.info("Configuration saved to %s", save_path)
            return True
        except OSError as e:
            logger.error("Error writing config file %s: %s", save_path, e)
            return False

    def has_charts(self):
        return any(s.startswith(CHART_SECTION_PREFIX) for s in self.config.sections())

    def get_all_chart_configs(self):
        """Returns [(chart_type, config_dict)] in file order."""
        charts = []
        for section_name in self.config.sections():
            if section_name.startswith(CHART_SECTION_PREFIX):
                chart_type = self.config.get(section_name, "type", fallback="unknown")
                config_dict = dict(self.config.items(section_name))
                config_dict["id"] = section_name
                charts.append((chart_type, config_dict))
        return charts

    def add_chart_config(self, chart_type, chart_config_dict):
        chart_id = chart_config_dict.get("id")
        if not chart_id or not chart_id.startswith(CHART_SECTION_PREFIX):
            chart_id = f"{CHART_SECTION_PREFIX}{uuid.uuid4().hex[:12]}"

        chart_config_dict["id"] = chart_id
        chart_config_dict["type"] = chart_type

        if not self.config.has_section(chart_id):
            self.config.add_section(chart_id)

        for key, value in chart_config_dict.items():
            if key == "id": continue
            self.config.set(chart_id, str(key), str(value))
        return chart_id

    def remove_chart_config(self, chart_id):
        if self.config.has_section(chart_id):
            self.config.remove_section(chart_id)
            return True
        return False
