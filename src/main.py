# main.py
import logging
import os
import signal
import sys

APP_DIR = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, APP_DIR)

import gi
gi.require_version("Gtk", "4.0")
from gi.repository import Gtk, Gio, GLib

# --- Centralized Module & Data Loading ---
import module_registry
module_registry.discover_and_load_modules()
from module_registry import AVAILABLE_DATA_SOURCES, AVAILABLE_DISPLAYERS
# -----------------------------------------

from cairo_surface import render_png
from chart_config import ChartConfigError, DonutConfig, RaceConfig
from config_manager import ConfigManager
from donut_renderer import DonutRenderer
from race_renderer import RaceRenderer

APP_VERSION = "1.0.0"
logger = logging.getLogger("gradial")

_DEMO_ITEMS = {'source': 'static', 'item_count': '4',
               'item1_value': '10', 'item1_label': '10', 'item1_color': 'rgba(255,0,0,1)',
               'item2_value': '20', 'item2_label': '20', 'item2_color': 'rgba(0,0,255,1)',
               'item3_value': '30', 'item3_label': '30', 'item3_color': 'rgba(0,255,0,1)',
               'item4_value': '40', 'item4_label': '40', 'item4_color': 'rgba(255,0,255,1)'}

DEFAULT_CHART_LAYOUT = [
    dict(_DEMO_ITEMS, type='donut', title_text='Donut', thickness='1.0'),
    dict(_DEMO_ITEMS, type='donut', title_text='Donut (thin)', thickness='0.4'),
    dict(_DEMO_ITEMS, type='race', title_text='Race', thickness='0.3', max_weight='50'),
    dict(_DEMO_ITEMS, type='race', title_text='Race (thin)', thickness='0.2', max_weight='50'),
]

# Headless renderers used by --snapshot, keyed like AVAILABLE_DISPLAYERS.
SNAPSHOT_RENDERERS = {
    'donut': (DonutRenderer, DonutConfig),
    'race': (RaceRenderer, RaceConfig),
}


def create_data_source(chart_config):
    source_key = chart_config.get('source', 'static')
    source_info = AVAILABLE_DATA_SOURCES.get(source_key)
    if not source_info:
        logger.warning("Unknown data source '%s' for chart %s", source_key, chart_config.get('id', 'N/A'))
        return None
    data_source = source_info['class'](chart_config)
    for key, value in data_source.get_chart_defaults().items():
        chart_config.setdefault(key, value)
    return data_source


def create_displayer(chart_type, chart_config):
    displayer_info = AVAILABLE_DISPLAYERS.get(chart_type)
    if not displayer_info:
        logger.warning("Unknown chart type '%s' for chart %s", chart_type, chart_config.get('id', 'N/A'))
        return None
    source_key = chart_config.get('source', 'static')
    if source_key in AVAILABLE_DATA_SOURCES and not module_registry.source_supports(source_key, chart_type):
        logger.warning("Source '%s' is not meant for %s charts (chart %s)", source_key, chart_type, chart_config.get('id', 'N/A'))
    try:
        data_source = create_data_source(chart_config)
        return displayer_info['class'](chart_config, data_source)
    except ChartConfigError as e:
        logger.error("Skipping chart %s: %s", chart_config.get('id', 'N/A'), e)
        return None


def create_snapshot_renderer(chart_type, chart_config):
    renderer_info = SNAPSHOT_RENDERERS.get(chart_type)
    if not renderer_info:
        logger.warning("Unknown chart type '%s' for chart %s", chart_type, chart_config.get('id', 'N/A'))
        return None
    renderer_class, config_class = renderer_info
    try:
        data_source = create_data_source(chart_config)
        items = data_source.get_items_safe() if data_source else []
        return renderer_class(items, config_class.from_config(chart_config))
    except ChartConfigError as e:
        logger.error("Skipping chart %s: %s", chart_config.get('id', 'N/A'), e)
        return None


class MainWindow(Gtk.ApplicationWindow):
    def __init__(self, app, config_manager):
        super().__init__(title="gRadial", application=app)
        self.config_manager = config_manager
        self.displayers = []

        self.flow_box = Gtk.FlowBox(selection_mode=Gtk.SelectionMode.NONE, column_spacing=16, row_spacing=16)
        self.flow_box.set_margin_top(16); self.flow_box.set_margin_bottom(16)
        self.flow_box.set_margin_start(16); self.flow_box.set_margin_end(16)
        self.set_child(Gtk.ScrolledWindow(child=self.flow_box))
        self.set_default_size(960, 320)

        self.load_charts_from_config()
        self.connect("close-request", self._on_close_request)

    def load_charts_from_config(self):
        for chart_type, chart_config in self.config_manager.get_all_chart_configs():
            displayer = create_displayer(chart_type, chart_config)
            if displayer is None: continue
            self.displayers.append(displayer)
            self.flow_box.append(displayer.get_widget())
        logger.info("Loaded %d chart(s)", len(self.displayers))

    def _on_close_request(self, window):
        for displayer in self.displayers:
            displayer.close()
        self.displayers = []
        return False


class ChartApp(Gtk.Application):
    def __init__(self, **kwargs):
        super().__init__(application_id="io.github.gradial",
                         flags=Gio.ApplicationFlags.HANDLES_COMMAND_LINE | Gio.ApplicationFlags.NON_UNIQUE,
                         **kwargs)
        self.window = None
        self.config_manager = None

        self.add_main_option(
            "config", 0, GLib.OptionFlags.NONE, GLib.OptionArg.STRING,
            "Load a specific config file", "FILEPATH")
        self.add_main_option(
            "snapshot", 0, GLib.OptionFlags.NONE, GLib.OptionArg.STRING,
            "Render all charts into a PNG file and exit", "FILEPATH")
        self.add_main_option(
            "list-charts", ord("l"), GLib.OptionFlags.NONE, GLib.OptionArg.NONE,
            "List configured charts and exit", None)
        self.add_main_option(
            "verbose", 0, GLib.OptionFlags.NONE, GLib.OptionArg.NONE,
            "Enable informational logging", None)
        self.add_main_option(
            "version", ord("v"), GLib.OptionFlags.NONE, GLib.OptionArg.NONE,
            "Show application version and exit", None)

    def do_activate(self):
        if not self.window or not self.window.is_visible():
            self.window = MainWindow(self, self.config_manager)
        self.window.present()

    def do_command_line(self, command_line):
        """Handles command-line argument processing."""
        options = command_line.get_options_dict().end().unpack()

        logging.basicConfig(
            level=logging.DEBUG if 'verbose' in options else logging.WARNING,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        if 'version' in options:
            print(f"gRadial {APP_VERSION}")
            return 0

        if 'config' in options:
            config_path = options['config']
            if not os.path.isfile(config_path):
                print(f"Error: Config file not found: {config_path}. Exiting.")
                return 1
            self.config_manager = ConfigManager(config_path)
        else:
            self.config_manager = ConfigManager()

        if not self.config_manager.has_charts():
            for chart in DEFAULT_CHART_LAYOUT:
                chart = dict(chart)
                self.config_manager.add_chart_config(chart.pop('type'), chart)
            self.config_manager.save()

        if 'list-charts' in options:
            for chart_type, chart_config in self.config_manager.get_all_chart_configs():
                print(f"  {chart_config['id']}: {chart_type} ({chart_config.get('source', 'static')}) {chart_config.get('title_text', '')}")
            return 0

        if 'snapshot' in options:
            renderers = []
            for chart_type, chart_config in self.config_manager.get_all_chart_configs():
                renderer = create_snapshot_renderer(chart_type, chart_config)
                if renderer is not None:
                    renderers.append(renderer)
            render_png(renderers, options['snapshot'])
            return 0

        self.activate()
        return 0

    def do_startup(self):
        Gtk.Application.do_startup(self)

        for sig in [signal.SIGINT, signal.SIGTERM]:
            GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, sig, self.on_signal, sig)

        action = Gio.SimpleAction.new("quit", None)
        action.connect("activate", self.on_quit)
        self.add_action(action)
        self.set_accels_for_action("app.quit", ["<Control>q"])

    def on_quit(self, *args):
        if self.window:
            self.window.close()
        self.quit()

    def on_signal(self, signum):
        logger.info("Caught signal %s, attempting graceful shutdown.", signum)
        self.on_quit()
        return True


def main():
    app = ChartApp()
    return app.run(sys.argv)


if __name__ == "__main__":
    sys.exit(main())
