# module_registry.py
import importlib
import logging
import os

from data_source import DataSource
from data_displayer import ChartDisplayer

APP_DIR = os.path.dirname(os.path.abspath(__file__))
logger = logging.getLogger(__name__)

# key -> metadata dict plus the loaded 'class'
AVAILABLE_DATA_SOURCES = {}
AVAILABLE_DISPLAYERS = {}

SOURCE_METADATA = [
    {'key': 'static', 'class_name': 'StaticDataSource', 'name': 'Static Items', 'displayers': ['donut', 'race']},
    {'key': 'memory_usage', 'class_name': 'MemoryUsageDataSource', 'name': 'Memory Usage', 'displayers': ['donut']},
    {'key': 'cpu', 'class_name': 'CPUDataSource', 'name': 'CPU Cores', 'displayers': ['race', 'donut']},
]

DISPLAYER_METADATA = [
    {'key': 'donut', 'class_name': 'DonutDisplayer', 'name': 'Donut'},
    {'key': 'race', 'class_name': 'RaceDisplayer', 'name': 'Race'},
]


def _find_subclasses(directory, base_class):
    """Imports every module in a plug-in directory and returns {class name: class} for subclasses of base_class."""
    found = {}
    dir_path = os.path.join(APP_DIR, directory)
    if not os.path.isdir(dir_path):
        logger.warning("Plug-in directory %s is missing", dir_path)
        return found

    for filename in sorted(os.listdir(dir_path)):
        if not filename.endswith(".py") or filename.startswith("__"):
            continue
        module_path = f"{directory}.{filename[:-3]}"
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            logger.error("Error importing module %s: %s", module_path, e)
            continue
        for attr in vars(module).values():
            if isinstance(attr, type) and issubclass(attr, base_class) and attr is not base_class:
                found[attr.__name__] = attr
    return found


def _register(metadata, classes, target):
    for meta in metadata:
        cls = classes.get(meta['class_name'])
        if cls is None:
            logger.warning("No class %s found for '%s'", meta['class_name'], meta['key'])
            continue
        target[meta['key']] = dict(meta, **{'class': cls})


def discover_and_load_modules():
    """
    Loads the data source and displayer plug-ins and fills
    AVAILABLE_DATA_SOURCES / AVAILABLE_DISPLAYERS. Calling it again is a no-op.
    """
    if AVAILABLE_DATA_SOURCES or AVAILABLE_DISPLAYERS:
        return
    _register(SOURCE_METADATA, _find_subclasses('data_sources', DataSource), AVAILABLE_DATA_SOURCES)
    _register(DISPLAYER_METADATA, _find_subclasses('data_displayers', ChartDisplayer), AVAILABLE_DISPLAYERS)
    logger.debug("Registered sources %s and displayers %s",
                 sorted(AVAILABLE_DATA_SOURCES), sorted(AVAILABLE_DISPLAYERS))


def source_supports(source_key, chart_type):
    source_info = AVAILABLE_DATA_SOURCES.get(source_key)
    return bool(source_info) and chart_type in source_info['displayers']
