from types import SimpleNamespace

import pytest

gi = pytest.importorskip("gi")
try:
    gi.require_version("Gdk", "4.0")
except ValueError:
    pytest.skip("GTK 4 introspection data is not installed", allow_module_level=True)

import psutil

from chart_item import BLUE, RED, ChartItem, Color
from config_manager import ConfigManager
from data_source import DataSource
from data_sources.cpu_source import CPUDataSource
from data_sources.memory_usage import GIB, MemoryUsageDataSource
from data_sources.static_source import StaticDataSource
from utils import items_from_config, items_to_config, parse_color


# --- Colors and items ---

@pytest.mark.parametrize("text, expected", [
    ("red", Color(1.0, 0.0, 0.0, 1.0)),
    ("#0000ff", Color(0.0, 0.0, 1.0, 1.0)),
    ("rgba(255,0,255,0.5)", Color(1.0, 0.0, 1.0, 0.5)),
])
def test_parse_color(text, expected):
    color = parse_color(text)
    assert color.to_tuple() == pytest.approx(expected.to_tuple())


@pytest.mark.parametrize("text", ["", None, "not-a-color"])
def test_parse_color_falls_back(text):
    assert parse_color(text, fallback=BLUE) == BLUE


def test_items_from_config_reads_numbered_keys():
    config = {"item_count": "3",
              "item1_value": "10", "item1_label": "ten", "item1_color": "rgba(255,0,0,1)",
              "item2_value": "lots",
              "item3_value": "2.5", "item3_desc": "small"}
    items = items_from_config(config)

    assert [i.value for i in items] == [10.0, 2.5]
    assert items[0].label == "ten"
    assert items[0].color == RED
    assert items[1].label == "2.5"
    assert items[1].desc == "small"


def test_items_from_config_with_bad_count():
    assert items_from_config({"item_count": "many"}) == []
    assert items_from_config({}) == []


def test_items_to_config_is_read_back():
    items = [ChartItem(data=None, value=4, label="four", desc="d", color=BLUE)]
    config = items_to_config(items, {})
    assert config["item_count"] == "1"
    assert config["item1_color"] == "rgba(0,0,255,1)"

    (item,) = items_from_config(config)
    assert (item.value, item.label, item.desc, item.color) == (4.0, "four", "d", BLUE)


# --- ConfigManager ---

def test_config_manager_saves_and_reloads_charts(tmp_path):
    path = str(tmp_path / "charts.ini")
    manager = ConfigManager(path)
    assert not manager.has_charts()

    first = manager.add_chart_config("donut", {"title_text": "Memory", "source": "memory_usage"})
    second = manager.add_chart_config("race", {"id": "chart_cores", "max_weight": 100})
    assert first.startswith("chart_")
    assert second == "chart_cores"
    assert manager.save()

    reloaded = ConfigManager(path)
    charts = reloaded.get_all_chart_configs()
    assert [chart_type for chart_type, _ in charts] == ["donut", "race"]
    assert charts[0][1]["id"] == first
    assert charts[0][1]["title_text"] == "Memory"
    assert charts[1][1]["max_weight"] == "100"

    assert reloaded.remove_chart_config("chart_cores")
    assert not reloaded.remove_chart_config("chart_cores")
    assert len(reloaded.get_all_chart_configs()) == 1


def test_config_manager_keeps_config_when_explicit_file_is_missing(tmp_path):
    manager = ConfigManager(str(tmp_path / "charts.ini"))
    manager.add_chart_config("donut", {})
    assert not manager.load(str(tmp_path / "missing.ini"))
    assert manager.has_charts()


def test_config_manager_keeps_percent_signs(tmp_path):
    path = str(tmp_path / "charts.ini")
    manager = ConfigManager(path)
    manager.add_chart_config("donut", {"title_text": "CPU 100%"})
    manager.save()
    assert ConfigManager(path).get_all_chart_configs()[0][1]["title_text"] == "CPU 100%"


# --- Data sources ---

def test_static_source_items_and_interval():
    source = StaticDataSource({"item_count": "2", "item1_value": "1", "item2_value": "3"})
    assert [i.value for i in source.get_items_safe()] == [1.0, 3.0]
    assert source.get_update_interval_ms() == 0


class FlakySource(DataSource):
    def __init__(self, config):
        super().__init__(config)
        self.fail = False

    def get_items(self):
        if self.fail:
            raise RuntimeError("sensor went away")
        return [ChartItem(data=None, value=1, label="ok")]


def test_failing_source_keeps_previous_items():
    source = FlakySource({})
    items = source.get_items_safe()
    source.fail = True
    assert source.get_items_safe() == items


def test_update_interval_from_config():
    assert FlakySource({"update_interval_seconds": "1.5"}).get_update_interval_ms() == 1500
    assert FlakySource({"update_interval_seconds": "soon"}).get_update_interval_ms() == 0


def test_memory_source(monkeypatch):
    memory = SimpleNamespace(used=6 * GIB, available=2 * GIB, percent=75.0)
    monkeypatch.setattr(psutil, "virtual_memory", lambda: memory)

    source = MemoryUsageDataSource({})
    used, available = source.get_items()
    assert (used.label, used.value) == ("Used", 6.0)
    assert (available.label, available.value) == ("Available", 2.0)
    assert used.desc == "6.0 GB (75.0%)"
    assert source.get_update_interval_ms() == 2000


def test_cpu_source_limits_cores(monkeypatch):
    monkeypatch.setattr(psutil, "cpu_percent", lambda interval=None, percpu=False: [10.0, 55.5, 80.0])

    source = CPUDataSource({"cpu_max_cores": "2"})
    items = source.get_items()
    assert [i.value for i in items] == [10.0, 55.5]
    assert [i.label for i in items] == ["Core 0", "Core 1"]
    assert source.get_chart_defaults() == {"max_weight": "100"}
