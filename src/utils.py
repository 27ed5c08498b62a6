# utils.py
import logging

import gi
gi.require_version("Gdk", "4.0")
from gi.repository import Gdk

from chart_item import ChartItem, Color, RED

logger = logging.getLogger(__name__)

DEFAULT_ITEM_COLORS = ["rgba(255,0,0,1)", "rgba(0,0,255,1)", "rgba(0,255,0,1)", "rgba(255,0,255,1)",
                       "rgba(255,165,0,1)", "rgba(0,255,255,1)", "rgba(255,255,0,1)", "rgba(128,0,128,1)",
                       "rgba(100,149,237,1)", "rgba(255,105,180,1)"]


def parse_color(color_str, fallback=RED):
    """Parses any string Gdk.RGBA understands (names, #rrggbb, rgba(...))."""
    rgba = Gdk.RGBA()
    if not color_str or not rgba.parse(str(color_str)):
        logger.warning("Could not parse color %r, using %s", color_str, fallback.to_string())
        return fallback
    return Color(rgba.red, rgba.green, rgba.blue, rgba.alpha)


def default_item_color(index):
    return DEFAULT_ITEM_COLORS[index % len(DEFAULT_ITEM_COLORS)]


def items_from_config(config):
    """
    Reads the numbered item keys of a chart section:
    item_count, item<N>_value, item<N>_label, item<N>_desc, item<N>_color.
    Items whose value cannot be read as a number are skipped.
    """
    try:
        count = int(config.get("item_count", 0))
    except (TypeError, ValueError):
        logger.warning("Invalid item_count %r in chart %s", config.get("item_count"), config.get("id", "N/A"))
        return []

    items = []
    for i in range(1, count + 1):
        raw_value = config.get(f"item{i}_value", "0")
        try:
            value = float(raw_value)
        except (TypeError, ValueError):
            logger.warning("Skipping item %d of chart %s: value %r is not a number", i, config.get("id", "N/A"), raw_value)
            continue
        items.append(ChartItem(
            data=value,
            value=value,
            label=config.get(f"item{i}_label", f"{value:g}"),
            desc=config.get(f"item{i}_desc", ""),
            color=parse_color(config.get(f"item{i}_color", default_item_color(i - 1))),
        ))
    return items


def items_to_config(items, config):
    """Writes items back as numbered keys, the inverse of items_from_config."""
    config["item_count"] = str(len(items))
    for i, item in enumerate(items, 1):
        config[f"item{i}_value"] = f"{float(item.value):g}"
        config[f"item{i}_label"] = item.label
        config[f"item{i}_desc"] = item.desc
        config[f"item{i}_color"] = item.color.to_string()
    return config
