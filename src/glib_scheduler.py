# glib_scheduler.py
from gi.repository import GLib


class GLibScheduler:
    """Timer scheduling on the GLib main loop, as used by AnimationDriver."""

    def timeout_add(self, interval_ms, callback):
        def _tick():
            return GLib.SOURCE_CONTINUE if callback() else GLib.SOURCE_REMOVE
        return GLib.timeout_add(interval_ms, _tick)

    def source_remove(self, source_id):
        GLib.source_remove(source_id)
