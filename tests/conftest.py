import itertools

import pytest

from canvas_surface import CanvasSurface


class ManualScheduler:
    """GLib-style timeout scheduler driven by an explicit clock, for tests."""

    def __init__(self):
        self.now_ms = 0
        self._ids = itertools.count(1)
        self._sources = {}

    def clock(self):
        return self.now_ms / 1000.0

    def timeout_add(self, interval_ms, callback):
        source_id = next(self._ids)
        self._sources[source_id] = [self.now_ms + interval_ms, interval_ms, callback]
        return source_id

    def source_remove(self, source_id):
        if source_id not in self._sources:
            raise KeyError(f"source {source_id} is not pending")
        del self._sources[source_id]

    @property
    def pending(self):
        return len(self._sources)

    def advance(self, ms):
        """Moves the clock forward, firing due callbacks in time order."""
        target = self.now_ms + ms
        while True:
            due = [(entry[0], source_id) for source_id, entry in self._sources.items() if entry[0] <= target]
            if not due:
                break
            due_time, source_id = min(due)
            self.now_ms = due_time
            _, interval_ms, callback = self._sources[source_id]
            if callback():
                if source_id in self._sources:
                    self._sources[source_id][0] = self.now_ms + interval_ms
            else:
                self._sources.pop(source_id, None)
        self.now_ms = target


class RecordingSurface(CanvasSurface):
    def __init__(self, width=200, height=200):
        self._size = (width, height)
        self.paths = []
        self.circles = []

    @property
    def size(self):
        return self._size

    def draw_path(self, path, color):
        self.paths.append((path, color))

    def draw_circle(self, center, radius, color):
        self.circles.append((center, radius, color))


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def surface():
    return RecordingSurface()
