# chart.py
from functools import partial

from animation import AnimationDriver
from chart_config import DonutConfig, RaceConfig
from donut_renderer import DonutRenderer
from race_renderer import RaceRenderer


class Chart:
    """
    One mounted chart: a renderer plus the animation driver that feeds it.
    The driver belongs to this instance alone. Unmounting cancels it; a later
    mount starts over with a fresh driver from `driver_factory`.
    """
    def __init__(self, renderer, driver_factory):
        self.renderer = renderer
        self._driver_factory = driver_factory
        self.driver = driver_factory()
        self._mounted = False

    @property
    def progress(self):
        return self.driver.progress

    @property
    def is_mounted(self):
        return self._mounted

    def mount(self):
        if self._mounted:
            return
        if self.driver.cancelled:
            self.driver = self._driver_factory()
        self._mounted = True
        self.driver.start()

    def restart(self):
        if self._mounted:
            self.driver.restart()

    def unmount(self):
        self._mounted = False
        self.driver.cancel()

    def set_items(self, items):
        self.renderer.items = items

    def draw(self, surface):
        self.renderer.draw(surface, self.driver.progress)


def donut_chart(items, scheduler, config=None, on_frame=None, **driver_kwargs):
    config = config or DonutConfig()
    factory = partial(AnimationDriver, scheduler, duration=config.animation_duration, on_frame=on_frame, **driver_kwargs)
    return Chart(DonutRenderer(items, config), factory)


def race_chart(items, scheduler, config=None, on_frame=None, **driver_kwargs):
    config = config or RaceConfig()
    factory = partial(AnimationDriver, scheduler, duration=config.animation_duration, on_frame=on_frame, **driver_kwargs)
    return Chart(RaceRenderer(items, config), factory)
