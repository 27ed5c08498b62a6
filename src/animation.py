# animation.py
# Per-chart progress animation, driven by a cooperative timer scheduler.

import logging
import time

logger = logging.getLogger(__name__)

IDLE = "idle"
ANIMATING = "animating"
SETTLED = "settled"


class CubicBezierEasing:
    """
    Easing curve through (0, 0), (x1, y1), (x2, y2), (1, 1). With x1 and x2
    inside [0, 1] the curve is a function of x; with y1, y2 inside [0, 1] it
    is also monotonic.
    """
    PRECISION = 1e-6

    def __init__(self, x1, y1, x2, y2):
        self.x1, self.y1, self.x2, self.y2 = x1, y1, x2, y2

    @staticmethod
    def _bezier(t, p1, p2):
        inv = 1.0 - t
        return 3 * inv * inv * t * p1 + 3 * inv * t * t * p2 + t * t * t

    def __call__(self, fraction):
        if fraction <= 0.0: return 0.0
        if fraction >= 1.0: return 1.0
        low, high = 0.0, 1.0
        t = fraction
        while high - low > self.PRECISION:
            t = (low + high) / 2.0
            if self._bezier(t, self.x1, self.x2) < fraction:
                low = t
            else:
                high = t
        return self._bezier(t, self.y1, self.y2)


def LINEAR(fraction):
    return min(max(fraction, 0.0), 1.0)


FAST_OUT_SLOW_IN = CubicBezierEasing(0.4, 0.0, 0.2, 1.0)


class AnimationState:
    """Snapshot of a driver's progress."""
    def __init__(self, progress=0.0, running=False, triggered_at=None):
        self.progress = progress
        self.running = running
        self.triggered_at = triggered_at

    def __repr__(self):
        return f"AnimationState(progress={self.progress}, running={self.running}, triggered_at={self.triggered_at})"


class AnimationDriver:
    """
    Animates a progress value from 0 to 1 over `duration` seconds.

    Lifecycle: idle -> animating -> settled. start() is the first-mount
    trigger; restart() drops progress back to 0, waits RESTART_DELAY_MS and
    animates again. cancel() is the teardown path: it removes every pending
    timer and keeps the driver from scheduling anything afterwards.

    The scheduler follows the GLib timeout API: timeout_add(interval_ms,
    callback) returns a handle, source_remove(handle) drops it, and callbacks
    return True to keep running.
    """
    FRAME_INTERVAL_MS = 16
    RESTART_DELAY_MS = 200

    def __init__(self, scheduler, duration=2.0, easing=FAST_OUT_SLOW_IN, clock=time.monotonic, on_frame=None):
        self._scheduler = scheduler
        self.duration = float(duration)
        self._easing = easing
        self._clock = clock
        self.on_frame = on_frame

        # --- Animation State ---
        self._phase = IDLE
        self._progress = 0.0
        self._triggered_at = None
        self._frame_source = None
        self._restart_source = None
        self._cancelled = False

    @property
    def phase(self):
        return self._phase

    @property
    def progress(self):
        return self._progress

    @property
    def state(self):
        return AnimationState(self._progress, self._phase == ANIMATING, self._triggered_at)

    @property
    def cancelled(self):
        return self._cancelled

    @property
    def has_pending_sources(self):
        return self._frame_source is not None or self._restart_source is not None

    def start(self):
        """Begins the first run. Ignored unless the driver is idle."""
        if self._cancelled or self._phase != IDLE or self._restart_source is not None:
            return
        self._begin()

    def restart(self):
        """Resets progress to 0 and re-runs the animation after a short delay."""
        if self._cancelled:
            return
        self._remove_sources()
        self._phase = IDLE
        self._set_progress(0.0)
        self._restart_source = self._scheduler.timeout_add(self.RESTART_DELAY_MS, self._on_restart_delay)

    def cancel(self):
        """Stops all scheduling for good; used when the chart is torn down."""
        self._remove_sources()
        if self._phase == ANIMATING:
            logger.debug("Animation cancelled at progress %.3f", self._progress)
            self._phase = IDLE
        self._cancelled = True

    def _remove_sources(self):
        if self._frame_source is not None:
            self._scheduler.source_remove(self._frame_source)
            self._frame_source = None
        if self._restart_source is not None:
            self._scheduler.source_remove(self._restart_source)
            self._restart_source = None

    def _on_restart_delay(self):
        self._restart_source = None
        if not self._cancelled:
            self._begin()
        return False

    def _begin(self):
        self._triggered_at = self._clock()
        self._phase = ANIMATING
        if self.duration <= 0:
            self._settle()
            return
        self._set_progress(0.0)
        self._frame_source = self._scheduler.timeout_add(self.FRAME_INTERVAL_MS, self._animation_tick)

    def _animation_tick(self):
        if self._cancelled or self._phase != ANIMATING:
            self._frame_source = None
            return False

        fraction = (self._clock() - self._triggered_at) / self.duration
        if fraction >= 1.0:
            self._frame_source = None
            self._settle()
            return False

        # The easing is monotonic; max() only guards against a clock going backwards.
        self._set_progress(max(self._progress, self._easing(max(fraction, 0.0))))
        return True

    def _settle(self):
        self._phase = SETTLED
        self._set_progress(1.0)

    def _set_progress(self, progress):
        self._progress = progress
        if self.on_frame is not None:
            self.on_frame(progress)
