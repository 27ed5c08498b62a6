# slice_allocator.py
import logging
import math

from canvas_util import FULL_CIRCLE_DEGREE_ANGLE, Y_AXIS_START_ANGLE

logger = logging.getLogger(__name__)


class Slice:
    """The angular span assigned to one chart item."""
    __slots__ = ("item", "start_angle_degrees", "sweep_angle_degrees")

    def __init__(self, item, start_angle_degrees, sweep_angle_degrees):
        self.item = item
        self.start_angle_degrees = start_angle_degrees
        self.sweep_angle_degrees = sweep_angle_degrees

    def __repr__(self):
        return f"Slice({self.item!r}, start={self.start_angle_degrees}, sweep={self.sweep_angle_degrees})"


def item_weight(item):
    """
    Returns the item's value as a usable weight. Negative and non-finite
    values are normalized to 0 so the rest of the geometry stays defined.
    """
    try:
        weight = float(item.value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Unusable weight %r for %r treated as 0", item.value, item.label)
        return 0.0
    if not math.isfinite(weight) or weight < 0:
        logger.debug("Weight %r for %r clamped to 0", item.value, item.label)
        return 0.0
    return weight


def allocate_cumulative(items):
    """
    Splits the full circle between `items` in proportion to their weights.
    Slices are contiguous and follow input order, starting at 0. A zero total
    gives zero sweeps.
    """
    weights = [item_weight(item) for item in items]
    total_weight = sum(weights)
    if math.isinf(total_weight):
        # Finite weights overflowed when summed; compare them relative to the largest.
        largest = max(weights)
        weights = [weight / largest for weight in weights]
        total_weight = math.fsum(weights)

    slices = []
    start_angle = 0.0
    for item, weight in zip(items, weights):
        sweep_angle = weight / total_weight * FULL_CIRCLE_DEGREE_ANGLE if total_weight > 0 else 0.0
        slices.append(Slice(item, start_angle, sweep_angle))
        start_angle += sweep_angle
    return slices


def resolve_track_weight(items, max_weight=None):
    """The weight that maps to a full turn in independent mode."""
    if max_weight is not None:
        return float(max_weight)
    weights = [item_weight(item) for item in items]
    return max(weights) if weights else 1.0


def allocate_independent(items, max_weight=None):
    """
    Gives every item its own sweep relative to a shared track weight. All
    slices start at the 12 o'clock base angle and do not stack. A value above
    the track weight sweeps past a full turn.
    """
    track_weight = resolve_track_weight(items, max_weight)
    if not math.isfinite(track_weight) or track_weight <= 0:
        logger.debug("Degenerate track weight %r, sweeps forced to 0", track_weight)
        track_weight = 0.0

    slices = []
    for item in items:
        weight = item_weight(item)
        sweep_angle = weight / track_weight * FULL_CIRCLE_DEGREE_ANGLE if track_weight > 0 else 0.0
        slices.append(Slice(item, Y_AXIS_START_ANGLE, sweep_angle))
    return slices
