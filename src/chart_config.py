# chart_config.py
import math


class ChartConfigError(ValueError):
    """Raised when a chart configuration cannot produce valid geometry."""


class InvalidDiameterError(ChartConfigError):
    """The configured ring thickness would put the inner diameter outside [0, outer]."""


class ConfigOption:
    """
    A data class to define a single configuration option.
    """
    def __init__(self, key, option_type, label, default,
                 min_val=None, max_val=None, step=None, digits=0,
                 options_dict=None, tooltip=None):
        self.key = key
        # Valid types: "string", "bool", "color", "scale", "spinner", "dropdown"
        self.type = option_type
        self.label = label
        self.default = default
        self.min_val = min_val
        self.max_val = max_val
        self.step = step
        self.digits = digits
        self.options_dict = options_dict or {}
        self.tooltip = tooltip


def populate_defaults_from_model(config, model):
    """
    Helper function to populate a configuration dictionary with default values
    from a given configuration model.
    """
    for section in model.values():
        for option in section:
            config.setdefault(option.key, str(option.default))


def _float_option(config, key, fallback=None):
    raw = config.get(key)
    if raw is None or str(raw).strip() == "":
        return fallback
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise ChartConfigError(f"Option '{key}' must be a number, got {raw!r}") from e


def _validate_thickness(thickness):
    if not math.isfinite(thickness) or not 0.0 < thickness <= 1.0:
        raise InvalidDiameterError(
            f"thickness must be within (0, 1], got {thickness!r}: "
            "the inner diameter would fall outside [0, outer diameter]")


def _validate_duration(duration):
    if not math.isfinite(duration) or duration < 0:
        raise ChartConfigError(f"animation_duration must be a non-negative number of seconds, got {duration!r}")


class DonutConfig:
    """
    @param thickness ratio of the ring width to the radius, from 0 (exclusive) to 1
    @param animation_duration seconds
    """
    DEFAULT_THICKNESS = 0.5
    DEFAULT_ANIMATION_DURATION = 2.0

    def __init__(self, thickness=DEFAULT_THICKNESS, animation_duration=DEFAULT_ANIMATION_DURATION):
        thickness = float(thickness)
        animation_duration = float(animation_duration)
        _validate_thickness(thickness)
        _validate_duration(animation_duration)
        self.thickness = thickness
        self.animation_duration = animation_duration

    @staticmethod
    def get_config_model():
        return {
            "Donut": [
                ConfigOption("thickness", "spinner", "Ring Thickness (ratio):", DonutConfig.DEFAULT_THICKNESS, 0.05, 1.0, 0.05, 2),
                ConfigOption("animation_duration_ms", "spinner", "Animation Duration (ms):", "2000", 0, 10000, 50, 0,
                             tooltip="How long the ring takes to sweep into place."),
            ]
        }

    @classmethod
    def from_config(cls, config):
        """Builds a config from a panel's string dictionary (INI section)."""
        populate_defaults_from_model(config, cls.get_config_model())
        return cls(
            thickness=_float_option(config, "thickness", cls.DEFAULT_THICKNESS),
            animation_duration=_float_option(config, "animation_duration_ms", 2000.0) / 1000.0,
        )

    def __repr__(self):
        return f"DonutConfig(thickness={self.thickness}, animation_duration={self.animation_duration})"


class RaceConfig:
    """
    @param max_weight weight of a full ring; None derives it from the largest item
    @param thickness ratio of each ring's width to the radius, from 0 (exclusive) to 1
    @param animation_duration seconds
    """
    DEFAULT_THICKNESS = 0.7
    DEFAULT_ANIMATION_DURATION = 2.0

    def __init__(self, max_weight=None, thickness=DEFAULT_THICKNESS, animation_duration=DEFAULT_ANIMATION_DURATION):
        thickness = float(thickness)
        animation_duration = float(animation_duration)
        _validate_thickness(thickness)
        _validate_duration(animation_duration)
        if max_weight is not None:
            max_weight = float(max_weight)
            if not math.isfinite(max_weight):
                raise ChartConfigError(f"max_weight must be finite, got {max_weight!r}")
        self.max_weight = max_weight
        self.thickness = thickness
        self.animation_duration = animation_duration

    @staticmethod
    def get_config_model():
        return {
            "Race": [
                ConfigOption("max_weight", "string", "Full Ring Weight:", "",
                             tooltip="Leave empty to use the largest item value."),
                ConfigOption("thickness", "spinner", "Ring Thickness (ratio):", RaceConfig.DEFAULT_THICKNESS, 0.05, 1.0, 0.05, 2),
                ConfigOption("animation_duration_ms", "spinner", "Animation Duration (ms):", "2000", 0, 10000, 50, 0),
            ]
        }

    @classmethod
    def from_config(cls, config):
        """Builds a config from a panel's string dictionary (INI section)."""
        populate_defaults_from_model(config, cls.get_config_model())
        return cls(
            max_weight=_float_option(config, "max_weight"),
            thickness=_float_option(config, "thickness", cls.DEFAULT_THICKNESS),
            animation_duration=_float_option(config, "animation_duration_ms", 2000.0) / 1000.0,
        )

    def __repr__(self):
        return (f"RaceConfig(max_weight={self.max_weight}, thickness={self.thickness}, "
                f"animation_duration={self.animation_duration})")
