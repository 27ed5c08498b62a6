# chart_item.py


class Color:
    """An RGBA color with float channels in the 0..1 range."""
    __slots__ = ("red", "green", "blue", "alpha")

    def __init__(self, red, green, blue, alpha=1.0):
        self.red = float(red)
        self.green = float(green)
        self.blue = float(blue)
        self.alpha = float(alpha)

    def with_alpha(self, alpha):
        """Returns a copy with the alpha channel replaced."""
        return Color(self.red, self.green, self.blue, alpha)

    def to_tuple(self):
        return (self.red, self.green, self.blue, self.alpha)

    def to_string(self):
        return (f"rgba({round(self.red * 255)},{round(self.green * 255)},"
                f"{round(self.blue * 255)},{self.alpha:g})")

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def __repr__(self):
        return f"Color({self.red}, {self.green}, {self.blue}, {self.alpha})"


RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
MAGENTA = Color(1.0, 0.0, 1.0)


class ChartItem:
    """
    A single weighted entry of a chart. `data` is an opaque payload for the
    caller; the renderers only read `value` and `color`.
    """
    __slots__ = ("_data", "_value", "_label", "_desc", "_color")

    def __init__(self, data, value, label, desc="", color=RED):
        self._data = data
        self._value = value
        self._label = label
        self._desc = desc
        self._color = color

    @property
    def data(self):
        return self._data

    @property
    def value(self):
        return self._value

    @property
    def label(self):
        return self._label

    @property
    def desc(self):
        return self._desc

    @property
    def color(self):
        return self._color

    def __repr__(self):
        return f"ChartItem(label={self._label!r}, value={self._value!r}, color={self._color!r})"
