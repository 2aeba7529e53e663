"""
Color Value Type for Pixel Studio

A cell either holds a Color or None ("no color"). Colors are immutable
RGBA tuples so grids can be copied row by row without aliasing.

"""

from typing import NamedTuple, Union

from PyQt6.QtGui import QColor


def _clamp_channel(value) -> int:
    return max(0, min(255, int(value)))


class _ColorFields(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255


class Color(_ColorFields):
    """An RGBA pixel with 8-bit channels, each clamped into 0..255"""

    __slots__ = ()

    def __new__(cls, r, g, b, a=255):
        return super().__new__(cls, _clamp_channel(r), _clamp_channel(g), _clamp_channel(b), _clamp_channel(a))

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """
        Parse '#RRGGBB', '#AARRGGBB' or an SVG color name

        Raises:
            ValueError: if Qt cannot make sense of the string
        """
        qcolor = QColor(value)
        if not qcolor.isValid():
            raise ValueError(f"Invalid color: {value!r}")
        return cls.from_qcolor(qcolor)

    @classmethod
    def from_qcolor(cls, qcolor: QColor) -> "Color":
        return cls(qcolor.red(), qcolor.green(), qcolor.blue(), qcolor.alpha())

    def to_qcolor(self) -> QColor:
        return QColor(self.r, self.g, self.b, self.a)

    def to_hex(self) -> str:
        if self.a == 255:
            return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
        return f"#{self.a:02X}{self.r:02X}{self.g:02X}{self.b:02X}"

    @staticmethod
    def lerp(start: "Color", end: "Color", t: float) -> "Color":
        """
        Linear interpolation between two colors

        Args:
            start: Color at t = 0
            end: Color at t = 1
            t: Weight of `end`, clamped into [0, 1]

        Returns:
            Color: channel-wise start + (end - start) * t, rounded half-up
        """
        t = max(0.0, min(1.0, float(t)))

        def mix(a, b):
            return _clamp_channel(a + (b - a) * t + 0.5)

        return Color(mix(start.r, end.r), mix(start.g, end.g),
                     mix(start.b, end.b), mix(start.a, end.a))


ColorLike = Union[Color, str, QColor]


def to_color(value: ColorLike) -> Color:
    """Coerce a hex string, QColor or Color into a Color"""
    if isinstance(value, Color):
        return value
    if isinstance(value, QColor):
        return Color.from_qcolor(value)
    if isinstance(value, str):
        return Color.from_hex(value)
    if isinstance(value, tuple) and len(value) in (3, 4):
        return Color(*value)
    raise TypeError(f"Cannot convert {type(value).__name__} to Color")
