"""RGBA colors as plain tuples, plus the few blend helpers the wheels need.

Channels are floats. Authored colors sit in 0..1, sums of stacked layers may
go above 1 until they are clamped.
"""

import colorsys
from typing import NamedTuple

from wheelstack.errors import ConfigError


class Color(NamedTuple):
    r: float
    g: float
    b: float
    a: float = 1.0

    @property
    def grayscale(self):
        return (self.r + self.g + self.b) / 3.0


# ---------------- Named colors ----------------
WHITE = Color(1.0, 1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)
GRAY = Color(0.5, 0.5, 0.5, 1.0)
RED = Color(1.0, 0.0, 0.0, 1.0)
GREEN = Color(0.0, 1.0, 0.0, 1.0)
BLUE = Color(0.0, 0.0, 1.0, 1.0)
CLEAR = Color(0.0, 0.0, 0.0, 0.0)


def add(c1, c2):
    return Color(c1[0] + c2[0], c1[1] + c2[1], c1[2] + c2[2], c1[3] + c2[3])


def clamp(c, hi=1.0):
    return Color(*(min(hi, v) for v in c))


def lerp(b, a, t):
    """Blend from ``b`` (t=0) to ``a`` (t=1), channel by channel."""
    u = 1.0 - t
    return Color(b[0] * u + a[0] * t,
                 b[1] * u + a[1] * t,
                 b[2] * u + a[2] * t,
                 b[3] * u + a[3] * t)


def to_rgb255(c):
    clamp255 = lambda v: max(0, min(255, int(round(v * 255))))
    return (clamp255(c[0]), clamp255(c[1]), clamp255(c[2]))


def hue_color(hue, saturation=0.75, value=1.0):
    r, g, b = colorsys.hsv_to_rgb(hue % 1.0, saturation, value)
    return Color(r, g, b, 1.0)


def parse_color(value) -> Color:
    """Read a color from config data: ``[r, g, b(, a)]`` or ``"#rrggbb(aa)"``."""
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        text = value.strip().lstrip("#")
        if len(text) not in (6, 8):
            raise ConfigError(f"Bad hex color: {value!r}")
        try:
            parts = [int(text[i:i + 2], 16) / 255.0 for i in range(0, len(text), 2)]
        except ValueError:
            raise ConfigError(f"Bad hex color: {value!r}") from None
        return Color(*parts)
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        try:
            return Color(*(float(v) for v in value))
        except (TypeError, ValueError):
            raise ConfigError(f"Bad color channels: {value!r}") from None
    raise ConfigError(f"Unsupported color value: {value!r}")
