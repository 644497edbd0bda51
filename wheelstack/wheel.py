"""Wheel layers and the rotation step that turns them."""

import logging
import math
import random
from typing import List, Sequence

from wheelstack.errors import ContractViolation
from wheelstack.palette import BLACK, WHITE
from wheelstack.tables import TABLE_SIZE, WheelVariant, generate_table

logger = logging.getLogger(__name__)


def wrap_degrees(angle, period=360.0):
    """Map any real angle into ``[0, period)``."""
    w = math.fmod(angle, period)
    if w < 0.0:
        w += period
    # fmod of a tiny negative value can round up to the period itself
    if w >= period:
        w = 0.0
    return w


class WheelSpec:
    """How to paint and spin one wheel.

    ``speed`` is the base angular speed in degrees per second; the layer
    draws its actual speed once from ``[speed - jitter, speed + jitter]``.
    Use :meth:`speed_range` for the older min/max style.
    """

    def __init__(self, variant=WheelVariant.STRIPE, primary=WHITE, secondary=BLACK,
                 ratio=0.5, division_count=1, speed=100.0, jitter=0.0):
        self.variant = WheelVariant.parse(variant)
        self.primary = primary
        self.secondary = secondary
        self.ratio = float(ratio)
        self.division_count = int(division_count)
        self.speed = float(speed)
        self.jitter = abs(float(jitter))

    @classmethod
    def speed_range(cls, min_speed, max_speed, **kwargs):
        lo, hi = sorted((float(min_speed), float(max_speed)))
        return cls(speed=(lo + hi) * 0.5, jitter=(hi - lo) * 0.5, **kwargs)

    def draw_speed(self, rng):
        if self.jitter == 0.0:
            return self.speed
        return rng.uniform(self.speed - self.jitter, self.speed + self.jitter)

    def build_table(self, rng=None):
        return generate_table(self.variant, self.primary, self.secondary,
                              ratio=self.ratio, division_count=self.division_count, rng=rng)

    def __repr__(self):
        return (f"WheelSpec({self.variant.value}, divisions={self.division_count}, "
                f"ratio={self.ratio:.2f}, speed={self.speed:g}±{self.jitter:g})")


class WheelLayer:
    """One painted wheel: a fixed color table, a fixed speed and a live angle.

    ``angle`` is stored unwrapped and only wrapped when it is read for scoring
    or drawing.
    """

    def __init__(self, table, speed, angle=0.0):
        if len(table) != TABLE_SIZE:
            raise ContractViolation(f"WheelLayer needs a {TABLE_SIZE}-entry table, got {len(table)}")
        self._table = tuple(table)
        self._speed = float(speed)
        self.angle = float(angle)

    @classmethod
    def from_spec(cls, spec: WheelSpec, rng=None, angle=0.0):
        rng = rng or random.Random()
        table = spec.build_table(rng)
        return cls(table, spec.draw_speed(rng), angle=angle)

    @property
    def table(self):
        return self._table

    @property
    def speed(self):
        return self._speed

    @property
    def wrapped_angle(self):
        return wrap_degrees(self.angle)

    def color_at(self, world_degrees):
        """Color showing at a world-frame angle once the wheel is rotated."""
        idx = int(math.floor(wrap_degrees(world_degrees - self.angle)))
        return self._table[idx]

    def __repr__(self):
        return f"WheelLayer(speed={self._speed:.1f}, angle={self.angle:.2f})"


def advance_layers(layers: Sequence[WheelLayer], dt, is_spinning):
    """Turn every layer by ``speed * dt`` degrees; nothing moves when stopped."""
    if not is_spinning:
        return
    for layer in layers:
        layer.angle += layer.speed * dt


def build_layers(specs: Sequence[WheelSpec], rng=None) -> List[WheelLayer]:
    rng = rng or random.Random()
    layers = []
    for i, spec in enumerate(specs):
        layer = WheelLayer.from_spec(spec, rng)
        logger.debug("layer %d: %r -> %.1f deg/s", i, spec, layer.speed)
        layers.append(layer)
    return layers
