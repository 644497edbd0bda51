"""Color tables: one color per degree of a wheel's local (unrotated) frame.

Index ``j`` paints the arc ``[j, j+1)`` degrees. Every generator returns a
list of exactly ``TABLE_SIZE`` colors, whatever parameters it is given; bad
parameters are corrected and logged instead of raised.
"""

import enum
import logging
import math
import random

from wheelstack.errors import ContractViolation
from wheelstack.palette import BLACK, Color, lerp

logger = logging.getLogger(__name__)

# ---------------- Config ----------------
TABLE_SIZE = 360
HIT_CHANCE = 5                 # random tables: one bucket in HIT_CHANCE is lit
HIT_BRIGHTNESS = (0.5, 1.0)    # brightness range of a lit bucket


class WheelVariant(enum.Enum):
    RANDOM = "random"
    PIE_CHART = "pie_chart"
    GRADIENT_STRIPE = "gradient_stripe"
    STRIPE = "stripe"

    @classmethod
    def parse(cls, name):
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "_").replace(" ", "_")
        # accept the CamelCase names used in older data files ("PieChart")
        key = {"piechart": "pie_chart", "gradientstripe": "gradient_stripe"}.get(key, key)
        return cls(key)


def _check_size(size):
    if size != TABLE_SIZE:
        raise ContractViolation(f"Color tables are {TABLE_SIZE} entries long, got a request for {size}")


def _clamp01(x):
    return max(0.0, min(1.0, float(x)))


def _division_count(division_count, strategy):
    divisions = int(division_count)
    if divisions <= 0:
        logger.warning("%s: division count must be at least 1 (got %s); using 1",
                       strategy, division_count)
        return 1
    return divisions


def random_table(rng=None, size=TABLE_SIZE):
    """Mostly black wheel with scattered gray-to-white hits."""
    _check_size(size)
    rng = rng or random.Random()
    colors = []
    for _ in range(size):
        if rng.randrange(HIT_CHANCE) == 0:
            v = rng.uniform(*HIT_BRIGHTNESS)
            colors.append(Color(v, v, v, 1.0))
        else:
            colors.append(BLACK)
    return colors


def stripe_table(primary, secondary, division_count, ratio=0.5, size=TABLE_SIZE):
    """Repeat ``division_count`` hard-edged bands of primary then secondary.

    Each band is ``360 // division_count`` buckets wide and opens with
    ``round(width * ratio)`` primary buckets. Buckets left over after the
    last band are painted with the secondary color.
    """
    _check_size(size)
    divisions = _division_count(division_count, "stripe")
    segment = max(1, size // divisions)
    lead = int(round(segment * _clamp01(ratio)))
    colors = []
    for j in range(size):
        if j // segment >= divisions:
            colors.append(secondary)
        elif j % segment < lead:
            colors.append(primary)
        else:
            colors.append(secondary)
    return colors


def pie_chart_table(primary, secondary, ratio, size=TABLE_SIZE):
    """One primary arc from 0 degrees, the rest of the wheel secondary."""
    _check_size(size)
    cut = int(round(size * _clamp01(ratio)))
    return [primary] * cut + [secondary] * (size - cut)


def gradient_stripe_table(primary, secondary, division_count, size=TABLE_SIZE):
    """Smooth sinusoidal blend with ``division_count`` primary peaks."""
    _check_size(size)
    divisions = _division_count(division_count, "gradient_stripe")
    step = divisions * 2.0 * math.pi / size
    colors = []
    for j in range(size):
        t = (math.sin(j * step) + 1.0) / 2.0
        colors.append(lerp(secondary, primary, t))
    return colors


def generate_table(variant, primary, secondary, ratio=0.5, division_count=1, rng=None, size=TABLE_SIZE):
    """Paint a full table for ``variant``; the single dispatch point."""
    variant = WheelVariant.parse(variant)
    if variant is WheelVariant.RANDOM:
        return random_table(rng, size)
    if variant is WheelVariant.PIE_CHART:
        return pie_chart_table(primary, secondary, ratio, size)
    if variant is WheelVariant.GRADIENT_STRIPE:
        return gradient_stripe_table(primary, secondary, division_count, size)
    return stripe_table(primary, secondary, division_count, ratio, size)
