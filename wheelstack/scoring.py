"""Scores read off a stack of wheels at their current angles.

Both scorers are read-only. Angles are wrapped when read, so layers may
carry any accumulated angle.
"""

import math

from wheelstack.errors import ContractViolation
from wheelstack.palette import CLEAR, add, clamp
from wheelstack.tables import TABLE_SIZE
from wheelstack.wheel import wrap_degrees

# ---------------- Config ----------------
TOP_MARK_DEGREES = 90.0    # 12 o'clock; local angle 0 points along +x
SCORE_SCALE = 100.0
MATCH_THRESHOLD = 0.99     # per-channel level that counts as full white


def _table_of(layer):
    table = layer.table
    if len(table) != TABLE_SIZE:
        raise ContractViolation(f"Scoring needs {TABLE_SIZE}-entry tables, got {len(table)}")
    return table


def top_mark_index(angle, reference=TOP_MARK_DEGREES):
    """Table index sitting under the reference mark for a wheel at ``angle``."""
    return int(math.floor(wrap_degrees(reference - angle)))


def score_at_top_mark(layers, reference=TOP_MARK_DEGREES):
    """Sum of the grayscale under the top mark over every layer, times 100."""
    total = 0.0
    for layer in layers:
        table = _table_of(layer)
        total += table[top_mark_index(layer.angle, reference)].grayscale
    return total * SCORE_SCALE


def blended_ring(layers):
    """Additive blend of all layers for each world degree, clamped to 1."""
    tables = [(_table_of(layer), layer.angle) for layer in layers]
    ring = []
    for j in range(TABLE_SIZE):
        acc = CLEAR
        for table, angle in tables:
            acc = add(acc, table[int(math.floor(wrap_degrees(j - angle)))])
        ring.append(clamp(acc))
    return ring


def is_match(color, threshold=MATCH_THRESHOLD):
    return all(v >= threshold for v in color)


def score_full_overlap(layers, threshold=MATCH_THRESHOLD):
    """Count of world degrees where the stacked colors add up to white."""
    if not layers:
        return 0
    return sum(1 for color in blended_ring(layers) if is_match(color, threshold))
