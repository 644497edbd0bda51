"""Disc geometry for drawing a color table.

Segment ``i`` is a triangle from the centre out to the rim between
``i`` and ``i + 1`` degrees, counter-clockwise from +x.
"""

import math

from wheelstack.errors import ContractViolation
from wheelstack.tables import TABLE_SIZE


def rim_point(degrees, radius, center=(0.0, 0.0), flip_y=False):
    t = math.radians(degrees)
    x = center[0] + math.cos(t) * radius
    y = math.sin(t) * radius
    # screen space has y pointing down
    return (x, center[1] - y) if flip_y else (x, center[1] + y)


def wedge_points(index, radius, center=(0.0, 0.0), angle=0.0, flip_y=False):
    """Centre plus the two rim points of segment ``index`` turned by ``angle`` degrees."""
    start = index + angle
    return (
        (float(center[0]), float(center[1])),
        rim_point(start, radius, center, flip_y),
        rim_point(start + 1.0, radius, center, flip_y),
    )


def disc_mesh(table, radius=5.0):
    """Unshared triangle mesh: 360 triangles, 1080 vertices, one color per vertex."""
    if len(table) != TABLE_SIZE:
        raise ContractViolation(f"Color array must have {TABLE_SIZE} elements, got {len(table)}")
    vertices = []
    triangles = []
    colors = []
    for i, color in enumerate(table):
        base = i * 3
        center, p0, p1 = wedge_points(i, radius)
        vertices.extend([(center[0], center[1], 0.0), (p0[0], p0[1], 0.0), (p1[0], p1[1], 0.0)])
        triangles.extend([base, base + 1, base + 2])
        colors.extend([color, color, color])
    return vertices, triangles, colors
