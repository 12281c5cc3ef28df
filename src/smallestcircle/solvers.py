"""Boundary-expansion steps of the randomized incremental construction."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .geometry import (
    Circle,
    cross_product,
    in_circle_mask,
    is_in_circle,
    make_circumcircle,
    make_diameter,
)


def make_circle_one_point(points: np.ndarray, p: Sequence[float]) -> Circle:
    """Smallest circle enclosing ``points`` with ``p`` on its boundary."""
    c: Circle | None = Circle(p[0], p[1], 0.0)
    for i, q in enumerate(points.tolist()):
        if is_in_circle(c, q):
            continue
        if c.r == 0:
            c = make_diameter(p, q)
        else:
            c = make_circle_two_points(points[: i + 1], p, q)
    return c


def make_circle_two_points(points: np.ndarray, p: Sequence[float], q: Sequence[float]) -> Circle | None:
    """Smallest circle enclosing ``points`` with both ``p`` and ``q`` on its boundary.

    When the diameter circle of (p, q) is not enough, the third boundary point
    is searched on each side of the directed line p -> q. On each side the
    circumcircle whose centre lies furthest from the line wins; between the
    two sides the left one is kept unless the right one is strictly smaller.
    """
    diameter = make_diameter(p, q)
    if bool(np.all(in_circle_mask(diameter, points))):
        return diameter

    px, py = p[0], p[1]
    qx, qy = q[0], q[1]
    left: Circle | None = None
    right: Circle | None = None
    for r in points.tolist():
        cross = cross_product(px, py, qx, qy, r[0], r[1])
        c = make_circumcircle(p, q, r)
        if c is None:
            continue
        c_cross = cross_product(px, py, qx, qy, c.x, c.y)
        if cross > 0 and (left is None or c_cross > cross_product(px, py, qx, qy, left.x, left.y)):
            left = c
        elif cross < 0 and (right is None or c_cross < cross_product(px, py, qx, qy, right.x, right.y)):
            right = c
    return left if right is None or (left is not None and left.r <= right.r) else right
