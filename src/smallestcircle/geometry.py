from __future__ import annotations

import math
from typing import NamedTuple, Sequence

import numpy as np

EPSILON = 1e-12


class Point(NamedTuple):
    x: float
    y: float


class Circle(NamedTuple):
    x: float
    y: float
    r: float

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)

    def contains(self, p: Sequence[float]) -> bool:
        return is_in_circle(self, p)


def as_points(points: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim == 1 and arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"points must be an (n, 2) array, got shape {arr.shape}")
    return arr


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.sqrt((ax - bx) * (ax - bx) + (ay - by) * (ay - by))


def cross_product(x0: float, y0: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """Twice the signed area of the triangle (p0, p1, p2)."""
    return (x1 - x0) * (y2 - y0) - (y1 - y0) * (x2 - x0)


def is_in_circle(c: Circle | None, p: Sequence[float]) -> bool:
    return c is not None and distance(p[0], p[1], c.x, c.y) < c.r + EPSILON


def in_circle_mask(c: Circle | None, points: np.ndarray) -> np.ndarray:
    if c is None:
        return np.zeros(points.shape[0], dtype=bool)
    dx = points[:, 0] - c.x
    dy = points[:, 1] - c.y
    return np.sqrt(dx * dx + dy * dy) < c.r + EPSILON


def make_diameter(p0: Sequence[float], p1: Sequence[float]) -> Circle:
    return Circle(
        (p0[0] + p1[0]) / 2,
        (p0[1] + p1[1]) / 2,
        distance(p0[0], p0[1], p1[0], p1[1]) / 2,
    )


def make_circumcircle(p0: Sequence[float], p1: Sequence[float], p2: Sequence[float]) -> Circle | None:
    ax, ay = p0[0], p0[1]
    bx, by = p1[0], p1[1]
    cx, cy = p2[0], p2[1]
    d = (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by)) * 2
    if d == 0:
        return None  # collinear or coincident
    a2 = ax * ax + ay * ay
    b2 = bx * bx + by * by
    c2 = cx * cx + cy * cy
    x = (a2 * (by - cy) + b2 * (cy - ay) + c2 * (ay - by)) / d
    y = (a2 * (cx - bx) + b2 * (ax - cx) + c2 * (bx - ax)) / d
    return Circle(x, y, distance(x, y, ax, ay))
