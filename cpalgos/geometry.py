"""Great-circle and Manhattan distances, and triangle classification."""

from __future__ import annotations

import math
from enum import Enum

EARTH_RADIUS_KM = 6371.0


class TriangleKind(Enum):
    """Kind of triangle formed by three side lengths."""

    NOT_A_TRIANGLE = "not"
    ACUTE = "acutangle"
    RIGHT = "rectangle"
    OBTUSE = "obtusangle"


def deg2rad(deg: float) -> float:
    """Degrees to radians."""
    return deg * math.pi / 180


def rad2deg(rad: float) -> float:
    """Radians to degrees."""
    return rad * 180 / math.pi


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres between two points given in degrees."""
    lat1r, lon1r = deg2rad(lat1), deg2rad(lon1)
    lat2r, lon2r = deg2rad(lat2), deg2rad(lon2)
    u = math.sin((lat2r - lat1r) / 2)
    v = math.sin((lon2r - lon1r) / 2)
    inner = u * u + math.cos(lat1r) * math.cos(lat2r) * v * v
    return 2.0 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(inner, 1.0)))


def manhattan(x1: int, y1: int, x2: int, y2: int) -> int:
    """Manhattan distance between two grid points."""
    return abs(x1 - x2) + abs(y1 - y2)


def classify_triangle(a: float, b: float, c: float) -> TriangleKind:
    """Classify the triangle with side lengths ``a``, ``b`` and ``c``."""
    x, y, z = sorted((a, b, c))
    if x + y <= z:
        return TriangleKind.NOT_A_TRIANGLE
    legs = x * x + y * y
    if legs > z * z:
        return TriangleKind.ACUTE
    if legs == z * z:
        return TriangleKind.RIGHT
    return TriangleKind.OBTUSE