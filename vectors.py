from __future__ import annotations

import math
from typing import NamedTuple


class Vector2(NamedTuple):
    x: float
    y: float

    def __str__(self) -> str:
        return f"({_num(self.x)}, {_num(self.y)})"


def _num(v: float) -> str:
    # integer operands print without a trailing ".0"
    if float(v).is_integer():
        return str(int(v))
    return str(v)


ZERO = Vector2(0.0, 0.0)


def magnitude(v: Vector2) -> float:
    return math.hypot(v[0], v[1])


def subtract(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a[0] - b[0], a[1] - b[1])


def scale(k: float, v: Vector2) -> Vector2:
    return Vector2(k * v[0], k * v[1])


def dot(a: Vector2, b: Vector2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def distance(a: Vector2, b: Vector2) -> float:
    """Length of B - A."""
    return magnitude(subtract(b, a))


def angle_degrees(a: Vector2, b: Vector2) -> float:
    """
    Angle between a and b in degrees, in [0, 180].

    Returns NaN when either vector has zero length; callers must not present
    that as a well-posed problem.
    """
    m = magnitude(a) * magnitude(b)
    if m == 0:
        return math.nan
    cos_theta = max(-1.0, min(1.0, dot(a, b) / m))
    return math.degrees(math.acos(cos_theta))


def projection(a: Vector2, b: Vector2) -> Vector2:
    """proj_b(a); the zero vector when b has zero length."""
    denom = dot(b, b)
    if denom == 0:
        return ZERO
    return scale(dot(a, b) / denom, b)


def unit(v: Vector2) -> Vector2:
    m = magnitude(v)
    if m == 0:
        return ZERO
    return Vector2(v[0] / m, v[1] / m)
