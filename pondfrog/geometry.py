"""2D vector math helpers operating on Vector2."""
from __future__ import annotations

import math
from typing import NamedTuple


class Vector2(NamedTuple):
    x: float
    y: float


def add(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x + b.x, a.y + b.y)


def sub(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x - b.x, a.y - b.y)


def scale(v: Vector2, s: float) -> Vector2:
    return Vector2(v.x * s, v.y * s)


def magnitude(v: Vector2) -> float:
    return math.hypot(v.x, v.y)


def distance(a: Vector2, b: Vector2) -> float:
    return magnitude(sub(b, a))


def polar(angle: float, magnitude: float) -> Vector2:
    """Vector of length ``magnitude`` pointing along ``angle`` (radians)."""
    return Vector2(math.cos(angle) * magnitude, math.sin(angle) * magnitude)


def angle_to(target: Vector2, origin: Vector2) -> float:
    """Angle of the vector origin→target, in (-π, π].

    A zero-length vector resolves to 0.
    """
    dx = target.x - origin.x
    dy = target.y - origin.y
    if dx == 0.0 and dy == 0.0:
        return 0.0
    angle = math.atan2(dy, dx)
    if angle == -math.pi:
        return math.pi
    return angle
