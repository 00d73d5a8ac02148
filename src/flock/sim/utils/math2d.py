from __future__ import annotations

import math

from pygame.math import Vector2

ZERO = Vector2()


def add(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x + b.x, a.y + b.y)


def sub(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x - b.x, a.y - b.y)


def scale(n: float, v: Vector2) -> Vector2:
    return Vector2(v.x * n, v.y * n)


def divide(n: float, v: Vector2) -> Vector2:
    # Division by zero leaves the vector as it was.
    if n == 0:
        return Vector2(v)
    return scale(1.0 / n, v)


def magnitude(v: Vector2) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y)


def normalize(v: Vector2) -> Vector2:
    return divide(magnitude(v), v)


def distance(a: Vector2, b: Vector2) -> float:
    return magnitude(sub(a, b))


def heading(v: Vector2) -> float:
    if v.x * v.x + v.y * v.y < 1e-12:
        return 0.0
    return math.atan2(v.y, v.x)


def clamp_value(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))
