from __future__ import annotations

import math

from pygame.math import Vector2
from pytest import approx

from flock.sim.utils.math2d import (
    ZERO,
    add,
    clamp_value,
    distance,
    divide,
    heading,
    magnitude,
    normalize,
    scale,
    sub,
)


def test_componentwise_arithmetic():
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, -4.0)
    assert add(a, b) == Vector2(4.0, -2.0)
    assert sub(a, b) == Vector2(-2.0, 6.0)
    assert scale(2.5, a) == Vector2(2.5, 5.0)
    assert divide(2.0, b) == Vector2(1.5, -2.0)


def test_helpers_do_not_mutate_arguments():
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, 4.0)
    add(a, b)
    scale(3.0, a)
    normalize(b)
    assert a == Vector2(1.0, 2.0)
    assert b == Vector2(3.0, 4.0)


def test_divide_by_zero_returns_vector_unchanged():
    v = Vector2(3.0, -7.0)
    result = divide(0, v)
    assert result == v
    assert result is not v


def test_magnitude_and_distance():
    assert magnitude(Vector2(3.0, 4.0)) == approx(5.0)
    assert distance(Vector2(1.0, 1.0), Vector2(4.0, 5.0)) == approx(5.0)
    assert distance(Vector2(2.0, 2.0), Vector2(2.0, 2.0)) == 0.0


def test_normalize_of_zero_is_zero():
    result = normalize(Vector2(0.0, 0.0))
    assert result == Vector2(0.0, 0.0)
    assert not math.isnan(result.x) and not math.isnan(result.y)


def test_normalize_is_idempotent_on_unit_vectors():
    for v in (Vector2(3.0, 4.0), Vector2(-0.001, 7.5), Vector2(1e6, -2e6)):
        once = normalize(v)
        twice = normalize(once)
        assert magnitude(once) == approx(1.0)
        assert twice.x == approx(once.x)
        assert twice.y == approx(once.y)


def test_zero_constant_and_heading():
    assert ZERO == Vector2()
    assert heading(Vector2()) == 0.0
    assert heading(Vector2(0.0, 1.0)) == approx(math.pi / 2)


def test_clamp_value():
    assert clamp_value(5.0, 2.0, 2.0) == 2.0
    assert clamp_value(0.5, 1.0, 3.0) == 1.0
    assert clamp_value(2.5, 1.0, 3.0) == 2.5
    assert clamp_value(9.0, 1.0, 3.0) == 3.0
