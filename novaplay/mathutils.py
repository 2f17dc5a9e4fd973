"""Scalar and vector helpers: combinatorics, vector algebra, splines and overlap tests."""

from __future__ import annotations

import math

from novaplay.structures import Vector2


def factorial(n: int) -> int:
    """Return n!, treating every n below 2 as 1."""
    return math.factorial(n) if n >= 2 else 1


def power(t: float, n: int) -> float:
    """Return t raised to the integer power n, or 1.0 when n is below 1."""
    return t**n if n >= 1 else 1.0


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient n choose k."""
    return factorial(n) // (factorial(k) * factorial(n - k))


def bernstein(n: int, i: int, t: float) -> float:
    """Return the Bernstein basis polynomial b_{i,n}(t)."""
    return float(binomial(n, i)) * power(t, i) * power(1 - t, n - i)


def distance(a: Vector2, b: Vector2) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def length(vec: Vector2) -> float:
    """Return the length of a vector."""
    return math.hypot(vec.x, vec.y)


def normalize(vec: Vector2) -> Vector2:
    """Return the unit vector of ``vec``, or the zero vector if it has no length."""
    size = length(vec)
    if size == 0:
        return Vector2(0.0, 0.0)
    return Vector2(vec.x / size, vec.y / size)


def dot(a: Vector2, b: Vector2) -> float:
    """Return the dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def cross(a: Vector2, b: Vector2) -> float:
    """Return the z component of the cross product of two vectors."""
    return a.x * b.y - a.y * b.x


def rotate(v: Vector2, angle: float) -> Vector2:
    """Rotate ``v`` counter-clockwise by ``angle`` radians."""
    c = math.cos(angle)
    s = math.sin(angle)
    return Vector2(c * v.x - s * v.y, s * v.x + c * v.y)


def _catmull_axis(p0: float, p1: float, p2: float, p3: float, t: float) -> float:
    t2 = t * t
    t3 = t2 * t
    return 0.5 * (
        2.0 * p1
        + (-p0 + p2) * t
        + (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3) * t2
        + (-p0 + 3.0 * p1 - 3.0 * p2 + p3) * t3
    )


def catmull_rom(p0: Vector2, p1: Vector2, p2: Vector2, p3: Vector2, t: float) -> Vector2:
    """Evaluate the Catmull-Rom spline through p1..p2 at parameter t."""
    return Vector2(
        _catmull_axis(p0.x, p1.x, p2.x, p3.x, t),
        _catmull_axis(p0.y, p1.y, p2.y, p3.y, t),
    )


def check_ground(
    tlx1: float,
    tly1: float,
    brx1: float,
    bry1: float,
    tlx2: float,
    tly2: float,
    brx2: float,
    bry2: float,
) -> bool:
    """Return whether two boxes overlap in world coordinates (y grows upwards)."""
    return tlx1 < brx2 and brx1 > tlx2 and tly1 > bry2 and bry1 < tly2