"""3x3 homogeneous matrices for 2D transforms, using row vectors."""

from __future__ import annotations

import math

from novaplay.structures import Matrix3x3, Vector2


def multiply(m1: Matrix3x3, m2: Matrix3x3) -> Matrix3x3:
    """Return the product m1 * m2."""
    columns = list(zip(*m2.m))
    return Matrix3x3(
        [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in m1.m]
    )


def inverse(m: Matrix3x3) -> Matrix3x3:
    """Return the inverse of ``m``; raise ValueError if it is singular."""
    (a, b, c), (d, e, f), (g, h, i) = m.m
    det = a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)
    if det == 0:
        raise ValueError("matrix is singular and has no inverse")
    return Matrix3x3(
        [
            [(e * i - f * h) / det, -(b * i - c * h) / det, (b * f - c * e) / det],
            [-(d * i - f * g) / det, (a * i - c * g) / det, -(a * f - c * d) / det],
            [(d * h - e * g) / det, -(a * h - b * g) / det, (a * e - b * d) / det],
        ]
    )


def make_rotate(theta: float) -> Matrix3x3:
    """Return a rotation matrix for ``theta`` radians."""
    c = math.cos(theta)
    s = math.sin(theta)
    return Matrix3x3([[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]])


def make_scale(scale: Vector2) -> Matrix3x3:
    """Return a scaling matrix."""
    return Matrix3x3([[scale.x, 0.0, 0.0], [0.0, scale.y, 0.0], [0.0, 0.0, 1.0]])


def make_translate(translate: Vector2) -> Matrix3x3:
    """Return a translation matrix."""
    return Matrix3x3(
        [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [translate.x, translate.y, 1.0]]
    )


def transform(vector: Vector2, matrix: Matrix3x3) -> Vector2:
    """Apply ``matrix`` to the point ``vector`` and divide by the homogeneous w."""
    (m00, m01, m02), (m10, m11, m12), (m20, m21, m22) = matrix.m
    x = vector.x * m00 + vector.y * m10 + m20
    y = vector.x * m01 + vector.y * m11 + m21
    w = vector.x * m02 + vector.y * m12 + m22
    return Vector2(x / w, y / w)


def make_affine(scale: Vector2, rotate: float, translate: Vector2) -> Matrix3x3:
    """Return scale, then rotation, then translation combined into one matrix."""
    return multiply(
        multiply(make_scale(scale), make_rotate(rotate)), make_translate(translate)
    )


def make_orthographic(left: float, top: float, right: float, bottom: float) -> Matrix3x3:
    """Return a matrix mapping the given box onto normalised device coordinates."""
    return Matrix3x3(
        [
            [2.0 / (right - left), 0.0, 0.0],
            [0.0, 2.0 / (top - bottom), 0.0],
            [(left + right) / (left - right), (top + bottom) / (bottom - top), 1.0],
        ]
    )


def make_viewport(left: float, top: float, right: float, bottom: float) -> Matrix3x3:
    """Return a matrix mapping normalised device coordinates onto a screen box."""
    return Matrix3x3(
        [
            [(right - left) / 2.0, 0.0, 0.0],
            [0.0, -(bottom - top) / 2.0, 0.0],
            [left + (right - left) / 2.0, top + (bottom - top) / 2.0, 1.0],
        ]
    )