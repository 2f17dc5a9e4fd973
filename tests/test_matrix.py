import math

import pytest

from novaplay import matrix as mx
from novaplay.structures import Matrix3x3, Vector2


def _assert_matrix_close(a, b):
    for row_a, row_b in zip(a.m, b.m):
        assert row_a == pytest.approx(row_b, abs=1e-9)


def _assert_vec_close(a, b):
    assert a.x == pytest.approx(b.x, abs=1e-9)
    assert a.y == pytest.approx(b.y, abs=1e-9)


def _sample():
    return mx.make_affine(Vector2(2.0, 0.5), 0.7, Vector2(30.0, -12.0))


def test_multiply_by_identity():
    m = _sample()
    _assert_matrix_close(mx.multiply(m, Matrix3x3.identity()), m)
    _assert_matrix_close(mx.multiply(Matrix3x3.identity(), m), m)


def test_multiply_is_associative():
    a = mx.make_rotate(0.3)
    b = mx.make_scale(Vector2(2.0, 3.0))
    c = mx.make_translate(Vector2(5.0, -1.0))
    _assert_matrix_close(
        mx.multiply(mx.multiply(a, b), c), mx.multiply(a, mx.multiply(b, c))
    )


def test_inverse_roundtrip():
    m = _sample()
    _assert_matrix_close(mx.multiply(m, mx.inverse(m)), Matrix3x3.identity())
    _assert_matrix_close(mx.multiply(mx.inverse(m), m), Matrix3x3.identity())


def test_inverse_of_singular_raises():
    with pytest.raises(ValueError):
        mx.inverse(Matrix3x3())


def test_translate_moves_point():
    p = mx.transform(Vector2(1.0, 2.0), mx.make_translate(Vector2(10.0, -5.0)))
    _assert_vec_close(p, Vector2(1.0 + 10.0, 2.0 - 5.0))


def test_scale_multiplies_components():
    p = mx.transform(Vector2(3.0, 4.0), mx.make_scale(Vector2(2.0, 0.5)))
    _assert_vec_close(p, Vector2(3.0 * 2.0, 4.0 * 0.5))


def test_rotate_preserves_length():
    v = Vector2(3.0, 4.0)
    r = mx.transform(v, mx.make_rotate(1.234))
    assert math.hypot(r.x, r.y) == pytest.approx(math.hypot(v.x, v.y))


def test_rotate_then_inverse_restores_point():
    v = Vector2(-2.0, 9.0)
    rot = mx.make_rotate(0.9)
    _assert_vec_close(mx.transform(mx.transform(v, rot), mx.inverse(rot)), v)


def test_affine_equals_stepwise_transform():
    scale, angle, move = Vector2(2.0, 3.0), 0.4, Vector2(7.0, -2.0)
    v = Vector2(1.5, -0.5)
    stepwise = mx.transform(
        mx.transform(mx.transform(v, mx.make_scale(scale)), mx.make_rotate(angle)),
        mx.make_translate(move),
    )
    _assert_vec_close(mx.transform(v, mx.make_affine(scale, angle, move)), stepwise)


def test_affine_origin_lands_on_translation():
    move = Vector2(30.0, -12.0)
    _assert_vec_close(mx.transform(Vector2(0.0, 0.0), _sample()), move)


def test_orthographic_maps_corners_to_unit_square():
    ortho = mx.make_orthographic(-650.0, 350.0, 650.0, -350.0)
    _assert_vec_close(mx.transform(Vector2(-650.0, 350.0), ortho), Vector2(-1.0, 1.0))
    _assert_vec_close(mx.transform(Vector2(650.0, -350.0), ortho), Vector2(1.0, -1.0))
    _assert_vec_close(mx.transform(Vector2(0.0, 0.0), ortho), Vector2(0.0, 0.0))


def test_viewport_maps_unit_square_to_screen():
    view = mx.make_viewport(0.0, 0.0, 1300.0, 700.0)
    _assert_vec_close(mx.transform(Vector2(-1.0, 1.0), view), Vector2(0.0, 0.0))
    _assert_vec_close(mx.transform(Vector2(1.0, -1.0), view), Vector2(1300.0, 700.0))


def test_orthographic_then_viewport_flips_y_axis():
    combined = mx.multiply(
        mx.make_orthographic(-650.0, 350.0, 650.0, -350.0),
        mx.make_viewport(0.0, 0.0, 1300.0, 700.0),
    )
    upper = mx.transform(Vector2(0.0, 100.0), combined)
    lower = mx.transform(Vector2(0.0, -100.0), combined)
    assert upper.y < lower.y
    assert upper.x == pytest.approx(lower.x)