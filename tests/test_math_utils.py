import math

import pytest

from cattoy.math_utils import Vector2, rotate_point


def test_limit_keeps_direction():
    v = Vector2(300, 400)
    assert v.limit_inplace(50) is v
    assert v.length() == pytest.approx(50)
    assert (v.x, v.y) == pytest.approx((30, 40))


def test_limit_leaves_slow_vectors():
    v = Vector2(3, 4)
    v.limit_inplace(10)
    assert v == Vector2(3, 4)


def test_zero_vector_normalizes_to_zero():
    assert Vector2().normalize() == Vector2(0, 0)
    assert Vector2().limit_inplace(1) == Vector2(0, 0)


def test_heading_and_rotation_agree():
    v = Vector2(0, 2)
    assert v.heading() == pytest.approx(math.pi / 2)
    assert rotate_point(1, 0, v.heading()) == pytest.approx((0, 1))


def test_vectors_are_unhashable():
    with pytest.raises(TypeError):
        hash(Vector2(1, 1))
