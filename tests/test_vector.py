import math

import numpy as np
import pytest

from cylprox.geometry import InvalidGeometryError, Point, Vector, approx_eq
from cylprox.config import APPROX_EQ_EPS


sample_pt = Point(1.0, 2.0, 3.0)
sample_vec = Vector(4.0, 5.0, 6.0)


def test_vec_access():
    assert sample_vec.x == 4.0
    assert sample_vec.y == 5.0
    assert sample_vec.z == 6.0
    assert tuple(sample_vec) == (4.0, 5.0, 6.0)


def test_vec_from_point():
    vec = Vector.from_point(sample_pt)
    assert (vec.x, vec.y, vec.z) == (1.0, 2.0, 3.0)


def test_add_and_scale_return_new_values():
    degenerate = Vector.from_point(Point.origin())
    assert math.isclose(degenerate.length(), 0.0, abs_tol=APPROX_EQ_EPS)

    offset = degenerate + sample_vec
    doubled = offset * 2.0
    assert doubled == Vector(8.0, 10.0, 12.0)
    assert offset == sample_vec
    assert 2.0 * offset == doubled
    assert np.float64(2.0) * offset == doubled


def test_sub_and_neg():
    assert sample_vec - Vector(1, 1, 1) == Vector(3, 4, 5)
    assert -sample_vec == Vector(-4, -5, -6)


def test_private_scale_is_in_place_and_chains():
    v = Vector(1, 2, 3)
    assert v._scale(2)._scale(0.5) is v
    assert v == Vector(1, 2, 3)


def test_length():
    assert Vector(3, 4, 0).length() == 5.0
    assert Vector(-3, 0, -4).length() == 5.0


def test_dot_product_is_length_squared():
    length = sample_vec.length()
    assert approx_eq(length * length, sample_vec.dot(sample_vec))
    assert Vector(1, 0, 0).dot(Vector(0, 1, 0)) == 0.0


def test_normalized():
    unit = Vector(0, 3, 4).normalized()
    assert approx_eq(unit.length(), 1.0)
    assert unit.approx_eq(Vector(0, 0.6, 0.8))


def test_normalized_degenerate_raises():
    with pytest.raises(InvalidGeometryError):
        Vector(0, 0, 1e-7).normalized()


def test_rotated_about_world_axes():
    assert Vector(1, 0, 0).rotated(0, 0, 90, deg=True).approx_eq(Vector(0, 1, 0))
    assert Vector(0, 1, 0).rotated(np.pi / 2, 0, 0).approx_eq(Vector(0, 0, 1))
    # x first, then z
    assert Vector(0, 1, 0).rotated(90, 0, 90, deg=True).approx_eq(Vector(0, 0, 1))
    assert approx_eq(sample_vec.rotated(0.3, -1.1, 2.0).length(), sample_vec.length())


def test_approx_eq_checks_every_axis():
    assert Vector(1, 2, 3).approx_eq(Vector(1, 2, 3 + APPROX_EQ_EPS / 2))
    assert not Vector(1, 2, 3).approx_eq(Vector(1, 2, 3 + APPROX_EQ_EPS * 2))
    assert not Vector(1, 2, 3).approx_eq(Vector(1 + APPROX_EQ_EPS * 2, 2, 3))


def test_approx_eq_honors_eps():
    assert Vector(1, 2, 3).approx_eq(Vector(1.01, 2, 3), eps=0.1)
    assert not Vector(1, 2, 3).approx_eq(Vector(1.01, 2, 3))


def test_scalar_approx_eq():
    assert approx_eq(1.0, 1.0 + 1e-6)
    assert not approx_eq(1.0, 1.0 + 1e-5)
    assert approx_eq(1.0, 1.5, eps=1)


def test_as_array_is_a_copy():
    v = Vector(1, 2, 3)
    arr = v.as_array()
    arr[0] = 100
    assert v.x == 1.0


def test_repr():
    assert repr(Vector(1, 0.5, -2)) == "Vector([1,0.5,-2])"
