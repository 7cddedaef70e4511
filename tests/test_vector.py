import math

import pytest

from raykit.vector import (
    Vector2f,
    Vector3f,
    cross_product,
    dot_product,
    elementwise_max,
    elementwise_min,
    lerp,
    normalize,
)


def test_single_value_fills_all_components():
    assert Vector3f(2.5) == Vector3f(2.5, 2.5, 2.5)
    assert Vector2f(4) == Vector2f(4, 4)


def test_default_is_zero():
    assert Vector3f() == Vector3f(0, 0, 0)


def test_two_values_rejected():
    with pytest.raises(TypeError):
        Vector3f(1, 2)


def test_add_sub_round_trip():
    a = Vector3f(1.5, -2.0, 3.25)
    b = Vector3f(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_negation_and_subtraction_agree():
    a = Vector3f(1, 2, 3)
    b = Vector3f(-4, 5, 7)
    assert a - b == a + (-b)


def test_scalar_multiplication_commutes():
    a = Vector3f(1, -2, 3)
    assert a * 3 == 3 * a
    assert (a * 4) / 4 == a


def test_componentwise_product():
    a = Vector3f(2, 3, 4)
    b = Vector3f(5, 6, 7)
    prod = a * b
    assert list(prod) == [a.x * b.x, a.y * b.y, a.z * b.z]


def test_indexing():
    v = Vector3f(7, 8, 9)
    assert [v[0], v[1], v[2]] == [7, 8, 9]
    v[1] = 42
    assert v.y == 42


def test_norm_of_normalized_is_one():
    v = Vector3f(3, -7, 11)
    assert math.isclose(v.normalized().norm(), 1.0)


def test_normalized_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3f().normalized()


def test_normalize_zero_is_unchanged():
    assert normalize(Vector3f()) == Vector3f()


def test_normalize_matches_normalized():
    v = Vector3f(2, 5, -1)
    assert list(normalize(v)) == pytest.approx(list(v.normalized()), abs=1e-9)


def test_cross_product_is_orthogonal():
    a = Vector3f(1, 2, 3)
    b = Vector3f(-2, 0.5, 4)
    c = cross_product(a, b)
    assert math.isclose(dot_product(c, a), 0.0, abs_tol=1e-9)
    assert math.isclose(dot_product(c, b), 0.0, abs_tol=1e-9)


def test_cross_product_of_axes():
    assert cross_product(Vector3f(1, 0, 0), Vector3f(0, 1, 0)) == Vector3f(0, 0, 1)


def test_cross_product_anticommutes():
    a = Vector3f(1, 2, 3)
    b = Vector3f(4, -5, 6)
    assert cross_product(a, b) == -cross_product(b, a)


def test_dot_product_with_self_is_norm_squared():
    v = Vector3f(1.5, -2.5, 4)
    assert math.isclose(dot_product(v, v), v.norm() ** 2)


def test_lerp_endpoints():
    a = Vector3f(1, 2, 3)
    b = Vector3f(-4, 8, 0.5)
    assert lerp(a, b, 0) == a
    assert lerp(a, b, 1) == b


def test_elementwise_min_max():
    a = Vector3f(1, 9, -3)
    b = Vector3f(4, -2, -3)
    lo = elementwise_min(a, b)
    hi = elementwise_max(a, b)
    for i in range(3):
        assert lo[i] == min(a[i], b[i])
        assert hi[i] == max(a[i], b[i])
        assert lo[i] <= hi[i]


def test_str_format():
    assert str(Vector3f(1, 2, 3)) == "1, 2, 3"


def test_vector2f_arithmetic():
    a = Vector2f(1, 2)
    b = Vector2f(3, -4)
    assert a + b == b + a
    assert a * 2 == a + a
    assert 2 * a == a * 2