import math

import pytest

from minirt.vector import Vec3, coordinate_system


A = Vec3(1.5, -2.0, 3.25)
B = Vec3(-4.0, 0.5, 2.0)


def test_add_then_subtract_round_trips():
    assert (A + B) - B == A


def test_scalar_multiplication_matches_repeated_addition():
    assert A * 2 == A + A
    assert 2 * A == A * 2


def test_negation_is_multiplication_by_minus_one():
    assert -A == A * -1
    assert A + (-A) == Vec3(0, 0, 0)


def test_division_undoes_multiplication():
    result = (A * 4) / 4
    for got, want in zip(result, A):
        assert got == pytest.approx(want)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3(1.5, -2.0, 3.25).__truediv__(0)


def test_unit_of_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3(0, 0, 0).unit()


def test_dot_with_self_is_length_squared():
    assert A.dot(A) == A.length_squared()
    assert A.dot(B) == B.dot(A)


def test_length_of_three_four_zero():
    assert Vec3(3, 4, 0).length() == 5


def test_cross_of_basis_vectors():
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_cross_is_perpendicular_and_anticommutative():
    c = A.cross(B)
    assert c.dot(A) == pytest.approx(0.0)
    assert c.dot(B) == pytest.approx(0.0)
    assert B.cross(A) == -c


def test_mult_is_componentwise():
    m = A.mult(B)
    assert list(m) == [a * b for a, b in zip(A, B)]


def test_unit_has_length_one_and_same_direction():
    u = A.unit()
    assert u.length() == pytest.approx(1.0)
    assert u.cross(A).length() == pytest.approx(0.0)
    assert u.dot(A) > 0


def test_minimum_is_componentwise():
    m = A.minimum(B)
    assert list(m) == [min(a, b) for a, b in zip(A, B)]
    assert A.minimum(A) == A


@pytest.mark.parametrize(
    "vector, expected",
    [
        (Vec3(0, 1, 0), Vec3(0, 0, 1)),
        (Vec3(0, -1, 0), Vec3(0, 0, -1)),
        (Vec3(1, 0, 0), Vec3(0, 1, 0)),
        (Vec3(0, 0.5, 0), Vec3(0, 1, 0)),
    ],
)
def test_up(vector, expected):
    assert vector.up() == expected


@pytest.mark.parametrize(
    "w",
    [Vec3(0, 0, 1), Vec3(0, 1, 0), Vec3(0, -1, 0), Vec3(1, 2, 3).unit()],
)
def test_coordinate_system_is_orthonormal(w):
    u, v = coordinate_system(w)
    assert u.length() == pytest.approx(1.0)
    assert v.length() == pytest.approx(1.0)
    assert u.dot(v) == pytest.approx(0.0)
    assert u.dot(w) == pytest.approx(0.0)
    assert v.dot(w) == pytest.approx(0.0)


def test_unpacking_yields_components():
    x, y, z = A
    assert (x, y, z) == (A.x, A.y, A.z)
    assert math.isclose(x, 1.5)