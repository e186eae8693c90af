import math

import pytest

from runbasis.quaternion import Quaternion
from runbasis.vector import Vec3


def _magnitude(q):
    return math.sqrt(q.x * q.x + q.y * q.y + q.z * q.z + q.w * q.w)


def _components(q):
    return (q.x, q.y, q.z, q.w)


def test_default_is_identity_under_multiplication():
    q = Quaternion(0.1, 0.2, 0.3, 0.9)
    assert Quaternion() * q == q
    assert q * Quaternion() == q


def test_scalar_multiplication_scales_each_component():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert q * 2.0 == Quaternion(2.0, 4.0, 6.0, 8.0)
    assert q * 1 == q


def test_multiplication_is_not_commutative():
    a = Quaternion.from_euler_angles(Vec3(1.0, 0.0, 0.0), 0.5)
    b = Quaternion.from_euler_angles(Vec3(0.0, 1.0, 0.0), 0.5)
    assert a * b != b * a


def test_zero_angle_gives_identity():
    q = Quaternion.from_euler_angles(Vec3(0.0, 1.0, 0.0), 0.0)
    assert q == Quaternion()


def test_euler_angles_with_unit_axis_is_unit_quaternion():
    q = Quaternion.from_euler_angles(Vec3(0.0, 0.0, 1.0), 1.2)
    assert _magnitude(q) == pytest.approx(1.0)


def test_composing_half_rotations_equals_full_rotation():
    axis = Vec3(0.0, 0.0, 1.0)
    half = Quaternion.from_euler_angles(axis, 0.4)
    full = Quaternion.from_euler_angles(axis, 0.8)
    assert _components(half * half) == pytest.approx(_components(full))


def test_normalize_yields_unit_magnitude():
    q = Quaternion(1.0, 2.0, 3.0, 4.0).normalize()
    assert _magnitude(q) == pytest.approx(1.0)


def test_normalize_zero_quaternion_raises():
    with pytest.raises(ValueError):
        Quaternion(0.0, 0.0, 0.0, 0.0).normalize()


def test_rotate_multiplies_on_the_left():
    a = Quaternion(0.1, 0.2, 0.3, 0.9)
    b = Quaternion(0.4, -0.1, 0.2, 0.8)
    assert a.rotate(b) == b * a


def test_rotate_mut_changes_in_place_and_returns_self():
    a = Quaternion(0.1, 0.2, 0.3, 0.9)
    b = Quaternion(0.4, -0.1, 0.2, 0.8)
    expected = a.rotate(b)
    result = a.rotate_mut(b)
    assert result is a
    assert a == expected


def test_rotate_does_not_modify_original():
    a = Quaternion(0.1, 0.2, 0.3, 0.9)
    a.rotate(Quaternion(0.4, -0.1, 0.2, 0.8))
    assert a == Quaternion(0.1, 0.2, 0.3, 0.9)