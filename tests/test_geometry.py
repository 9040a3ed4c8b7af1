import math

import pytest

from astroship.geometry import Quat, Transform, Vec3, Y_AXIS, Z_AXIS


def test_vector_arithmetic_round_trip():
    a = Vec3(1.5, -2.0, 3.0)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert -(-a) == a
    assert a * 1.0 == a


def test_length_of_axis_aligned_vector():
    assert Vec3(0.0, 0.0, -7.0).length() == pytest.approx(7.0)


def test_length_pythagorean():
    assert Vec3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


def test_distance_is_symmetric_and_zero_to_self():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 9.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(a) == 0.0


def test_identity_quat_leaves_vector_unchanged():
    v = Vec3(1.0, -2.0, 3.0)
    assert tuple(Quat().rotate_vector(v)) == pytest.approx(tuple(v))


def test_rotation_preserves_length():
    q = Quat.from_axis_angle(Vec3(1.0, 1.0, 0.5), 1.234)
    v = Vec3(3.0, -1.0, 2.0)
    assert q.rotate_vector(v).length() == pytest.approx(v.length())


def test_compose_with_conjugate_is_identity():
    q = Quat.from_axis_angle(Vec3(0.3, 0.9, -0.2), 0.77)
    v = Vec3(1.0, 2.0, 3.0)
    assert tuple(q.compose(q.conjugate).rotate_vector(v)) == pytest.approx(tuple(v))


def test_compose_applies_right_operand_first():
    a = Quat.from_axis_angle(Y_AXIS, 0.4)
    b = Quat.from_axis_angle(Z_AXIS, 1.1)
    v = Vec3(1.0, 0.0, 0.0)
    expected = a.rotate_vector(b.rotate_vector(v))
    assert tuple(a.compose(b).rotate_vector(v)) == pytest.approx(tuple(expected))


def test_rotation_about_axis_keeps_axis_fixed():
    q = Quat.from_axis_angle(Y_AXIS, 2.0)
    assert tuple(q.rotate_vector(Y_AXIS)) == pytest.approx(tuple(Y_AXIS))


def test_zero_axis_is_rejected():
    with pytest.raises(ValueError):
        Quat.from_axis_angle(Vec3(), 1.0)


def test_default_forward_points_down_negative_z():
    assert tuple(Transform().forward()) == pytest.approx((0.0, 0.0, -1.0))


def test_rotate_y_and_back_restores_forward():
    t = Transform()
    start = t.forward()
    t.rotate_y(0.9)
    assert t.forward().distance(start) > 0.1
    t.rotate_y(-0.9)
    assert tuple(t.forward()) == pytest.approx(tuple(start), abs=1e-9)


def test_full_turn_about_y_restores_forward():
    t = Transform()
    t.rotate_y(math.pi / 3)
    start = t.forward()
    for _ in range(6):
        t.rotate_y(math.pi / 3)
    assert tuple(t.forward()) == pytest.approx(tuple(start), abs=1e-9)


def test_roll_does_not_change_forward():
    t = Transform()
    t.rotate_y(0.5)
    before = t.forward()
    t.rotate_local_z(1.3)
    assert tuple(t.forward()) == pytest.approx(tuple(before), abs=1e-9)


def test_rotate_y_keeps_forward_horizontal():
    t = Transform()
    t.rotate_y(1.7)
    assert t.forward().y == pytest.approx(0.0, abs=1e-12)
    assert t.forward().length() == pytest.approx(1.0)