import math

import pytest

from astroship.camera import CAMERA_DISTANCE, Camera
from astroship.geometry import ZERO, Vec3

SIZE = (800, 600)


def test_origin_at_centre():
    assert Camera().project(ZERO, SIZE) == pytest.approx((400.0, 300.0))


def test_positive_z_is_up_and_positive_x_is_left():
    camera = Camera()
    _, y = camera.project(Vec3(0.0, 0.0, 10.0), SIZE)
    x, _ = camera.project(Vec3(10.0, 0.0, 0.0), SIZE)
    assert y < SIZE[1] / 2
    assert x < SIZE[0] / 2


def test_mirror_symmetry():
    camera = Camera()
    left = camera.project(Vec3(5.0, 0.0, 3.0), SIZE)
    right = camera.project(Vec3(-5.0, 0.0, 3.0), SIZE)
    assert math.isclose(left[0] + right[0], SIZE[0])
    assert math.isclose(left[1], right[1])


def test_farther_points_land_farther_from_centre():
    camera = Camera()
    near = camera.project(Vec3(0.0, 0.0, 5.0), SIZE)
    far = camera.project(Vec3(0.0, 0.0, 20.0), SIZE)
    assert far[1] < near[1] < SIZE[1] / 2


def test_closer_objects_appear_larger():
    camera = Camera()
    low = camera.project(Vec3(0.0, 0.0, 5.0), SIZE)
    high = camera.project(Vec3(0.0, 40.0, 5.0), SIZE)
    assert high[1] < low[1]


def test_points_behind_camera_are_hidden():
    camera = Camera()
    assert camera.project(Vec3(0.0, CAMERA_DISTANCE, 0.0), SIZE) is None
    assert camera.project(Vec3(0.0, CAMERA_DISTANCE + 5.0, 0.0), SIZE) is None


def test_invalid_size():
    with pytest.raises(ValueError):
        Camera().project(ZERO, (800, 0))