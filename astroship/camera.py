"""A perspective camera that looks down on the play field."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from astroship.geometry import ZERO, Vec3, Z_AXIS

CAMERA_DISTANCE = 80.0


def _dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(a.y * b.z - a.z * b.y, a.z * b.x - a.x * b.z, a.x * b.y - a.y * b.x)


def _normalized(v: Vec3) -> Vec3:
    length = v.length()
    if length == 0.0:
        raise ValueError("cannot normalise the zero vector")
    return v * (1.0 / length)


@dataclass(frozen=True)
class Camera:
    """Camera at ``position`` looking at ``target`` with ``up`` towards the top of the screen."""

    position: Vec3 = field(default_factory=lambda: Vec3(0.0, CAMERA_DISTANCE, 0.0))
    target: Vec3 = ZERO
    up: Vec3 = Z_AXIS
    fov_y: float = math.pi / 4.0
    near: float = 0.1

    def project(self, point: Vec3, size: tuple[int, int]) -> tuple[float, float] | None:
        """Pixel coordinates of ``point`` on a screen of ``size``; None if it is behind the camera."""
        width, height = size
        if width <= 0 or height <= 0:
            raise ValueError("screen size must be positive")
        forward = _normalized(self.target - self.position)
        right = _normalized(_cross(forward, self.up))
        screen_up = _cross(right, forward)

        relative = point - self.position
        depth = _dot(relative, forward)
        if depth <= self.near:
            return None
        half_height = math.tan(self.fov_y / 2.0) * depth
        half_width = half_height * (width / height)
        ndc_x = _dot(relative, right) / half_width
        ndc_y = _dot(relative, screen_up) / half_height
        return (ndc_x + 1.0) / 2.0 * width, (1.0 - ndc_y) / 2.0 * height