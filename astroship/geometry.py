"""Vectors, rotations and transforms for a right-handed, Y-up world."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(_dot(self, self))

    def distance(self, other: Vec3) -> float:
        """Euclidean distance to another point."""
        return (self - other).length()


ZERO = Vec3()
X_AXIS = Vec3(1.0, 0.0, 0.0)
Y_AXIS = Vec3(0.0, 1.0, 0.0)
Z_AXIS = Vec3(0.0, 0.0, 1.0)


def _dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


@dataclass(frozen=True)
class Quat:
    """A unit quaternion describing a rotation; the default is the identity."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def from_axis_angle(axis: Vec3, angle: float) -> Quat:
        """Rotation of ``angle`` radians about ``axis`` (normalised here)."""
        length = axis.length()
        if length == 0.0:
            raise ValueError("rotation axis must not be the zero vector")
        half = angle / 2.0
        s = math.sin(half) / length
        return Quat(math.cos(half), axis.x * s, axis.y * s, axis.z * s)

    @property
    def conjugate(self) -> Quat:
        return Quat(self.w, -self.x, -self.y, -self.z)

    def compose(self, other: Quat) -> Quat:
        """The rotation that applies ``other`` first and then ``self``."""
        a, b = self, other
        return Quat(
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
            a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
        )

    def rotate_vector(self, vector: Vec3) -> Vec3:
        """Rotate a vector by this quaternion."""
        axis = Vec3(self.x, self.y, self.z)
        t = _cross(axis, vector) * 2.0
        return vector + t * self.w + _cross(axis, t)


@dataclass
class Transform:
    """Position and orientation of an entity."""

    translation: Vec3 = field(default_factory=Vec3)
    rotation: Quat = field(default_factory=Quat)

    def forward(self) -> Vec3:
        """The direction the entity faces: local -Z rotated into the world."""
        return self.rotation.rotate_vector(Vec3(0.0, 0.0, -1.0))

    def rotate_y(self, angle: float) -> None:
        """Rotate about the world Y axis."""
        self.rotation = Quat.from_axis_angle(Y_AXIS, angle).compose(self.rotation)

    def rotate_local_z(self, angle: float) -> None:
        """Rotate about the entity's own Z axis."""
        self.rotation = self.rotation.compose(Quat.from_axis_angle(Z_AXIS, angle))