"""Velocity and acceleration components and the systems that integrate them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from astroship.collision import Collider
from astroship.geometry import Transform, Vec3
from astroship.world import World


@dataclass
class Velocity:
    value: Vec3


@dataclass
class Acceleration:
    value: Vec3


@dataclass
class Model:
    """The scene drawn for an entity."""

    scene: str


def spawn_moving_object(
    world: World,
    transform: Transform,
    velocity: Vec3,
    acceleration: Vec3,
    radius: float,
    model: str,
    *args: Any,
) -> int:
    """Spawn an entity that moves, collides and is drawn, plus any extra components."""
    return world.spawn(
        transform,
        Velocity(velocity),
        Acceleration(acceleration),
        Collider(radius),
        Model(model),
        *args,
    )


def update_position(world: World, dt: float) -> None:
    """Move every entity with a velocity by ``velocity * dt``."""
    for _, velocity, transform in world.query(Velocity, Transform):
        transform.translation = transform.translation + velocity.value * dt


def update_velocity(world: World, dt: float) -> None:
    """Change every velocity by ``acceleration * dt``."""
    for _, acceleration, velocity in world.query(Acceleration, Velocity):
        velocity.value = velocity.value + acceleration.value * dt