"""The player's spaceship: spawning, steering and firing missiles."""

from __future__ import annotations

import enum
from collections.abc import Container
from dataclasses import dataclass

from astroship.assets import SceneAssets
from astroship.geometry import ZERO, Transform, Vec3
from astroship.movement import Velocity, spawn_moving_object
from astroship.world import World

STARTING_TRANSLATION = Vec3(0.0, 0.0, -20.0)
SPACESHIP_SPEED = 25.0
SPACESHIP_ROTATION_SPEED = 2.5
SPACESHIP_ROLL_SPEED = 2.5
MISSILE_SPEED = 20.0
MISSILE_FORWARD_SPAWN_SCALAR = 7.5
SPACESHIP_RADIUS = 1.0
MISSILE_RADIUS = 0.65


class Key(enum.Enum):
    """Keys the spaceship responds to."""

    W = enum.auto()
    A = enum.auto()
    S = enum.auto()
    D = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    SHIFT_LEFT = enum.auto()
    CONTROL_LEFT = enum.auto()
    SPACE = enum.auto()


@dataclass
class Spaceship:
    """Marks the player's spaceship."""


@dataclass
class SpaceshipMissile:
    """Marks a missile fired by the spaceship."""


def spawn_spaceship(world: World, assets: SceneAssets) -> int:
    """Spawn the stationary spaceship at its starting position."""
    return spawn_moving_object(
        world,
        Transform(STARTING_TRANSLATION),
        ZERO,
        ZERO,
        SPACESHIP_RADIUS,
        assets.spaceship,
        Spaceship(),
    )


def _the_spaceship(world: World) -> int:
    ships = [entity for entity, _ in world.query(Spaceship)]
    if len(ships) != 1:
        raise LookupError(f"expected exactly one spaceship, found {len(ships)}")
    return ships[0]


def _any(keys: Container[Key], *wanted: Key) -> bool:
    return any(key in keys for key in wanted)


def spaceship_movement_controls(world: World, keys: Container[Key], dt: float) -> None:
    """Set the spaceship's velocity and turn it from the pressed keys."""
    ship = _the_spaceship(world)
    transform = world.component(ship, Transform)
    velocity = world.component(ship, Velocity)

    movement = 0.0
    if _any(keys, Key.S, Key.DOWN):
        movement = -SPACESHIP_SPEED
    elif _any(keys, Key.W, Key.UP):
        movement = SPACESHIP_SPEED

    rotation = 0.0
    if _any(keys, Key.D, Key.RIGHT):
        rotation = -SPACESHIP_ROTATION_SPEED * dt
    elif _any(keys, Key.A, Key.LEFT):
        rotation = SPACESHIP_ROTATION_SPEED * dt

    roll = 0.0
    if Key.SHIFT_LEFT in keys:
        roll = -SPACESHIP_ROLL_SPEED * dt
    elif Key.CONTROL_LEFT in keys:
        roll = SPACESHIP_ROLL_SPEED * dt

    velocity.value = -transform.forward() * movement
    transform.rotate_y(rotation)
    transform.rotate_local_z(roll)


def spaceship_weapon_controls(
    world: World, keys: Container[Key], assets: SceneAssets
) -> int | None:
    """Fire a missile ahead of the spaceship while space is held; return its id."""
    ship = _the_spaceship(world)
    if Key.SPACE not in keys:
        return None
    transform = world.component(ship, Transform)
    ahead = -transform.forward()
    return spawn_moving_object(
        world,
        Transform(transform.translation + ahead * MISSILE_FORWARD_SPAWN_SCALAR),
        ahead * MISSILE_SPEED,
        ZERO,
        MISSILE_RADIUS,
        assets.missiles,
        SpaceshipMissile(),
    )