"""Asteroids: timed spawning, spinning, and removal on impact."""

from __future__ import annotations

import random
from dataclasses import dataclass

from astroship.assets import SceneAssets
from astroship.collision import Collider
from astroship.components import PlayerEnemy
from astroship.geometry import Transform, Vec3
from astroship.movement import spawn_moving_object
from astroship.score import ScoreChange
from astroship.world import World

SPAWN_RANGE_X = (-25.0, 25.0)
SPAWN_RANGE_Z = (0.0, 25.0)
SPAWN_TIME_SECONDS = 1.0
ROTATE_SPEED = 2.5
RADIUS = 1.75
MAX_SPEED = 300
DAMAGE = 20


@dataclass
class Asteroid:
    """Marks an entity as an asteroid."""


@dataclass
class Timer:
    """Counts elapsed time and reports when ``duration`` has passed."""

    duration: float
    repeating: bool = True
    elapsed: float = 0.0
    just_finished: bool = False
    times_finished: int = 0

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError("timer duration must be positive")

    @property
    def finished(self) -> bool:
        """True once a one-shot timer has run out, or on a repeating timer's finishing tick."""
        if self.repeating:
            return self.just_finished
        return self.elapsed >= self.duration

    def tick(self, delta: float) -> bool:
        """Advance by ``delta`` seconds; return whether the timer finished during this tick."""
        if delta < 0:
            raise ValueError("cannot tick a timer backwards")
        if not self.repeating and self.elapsed >= self.duration:
            self.just_finished = False
            self.times_finished = 0
            return False
        self.elapsed += delta
        if self.elapsed >= self.duration:
            if self.repeating:
                self.times_finished = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
            else:
                self.times_finished = 1
                self.elapsed = self.duration
            self.just_finished = True
        else:
            self.times_finished = 0
            self.just_finished = False
        return self.just_finished


def _random_planar(rng: random.Random) -> Vec3:
    return Vec3(rng.uniform(-1.0, 1.0), 0.0, rng.uniform(-1.0, 1.0))


def spawn_asteroid(
    world: World,
    timer: Timer,
    dt: float,
    assets: SceneAssets,
    rng: random.Random,
) -> int | None:
    """Tick the spawn timer and, when it fires, spawn one drifting asteroid."""
    if not timer.tick(dt):
        return None
    translation = Vec3(rng.uniform(*SPAWN_RANGE_X), 0.0, rng.uniform(*SPAWN_RANGE_Z))
    velocity = _random_planar(rng)
    acceleration = _random_planar(rng)
    return spawn_moving_object(
        world,
        Transform(translation),
        velocity,
        acceleration,
        RADIUS,
        assets.asteroid,
        PlayerEnemy(damage=DAMAGE, max_speed=MAX_SPEED),
        Asteroid(),
    )


def rotate_asteroids(world: World, dt: float) -> None:
    """Spin every asteroid about its own Z axis."""
    for _, transform, _marker in world.query(Transform, Asteroid):
        transform.rotate_local_z(ROTATE_SPEED * dt)


def handle_asteroid_collisions(world: World) -> list[int]:
    """Despawn asteroids touching anything but other asteroids, scoring each hit.

    Returns the despawned asteroid ids in the order they were removed.
    """
    rows = world.query(Asteroid, Collider)
    asteroids = {entity for entity, _, _ in rows}
    removed: list[int] = []
    for entity, _, collider in rows:
        for other in collider.colliding_entities:
            if other in asteroids:
                continue
            world.send(ScoreChange.INCREMENT)
            if entity not in removed:
                removed.append(entity)
    for entity in removed:
        world.despawn(entity)
    return removed