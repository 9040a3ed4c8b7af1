"""Sphere colliders and the pass that records which entities overlap."""

from __future__ import annotations

from dataclasses import dataclass, field

from astroship.geometry import Transform
from astroship.world import World


@dataclass
class Collider:
    """A sphere of ``radius`` and the entities it touched in the last pass."""

    radius: float
    colliding_entities: list[int] = field(default_factory=list)


def detect_collisions(world: World) -> None:
    """Refresh every collider's list of entities whose spheres overlap it."""
    rows = world.query(Transform, Collider)
    found: dict[int, list[int]] = {}
    for entity_a, transform_a, collider_a in rows:
        for entity_b, transform_b, collider_b in rows:
            if entity_a == entity_b:
                continue
            distance = transform_a.translation.distance(transform_b.translation)
            if distance < collider_a.radius + collider_b.radius:
                found.setdefault(entity_a, []).append(entity_b)
    for entity, _, collider in rows:
        collider.colliding_entities = found.get(entity, [])