"""Removal of entities that have drifted too far from the origin."""

from __future__ import annotations

from astroship.geometry import ZERO, Transform
from astroship.world import World

DESPAWN_DISTANCE = 100.0


def despawn_far_away_entities(world: World) -> list[int]:
    """Despawn entities farther than ``DESPAWN_DISTANCE`` from the origin; return their ids."""
    removed = [
        entity
        for entity, transform in world.query(Transform)
        if transform.translation.distance(ZERO) > DESPAWN_DISTANCE
    ]
    for entity in removed:
        world.despawn(entity)
    return removed