from astroship.despawn import DESPAWN_DISTANCE, despawn_far_away_entities
from astroship.geometry import Transform, Vec3
from astroship.world import World


def test_far_entity_is_removed():
    world = World()
    far = world.spawn(Transform(Vec3(0.0, 0.0, DESPAWN_DISTANCE + 1.0)))
    near = world.spawn(Transform(Vec3(5.0, 0.0, 5.0)))
    assert despawn_far_away_entities(world) == [far]
    assert far not in world
    assert near in world


def test_entity_exactly_at_limit_is_kept():
    world = World()
    e = world.spawn(Transform(Vec3(DESPAWN_DISTANCE, 0.0, 0.0)))
    assert despawn_far_away_entities(world) == []
    assert e in world


def test_entity_without_transform_is_kept():
    world = World()
    e = world.spawn("label")
    assert despawn_far_away_entities(world) == []
    assert e in world


def test_distance_uses_all_axes():
    world = World()
    e = world.spawn(Transform(Vec3(-80.0, 0.0, -80.0)))
    assert despawn_far_away_entities(world) == [e]
    assert len(world) == 0