from astroship.assets import SceneAssets


def test_default_scene_paths():
    assets = SceneAssets()
    assert assets.asteroid == "Asteroid.glb#Scene0"
    assert assets.spaceship == "Spaceship.glb#Scene0"
    assert assets.missiles == "Missiles.glb#Scene0"


def test_all_lists_scenes_in_order():
    assert SceneAssets().all() == (
        "Asteroid.glb#Scene0",
        "Spaceship.glb#Scene0",
        "Missiles.glb#Scene0",
    )


def test_all_reflects_overrides():
    assets = SceneAssets(asteroid="rock.glb")
    assert assets.all()[0] == "rock.glb"
    assert assets.all()[1:] == SceneAssets().all()[1:]