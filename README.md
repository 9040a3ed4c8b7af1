# astroship

A small top-down arcade shooter. You fly a spaceship across a field of drifting,
spinning asteroids and shoot them down. The game runs in a pygame window, and
its logic can also be stepped headlessly.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
astroship [--seed N] [--width W] [--height H]
```

`--seed` fixes where asteroids appear and how they move. The window is 1280×720
by default and runs at up to 60 frames per second.

| Key                  | Action                                   |
|----------------------|------------------------------------------|
| `W` / `Up`           | fly forward                              |
| `S` / `Down`         | fly backward                             |
| `A` / `Left`         | turn left                                |
| `D` / `Right`        | turn right                               |
| `Left Shift`         | roll one way                             |
| `Left Ctrl`          | roll the other way                       |
| `Space`              | fire a missile every frame while held    |

The ship moves only while a movement key is held. A new asteroid appears every
second at a random point with x between -25 and 25 and z between 0 and 25 (the
upper half of the screen), with a random velocity and a random acceleration.
When an asteroid touches anything other than another asteroid — a missile or
the spaceship — it is removed and the score goes up by one; each point is also
printed to standard output.

Anything more than 100 units from the centre is removed, the spaceship
included. When the spaceship is gone the game prints the final score and exits
with status 1; closing the window exits with status 0.

The heads-up display in the top-left corner shows the score.

## What it does not do

- Entities are drawn as flat circles, one colour per kind, seen from a camera
  above the field. The scene paths in `SceneAssets` are only used as labels;
  no model files are loaded.
- There is no health or damage. `astroship.components` defines `Health`,
  `HealthChange` and `PlayerEnemy`, but nothing acts on them, and the display
  always shows `Health: 0`.
- Asteroids do not harm the spaceship; a collision only removes the asteroid.

## Using the pieces

The simulation can be stepped without opening a window:

```python
from astroship.game import Game
from astroship.spaceship import Key

game = Game(seed=1)
for _ in range(120):
    game.step(1 / 60, keys={Key.W, Key.SPACE})
print(game.score.value, len(game.world))
```

`Game.step(dt, keys)` runs, in order: removal of far-away entities, spaceship
steering and firing, position and velocity updates, collision detection,
asteroid spawning, asteroid spin, asteroid impacts and score counting. It
raises `LookupError` once the spaceship is gone.

The modules:

- `astroship.geometry` — `Vec3`, `Quat` and `Transform` (with `forward`,
  `rotate_y` and `rotate_local_z`).
- `astroship.world` — `World`, an entity store with `spawn`, `despawn`,
  `component`, `has`, `query`, and a typed event queue (`send`, `drain`);
  `InGameSet` lists the frame phases in run order.
- `astroship.movement` — `Velocity`, `Acceleration`, `Model`,
  `spawn_moving_object`, `update_position`, `update_velocity`.
- `astroship.collision` — `Collider` and `detect_collisions`.
- `astroship.despawn` — `despawn_far_away_entities`.
- `astroship.asteroids` — `Asteroid`, a `Timer`, `spawn_asteroid`,
  `rotate_asteroids`, `handle_asteroid_collisions`.
- `astroship.spaceship` — `Key`, `Spaceship`, `SpaceshipMissile`,
  `spawn_spaceship`, `spaceship_movement_controls`,
  `spaceship_weapon_controls`.
- `astroship.score` — `Score`, `ScoreChange`, `listen_for_changes`.
- `astroship.camera` — `Camera.project`, which maps a world point to pixel
  coordinates.
- `astroship.ui` — `status_lines`, the display text.
- `astroship.assets` — `SceneAssets`.

Each system is a plain function over a `World` and can be called on its own.