"""The game loop: one frame of systems, and a window that plays it."""

from __future__ import annotations

import argparse
import random
from collections.abc import Container

from astroship.asteroids import (
    SPAWN_TIME_SECONDS,
    Timer,
    handle_asteroid_collisions,
    rotate_asteroids,
    spawn_asteroid,
)
from astroship.assets import SceneAssets
from astroship.camera import Camera
from astroship.collision import Collider, detect_collisions
from astroship.despawn import despawn_far_away_entities
from astroship.geometry import Transform, Vec3
from astroship.movement import Model, update_position, update_velocity
from astroship.score import Score, listen_for_changes
from astroship.spaceship import (
    Key,
    spaceship_movement_controls,
    spaceship_weapon_controls,
    spawn_spaceship,
)
from astroship.ui import status_lines
from astroship.world import World

CLEAR_COLOR = (222, 0, 38)


class Game:
    """All game state, advanced one frame at a time by ``step``."""

    def __init__(self, seed: int | None = None, assets: SceneAssets | None = None) -> None:
        self.world = World()
        self.assets = assets if assets is not None else SceneAssets()
        self.score = Score()
        self.spawn_timer = Timer(SPAWN_TIME_SECONDS)
        self.rng = random.Random(seed)
        self.camera = Camera()
        self.spaceship = spawn_spaceship(self.world, self.assets)

    def step(self, dt: float, keys: Container[Key]) -> None:
        """Run every system once for a frame lasting ``dt`` seconds.

        Raises LookupError once the spaceship is gone.
        """
        world = self.world
        despawn_far_away_entities(world)

        spaceship_movement_controls(world, keys, dt)
        spaceship_weapon_controls(world, keys, self.assets)

        update_position(world, dt)
        update_velocity(world, dt)

        detect_collisions(world)

        spawn_asteroid(world, self.spawn_timer, dt, self.assets, self.rng)
        rotate_asteroids(world, dt)
        handle_asteroid_collisions(world)
        listen_for_changes(world, self.score)


def _draw(pygame, screen, font, game: Game, colors: dict[str, tuple[int, int, int]]) -> None:
    screen.fill(CLEAR_COLOR)
    size = screen.get_size()
    for _, transform, collider, model in game.world.query(Transform, Collider, Model):
        centre = game.camera.project(transform.translation, size)
        edge = game.camera.project(transform.translation + Vec3(collider.radius, 0.0, 0.0), size)
        if centre is None or edge is None:
            continue
        radius = max(1, round(abs(edge[0] - centre[0])))
        color = colors.get(model.scene, (255, 255, 255))
        pygame.draw.circle(screen, color, (round(centre[0]), round(centre[1])), radius)
    text = font.render("".join(status_lines(game.score)), True, (255, 255, 255))
    screen.blit(text, (0, 0))
    pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Open a window and play until it is closed or the spaceship is lost."""
    parser = argparse.ArgumentParser(prog="astroship", description="Fly a spaceship and shoot asteroids.")
    parser.add_argument("--seed", type=int, default=None, help="seed for asteroid placement")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    args = parser.parse_args(argv)

    import pygame

    key_map = {
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_LSHIFT: Key.SHIFT_LEFT,
        pygame.K_LCTRL: Key.CONTROL_LEFT,
        pygame.K_SPACE: Key.SPACE,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("astroship")
        font = pygame.font.Font(None, 28)
        clock = pygame.time.Clock()
        game = Game(seed=args.seed)
        colors = {
            game.assets.asteroid: (150, 150, 150),
            game.assets.spaceship: (255, 255, 255),
            game.assets.missiles: (255, 220, 0),
        }
        while True:
            dt = clock.tick(60) / 1000.0
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                return 0
            pressed = pygame.key.get_pressed()
            keys = {key for code, key in key_map.items() if pressed[code]}
            try:
                game.step(dt, keys)
            except LookupError:
                print(f"The spaceship is gone. Final score: {game.score.value}")
                return 1
            _draw(pygame, screen, font, game, colors)
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())