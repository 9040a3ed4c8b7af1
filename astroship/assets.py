"""Scene files used by the game's entities."""

from __future__ import annotations

from dataclasses import astuple, dataclass


@dataclass(frozen=True)
class SceneAssets:
    """Paths of the scenes for each kind of entity."""

    asteroid: str = "Asteroid.glb#Scene0"
    spaceship: str = "Spaceship.glb#Scene0"
    missiles: str = "Missiles.glb#Scene0"

    def all(self) -> tuple[str, str, str]:
        """Every scene path, as asteroid, spaceship, missiles."""
        return astuple(self)