"""Plain components shared by players and enemies."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class HealthChange(enum.Enum):
    INCREMENT = enum.auto()
    DECREMENT = enum.auto()


@dataclass
class Health:
    value: int


@dataclass
class PlayerEnemy:
    """An entity hostile to the player."""

    damage: int
    max_speed: int