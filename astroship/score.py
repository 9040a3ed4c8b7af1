"""The player's score and the events that change it."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from astroship.world import World


class ScoreChange(enum.Enum):
    INCREMENT = enum.auto()
    DECREMENT = enum.auto()


@dataclass
class Score:
    value: int = 0


def listen_for_changes(world: World, score: Score) -> int:
    """Add a point for every queued score event and return the new score."""
    for _event in world.drain(ScoreChange):
        score.value += 1
        print(f"Another point! Now {score.value}")
    return score.value