"""Text shown on the heads-up display."""

from __future__ import annotations

from astroship.score import Score


def status_lines(score: Score) -> list[str]:
    """The HUD sections: the score, then the health."""
    return [f"Score: {score.value}", "Health: 0"]