"""Actor vs. obstacle collision test."""

from __future__ import annotations

from typing import Iterable

from beatflap.actor import Actor
from beatflap.models import Obstacle


def check_collision(actor: Actor, obstacles: Iterable[Obstacle]) -> bool:
    """Axis-aligned overlap test, evaluated once per frame.

    The actor collides with an obstacle when their horizontal extents overlap
    and the actor is not fully inside the gap band.
    """
    top = actor.y
    bottom = actor.y + actor.height
    for obstacle in obstacles:
        if actor.x + actor.width > obstacle.x and actor.x < obstacle.right:
            if top < obstacle.gap_top or bottom > obstacle.gap_bottom:
                return True
    return False
