"""The player-controlled falling/jumping body."""

from __future__ import annotations

from typing import Callable

from beatflap.config import (
    ACTOR_SIZE,
    ACTOR_X,
    GRAVITY,
    JUMP_FORCE,
    JUMP_TILT,
    MAX_TILT,
    TILT_SCALE,
    WINDOW_HEIGHT,
)
from beatflap.models import ActorView, Cue


class Actor:
    """Gravity-integrated body with a fixed x position.

    ``y`` grows downward. The body is kept inside ``[0, playfield_height - height]``;
    hitting the ceiling stops upward motion, hitting the floor is reported by
    :meth:`integrate` so the caller can end the session.
    """

    def __init__(
        self,
        playfield_height: float = WINDOW_HEIGHT,
        x: float = ACTOR_X,
        size: float = ACTOR_SIZE,
        gravity: float = GRAVITY,
        jump_force: float = JUMP_FORCE,
        on_cue: Callable[[Cue], None] | None = None,
    ) -> None:
        self.playfield_height = playfield_height
        self.x = x
        self.width = size
        self.height = size
        self.gravity = gravity
        self.jump_force = jump_force
        self._on_cue = on_cue
        self.y = 0.0
        self.velocity = 0.0
        self.tilt = 0.0
        self.reset()

    def reset(self) -> None:
        self.y = self.playfield_height / 2
        self.velocity = 0.0
        self.tilt = 0.0

    def apply_gravity(self) -> None:
        self.velocity += self.gravity

    def integrate(self) -> bool:
        """Advance one frame. Returns True if the actor touched the floor."""
        self.y += self.velocity
        if self.y < 0:
            self.y = 0.0
            self.velocity = 0.0
        floor = self.playfield_height - self.height
        if self.y >= floor:
            self.y = floor
            return True
        return False

    def jump(self) -> None:
        self.velocity = self.jump_force
        self.tilt = JUMP_TILT
        if self._on_cue is not None:
            self._on_cue(Cue.JUMP)

    def update_tilt(self) -> None:
        self.tilt = min(MAX_TILT, max(-MAX_TILT, self.velocity * TILT_SCALE))

    def view(self) -> ActorView:
        return ActorView(x=self.x, y=self.y, width=self.width, height=self.height, tilt=self.tilt)
