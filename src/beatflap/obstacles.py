"""Obstacle field: scrolling, culling, passage detection and spawning."""

from __future__ import annotations

import random

from beatflap.config import GAP_MARGIN, OBSTACLE_GAP, OBSTACLE_WIDTH, WINDOW_HEIGHT, WINDOW_WIDTH
from beatflap.models import Obstacle, ObstacleView


def maybe_spawn(now: float, last_spawn_time: float | None, spawn_interval: float) -> bool:
    """True when more than ``spawn_interval`` ms have elapsed since the last spawn.

    ``last_spawn_time`` is None for a session that has not spawned yet, which is
    always due.
    """
    if last_spawn_time is None:
        return True
    return now - last_spawn_time > spawn_interval


class ObstacleField:
    """Live obstacles in spawn order (which is also left-to-right screen order)."""

    def __init__(
        self,
        playfield_width: float = WINDOW_WIDTH,
        playfield_height: float = WINDOW_HEIGHT,
        gap_height: float = OBSTACLE_GAP,
        width: float = OBSTACLE_WIDTH,
        margin: float = GAP_MARGIN,
        rng: random.Random | None = None,
    ) -> None:
        if playfield_height - 2 * margin < gap_height:
            raise ValueError("gap band does not fit inside the playfield margins")
        self.playfield_width = playfield_width
        self.playfield_height = playfield_height
        self.gap_height = gap_height
        self.width = width
        self.margin = margin
        self._rng = rng or random.Random()
        self.obstacles: list[Obstacle] = []

    def __len__(self) -> int:
        return len(self.obstacles)

    def __iter__(self):
        return iter(self.obstacles)

    def clear(self) -> None:
        self.obstacles = []

    def step(self, scroll_speed: float) -> None:
        """Scroll every obstacle left and drop the ones fully off-screen."""
        for obstacle in self.obstacles:
            obstacle.x -= scroll_speed
        self.obstacles = [o for o in self.obstacles if o.right >= 0]

    def check_passage(self, actor_x: float) -> list[Obstacle]:
        """Flag and return obstacles whose right edge just went behind the actor."""
        passed: list[Obstacle] = []
        for obstacle in self.obstacles:
            if not obstacle.passed and obstacle.right < actor_x:
                obstacle.passed = True
                passed.append(obstacle)
        return passed

    def spawn(self) -> Obstacle:
        """Append a new obstacle at the right edge with a random gap position."""
        gap_top = self._rng.uniform(self.margin, self.playfield_height - self.margin - self.gap_height)
        obstacle = Obstacle(
            x=self.playfield_width,
            gap_top=gap_top,
            gap_height=self.gap_height,
            width=self.width,
        )
        self.obstacles.append(obstacle)
        return obstacle

    def views(self) -> tuple[ObstacleView, ...]:
        return tuple(
            ObstacleView(x=o.x, gap_top=o.gap_top, gap_height=o.gap_height, width=o.width)
            for o in self.obstacles
        )
