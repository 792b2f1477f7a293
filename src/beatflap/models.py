"""Core data models shared across the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from beatflap.config import BEATS_PER_OBSTACLE, DEFAULT_BPM


class SessionState(Enum):
    NOT_STARTED = auto()
    RUNNING = auto()
    OVER = auto()


class RhythmMode(Enum):
    PASSAGE = auto()  # each passed obstacle counts as a beat
    EXTERNAL = auto()  # beats come only from a pulse source


class Cue(Enum):
    """Sound cues emitted by the game core."""

    JUMP = auto()
    SCORE = auto()
    CLAP = auto()
    HIT = auto()


def spawn_interval_for(bpm: int, beats_per_obstacle: int = BEATS_PER_OBSTACLE) -> float:
    """Milliseconds between obstacles at the given tempo."""
    return 60000 / bpm * beats_per_obstacle


@dataclass
class Obstacle:
    """A gated barrier scrolling right-to-left."""

    x: float
    gap_top: float
    gap_height: float
    width: float
    passed: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def gap_bottom(self) -> float:
        return self.gap_top + self.gap_height


@dataclass
class RhythmState:
    bpm: int = DEFAULT_BPM
    last_pulse: float | None = None  # ms
    spawn_interval: float = field(default_factory=lambda: spawn_interval_for(DEFAULT_BPM))


@dataclass(frozen=True)
class ActorView:
    x: float
    y: float
    width: float
    height: float
    tilt: float


@dataclass(frozen=True)
class ObstacleView:
    x: float
    gap_top: float
    gap_height: float
    width: float


@dataclass(frozen=True)
class Snapshot:
    """Read-only per-frame state handed to the presentation layer."""

    state: SessionState
    score: int
    best_score: int
    bpm: int
    spawn_interval: float
    actor: ActorView
    obstacles: tuple[ObstacleView, ...] = ()
