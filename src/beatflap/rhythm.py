"""Tempo estimation from pulse timestamps."""

from __future__ import annotations

import math
from collections import deque

from beatflap.config import BEATS_PER_OBSTACLE, DEFAULT_BPM, MAX_BPM, MIN_BPM
from beatflap.models import RhythmState, spawn_interval_for


def bpm_from_interval(interval_ms: float) -> int:
    """Convert an inter-pulse interval to a tempo clamped to [MIN_BPM, MAX_BPM]."""
    # halves round up, not to even
    bpm = math.floor(60000 / interval_ms + 0.5)
    return max(MIN_BPM, min(MAX_BPM, bpm))


class RhythmTracker:
    """Turns a sparse pulse sequence into a tempo and an obstacle spawn interval.

    With ``window=1`` the tempo follows the most recent inter-pulse interval
    only. A larger window averages the last ``window`` intervals, which trades
    responsiveness for stability.
    """

    def __init__(self, beats_per_obstacle: int = BEATS_PER_OBSTACLE, window: int = 1) -> None:
        if window < 1:
            raise ValueError("window must be >= 1")
        self.beats_per_obstacle = beats_per_obstacle
        self.window = window
        self._intervals: deque[float] = deque(maxlen=window)
        self._state = RhythmState()
        self.reset()

    def reset(self) -> None:
        self._intervals.clear()
        self._state = RhythmState(
            bpm=DEFAULT_BPM,
            last_pulse=None,
            spawn_interval=spawn_interval_for(DEFAULT_BPM, self.beats_per_obstacle),
        )

    @property
    def state(self) -> RhythmState:
        return self._state

    @property
    def bpm(self) -> int:
        return self._state.bpm

    @property
    def spawn_interval(self) -> float:
        return self._state.spawn_interval

    def on_pulse(self, now: float) -> None:
        """Register a pulse at ``now`` (ms). The first pulse only sets the reference time."""
        last = self._state.last_pulse
        if last is not None and now - last > 0:
            self._intervals.append(now - last)
            bpm = bpm_from_interval(sum(self._intervals) / len(self._intervals))
            self._state = RhythmState(
                bpm=bpm,
                last_pulse=now,
                spawn_interval=spawn_interval_for(bpm, self.beats_per_obstacle),
            )
        else:
            self._state.last_pulse = now
