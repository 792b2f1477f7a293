"""Per-frame update order and the session state machine."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from beatflap.actor import Actor
from beatflap.collision import check_collision
from beatflap.config import (
    BEATS_PER_OBSTACLE,
    SCROLL_SPEED,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from beatflap.models import Cue, RhythmMode, SessionState, Snapshot
from beatflap.obstacles import ObstacleField, maybe_spawn
from beatflap.rhythm import RhythmTracker

if TYPE_CHECKING:
    from beatflap.scores import BestScoreStore

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Everything that is reset when a new run begins."""

    actor: Actor
    obstacles: ObstacleField
    rhythm: RhythmTracker
    score: int = 0
    last_spawn_time: float | None = None
    pending_pulses: list[float] = field(default_factory=list)


class GameLoop:
    """Owns one game session and drives it one frame at a time.

    The host calls :meth:`tick` once per display frame with a monotonic
    millisecond timestamp. Input arrives through :meth:`jump`,
    :meth:`queue_pulse`, :meth:`start` and :meth:`restart`; everything the
    presentation layer needs is available from :meth:`snapshot` and
    :meth:`drain_cues`.
    """

    def __init__(
        self,
        store: BestScoreStore | None = None,
        rhythm_mode: RhythmMode = RhythmMode.PASSAGE,
        playfield_width: float = WINDOW_WIDTH,
        playfield_height: float = WINDOW_HEIGHT,
        scroll_speed: float = SCROLL_SPEED,
        beats_per_obstacle: int = BEATS_PER_OBSTACLE,
        tempo_window: int = 1,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store
        self.rhythm_mode = rhythm_mode
        self.playfield_width = playfield_width
        self.playfield_height = playfield_height
        self.scroll_speed = scroll_speed
        self.beats_per_obstacle = beats_per_obstacle
        self.tempo_window = tempo_window
        self._rng = rng or random.Random()
        self._cues: list[Cue] = []
        self._in_tick = False
        self.state = SessionState.NOT_STARTED
        self.best_score = store.load_best_score() if store is not None else 0
        self.session = self.new_session()

    def new_session(self) -> Session:
        return Session(
            actor=Actor(playfield_height=self.playfield_height, on_cue=self._cues.append),
            obstacles=ObstacleField(
                playfield_width=self.playfield_width,
                playfield_height=self.playfield_height,
                rng=self._rng,
            ),
            rhythm=RhythmTracker(beats_per_obstacle=self.beats_per_obstacle, window=self.tempo_window),
        )

    # -- triggers -------------------------------------------------------

    def start(self) -> None:
        if self.state != SessionState.NOT_STARTED:
            return
        self._begin()

    def restart(self) -> None:
        if self.state != SessionState.OVER:
            return
        self._begin()

    def reset(self) -> None:
        """Discard the current session and enter RUNNING with a fresh one."""
        self._begin()

    def _begin(self) -> None:
        self.session = self.new_session()
        self._cues.clear()
        self.state = SessionState.RUNNING
        logger.debug("session started")

    def jump(self) -> None:
        if self.state == SessionState.RUNNING:
            self.session.actor.jump()

    def queue_pulse(self, now: float) -> None:
        """Buffer an external beat; it is applied at the start of the next tick."""
        if self.state != SessionState.RUNNING or self.rhythm_mode != RhythmMode.EXTERNAL:
            return
        self.session.pending_pulses.append(now)

    # -- frame ----------------------------------------------------------

    def tick(self, now: float) -> None:
        """Advance the running session by one frame."""
        if self.state != SessionState.RUNNING or self._in_tick:
            return
        self._in_tick = True
        try:
            self._step(now)
        finally:
            self._in_tick = False

    def _step(self, now: float) -> None:
        session = self.session
        actor = session.actor

        for pulse_time in session.pending_pulses:
            session.rhythm.on_pulse(pulse_time)
        session.pending_pulses.clear()

        actor.apply_gravity()
        hit_floor = actor.integrate()
        actor.update_tilt()
        if hit_floor:
            self.end_game()
            return

        session.obstacles.step(self.scroll_speed)

        for _ in session.obstacles.check_passage(actor.x):
            session.score += 1
            self._cues.append(Cue.SCORE)
            self._cues.append(Cue.CLAP)
            if self.rhythm_mode == RhythmMode.PASSAGE:
                session.rhythm.on_pulse(now)

        if check_collision(actor, session.obstacles):
            self.end_game()
            return

        if maybe_spawn(now, session.last_spawn_time, session.rhythm.spawn_interval):
            session.obstacles.spawn()
            session.last_spawn_time = now

    def end_game(self) -> None:
        """Enter OVER. Calling it again before a restart does nothing."""
        if self.state != SessionState.RUNNING:
            return
        self.state = SessionState.OVER
        self._cues.append(Cue.HIT)
        score = self.session.score
        if score > self.best_score:
            self.best_score = score
            if self.store is not None:
                self.store.save_best_score(score)
        logger.debug("game over: score=%d best=%d bpm=%d", score, self.best_score, self.session.rhythm.bpm)

    # -- read side ------------------------------------------------------

    @property
    def score(self) -> int:
        return self.session.score

    def drain_cues(self) -> list[Cue]:
        cues = list(self._cues)
        self._cues.clear()
        return cues

    def snapshot(self) -> Snapshot:
        session = self.session
        return Snapshot(
            state=self.state,
            score=session.score,
            best_score=self.best_score,
            bpm=session.rhythm.bpm,
            spawn_interval=session.rhythm.spawn_interval,
            actor=session.actor.view(),
            obstacles=session.obstacles.views(),
        )
