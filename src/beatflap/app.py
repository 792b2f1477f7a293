"""Top-level application: initializes pygame, manages screens, and runs the game loop."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from beatflap.config import FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from beatflap.models import RhythmMode
from beatflap.pulse_input import KeyboardPulseSource, MidiPulseSource
from beatflap.scores import DEFAULT_DB_PATH, InMemoryScoreStore, ScoreStore
from beatflap.settings import GameSettings
from beatflap.views.base import ViewContext, ViewManager
from beatflap.views.game_view import GameView
from beatflap.views.menu_view import MenuView

logger = logging.getLogger(__name__)


class App:
    def __init__(
        self,
        settings: GameSettings | None = None,
        db_path: Path = DEFAULT_DB_PATH,
        seed: int | None = None,
        rhythm_mode: RhythmMode | None = None,
    ) -> None:
        settings = settings or GameSettings()
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        # Optional subsystems gracefully degrade
        self._midi_input = self._try_midi(settings)
        self._audio = self._try_audio(settings)
        self._scores = self._try_scores(db_path)
        self._keyboard_input = KeyboardPulseSource()

        context = ViewContext(
            screen_size=(WINDOW_WIDTH, WINDOW_HEIGHT),
            scores=self._scores,
            audio=self._audio,
            midi_input=self._midi_input,
            keyboard_input=self._keyboard_input,
            rhythm_mode=rhythm_mode or settings.get_rhythm_mode(),
            tempo_window=settings.tempo_window,
            seed=seed,
        )

        self.views = ViewManager(context)
        self.views.register(MenuView)
        self.views.register(GameView)
        self.views.push("menu")

    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    self._keyboard_input.feed_event(event)
                    if not self.views.handle_event(event):
                        running = False
            if running:
                if not self.views.update(dt):
                    running = False
            self.views.draw(self.screen)
            pygame.display.flip()

        self._cleanup()
        pygame.quit()

    def _cleanup(self) -> None:
        while self.views.active_view:
            self.views.pop()
        if self._midi_input:
            self._midi_input.close()
        if self._audio:
            self._audio.shutdown()
        if isinstance(self._scores, ScoreStore):
            self._scores.close()

    @staticmethod
    def _try_midi(settings: GameSettings):
        try:
            mi = MidiPulseSource(
                port_index=settings.midi_port,
                velocity_threshold=settings.midi_velocity_threshold,
            )
            mi.open()
            return mi
        except Exception as exc:
            logger.info("MIDI pulse input unavailable: %s", exc)
            return None

    @staticmethod
    def _try_audio(settings: GameSettings):
        try:
            from beatflap.audio import AudioEngine
            return AudioEngine(soundfont_path=settings.soundfont_path or None, volume=settings.volume)
        except Exception as exc:
            logger.warning("Audio disabled: %s", exc)
            return None

    @staticmethod
    def _try_scores(db_path: Path):
        try:
            return ScoreStore(db_path)
        except Exception as exc:
            logger.warning("Best score will not be saved: %s", exc)
            return InMemoryScoreStore()
