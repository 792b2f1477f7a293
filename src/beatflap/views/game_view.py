"""Gameplay view — runs the game loop and draws it."""

from __future__ import annotations

import random

import pygame

from beatflap.config import FLAP_ANIMATION_DURATION
from beatflap.game import GameLoop
from beatflap.models import SessionState, Snapshot
from beatflap.pulse_input import drain
from beatflap.renderer import colors as colors_mod
from beatflap.renderer.hud import render_hud
from beatflap.renderer.playfield import render_actor, render_obstacles
from beatflap.views.base import ViewAction, ViewContext


class GameView:
    name = "game"
    display_name = "Play"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._loop: GameLoop | None = None
        self._display_tilt: float = 0.0
        self._font: pygame.font.Font | None = None
        self._title_font: pygame.font.Font | None = None

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        self._font = pygame.font.SysFont("monospace", 18)
        self._title_font = pygame.font.SysFont("monospace", 32, bold=True)
        width, height = context.screen_size
        self._loop = GameLoop(
            store=context.scores,
            rhythm_mode=context.rhythm_mode,
            playfield_width=width,
            playfield_height=height,
            tempo_window=context.tempo_window,
            rng=random.Random(context.seed),
        )
        self._display_tilt = 0.0
        drain(context.midi_input)
        drain(context.keyboard_input)
        self._loop.start()

    def on_exit(self) -> None:
        if self._context and self._context.audio:
            self._context.audio.all_notes_off()

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return ViewAction(kind="switch", target="menu")
        return None

    def update(self, dt: float) -> ViewAction | None:
        loop = self._loop
        if loop is None or self._context is None:
            return None

        for source in (self._context.midi_input, self._context.keyboard_input):
            if source is None:
                continue
            while True:
                evt = source.poll()
                if evt is None:
                    break
                if loop.state == SessionState.RUNNING:
                    if evt.beat:
                        loop.queue_pulse(evt.timestamp)
                    if evt.jump:
                        loop.jump()
                elif loop.state == SessionState.OVER and evt.jump and source is self._context.keyboard_input:
                    loop.restart()

        loop.tick(pygame.time.get_ticks())

        audio = self._context.audio
        cues = loop.drain_cues()
        if audio:
            for cue in cues:
                audio.play_cue(cue)
            audio.flush_pending_offs()

        # ease the drawn tilt toward the physical one
        target = loop.session.actor.tilt
        blend = min(1.0, dt / FLAP_ANIMATION_DURATION) if FLAP_ANIMATION_DURATION > 0 else 1.0
        self._display_tilt += (target - self._display_tilt) * blend
        return None

    def draw(self, surface: pygame.Surface) -> None:
        loop = self._loop
        if loop is None:
            return

        snapshot = loop.snapshot()
        surface.fill(colors_mod.BG)
        render_obstacles(surface, snapshot.obstacles)
        render_actor(surface, snapshot.actor, self._display_tilt)
        render_hud(surface, snapshot)

        if snapshot.state == SessionState.OVER:
            self._draw_game_over(surface, snapshot)

    def _draw_game_over(self, surface: pygame.Surface, snapshot: Snapshot) -> None:
        if not self._font or not self._title_font:
            return
        w, h = surface.get_size()
        panel = pygame.Surface((w * 3 // 4, 180), pygame.SRCALPHA)
        panel.fill(colors_mod.OVERLAY)
        px = w // 2 - panel.get_width() // 2
        py = h // 2 - panel.get_height() // 2
        surface.blit(panel, (px, py))

        lines = [
            (self._title_font.render("Game Over!", True, colors_mod.HUD_TEXT), 20),
            (self._font.render(f"Score: {snapshot.score}", True, colors_mod.HUD_TEXT), 70),
            (self._font.render(f"High Score: {snapshot.best_score}", True, colors_mod.HUD_ACCENT), 96),
            (self._font.render("Space: play again | Esc: menu", True, (160, 160, 170)), 140),
        ]
        for text, dy in lines:
            surface.blit(text, (w // 2 - text.get_width() // 2, py + dy))
