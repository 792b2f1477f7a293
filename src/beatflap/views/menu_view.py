"""Start screen."""

from __future__ import annotations

import pygame

from beatflap.models import RhythmMode
from beatflap.pulse_input import drain
from beatflap.renderer import colors as colors_mod
from beatflap.views.base import ViewAction, ViewContext

_MODE_LABELS = {
    RhythmMode.PASSAGE: "Passing obstacles sets the beat",
    RhythmMode.EXTERNAL: "Tap B or hit a MIDI pad to set the beat",
}


class MenuView:
    name = "menu"
    display_name = "Start Screen"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._mode: RhythmMode = RhythmMode.PASSAGE
        self._best: int = 0
        self._font: pygame.font.Font | None = None
        self._title_font: pygame.font.Font | None = None

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        self._mode = context.rhythm_mode
        self._best = context.scores.load_best_score()
        self._font = pygame.font.SysFont("monospace", 16)
        self._title_font = pygame.font.SysFont("monospace", 40, bold=True)

    def on_exit(self) -> None:
        pass

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if event.type != pygame.KEYDOWN:
            return None

        if event.key == pygame.K_ESCAPE:
            return ViewAction(kind="quit")
        elif event.key == pygame.K_TAB:
            modes = list(RhythmMode)
            self._mode = modes[(modes.index(self._mode) + 1) % len(modes)]
        elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
            return ViewAction(kind="switch", target="game", context_patch={"rhythm_mode": self._mode})

        return None

    def update(self, dt: float) -> ViewAction | None:
        # input on the start screen must not carry over into the first frame of play
        if self._context:
            drain(self._context.midi_input)
            drain(self._context.keyboard_input)
        return None

    def draw(self, surface: pygame.Surface) -> None:
        if not self._font or not self._title_font or not self._context:
            return

        surface.fill(colors_mod.BG)
        w, h = surface.get_size()

        title = self._title_font.render("BeatFlap", True, colors_mod.ACTOR)
        surface.blit(title, (w // 2 - title.get_width() // 2, h // 4))

        if self._context.midi_input is not None:
            status, color = "MIDI pad: active", colors_mod.HUD_ACCENT
        else:
            status, color = "No MIDI pad. Using spacebar to jump.", colors_mod.WARNING

        lines = [
            (f"Best: {self._best}", colors_mod.HUD_TEXT),
            (status, color),
            (f"Mode: {_MODE_LABELS[self._mode]}", colors_mod.HUD_TEXT),
            ("Tab: change mode", (120, 120, 140)),
            ("Space/Enter: start | Esc: quit", (120, 120, 140)),
        ]
        y = h // 2
        for line, line_color in lines:
            text = self._font.render(line, True, line_color)
            surface.blit(text, (w // 2 - text.get_width() // 2, y))
            y += 28
