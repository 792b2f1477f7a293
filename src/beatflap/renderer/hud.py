"""Heads-up display: score, best score and tempo."""

from __future__ import annotations

import pygame

from beatflap.models import Snapshot
from beatflap.renderer.colors import HUD_ACCENT, HUD_TEXT


def render_hud(surface: pygame.Surface, snapshot: Snapshot) -> None:
    font = pygame.font.SysFont("monospace", 20)
    big = pygame.font.SysFont("monospace", 40, bold=True)

    score = big.render(str(snapshot.score), True, HUD_TEXT)
    surface.blit(score, (surface.get_width() // 2 - score.get_width() // 2, 20))

    lines = [
        f"BPM: {snapshot.bpm}",
        f"Best: {snapshot.best_score}",
    ]
    y = 10
    for line in lines:
        text = font.render(line, True, HUD_ACCENT)
        surface.blit(text, (10, y))
        y += 24
