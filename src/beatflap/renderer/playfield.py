"""Draw the actor and the obstacles."""

from __future__ import annotations

import math

import pygame

from beatflap.models import ActorView, ObstacleView
from beatflap.renderer import colors as colors_mod

CAP_HEIGHT = 20
CAP_OVERHANG = 5


def render_obstacles(surface: pygame.Surface, obstacles: tuple[ObstacleView, ...]) -> None:
    """Each obstacle is a top and bottom column with a cap at the gap edges."""
    h = surface.get_height()
    for o in obstacles:
        x, w = int(o.x), int(o.width)
        gap_top = int(o.gap_top)
        gap_bottom = int(o.gap_top + o.gap_height)

        pygame.draw.rect(surface, colors_mod.OBSTACLE, pygame.Rect(x, 0, w, gap_top))
        pygame.draw.rect(surface, colors_mod.OBSTACLE, pygame.Rect(x, gap_bottom, w, h - gap_bottom))

        cap_x = x - CAP_OVERHANG
        cap_w = w + 2 * CAP_OVERHANG
        pygame.draw.rect(surface, colors_mod.OBSTACLE_CAP, pygame.Rect(cap_x, gap_top - CAP_HEIGHT, cap_w, CAP_HEIGHT))
        pygame.draw.rect(surface, colors_mod.OBSTACLE_CAP, pygame.Rect(cap_x, gap_bottom, cap_w, CAP_HEIGHT))


def render_actor(surface: pygame.Surface, actor: ActorView, tilt: float | None = None) -> None:
    """Draw the actor as a disc with a beak, rotated by ``tilt`` radians."""
    angle = actor.tilt if tilt is None else tilt
    size = int(max(actor.width, actor.height))
    sprite = pygame.Surface((size, size), pygame.SRCALPHA)
    r = size // 2
    pygame.draw.circle(sprite, colors_mod.ACTOR, (r, r), r)
    pygame.draw.circle(sprite, colors_mod.ACTOR_OUTLINE, (r, r), r, 2)
    pygame.draw.polygon(sprite, colors_mod.ACTOR_OUTLINE, [(size - 4, r - 4), (size, r), (size - 4, r + 4)])

    # pygame rotates counter-clockwise in degrees; positive tilt points the nose down
    rotated = pygame.transform.rotate(sprite, -math.degrees(angle))
    center = (actor.x + actor.width / 2, actor.y + actor.height / 2)
    surface.blit(rotated, rotated.get_rect(center=(int(center[0]), int(center[1]))))
