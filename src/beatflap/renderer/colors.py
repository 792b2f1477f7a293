"""Color palette."""

# RGB tuples
BG = (18, 18, 24)
ACTOR = (255, 215, 0)
ACTOR_OUTLINE = (200, 150, 0)
OBSTACLE = (255, 255, 255)
OBSTACLE_CAP = (134, 134, 134)
HUD_TEXT = (220, 220, 220)
HUD_ACCENT = (80, 220, 100)
OVERLAY = (0, 0, 0, 204)
WARNING = (220, 60, 60)
