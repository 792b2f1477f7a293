"""Global constants and default settings."""

import math

WINDOW_WIDTH = 400
WINDOW_HEIGHT = 600
FPS = 60
WINDOW_TITLE = "BeatFlap"

# Actor physics (per frame)
GRAVITY = 0.5
JUMP_FORCE = -10.0
JUMP_TILT = -0.5  # radians, pitch up
TILT_SCALE = 0.05
MAX_TILT = math.pi / 4
ACTOR_SIZE = 30
ACTOR_X = 100

# Obstacles
OBSTACLE_WIDTH = 50
OBSTACLE_GAP = 150
GAP_MARGIN = 50  # min distance between the gap band and the playfield edges
SCROLL_SPEED = 2.0  # pixels per frame

# Rhythm
DEFAULT_BPM = 120
MIN_BPM = 60
MAX_BPM = 300
BEATS_PER_OBSTACLE = 2

# Presentation only
FLAP_ANIMATION_DURATION = 0.2  # seconds
