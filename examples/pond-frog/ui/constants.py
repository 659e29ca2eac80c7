"""Layout, color, and rendering constants."""
from __future__ import annotations

# Window defaults (overridden by CLI --scale / --fps)
DEFAULT_SCALE = 4
FPS = 60
TITLE = "Pond Frog"

# Colors
COLOR_POND = (103, 114, 169)
COLOR_FROG = (84, 160, 72)
COLOR_FROG_DARK = (40, 96, 40)
COLOR_MOUTH = (150, 40, 60)
COLOR_TONGUE = (220, 90, 110)
COLOR_FLY = (30, 30, 36)
COLOR_WING = (210, 220, 240)
COLOR_CATCH = (255, 240, 150)
COLOR_TEXT = (240, 240, 240)

# Sizes in arena units
FROG_RADIUS = 8
FLY_RADIUS = 2
EFFECT_RADIUS = 3
