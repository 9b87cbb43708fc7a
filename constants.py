# constants.py

"""
Application Constants

This module defines static configuration values for the screensaver's framework.
These are not expected to change between runs.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

import math

# Screen dimensions (debug window only; screensaver mode uses the full display)
WIDTH = 1280  # Pixels
HEIGHT = 720  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREY = (90, 90, 100)
ACCENT = (72, 159, 255)

# Window Titles
TITLE = "Hexagon Screensaver"
CONFIG_TITLE = "Hexagon Screensaver Settings"

# Tiling
CELL_RADIUS = 40.0  # Pixels. Circumradius of one hexagon / heart size.
SIN_60 = math.sin(math.radians(60))
GRID_MARGIN_CELLS = 2  # Extra rows/columns past the viewport edge.

# Heart outline resolution
HEART_SEGMENTS = 100

# Animation
COLOR_TRANSITION_RATE = 0.3  # Crossfade progress per second (~3.3 s per color).
PHASE_SPEED_SCALE = 10.0  # phase_speed = (1 - threshold) * PHASE_SPEED_SCALE
VISIBILITY_FLOOR = 0.01  # Cells at or below this opacity are not drawn.

# Logging
LOG_EVERY_FRAMES = 600  # Throttle for the per-frame debug line.

# Configuration window layout
CONFIG_WIDTH = 420  # Pixels
CONFIG_HEIGHT = 300  # Pixels
CONFIG_BG = (15, 15, 25)
CONFIG_TEXT = (220, 230, 240)
CONFIG_FONT_SIZE = 18
