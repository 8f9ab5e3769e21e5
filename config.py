# config.py
# All configurable constants and settings

import os

# Optional debug logging toggle – when enabled, mode changes, spawns and
# collisions are traced to logs/debug.txt. Disabled by default for normal play.
LOG_ENABLED = bool(int(os.getenv("DINO_LOG_ENABLED", "0")))
LOG_FILE_PATH = "logs/debug.txt"

# Open the window fullscreen instead of sizing it to the console.
FULLSCREEN = bool(int(os.getenv("DINO_FULLSCREEN", "0")))

WINDOW_TITLE = "Dino Runner"

# Console grid (cells)
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50

# Pixel size of one console cell and margin around the console
CELL_SIZE = 16
GUTTER = 8

# Frames per second
FPS = 60

# Physics step threshold in milliseconds
FRAME_DURATION = 35.0

# Track layout
FLOOR = 40
PLAYER_COLUMN = 10

# Player physics
MAX_FALL_VELOCITY = 10
JUMP_VELOCITY = -3

# Obstacle generation
MAX_OBSTACLE_RISE = 5          # rows above the floor an obstacle may float
MIN_OBSTACLE_SPEED = -1.5      # negative draws become ground level obstacles
SPEED_PER_POINT = 0.02         # upper speed bound grows with score

# Obstacle field
RETIRE_DISTANCE = 5            # columns behind the player
SPAWN_LOOKAHEAD = SCREEN_WIDTH * 9 // 10

# Sky darkens every SKY_BAND_SIZE points and wraps every SKY_CYCLE points
SKY_BAND_SIZE = 10
SKY_CYCLE = 50

# Named colors
WHITE = (255, 255, 255)
LIGHT_GRAY = (211, 211, 211)
GRAY = (169, 169, 169)
DARK_GRAY = (105, 105, 105)
BLACK = (0, 0, 0)
ORANGE1 = (255, 165, 0)
DARK_GREEN = (0, 100, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)

SKY_COLORS = (WHITE, LIGHT_GRAY, GRAY, DARK_GRAY, BLACK)

# Glyphs
PLAYER_GLYPH = "&"
FLOOR_GLYPH = "-"

# Settings dictionary for values the loop re-reads every frame
settings_data = {
    "FPS": FPS,
}
