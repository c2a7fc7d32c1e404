from __future__ import annotations

from pathlib import Path

# Grid
CELL_SIZE = 30
CELL_COUNT = 25
OFFSET = 75

WIDTH = CELL_SIZE * CELL_COUNT
HEIGHT = CELL_SIZE * CELL_COUNT
WINDOW_SIZE = (WIDTH + 2 * OFFSET, HEIGHT + 2 * OFFSET)
TITLE = "Retro Snake"

# Timing
FPS = 60
TICK_INTERVAL = 0.2  # seconds between simulation ticks

# Snake start: head first, facing right.
START_BODY = ((6, 9), (5, 9), (4, 9))
START_DIRECTION = (1, 0)

# Colors
GREEN = (173, 204, 96)
DARK_GREEN = (43, 51, 24)
FOOD_FALLBACK = (200, 40, 40)

# Assets, relative to the --assets directory.
FOOD_IMAGE = Path("Graphics") / "food.png"
EAT_SOUND = Path("Sounds") / "eat.mp3"
WALL_SOUND = Path("Sounds") / "wall.mp3"
