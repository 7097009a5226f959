"""
Constants for the game.
"""

from __future__ import annotations

# grid
ROWS = 23
COLS = 15
CELL_SIZE = 40
MARGIN = 40
SIDE_PANEL_WIDTH = 500

PLAYER_ROW = ROWS - 1
PLAYER_START_COL = COLS // 2

WINDOW_SIZE = (
    COLS * CELL_SIZE + MARGIN * 2 + SIDE_PANEL_WIDTH,
    ROWS * CELL_SIZE + MARGIN * 2,
)
TITLE = "Space Shooter"

# one frame every 50 ms
FPS = 20

# progression
MAX_LIVES = 3
MAX_LEVEL = 5
POINTS_PER_LEVEL = 10
BOSS_MIN_LEVEL = 3

# timing (seconds)
INVINCIBILITY_DURATION = 1.0
HIT_EFFECT_DURATION = 0.3
MAX_HIT_EFFECTS = 50
LEVEL_UP_HOLD = 2.0
LEVEL_UP_BLINK = 0.3
INVINCIBLE_BLINK_MS = 100

MENU_COOLDOWN = 0.2
PLAYER_MOVE_COOLDOWN = 0.1
PLAYER_FIRE_COOLDOWN = 0.3

METEOR_MOVE_CADENCE = 0.833
ENEMY_MOVE_CADENCE = 0.833
ENEMY_MIN_CADENCE = 0.05
BOSS_MOVE_CADENCE = 0.8
BOSS_MIN_CADENCE = 0.5
PLAYER_BULLET_CADENCE = 0.05

# boss fires on every Nth boss-mover tick
BOSS_FIRE_INTERVALS = {3: 3, 4: 2, 5: 1}

# assets, relative to the assets root
IMAGES_DIR = "images"
FONT_PATH = "fonts/font.ttf"

# colours
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
YELLOW = (255, 255, 0)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
CYAN = (0, 255, 255)
GRAY = (150, 150, 150)
BACKGROUND = (40, 40, 40)
PAUSE_OVERLAY = (0, 0, 0, 150)
