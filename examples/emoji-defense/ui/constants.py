"""Screen layout and colours for the emoji-defense client."""
from __future__ import annotations

from tick_defense import COLUMNS, ROWS

TILE_SIZE = 72
GRID_W = COLUMNS * TILE_SIZE
GRID_H = ROWS * TILE_SIZE
SIDEBAR_W = 260
STATUS_H = 40
SCREEN_W = GRID_W + SIDEBAR_W
SCREEN_H = GRID_H + STATUS_H
FPS = 60

GRASS = (70, 130, 60)
ROAD = (170, 140, 90)
GRID_LINE = (30, 40, 30)
HIT_FLASH = (255, 90, 60)
FOCUS = (255, 230, 80)
PREVIEW_OK = (255, 255, 0)
PREVIEW_BAD = (255, 80, 80)
TEXT = (220, 220, 220)
DIM = (130, 130, 140)

TOWER_COLORS = {
    "archer": (150, 100, 50),
    "frost": (120, 190, 240),
    "blaze": (240, 110, 40),
}
ENEMY_COLORS = {
    "small": (150, 80, 200),
    "medium": (200, 60, 60),
    "large": (60, 160, 80),
}
