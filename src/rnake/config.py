from dataclasses import dataclass
from typing import Optional
import random

# ----- Grid & window -----
GRID_W, GRID_H = 40, 30
CELL_SIZE = 20
MARGIN = 1
WIDTH, HEIGHT = GRID_W * CELL_SIZE, GRID_H * CELL_SIZE
CAPTION = "Rnake"

# ----- Colors -----
BG        = (0, 0, 0)
BG_PAUSED = (30, 30, 30)
GREEN     = (0, 255, 0)
RED       = (255, 0, 0)
PAUSED_TEXT = (0, 255, 255)
OVER_TEXT   = (255, 20, 147)

# Overlay text is stretched into this rect (x, y, w, h)
TEXT_RECT = (100, 150, 600, 300)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    fps: int = 30
    tick_every: int = 3           # one simulation tick per N frames
    font_path: Optional[str] = None  # None -> pygame's default font
    font_size: int = 128

CFG = Config(seed=0)

# Make food placement reproducible for debugging
random.seed(CFG.seed)
