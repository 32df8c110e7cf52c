"""Layout constants and color definitions."""

FPS = 60

# Layout dimensions
WHEEL_SIZE = 520
SIDEBAR_W = 260
STATUS_H = 36

SCREEN_W = WHEEL_SIZE + SIDEBAR_W
SCREEN_H = WHEEL_SIZE + STATUS_H

ROW_H = 20
LIST_TOP = 150

# Duration controls (seconds)
DURATION_STEP = 0.5

# Winner highlight flash (seconds)
FLASH_TIME = 0.8

# Colors
BG_COLOR = (20, 20, 30)
SIDEBAR_BG = (25, 25, 38)
STATUS_BG = (35, 35, 50)
BORDER = (50, 50, 70)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
POINTER_COLOR = (240, 240, 250)
HUB_COLOR = (40, 40, 55)
WINNER_COLOR = (255, 215, 0)
STOP_ON = (100, 255, 100)

SEGMENT_COLORS: list[tuple[int, int, int]] = [
    (46, 204, 113),
    (241, 196, 15),
    (52, 152, 219),
    (155, 89, 182),
    (231, 76, 60),
    (230, 126, 34),
    (26, 188, 156),
    (236, 112, 160),
]
