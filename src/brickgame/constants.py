STAGE_WIDTH = 16
STAGE_HEIGHT = 30

# Gravity delay in milliseconds (1000ms = 1s)
DEFAULT_SPEED = 1000
SPAWN_ROW = 0

# The "next brick" preview box
PREVIEW_WIDTH = 6
PREVIEW_HEIGHT = 6

# Score per cleared row, plus a bonus for every extra row cleared in the same pass
ROW_SCORE = 10
MULTI_ROW_BONUS = 5

# (level, speed in ms, lowest score, highest score inclusive)
DEFAULT_SPEED_TABLE = (
    (1, 1000, 0, 499),
    (2, 800, 500, 999),
    (3, 600, 1000, 1999),
    (4, 400, 2000, 3999),
    (5, 300, 4000, 5999),
    (6, 200, 6000, 7999),
    (7, 150, 8000, 8999),
    (8, 100, 9000, 9999),
    (9, 20, 10000, None),  # None: no upper bound
)

ACTION_MOVE = "move"
ACTION_ROTATE_RIGHT = "rotate_right"

# Arcade key symbols (arcade.key.*)
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_SPACE = 32

# Window geometry
CELL_SIZE = 20
WINDOW_MARGIN = 20
SIDE_PANEL_WIDTH = 180
