GRID_ROWS = 8
GRID_COLS = 8

# Score needed to clear the level.
TARGET_SCORE = 1000

# Points awarded per settle pass, keyed by the number of cells cleared in that pass.
SCORE_THREE = 100
SCORE_FOUR = 200
SCORE_FIVE_PLUS = 300

# Regenerations tried when the board has no legal move before the game ends.
RESHUFFLE_ATTEMPTS = 5
# Cascade passes allowed within one settle before it is treated as a runaway.
MAX_SETTLE_PASSES = 1000

# Seconds the most recent match stays highlighted.
PENDING_REMOVAL_SECONDS = 0.3
# Seconds without a settle pass before the tick re-checks the board.
SETTLE_GRACE_SECONDS = 0.5

# Cosmetic animation durations (seconds).
FADE_DURATION = 0.2
FALL_DURATION = 0.25

# Window and board layout.
WINDOW_WIDTH = 400
WINDOW_HEIGHT = 550
TILE_SIZE = 40
TILE_GAP = 2
BOARD_MARGIN = 10
TOP_MARGIN = 90
