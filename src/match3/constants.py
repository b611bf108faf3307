GRID_WIDTH = 8
GRID_HEIGHT = 8
DEFAULT_TILE_KINDS = 6

# A cell is matched when at least this many equal neighbours line up with it on one axis
# (two neighbours plus the cell itself make the classic three-in-a-row).
MIN_NEIGHBOUR_COUNT_FOR_MATCH = 2

# Returned by the direction resolver when stepping would leave the board.
NO_NEIGHBOUR = -1

# Consecutive rejected picks for a single cell before a shuffle attempt is abandoned.
MAX_TRIES_PER_CELL = 30
# Whole-board attempts before shuffle/generation gives up. None disables the cap.
MAX_SHUFFLE_ATTEMPTS = 1000
