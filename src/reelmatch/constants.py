from typing import Dict, Tuple

# A fresh session picks its square board size from these when none is forced.
GRID_SIZE_CHOICES: Tuple[int, ...] = (5, 7)

# Length of every reel strip. Must be at least twice the grid size so a full
# visible window plus its scroll-in cells fits inside one period.
DEFAULT_COLUMN_LENGTH = 32

# Balance guarantee: every tile type appears at least this often on a board.
MIN_TILES_PER_TYPE = 3
# Smallest catalog the generator accepts.
MIN_TILE_TYPES = 3

# Stop offset rejection sampling.
POOL_TARGET_SIZE = 100
POOL_MAX_ATTEMPTS = 1000

# Minimum-swap search: states dequeued before giving up.
SOLVER_MAX_ITERATIONS = 10000

# Shortest run that counts as a match.
MATCH_LENGTH = 3

# Canonical tile types installed when the host does not provide a catalog.
DEFAULT_TILE_TYPES: Dict[str, Tuple[int, int, int]] = {
    'red':     (180, 60, 60),
    'green':   (80, 170, 80),
    'blue':    (70, 90, 180),
    'yellow':  (200, 190, 80),
    'magenta': (170, 80, 160),
    'cyan':    (70, 170, 170),
    'orange':  (200, 130, 60),
}
