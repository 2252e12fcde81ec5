"""Distribution of minimum-swap budgets over randomly spun boards.

Builds a few sessions per grid size, spins each one repeatedly and plots how
many swaps the solver says the player needs. Useful when tuning the catalog
size or the minimum tile count.

Run with: ``python plot.py``
"""
import random
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

# Ensure src/ is on the import path when run from a checkout.
SRC_PATH = Path(__file__).parent / "src"
if SRC_PATH.exists() and str(SRC_PATH) not in sys.path:
    sys.path.append(str(SRC_PATH))

from reelmatch.constants import DEFAULT_TILE_TYPES, GRID_SIZE_CHOICES  # type: ignore
from reelmatch.reels import create_session, solve_minimum_swaps  # type: ignore

SESSIONS_PER_SIZE = 5
SPINS_PER_SESSION = 40


def collect_moves(grid_size, rng):
    moves = []
    unsolved = 0
    for _ in range(SESSIONS_PER_SIZE):
        session = create_session(grid_size, list(DEFAULT_TILE_TYPES), rng=rng)
        for _ in range(SPINS_PER_SESSION):
            result = solve_minimum_swaps(session.materialize(session.sample_offsets()))
            if result is None:
                unsolved += 1
            else:
                moves.append(result)
    return np.array(moves, dtype=int), unsolved


rng = random.Random(7)
plt.figure(figsize=(7, 4))
for grid_size in GRID_SIZE_CHOICES:
    moves, unsolved = collect_moves(grid_size, rng)
    bins = np.arange(0, max(moves.max(initial=0), 3) + 2) - 0.5
    plt.hist(moves, bins=bins, alpha=0.6, label=f"{grid_size}x{grid_size} (unsolved: {unsolved})")
plt.xlabel("Minimum swaps to first match")
plt.ylabel("Boards")
plt.title("Swap budget per spun board")
plt.legend()
plt.grid(True)
plt.show()
