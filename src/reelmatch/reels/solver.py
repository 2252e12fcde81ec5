"""Breadth-first search for the fewest adjacent swaps that create a match.

States live in a flat arena: each entry is a column-major tuple of small
integer tile ids plus its depth, parent index and the swap that produced it.
The visited map keys on grid contents, so a configuration reached through
different swap orders is expanded only once.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List, Tuple

from reelmatch.constants import SOLVER_MAX_ITERATIONS
from reelmatch.reels.types import Cell, GridLike, TileType

logger = logging.getLogger(__name__)

FlatGrid = Tuple[int, ...]
IndexPair = Tuple[int, int]
Swap = Tuple[Cell, Cell]

# Returned when the frontier empties or the iteration ceiling trips.
NO_SOLUTION = None


def _flatten(board: GridLike) -> Tuple[FlatGrid, int, int]:
    cols = len(board)
    rows = len(board[0]) if cols else 0
    if any(len(column) != rows for column in board):
        raise ValueError("Board columns must all have the same length")
    ids: Dict[TileType, int] = {}
    flat = tuple(ids.setdefault(tile, len(ids)) for column in board for tile in column)
    return flat, cols, rows


def _adjacent_pairs(cols: int, rows: int) -> List[IndexPair]:
    """Every undirected orthogonal neighbour pair, each listed once."""
    pairs: List[IndexPair] = []
    # Horizontal swaps
    for row in range(rows):
        for col in range(cols - 1):
            pairs.append((col * rows + row, (col + 1) * rows + row))
    # Vertical swaps
    for col in range(cols):
        for row in range(rows - 1):
            pairs.append((col * rows + row, col * rows + row + 1))
    return pairs


def _line_triples(cols: int, rows: int) -> List[Tuple[int, int, int]]:
    triples: List[Tuple[int, int, int]] = []
    for row in range(rows):
        for col in range(cols - 2):
            base = col * rows + row
            triples.append((base, base + rows, base + 2 * rows))
    for col in range(cols):
        for row in range(rows - 2):
            base = col * rows + row
            triples.append((base, base + 1, base + 2))
    return triples


def _has_triple(grid: FlatGrid, triples: List[Tuple[int, int, int]]) -> bool:
    for a, b, c in triples:
        if grid[a] == grid[b] == grid[c]:
            return True
    return False


def find_minimum_swap_path(
    board: GridLike,
    *,
    max_iterations: int = SOLVER_MAX_ITERATIONS,
) -> List[Swap] | None:
    """Return the shortest list of adjacent swaps that produces a match.

    Swaps are ``((col, row), (col, row))`` pairs applied in order. An empty list
    means the board already holds a match; ``None`` means no answer was found
    within ``max_iterations`` dequeued states. ``board`` is never modified.
    """

    start, cols, rows = _flatten(board)
    pairs = _adjacent_pairs(cols, rows)
    triples = _line_triples(cols, rows)

    arena: List[FlatGrid] = [start]
    depth: List[int] = [0]
    parent: List[int] = [-1]
    via: List[int] = [-1]
    visited: Dict[FlatGrid, int] = {start: 0}
    queue: Deque[int] = deque([0])
    iterations = 0

    while queue and iterations < max_iterations:
        index = queue.popleft()
        iterations += 1
        grid = arena[index]
        if _has_triple(grid, triples):
            path = _unwind(index, parent, via, pairs, rows)
            logger.debug("Solution found in %d moves after %d states.", depth[index], iterations)
            return path
        for pair_index, (a, b) in enumerate(pairs):
            # Undoing the parent's swap only leads back to a visited grid.
            if pair_index == via[index]:
                continue
            if grid[a] == grid[b]:
                continue
            cells = list(grid)
            cells[a], cells[b] = cells[b], cells[a]
            child = tuple(cells)
            if child in visited:
                continue
            visited[child] = len(arena)
            arena.append(child)
            depth.append(depth[index] + 1)
            parent.append(index)
            via.append(pair_index)
            queue.append(visited[child])

    logger.warning("No solution found after checking %d states.", iterations)
    return NO_SOLUTION


def _unwind(index: int, parent: List[int], via: List[int], pairs: List[IndexPair], rows: int) -> List[Swap]:
    path: List[Swap] = []
    while parent[index] != -1:
        a, b = pairs[via[index]]
        path.append(((a // rows, a % rows), (b // rows, b % rows)))
        index = parent[index]
    path.reverse()
    return path


def solve_minimum_swaps(
    board: GridLike,
    *,
    max_iterations: int = SOLVER_MAX_ITERATIONS,
) -> int | None:
    """Minimum number of adjacent swaps needed before ``board`` shows a match.

    Returns ``0`` for a board that already matches and ``None`` when the search
    gives up. Each call owns its own queue and visited set.
    """

    path = find_minimum_swap_path(board, max_iterations=max_iterations)
    if path is None:
        return NO_SOLUTION
    return len(path)
