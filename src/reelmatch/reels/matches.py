from __future__ import annotations

from typing import List, Set

from reelmatch.constants import MATCH_LENGTH
from reelmatch.reels.types import Cell, GridLike


def has_match(grid: GridLike) -> bool:
    """Return True if any row or column holds three equal adjacent cells."""
    cols = len(grid)
    for col in range(cols):
        column = grid[col]
        for row in range(len(column) - 2):
            if column[row] == column[row + 1] == column[row + 2]:
                return True
    if cols < 3:
        return False
    rows = len(grid[0])
    for row in range(rows):
        for col in range(cols - 2):
            if grid[col][row] == grid[col + 1][row] == grid[col + 2][row]:
                return True
    return False


def find_matches(grid: GridLike) -> List[List[Cell]]:
    """Detect all contiguous horizontal or vertical runs of length >= 3.

    Runs that share a cell (L and T shapes) are merged into one group.
    """
    cols = len(grid)
    if not cols:
        return []
    rows = len(grid[0])
    runs: List[List[Cell]] = []
    # Horizontal runs
    for r in range(rows):
        run: List[Cell] = []
        last = None
        for c in range(cols):
            tval = grid[c][r]
            if run and tval == last:
                run.append((c, r))
            else:
                if len(run) >= MATCH_LENGTH:
                    runs.append(run)
                run = [(c, r)]
                last = tval
        if len(run) >= MATCH_LENGTH:
            runs.append(run)
    # Vertical runs
    for c in range(cols):
        run = []
        last = None
        for r in range(rows):
            tval = grid[c][r]
            if run and tval == last:
                run.append((c, r))
            else:
                if len(run) >= MATCH_LENGTH:
                    runs.append(run)
                run = [(c, r)]
                last = tval
        if len(run) >= MATCH_LENGTH:
            runs.append(run)
    if not runs:
        return []
    groups = [set(run) for run in runs]
    merged: List[Set[Cell]] = []
    while groups:
        first = groups.pop()
        changed = True
        while changed:
            changed = False
            for g in groups[:]:
                if first & g:
                    first |= g
                    groups.remove(g)
                    changed = True
        merged.append(first)
    return [sorted(group) for group in merged]
