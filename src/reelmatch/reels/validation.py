"""Stop offset checks evaluated straight from the reel strips.

A board implied by ``(sequences, offsets)`` is never built here; every cell is
read through the modulo lookup so the answer depends only on that pair.
"""
from __future__ import annotations

from typing import Dict, Sequence

from reelmatch.reels.types import ColumnSequence, TileType


def _cell(sequences: Sequence[ColumnSequence], offsets: Sequence[int], col: int, row: int) -> TileType:
    sequence = sequences[col]
    return sequence[(offsets[col] + row) % len(sequence)]


def is_match_free(sequences: Sequence[ColumnSequence], offsets: Sequence[int]) -> bool:
    grid_size = len(sequences)
    if len(offsets) != grid_size:
        raise ValueError(f"Expected {grid_size} offsets, got {len(offsets)}")
    # Horizontal triples
    for y in range(grid_size):
        for x in range(grid_size - 2):
            first = _cell(sequences, offsets, x, y)
            if first == _cell(sequences, offsets, x + 1, y) == _cell(sequences, offsets, x + 2, y):
                return False
    # Vertical triples
    for x in range(grid_size):
        for y in range(grid_size - 2):
            first = _cell(sequences, offsets, x, y)
            if first == _cell(sequences, offsets, x, y + 1) == _cell(sequences, offsets, x, y + 2):
                return False
    return True


def tile_counts(sequences: Sequence[ColumnSequence], offsets: Sequence[int]) -> Dict[TileType, int]:
    """Tally tile types across the ``grid_size x grid_size`` board the offsets imply."""
    grid_size = len(sequences)
    counts: Dict[TileType, int] = {}
    for x in range(grid_size):
        for y in range(grid_size):
            tile = _cell(sequences, offsets, x, y)
            counts[tile] = counts.get(tile, 0) + 1
    return counts


def has_minimum_tiles_per_type(
    sequences: Sequence[ColumnSequence],
    offsets: Sequence[int],
    tile_types: Sequence[TileType],
    min_tiles_per_type: int,
) -> bool:
    counts = tile_counts(sequences, offsets)
    return all(counts.get(tile, 0) >= min_tiles_per_type for tile in tile_types)


def is_valid_stop(
    sequences: Sequence[ColumnSequence],
    offsets: Sequence[int],
    tile_types: Sequence[TileType],
    min_tiles_per_type: int,
) -> bool:
    """True when the offsets give a match-free board holding enough of every type."""
    if not is_match_free(sequences, offsets):
        return False
    return has_minimum_tiles_per_type(sequences, offsets, tile_types, min_tiles_per_type)
