"""Reel strip generation.

Every column of the board spins through its own fixed, repeating strip of
tile types. Strips are built greedily one cell at a time: drop the types that
would extend a run, then take the least-used remaining type so that each strip
stays balanced across the catalog.
"""
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from reelmatch.constants import MIN_TILE_TYPES
from reelmatch.errors import ConfigurationError
from reelmatch.reels.types import ColumnSequence, TileType


def validate_parameters(
    grid_size: int,
    tile_types: Sequence[TileType],
    min_tiles_per_type: int,
    column_length: int,
) -> None:
    """Reject configurations that can never yield a balanced, match-free board."""

    if grid_size <= 0:
        raise ConfigurationError(f"Grid size must be positive, got {grid_size}")
    if not tile_types:
        raise ConfigurationError("Must provide at least one tile type")
    distinct = len(set(tile_types))
    if distinct != len(tile_types):
        raise ConfigurationError("Tile types must be distinct")
    if distinct < MIN_TILE_TYPES:
        raise ConfigurationError(
            f"Need at least {MIN_TILE_TYPES} tile types to avoid forced matches, got {distinct}"
        )
    if min_tiles_per_type < 0:
        raise ConfigurationError("Minimum tiles per type cannot be negative")
    if column_length < grid_size * 2:
        raise ConfigurationError(
            f"Column length must be at least twice the grid size ({grid_size * 2}), got {column_length}"
        )
    total_minimum = distinct * min_tiles_per_type
    total_cells = grid_size * grid_size
    if total_minimum > total_cells:
        raise ConfigurationError(
            f"Cannot guarantee {min_tiles_per_type} tiles of each type with grid size {grid_size}. "
            f"Need {total_minimum} tiles but only have {total_cells} spaces."
        )


def generate_column_sequence(
    column: int,
    tile_types: Sequence[TileType],
    column_length: int,
    previous_columns: Sequence[ColumnSequence],
    grid_size: int | None = None,
) -> ColumnSequence:
    """Build the reel strip for ``column``.

    ``previous_columns`` holds the strips already generated for the columns to
    the left. Only the first ``grid_size`` cells (the initial visible window)
    look at the left neighbour; without ``grid_size`` the whole strip does.
    """

    window = grid_size if grid_size is not None else column_length
    left = previous_columns[column - 1] if column > 0 else None
    counts: Dict[TileType, int] = {tile: 0 for tile in tile_types}
    sequence: List[TileType] = []
    for i in range(column_length):
        available = list(tile_types)
        if i >= 2 and sequence[i - 1] == sequence[i - 2]:
            available = [t for t in available if t != sequence[i - 1]]
        if left is not None and 2 <= i < window:
            neighbour = left[i]
            if left[i - 1] == neighbour and sequence[i - 1] == neighbour:
                available = [t for t in available if t != neighbour]
        # min() keeps the first minimum, so ties resolve in catalog order.
        chosen = min(available, key=counts.__getitem__)
        sequence.append(chosen)
        counts[chosen] += 1
    return tuple(sequence)


def generate_column_sequences(
    grid_size: int,
    tile_types: Sequence[TileType],
    column_length: int,
) -> Tuple[ColumnSequence, ...]:
    columns: List[ColumnSequence] = []
    for col in range(grid_size):
        columns.append(
            generate_column_sequence(col, tile_types, column_length, columns, grid_size=grid_size)
        )
    return tuple(columns)
