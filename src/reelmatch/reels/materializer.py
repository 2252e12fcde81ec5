"""Turn reel strips plus stop offsets into concrete boards."""
from __future__ import annotations

from typing import Sequence

from reelmatch.reels.types import ColumnSequence, Grid, OffsetVector, TileType


def tile_at(
    sequences: Sequence[ColumnSequence],
    offsets: Sequence[int],
    column: int,
    row: int,
) -> TileType:
    """Tile shown at ``(column, row)`` when ``column`` stops at ``offsets[column]``."""

    if not 0 <= column < len(sequences):
        raise IndexError(f"Column {column} out of range for {len(sequences)} columns")
    return tile_at_offset(sequences[column], offsets[column], row)


def tile_at_offset(sequence: ColumnSequence, offset: int, row: int) -> TileType:
    """Read one cell of a strip that is stopped at ``offset``.

    Rows may run past the visible board (scroll-in cells) but not past one
    full period of the strip.
    """

    length = len(sequence)
    if not 0 <= offset < length:
        raise IndexError(f"Offset {offset} out of range for column length {length}")
    if not 0 <= row < length:
        raise IndexError(f"Row {row} out of range for column length {length}")
    return sequence[(offset + row) % length]


def materialize(sequences: Sequence[ColumnSequence], offsets: Sequence[int]) -> Grid:
    """Build the full ``grid[col][row]`` board for a stop offset vector."""

    grid_size = len(sequences)
    if len(offsets) != grid_size:
        raise ValueError(f"Expected {grid_size} offsets, got {len(offsets)}")
    return tuple(
        tuple(tile_at_offset(sequences[col], offsets[col], row) for row in range(grid_size))
        for col in range(grid_size)
    )


def normalize_offsets(offsets: Sequence[int], column_length: int) -> OffsetVector:
    """Fold arbitrary integers into ``[0, column_length)``; equal modulo the strip length."""

    return tuple(int(offset) % column_length for offset in offsets)
