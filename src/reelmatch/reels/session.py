"""Board sessions: one grid size, one set of reel strips, one stop pool.

A session is built whenever the game starts a fresh board and then serves
every spin until the next session replaces it.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from reelmatch.components.tile_catalog import TileCatalog
from reelmatch.constants import (
    DEFAULT_COLUMN_LENGTH,
    GRID_SIZE_CHOICES,
    MIN_TILES_PER_TYPE,
    POOL_MAX_ATTEMPTS,
    POOL_TARGET_SIZE,
)
from reelmatch.reels.materializer import materialize, tile_at_offset
from reelmatch.reels.pool import StopOffsetPool, build_stop_offset_pool
from reelmatch.reels.sequences import generate_column_sequences, validate_parameters
from reelmatch.reels.types import ColumnSequence, Grid, OffsetVector, TileType
from reelmatch.reels.validation import is_valid_stop

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Session:
    grid_size: int
    tile_types: Tuple[TileType, ...]
    min_tiles_per_type: int
    column_length: int
    sequences: Tuple[ColumnSequence, ...]
    pool: StopOffsetPool
    rng: random.Random

    @property
    def degraded(self) -> bool:
        return self.pool.degraded

    def sample_offsets(self) -> OffsetVector:
        """One random reel stop from the pool."""
        return self.pool.sample(self.rng)

    def materialize(self, offsets: Sequence[int]) -> Grid:
        return materialize(self.sequences, offsets)

    def tile_at(self, column: int, offset: int, row: int) -> TileType:
        """Single cell of ``column`` stopped at ``offset``; rows past the board scroll in."""
        if not 0 <= column < self.grid_size:
            raise IndexError(f"Column {column} out of range for grid size {self.grid_size}")
        return tile_at_offset(self.sequences[column], offset, row)

    def is_valid(self, offsets: Sequence[int]) -> bool:
        return is_valid_stop(self.sequences, offsets, self.tile_types, self.min_tiles_per_type)


def as_tile_types(catalog: TileCatalog | Iterable[TileType]) -> Tuple[TileType, ...]:
    if isinstance(catalog, TileCatalog):
        return tuple(catalog.spawnable)
    return tuple(catalog)


def choose_grid_size(rng: random.Random, choices: Sequence[int] = GRID_SIZE_CHOICES) -> int:
    return rng.choice(tuple(choices))


def create_session(
    grid_size: int,
    tile_catalog: TileCatalog | Iterable[TileType],
    min_tiles_per_type: int = MIN_TILES_PER_TYPE,
    column_length: int = DEFAULT_COLUMN_LENGTH,
    *,
    rng: random.Random | None = None,
    target_pool_size: int = POOL_TARGET_SIZE,
    max_attempts: int = POOL_MAX_ATTEMPTS,
) -> Session:
    """Generate reel strips and their stop pool for a new board.

    Raises ConfigurationError before any generation work when the parameters
    are infeasible. A degraded pool is reported through ``Session.degraded``.
    """

    tile_types = as_tile_types(tile_catalog)
    validate_parameters(grid_size, tile_types, min_tiles_per_type, column_length)
    rng = rng or random.Random()
    sequences = generate_column_sequences(grid_size, tile_types, column_length)
    pool = build_stop_offset_pool(
        sequences,
        tile_types,
        min_tiles_per_type,
        rng,
        target_pool_size=target_pool_size,
        max_attempts=max_attempts,
    )
    logger.debug(
        "Created %dx%d session with %d tile types and %d stop offsets.",
        grid_size,
        grid_size,
        len(tile_types),
        len(pool),
    )
    return Session(
        grid_size=grid_size,
        tile_types=tile_types,
        min_tiles_per_type=min_tiles_per_type,
        column_length=column_length,
        sequences=sequences,
        pool=pool,
        rng=rng,
    )
