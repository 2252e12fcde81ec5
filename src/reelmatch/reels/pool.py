"""Precomputed reel stops that are known to produce a valid board."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, Iterator, Sequence, Tuple

from reelmatch.constants import POOL_MAX_ATTEMPTS, POOL_TARGET_SIZE
from reelmatch.reels.types import ColumnSequence, OffsetVector, TileType
from reelmatch.reels.validation import is_valid_stop

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StopOffsetPool:
    """Deduplicated offset vectors accepted for one set of reel strips.

    ``degraded`` is set when nothing passed validation and the pool only holds
    the all-zero fallback stop. Such a board may contain matches or miss a tile
    type; callers may regenerate with relaxed constraints instead.
    """

    offsets: Tuple[OffsetVector, ...]
    attempts: int
    degraded: bool = False

    def __len__(self) -> int:
        return len(self.offsets)

    def __iter__(self) -> Iterator[OffsetVector]:
        return iter(self.offsets)

    def __contains__(self, offsets: Sequence[int]) -> bool:
        return tuple(offsets) in self.offsets

    def sample(self, rng: random.Random) -> OffsetVector:
        return sample_stop_offsets(self, rng)


def build_stop_offset_pool(
    sequences: Sequence[ColumnSequence],
    tile_types: Sequence[TileType],
    min_tiles_per_type: int,
    rng: random.Random,
    *,
    target_pool_size: int = POOL_TARGET_SIZE,
    max_attempts: int = POOL_MAX_ATTEMPTS,
) -> StopOffsetPool:
    """Rejection-sample random stops until ``target_pool_size`` are accepted.

    Each draw picks every column's offset independently and uniformly in
    ``[0, column_length)``. Repeated draws of an accepted stop are ignored.
    """

    grid_size = len(sequences)
    accepted: Dict[OffsetVector, None] = {}
    attempts = 0
    while attempts < max_attempts and len(accepted) < target_pool_size:
        offsets = tuple(rng.randrange(len(sequences[col])) for col in range(grid_size))
        attempts += 1
        if offsets in accepted:
            continue
        if is_valid_stop(sequences, offsets, tile_types, min_tiles_per_type):
            accepted[offsets] = None

    if not accepted:
        logger.warning(
            "Could not generate any valid board configurations after %d attempts; "
            "falling back to zero offsets. Consider relaxing constraints.",
            attempts,
        )
        return StopOffsetPool(offsets=((0,) * grid_size,), attempts=attempts, degraded=True)

    logger.info("Preconstructed %d valid stop positions after %d attempts.", len(accepted), attempts)
    return StopOffsetPool(offsets=tuple(accepted), attempts=attempts)


def sample_stop_offsets(pool: StopOffsetPool, rng: random.Random) -> OffsetVector:
    """Uniform draw with replacement; consecutive spins may land on the same stop."""
    return rng.choice(pool.offsets)
