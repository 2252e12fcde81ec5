"""Reel strip generation, stop validation and minimum-swap search."""

from reelmatch.reels.matches import find_matches, has_match
from reelmatch.reels.materializer import materialize, tile_at
from reelmatch.reels.pool import StopOffsetPool, build_stop_offset_pool, sample_stop_offsets
from reelmatch.reels.sequences import (
    generate_column_sequence,
    generate_column_sequences,
    validate_parameters,
)
from reelmatch.reels.session import Session, choose_grid_size, create_session
from reelmatch.reels.solver import NO_SOLUTION, find_minimum_swap_path, solve_minimum_swaps
from reelmatch.reels.validation import has_minimum_tiles_per_type, is_match_free, is_valid_stop

__all__ = [
    "NO_SOLUTION",
    "Session",
    "StopOffsetPool",
    "build_stop_offset_pool",
    "choose_grid_size",
    "create_session",
    "find_matches",
    "find_minimum_swap_path",
    "generate_column_sequence",
    "generate_column_sequences",
    "has_match",
    "has_minimum_tiles_per_type",
    "is_match_free",
    "is_valid_stop",
    "materialize",
    "sample_stop_offsets",
    "solve_minimum_swaps",
    "tile_at",
    "validate_parameters",
]
