"""Slot-reel style match-three board generation and move-count search."""

from reelmatch.errors import ConfigurationError
from reelmatch.reels.session import Session, create_session
from reelmatch.reels.solver import NO_SOLUTION, solve_minimum_swaps

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "NO_SOLUTION",
    "Session",
    "create_session",
    "solve_minimum_swaps",
    "__version__",
]
