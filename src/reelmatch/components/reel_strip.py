from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class ReelStrip:
    """Fixed repeating tile sequence one board column spins through."""
    column: int
    tiles: Tuple[str, ...]
