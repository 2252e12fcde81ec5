from dataclasses import dataclass, field
from typing import Tuple

@dataclass(slots=True)
class SpinState:
    """Stop offsets currently shown on the board and how many spins ran this session."""
    offsets: Tuple[int, ...] = field(default_factory=tuple)
    spin_count: int = 0
