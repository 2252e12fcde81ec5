from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

@dataclass(slots=True)
class TileCatalog:
    """Tile types a session may place on its reel strips.

    ``types`` maps every known type name to its display color. ``spawnable``
    is the order the strip generator sees: when two types have been used
    equally often, the earlier one wins. Unknown and repeated names are
    dropped; an empty selection means every defined type in definition order.
    """
    types: Dict[str, Tuple[int, int, int]]
    spawnable: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        ordered = dict.fromkeys(name for name in self.spawnable if name in self.types)
        self.spawnable = list(ordered or self.types)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "TileCatalog":
        return cls(types={name: (255, 255, 255) for name in names})
