from dataclasses import dataclass

@dataclass(slots=True)
class TileType:
    """Per-cell tile type assignment on the live board.

    Stores only the semantic type_name; colors live on the TileCatalog entity.
    """
    type_name: str
