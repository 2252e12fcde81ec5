from dataclasses import dataclass

@dataclass(slots=True)
class TileCatalogRegistry:
    """Empty tag component marking the single entity that stores the tile catalog.

    The same entity also carries a TileCatalog component.
    """
    pass
