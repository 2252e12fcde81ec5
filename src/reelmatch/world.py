import random

from esper import World

from reelmatch.components.tile_catalog import TileCatalog
from reelmatch.components.tile_catalog_registry import TileCatalogRegistry
from reelmatch.constants import DEFAULT_TILE_TYPES


def create_world(
    *,
    catalog: TileCatalog | None = None,
    rng: random.Random | None = None,
) -> World:
    """Create a world holding the tile catalog and the shared random source.

    Systems attached later reuse ``world.random`` so a seeded world replays the
    same sessions and spins.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    world.create_entity(
        TileCatalogRegistry(),
        catalog or TileCatalog(types=dict(DEFAULT_TILE_TYPES)),
    )
    return world
