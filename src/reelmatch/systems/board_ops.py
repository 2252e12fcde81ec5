from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from esper import World

from reelmatch.components.board import Board
from reelmatch.components.board_position import BoardPosition
from reelmatch.components.reel_strip import ReelStrip
from reelmatch.components.tile import TileType
from reelmatch.components.tile_catalog import TileCatalog
from reelmatch.components.tile_catalog_registry import TileCatalogRegistry
from reelmatch.reels.matches import find_matches
from reelmatch.reels.materializer import tile_at
from reelmatch.reels.types import ColumnSequence, Grid

# Live board positions are (row, col); materialized grids are indexed [col][row].
Position = Tuple[int, int]


def get_tile_catalog(world: World) -> TileCatalog:
    for entity, _ in world.get_component(TileCatalogRegistry):
        return world.component_for_entity(entity, TileCatalog)
    raise RuntimeError("TileCatalog definitions not found")


def get_board_entity(world: World) -> int | None:
    for entity, _ in world.get_component(Board):
        return entity
    return None


def board_dimensions(world: World) -> Tuple[int, int] | None:
    for _, board in world.get_component(Board):
        return board.rows, board.cols
    return None


def get_entity_at(world: World, row: int, col: int) -> int | None:
    for entity, position in world.get_component(BoardPosition):
        if position.row == row and position.col == col:
            return entity
    return None


def is_adjacent(a: Position, b: Position) -> bool:
    ar, ac = a
    br, bc = b
    return (abs(ar - br) == 1 and ac == bc) or (abs(ac - bc) == 1 and ar == br)


def in_bounds(world: World, pos: Position) -> bool:
    dims = board_dimensions(world)
    if not dims:
        return False
    rows, cols = dims
    return 0 <= pos[0] < rows and 0 <= pos[1] < cols


def tile_type_map(world: World) -> Dict[Position, str]:
    """Return mapping of live board positions to their type names."""
    mapping: Dict[Position, str] = {}
    for entity, position in world.get_component(BoardPosition):
        tile: TileType = world.component_for_entity(entity, TileType)
        mapping[(position.row, position.col)] = tile.type_name
    return mapping


def board_grid(world: World) -> Grid:
    """Read the live board back as a column-major ``grid[col][row]``."""
    dims = board_dimensions(world)
    if not dims:
        return ()
    rows, cols = dims
    types = tile_type_map(world)
    return tuple(tuple(types[(row, col)] for row in range(rows)) for col in range(cols))


def sync_board_to_offsets(
    world: World,
    sequences: Sequence[ColumnSequence],
    offsets: Sequence[int],
) -> List[Position]:
    """Write the tiles a reel stop shows into every cell entity."""
    updated: List[Position] = []
    for entity, position in world.get_component(BoardPosition):
        tile: TileType = world.component_for_entity(entity, TileType)
        tile.type_name = tile_at(sequences, offsets, position.col, position.row)
        updated.append((position.row, position.col))
    return sorted(updated)


def swap_tile_types(world: World, src: Position, dst: Position) -> bool:
    """Swap the TileType values of two cell entities."""
    src_entity = get_entity_at(world, src[0], src[1])
    dst_entity = get_entity_at(world, dst[0], dst[1])
    if src_entity is None or dst_entity is None:
        return False
    src_tile: TileType = world.component_for_entity(src_entity, TileType)
    dst_tile: TileType = world.component_for_entity(dst_entity, TileType)
    src_tile.type_name, dst_tile.type_name = dst_tile.type_name, src_tile.type_name
    return True


def find_all_matches(world: World) -> List[List[Position]]:
    """Detect every run of three or more on the live board, as (row, col) groups."""
    groups = find_matches(board_grid(world))
    return [sorted((row, col) for col, row in group) for group in groups]


def clear_board(world: World) -> None:
    """Delete the board, its cells and reel strips so a new session can build fresh ones."""
    doomed = set()
    for component_type in (Board, BoardPosition, ReelStrip):
        for entity, _ in world.get_component(component_type):
            doomed.add(entity)
    for entity in doomed:
        world.delete_entity(entity, immediate=True)
