from __future__ import annotations

from typing import Dict, Hashable, Sequence

from esper import World

from reelmatch.components.tile import TileType
from reelmatch.reels.types import Grid
from reelmatch.systems.board_ops import get_entity_at

SEVEN_TYPES = ('red', 'green', 'blue', 'yellow', 'magenta', 'cyan', 'orange')

# Row 2 reads A A B A H; swapping (col 2, row 2) with (col 3, row 2) lines up three As.
ONE_SWAP_ROWS = (
    'CDEFG',
    'DEFGC',
    'AABAH',
    'EFGCD',
    'FGCDE',
)

# Three types laid out along anti-diagonals: no single swap lines up three,
# two swaps can.
TWO_SWAP_ROWS = tuple(
    ''.join('ABC'[(row + col) % 3] for col in range(5)) for row in range(5)
)


def grid_from_rows(rows: Sequence[Sequence[Hashable]]) -> Grid:
    """Convert row-major test fixtures into the column-major ``grid[col][row]`` layout."""
    return tuple(tuple(row[col] for row in rows) for col in range(len(rows[0])))


def count_tiles(grid: Grid) -> Dict[Hashable, int]:
    counts: Dict[Hashable, int] = {}
    for column in grid:
        for tile in column:
            counts[tile] = counts.get(tile, 0) + 1
    return counts


def write_board_rows(world: World, rows: Sequence[str]) -> None:
    """Overwrite the live board cells with a row-major layout of type names."""
    for r, row in enumerate(rows):
        for c, type_name in enumerate(row):
            entity = get_entity_at(world, r, c)
            assert entity is not None, f'No cell at {(r, c)}'
            world.component_for_entity(entity, TileType).type_name = type_name
