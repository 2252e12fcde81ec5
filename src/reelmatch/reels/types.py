from typing import Hashable, Sequence, Tuple

# Tile identifiers are opaque: only equality and hashing are used.
TileType = Hashable
ColumnSequence = Tuple[TileType, ...]
OffsetVector = Tuple[int, ...]
# Boards are column-major: grid[col][row].
Grid = Tuple[Tuple[TileType, ...], ...]
GridLike = Sequence[Sequence[TileType]]
# (col, row) on a materialized grid.
Cell = Tuple[int, int]
