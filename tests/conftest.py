import sys, os

# Ensure src (and the repository root for tests.helpers) is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

from tests.helpers import grid_from_rows, write_board_rows

__all__ = [
    "grid_from_rows",
    "write_board_rows",
]
