"""
wangfill - Shared Constants

Direction indexes, neighbor deltas and value limits used by the Wang
constraint types and the filler.
"""

from typing import Tuple

# Type alias for a grid coordinate (x, y), y grows downward
Point = Tuple[int, int]

# Number of color slots around a cell
NUM_INDEXES = 8

# Colors are stored in one nibble per slot; 0 means "undefined"
UNDEFINED_COLOR = 0
MAX_COLOR = 15

# Tile id stored in a layer for an empty cell
EMPTY_TILE = -1

# Slot indexes, clockwise starting at the top edge
TOP = 0
TOP_RIGHT = 1
RIGHT = 2
BOTTOM_RIGHT = 3
BOTTOM = 4
BOTTOM_LEFT = 5
LEFT = 6
TOP_LEFT = 7

INDEX_NAMES = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

# Neighbor offsets on an orthogonal grid, indexed like the slots above
AROUND_TILE_DELTAS: Tuple[Point, ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)
