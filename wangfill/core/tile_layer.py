"""
wangfill - Tile Layer

Rectangular grid of cells with an origin offset. Cells are addressed in
grid (map) coordinates; the layer translates them to its own storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .constants import EMPTY_TILE, Point


@dataclass(frozen=True)
class Cell:
    """A reference to a placed tile, or empty when tile_id is None."""

    tile_id: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.tile_id is None


class TileLayer:
    """
    Tile grid backed by a numpy array of tile ids.

    Empty cells are stored as EMPTY_TILE. Reads outside the layer return an
    empty cell so neighbor lookups near the edge need no bounds checks.
    """

    def __init__(self, width: int, height: int, x: int = 0, y: int = 0):
        if width < 0 or height < 0:
            raise ValueError(f"Invalid layer size: {width}x{height}")
        self.x = x
        self.y = y
        self.tiles = np.full((height, width), EMPTY_TILE, dtype=np.int32)

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[Optional[int]]], x: int = 0, y: int = 0
    ) -> TileLayer:
        """
        Build a layer from rows of tile ids (None for empty cells).

        All rows must have the same length.
        """
        height = len(rows)
        width = len(rows[0]) if height > 0 else 0
        layer = cls(width, height, x, y)
        for row_index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {row_index} has {len(row)} cells, expected {width}"
                )
            for col_index, tile_id in enumerate(row):
                if tile_id is not None:
                    layer.tiles[row_index, col_index] = tile_id
        return layer

    @property
    def width(self) -> int:
        return self.tiles.shape[1]

    @property
    def height(self) -> int:
        return self.tiles.shape[0]

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    def contains(self, point: Point) -> bool:
        px, py = point
        return (
            self.x <= px < self.x + self.width
            and self.y <= py < self.y + self.height
        )

    def cell_at(self, point: Point) -> Cell:
        if not self.contains(point):
            return Cell()
        tile_id = int(self.tiles[point[1] - self.y, point[0] - self.x])
        if tile_id == EMPTY_TILE:
            return Cell()
        return Cell(tile_id)

    def set_cell(self, point: Point, cell: Cell) -> None:
        if not self.contains(point):
            raise IndexError(
                f"Point {point} outside layer at {self.position} "
                f"({self.width}x{self.height})"
            )
        value = EMPTY_TILE if cell.is_empty else cell.tile_id
        self.tiles[point[1] - self.y, point[0] - self.x] = value

    def is_empty(self) -> bool:
        return bool(np.all(self.tiles == EMPTY_TILE))

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.tiles != EMPTY_TILE))

    def tile_ids(self) -> np.ndarray:
        """Copy of the underlying tile id array, indexed [row, col]."""
        return self.tiles.copy()

    def clone(self) -> TileLayer:
        layer = TileLayer(self.width, self.height, self.x, self.y)
        layer.tiles = self.tiles.copy()
        return layer

    def __eq__(self, other) -> bool:
        if not isinstance(other, TileLayer):
            return NotImplemented
        return self.position == other.position and np.array_equal(
            self.tiles, other.tiles
        )

    def __repr__(self) -> str:
        return (
            f"TileLayer({self.width}x{self.height} at {self.position}, "
            f"{self.filled_count()} filled)"
        )
