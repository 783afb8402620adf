"""
wangfill - Wang Set

In-memory catalog of Wang tiles for one terrain family: which tile carries
which WangId, how likely each tile is to be chosen, and whether the set
covers every color combination.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Iterable, Optional, Sequence

from .constants import NUM_INDEXES, UNDEFINED_COLOR
from .tile_layer import Cell
from .wang_id import WangId, is_corner

EDGE_MASK = 0b01010101
CORNER_MASK = 0b10101010


@dataclass(frozen=True)
class WangTile:
    """A concrete tile tagged with a WangId and a relative selection weight."""

    tile_id: int
    wang_id: WangId
    probability: float = 1.0

    def make_cell(self) -> Cell:
        return Cell(self.tile_id)


class WangSet:
    """
    Queryable collection of Wang tiles.

    Edge colors are the colors used in the even (edge) slots, corner colors
    those used in the odd (corner) slots. A set may use only one kind.
    """

    def __init__(self, name: str, tiles: Iterable[WangTile]):
        self.name = name
        self._tiles: tuple[WangTile, ...] = tuple(tiles)
        self._tiles_by_id: dict[int, WangTile] = {}

        for tile in self._tiles:
            if tile.tile_id < 0:
                raise ValueError(
                    f"Invalid tile id {tile.tile_id} in Wang set '{name}' "
                    f"(must be non-negative)"
                )
            if tile.tile_id in self._tiles_by_id:
                raise ValueError(
                    f"Duplicate tile id {tile.tile_id} in Wang set '{name}'"
                )
            if tile.probability < 0:
                raise ValueError(
                    f"Negative probability {tile.probability} for tile {tile.tile_id}"
                )
            self._tiles_by_id[tile.tile_id] = tile

        self.edge_colors: frozenset[int] = frozenset(
            color
            for tile in self._tiles
            for index, color in enumerate(tile.wang_id.colors)
            if not is_corner(index) and color != UNDEFINED_COLOR
        )
        self.corner_colors: frozenset[int] = frozenset(
            color
            for tile in self._tiles
            for index, color in enumerate(tile.wang_id.colors)
            if is_corner(index) and color != UNDEFINED_COLOR
        )
        self._complete = self._check_complete()

    def _check_complete(self) -> bool:
        """
        Check whether every fully-defined combination has a pickable tile.

        Only the slot kinds actually in use count as "fully defined": an
        edge-only set needs all 4-edge combinations, a mixed set needs all
        8-slot combinations.
        """
        required_mask = 0
        if self.edge_colors:
            required_mask |= EDGE_MASK
        if self.corner_colors:
            required_mask |= CORNER_MASK

        expected = max(1, len(self.edge_colors)) ** 4 * max(1, len(self.corner_colors)) ** 4

        seen = {
            tile.wang_id
            for tile in self._tiles
            if tile.probability > 0 and tile.wang_id.mask == required_mask
        }
        return len(seen) >= expected

    # -------------------------------------------------------------------------
    # Tile lookups
    # -------------------------------------------------------------------------

    @property
    def wang_tiles(self) -> tuple[WangTile, ...]:
        """All tiles in catalog order."""
        return self._tiles

    @property
    def is_complete(self) -> bool:
        return self._complete

    @property
    def color_count(self) -> int:
        return len(self.edge_colors | self.corner_colors)

    def wang_tile_of_cell(self, cell: Cell) -> Optional[WangTile]:
        if cell.is_empty:
            return None
        return self._tiles_by_id.get(cell.tile_id)

    def wang_id_of_cell(self, cell: Cell) -> WangId:
        """WangId of the tile in a cell; undefined for empty or unknown cells."""
        tile = self.wang_tile_of_cell(cell)
        if tile is None:
            return WangId.undefined()
        return tile.wang_id

    def color_of_cell(self, cell: Cell, index: int) -> int:
        """Color a cell shows at one slot (0 when undefined)."""
        return self.wang_id_of_cell(cell).color(index)

    def wang_id_from_surrounding(self, cells: Sequence[Cell]) -> WangId:
        """
        Derive the WangId of a point from its 8 neighbor cells.

        Args:
            cells: Neighbor cells ordered N, NE, E, SE, S, SW, W, NW

        Returns:
            WangId where slot i is the color neighbor i shows toward the point
        """
        if len(cells) != NUM_INDEXES:
            raise ValueError(f"Expected {NUM_INDEXES} cells, got {len(cells)}")
        return WangId.from_surrounding(
            [None if cell.is_empty else self.wang_id_of_cell(cell) for cell in cells]
        )

    def wang_tile_probability(self, tile: WangTile) -> float:
        return tile.probability

    def find_matching_wang_tiles(self, wang_id: WangId) -> list[WangTile]:
        """Tiles agreeing with `wang_id` wherever both are defined."""
        return [tile for tile in self._tiles if tile.wang_id.matches(wang_id)]

    def wild_wang_id_is_used(self, wang_id: WangId) -> bool:
        """Check whether any tile can satisfy a possibly partial WangId."""
        return any(tile.wang_id.matches(wang_id) for tile in self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __repr__(self) -> str:
        return (
            f"WangSet({self.name!r}, {len(self._tiles)} tiles, "
            f"edges={sorted(self.edge_colors)}, corners={sorted(self.corner_colors)})"
        )


def build_complete_wang_set(
    name: str,
    edge_colors: Sequence[int] = (),
    corner_colors: Sequence[int] = (),
    tile_id_start: int = 0,
    probability: float = 1.0,
) -> WangSet:
    """
    Generate a Wang set holding one tile for every color combination.

    Tile ids are assigned consecutively from tile_id_start in
    itertools.product order (edges outermost).

    Args:
        name: Name of the set
        edge_colors: Colors allowed in edge slots (empty for a corner set)
        corner_colors: Colors allowed in corner slots (empty for an edge set)
        tile_id_start: First tile id
        probability: Weight given to every tile

    Returns:
        A complete WangSet
    """
    edge_choices = list(product(edge_colors, repeat=4)) if edge_colors else [(0,) * 4]
    corner_choices = (
        list(product(corner_colors, repeat=4)) if corner_colors else [(0,) * 4]
    )

    tiles = []
    tile_id = tile_id_start
    for edges in edge_choices:
        for corners in corner_choices:
            colors = []
            for edge, corner in zip(edges, corners):
                colors.extend((edge, corner))
            tiles.append(WangTile(tile_id, WangId(tuple(colors)), probability))
            tile_id += 1

    return WangSet(name, tiles)
