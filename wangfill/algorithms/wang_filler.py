"""
wangfill - Wang Filler

Fills cells with Wang tiles whose colors match their already-placed
neighbors, either one cell at a time (find_fitting_cell) or for a whole
region in a single sweep (fill_region).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from wangfill.core.constants import NUM_INDEXES, Point
from wangfill.core.geometry import StaggeredGrid, make_geometry, opposite
from wangfill.core.random_picker import RandomPicker
from wangfill.core.region import Rect, Region
from wangfill.core.tile_layer import Cell, TileLayer
from wangfill.core.wang_id import WangId
from wangfill.core.wang_id_grid import WangIdGrid
from wangfill.core.wang_set import WangSet, WangTile

logger = logging.getLogger(__name__)


@dataclass
class FillStats:
    """Outcome of a region fill."""

    filled: int = 0
    unfilled: list[Point] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.unfilled


def find_best_match(
    wang_set: WangSet,
    wang_id: WangId,
    rng=None,
    penalize_undefined: bool = True,
) -> Optional[WangTile]:
    """
    Pick the tile that best fits a possibly partial WangId.

    Candidates must equal `wang_id` on all of its defined slots. Among those,
    only the ones with the fewest mismatching slots are kept and one is
    drawn by probability.

    Args:
        wang_set: Catalog to search
        wang_id: Desired WangId
        rng: Random generator (defaults to the random module)
        penalize_undefined: Count mismatches on slots `wang_id` leaves
            undefined too. An undefined slot reads as color 0 there, so tiles
            that define that slot are penalized against wildcard tiles.

    Returns:
        Chosen WangTile, or None if no tile matches the defined slots
    """
    mask = wang_id.mask
    matches: RandomPicker[WangTile] = RandomPicker(rng)
    lowest_penalty: Optional[int] = None

    for wang_tile in wang_set.wang_tiles:
        if not wang_tile.wang_id.masked_equals(wang_id, mask):
            continue

        penalty = 0
        for index in range(NUM_INDEXES):
            if not penalize_undefined and not mask & (1 << index):
                continue
            if wang_tile.wang_id.color(index) != wang_id.color(index):
                penalty += 1

        if lowest_penalty is None or penalty < lowest_penalty:
            matches.clear()
            lowest_penalty = penalty
        if penalty == lowest_penalty:
            matches.add(wang_tile, wang_set.wang_tile_probability(wang_tile))

    if matches.is_empty():
        return None
    return matches.pick()


def border_points(rect: Rect, reach: int) -> Iterator[Point]:
    """Cells of `rect` lying within `reach` cells of its outline."""
    for y in range(rect.top, rect.bottom + 1):
        if y - rect.top < reach or rect.bottom - y < reach:
            yield from ((x, y) for x in range(rect.left, rect.right + 1))
            continue
        seen = set()
        for offset in range(reach):
            for x in (rect.left + offset, rect.right - offset):
                if rect.left <= x <= rect.right and x not in seen:
                    seen.add(x)
                    yield (x, y)


class WangFiller:
    """
    Chooses Wang tiles for empty cells.

    Two entry points:
        find_fitting_cell: one cell, looking at all 8 current neighbors and
            checking ahead that each empty neighbor can still be filled
        fill_region: a whole region in one pass, seeding the region border
            from the surrounding content and propagating each placed tile's
            colors to the cells not yet visited

    The neighbor geometry is fixed when the filler is created.
    """

    def __init__(
        self,
        wang_set: WangSet,
        staggered_grid: Optional[StaggeredGrid] = None,
        rng=None,
        strict: bool = False,
        penalize_undefined: bool = True,
        debug: bool = False,
    ):
        """
        Args:
            wang_set: Catalog to pick tiles from
            staggered_grid: Coordinate mapping for staggered maps; None for
                orthogonal maps
            rng: random.Random instance; None uses the random module
            strict: In find_fitting_cell, return an empty cell instead of an
                unchecked tile when no candidate keeps all neighbors fillable
            penalize_undefined: Passed to find_best_match
            debug: Log the fill summary at INFO instead of DEBUG
        """
        self.wang_set = wang_set
        self.geometry = make_geometry(staggered_grid)
        self.rng = rng
        self.strict = strict
        self.penalize_undefined = penalize_undefined
        self.debug = debug

    # =========================================================================
    # Neighbor lookups
    # =========================================================================

    def get_cell(
        self, back: TileLayer, front: TileLayer, fill_region: Region, point: Point
    ) -> Cell:
        """In-progress content inside the fill region, base content outside."""
        if fill_region.contains(point):
            return front.cell_at(point)
        return back.cell_at(point)

    def wang_id_from_surroundings(
        self, back: TileLayer, front: TileLayer, fill_region: Region, point: Point
    ) -> WangId:
        """WangId a tile at `point` needs to fit its current neighbors."""
        cells = [
            self.get_cell(back, front, fill_region, p)
            for p in self.geometry.neighbors(point)
        ]
        return self.wang_set.wang_id_from_surrounding(cells)

    def wang_id_from_back(
        self, back: TileLayer, fill_region: Region, point: Point
    ) -> WangId:
        """Like wang_id_from_surroundings, ignoring everything inside the region."""
        cells = [
            Cell() if fill_region.contains(p) else back.cell_at(p)
            for p in self.geometry.neighbors(point)
        ]
        return self.wang_set.wang_id_from_surrounding(cells)

    # =========================================================================
    # Single cell
    # =========================================================================

    def find_fitting_cell(
        self, back: TileLayer, front: TileLayer, fill_region: Region, point: Point
    ) -> Cell:
        """
        Choose a tile for one point.

        Algorithm:
            1. Derive the WangId wanted at the point from its 8 neighbors
            2. Collect all matching tiles, weighted by probability
            3. Complete set: any match is safe, pick one
            4. Otherwise draw candidates without replacement until one leaves
               every empty neighbor with at least one usable tile
            5. If none does, fall back to the last candidate drawn (or an
               empty cell in strict mode)

        Returns:
            Cell with the chosen tile, or an empty cell if nothing matches
        """
        wang_id = self.wang_id_from_surroundings(back, front, fill_region, point)

        wang_tiles: RandomPicker[WangTile] = RandomPicker(self.rng)
        for wang_tile in self.wang_set.find_matching_wang_tiles(wang_id):
            wang_tiles.add(wang_tile, self.wang_set.wang_tile_probability(wang_tile))

        if wang_tiles.is_empty():
            logger.debug("No Wang tile matches %s at %s", wang_id, point)
            return Cell()

        if self.wang_set.is_complete:
            return wang_tiles.pick().make_cell()

        adjacent_points = self.geometry.neighbors(point)
        wang_tile = None

        while not wang_tiles.is_empty():
            wang_tile = wang_tiles.take()
            if self._keeps_neighbors_fillable(
                back, front, fill_region, adjacent_points, wang_tile
            ):
                return wang_tile.make_cell()

        if self.strict:
            logger.debug("No candidate keeps the neighbors of %s fillable", point)
            return Cell()

        logger.debug(
            "No candidate keeps the neighbors of %s fillable, using tile %d",
            point,
            wang_tile.tile_id,
        )
        return wang_tile.make_cell()

    def _keeps_neighbors_fillable(
        self,
        back: TileLayer,
        front: TileLayer,
        fill_region: Region,
        adjacent_points: tuple[Point, ...],
        wang_tile: WangTile,
    ) -> bool:
        """Check that every empty neighbor still has a usable tile with `wang_tile` placed."""
        for index, adjacent_point in enumerate(adjacent_points):
            if not self.get_cell(back, front, fill_region, adjacent_point).is_empty:
                continue

            adjacent_wang_id = self.wang_id_from_surroundings(
                back, front, fill_region, adjacent_point
            )
            adjacent_wang_id = adjacent_wang_id.update_to_adjacent(
                wang_tile.wang_id, opposite(index)
            )

            if not self.wang_set.wild_wang_id_is_used(adjacent_wang_id):
                return False
        return True

    # =========================================================================
    # Region
    # =========================================================================

    def fill_region(
        self,
        target: TileLayer,
        back: TileLayer,
        region: Region,
        wang_ids: Optional[WangIdGrid] = None,
    ) -> FillStats:
        """
        Fill every cell of a region in one pass.

        Phase A seeds the wanted WangIds along the region border from the
        content of `back` just outside it. Phase B visits the region cells in
        order, places the best matching tile and copies its colors into the
        wanted WangIds of its still-empty neighbors. Placed tiles are never
        revisited.

        Args:
            target: Layer written to (modified in place)
            back: Layer providing the content around the region
            region: Cells to fill
            wang_ids: Optional initial wanted WangIds; copied, not modified

        Returns:
            FillStats with the number of placed tiles and the cells left empty
        """
        wang_ids = wang_ids.copy() if wang_ids is not None else WangIdGrid()
        stats = FillStats()

        self._seed_region_border(back, region, wang_ids)

        for point in region.points():
            wang_tile = find_best_match(
                self.wang_set,
                wang_ids.get(point),
                rng=self.rng,
                penalize_undefined=self.penalize_undefined,
            )
            if wang_tile is None:
                logger.debug("No Wang tile fits %s at %s", wang_ids.get(point), point)
                stats.unfilled.append(point)
                continue

            target.set_cell(point, wang_tile.make_cell())
            stats.filled += 1

            for index, adjacent_point in enumerate(self.geometry.neighbors(point)):
                if not target.cell_at(adjacent_point).is_empty:
                    continue
                adjacent_wang_id = wang_ids.get(adjacent_point).update_to_adjacent(
                    wang_tile.wang_id, opposite(index)
                )
                wang_ids.set(adjacent_point, adjacent_wang_id)

        if not region.is_empty():
            logger.log(
                logging.INFO if self.debug else logging.DEBUG,
                "Filled %d of %d cells in Wang set '%s' (%d unfilled)",
                stats.filled,
                len(region),
                self.wang_set.name,
                len(stats.unfilled),
            )
        return stats

    def _seed_region_border(
        self, back: TileLayer, region: Region, wang_ids: WangIdGrid
    ) -> None:
        """Merge the colors of cells just outside the region into the border cells."""
        reach = self.geometry.reach
        for rect in region.rects:
            for point in border_points(rect, reach):
                wang_id = wang_ids.get(point)
                for index, adjacent_point in enumerate(self.geometry.neighbors(point)):
                    if region.contains(adjacent_point):
                        continue
                    adjacent_wang_id = self.wang_set.wang_id_of_cell(
                        back.cell_at(adjacent_point)
                    )
                    wang_id = wang_id.merge_from_adjacent(adjacent_wang_id, index)
                wang_ids.set(point, wang_id)
