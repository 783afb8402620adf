"""
Integration tests for WangFiller.fill_region.

Fills whole regions against real Wang sets and checks the result as a map:
border consistency with the surrounding content, compatibility between
placed neighbors, and reproducibility.
"""

import random
from unittest.mock import MagicMock

import numpy as np
import pytest

from wangfill.algorithms.wang_filler import WangFiller, border_points
from wangfill.core.constants import LEFT, RIGHT
from wangfill.core.geometry import StaggeredGrid, make_geometry, opposite
from wangfill.core.region import Rect, Region
from wangfill.core.tile_layer import Cell, TileLayer
from wangfill.core.wang_id import WangId
from wangfill.core.wang_id_grid import WangIdGrid
from wangfill.core.wang_set import WangSet, WangTile, build_complete_wang_set


def clear_region(layer: TileLayer, region: Region) -> TileLayer:
    """Copy of `layer` with the region cells emptied."""
    target = layer.clone()
    for point in region.points():
        target.set_cell(point, Cell())
    return target


def uniform_layer(width: int, height: int, tile_id: int) -> TileLayer:
    layer = TileLayer(width, height)
    layer.tiles[:, :] = tile_id
    return layer


def incompatible_pairs(layer, wang_set, region, geometry):
    """All (point, direction) pairs where a region cell disagrees with a filled neighbor."""
    problems = []
    for point in region.points():
        placed = wang_set.wang_id_of_cell(layer.cell_at(point))
        for index, neighbor_point in enumerate(geometry.neighbors(point)):
            neighbor_cell = layer.cell_at(neighbor_point)
            if neighbor_cell.is_empty:
                continue
            neighbor = wang_set.wang_id_of_cell(neighbor_cell)
            if placed.color(index) != neighbor.color(opposite(index)):
                problems.append((point, index))
    return problems


# =============================================================================
# Scenarios
# =============================================================================

class TestUniformSurroundings:
    """Tests for fills inside uniform or consistent surroundings."""

    def test_single_color_set_fills_everything_with_that_color(self):
        wang_set = build_complete_wang_set("grass", [1], [1])
        assert len(wang_set) == 1

        back = uniform_layer(5, 5, 0)
        region = Region([Rect(1, 1, 3, 3)])
        target = clear_region(back, region)

        stats = WangFiller(wang_set, rng=random.Random(1)).fill_region(target, back, region)

        assert stats.filled == 9
        assert stats.complete
        for point in region.points():
            assert wang_set.wang_id_of_cell(target.cell_at(point)) == WangId.uniform(1)

    def test_border_matches_uniform_exterior(self, mixed_set):
        grass = next(t.tile_id for t in mixed_set.wang_tiles if t.wang_id == WangId.uniform(1))
        back = uniform_layer(5, 5, grass)
        region = Region([Rect(1, 1, 3, 3)])
        geometry = make_geometry()

        for seed in range(10):
            target = clear_region(back, region)
            WangFiller(mixed_set, rng=random.Random(seed)).fill_region(target, back, region)

            for point in region.points():
                placed = mixed_set.wang_id_of_cell(target.cell_at(point))
                for index, neighbor_point in enumerate(geometry.neighbors(point)):
                    if not region.contains(neighbor_point):
                        assert placed.color(index) == 1, (point, index)

    def test_complete_set_fill_is_consistent(self, mixed_set):
        # Consistent random surroundings: fill an empty layer from scratch
        back = TileLayer(8, 8)
        everything = Region([Rect(0, 0, 8, 8)])
        stats = WangFiller(mixed_set, rng=random.Random(8)).fill_region(
            back, TileLayer(8, 8), everything
        )
        assert stats.complete
        assert incompatible_pairs(back, mixed_set, everything, make_geometry()) == []

        region = Region([Rect(2, 2, 4, 3)])
        target = clear_region(back, region)
        WangFiller(mixed_set, rng=random.Random(4)).fill_region(target, back, region)

        assert incompatible_pairs(target, mixed_set, region, make_geometry()) == []

    def test_multi_rect_region(self, edge_set, grass_tile_id):
        back = uniform_layer(7, 7, grass_tile_id)
        region = Region.from_points(
            [(1, 1), (2, 1), (3, 1), (1, 2), (2, 2), (1, 3), (5, 5)]
        )
        target = clear_region(back, region)

        stats = WangFiller(edge_set, rng=random.Random(3)).fill_region(target, back, region)

        assert stats.filled == len(region) == 7
        assert incompatible_pairs(target, edge_set, region, make_geometry()) == []
        # Isolated cell surrounded by grass can only be grass
        assert target.cell_at((5, 5)) == Cell(grass_tile_id)


class TestEmptyRegion:
    """Tests for filling a region with no rectangles."""

    def test_target_unchanged(self, edge_set, grass_layer):
        target = TileLayer(5, 5)
        stats = WangFiller(edge_set).fill_region(target, grass_layer, Region())
        assert target.is_empty()
        assert stats.filled == 0
        assert stats.unfilled == []

    def test_no_catalog_queries(self, grass_layer):
        wang_set = MagicMock(spec=WangSet)
        target = grass_layer.clone()
        WangFiller(wang_set).fill_region(target, grass_layer, Region())
        assert wang_set.mock_calls == []
        assert target == grass_layer


# =============================================================================
# Propagation and overrides
# =============================================================================

class TestPropagation:
    """Tests for color propagation and caller overrides."""

    def test_placed_colors_flow_to_next_cell(self, edge_set, dirt_tile_id):
        back = TileLayer(2, 1)
        region = Region([Rect(0, 0, 2, 1)])
        wang_ids = WangIdGrid({(0, 0): WangId((2, 0, 2, 0, 2, 0, 2, 0))})

        target = TileLayer(2, 1)
        WangFiller(edge_set, rng=random.Random(0)).fill_region(
            target, back, region, wang_ids
        )

        assert target.cell_at((0, 0)) == Cell(dirt_tile_id)
        right = edge_set.wang_id_of_cell(target.cell_at((1, 0)))
        assert right.color(LEFT) == 2

    def test_caller_overrides_are_not_modified(self, edge_set):
        wanted = WangId((2, 0, 2, 0, 2, 0, 2, 0))
        wang_ids = WangIdGrid({(0, 0): wanted})
        region = Region([Rect(0, 0, 3, 3)])

        WangFiller(edge_set).fill_region(TileLayer(3, 3), TileLayer(3, 3), region, wang_ids)

        assert len(wang_ids) == 1
        assert wang_ids.get((0, 0)) == wanted

    def test_filled_cells_are_not_revisited(self, edge_set, grass_tile_id):
        back = TileLayer(3, 1)
        target = TileLayer(3, 1)
        target.set_cell((2, 0), Cell(grass_tile_id))
        region = Region([Rect(0, 0, 2, 1)])

        WangFiller(edge_set, rng=random.Random(0)).fill_region(target, back, region)

        assert target.cell_at((2, 0)) == Cell(grass_tile_id)
        assert target.filled_count() == 3


# =============================================================================
# Failures
# =============================================================================

class TestUnfillableCells:
    """Tests for cells no tile can fill."""

    def test_cell_without_match_stays_empty(self):
        grass = WangTile(1, WangId((1, 0, 1, 0, 1, 0, 1, 0)))
        dirt = WangTile(2, WangId((2, 0, 2, 0, 2, 0, 2, 0)))
        wang_set = WangSet("two", [grass, dirt])

        back = uniform_layer(3, 3, 1)
        back.set_cell((0, 1), Cell(2))  # dirt on the left, grass elsewhere
        region = Region([Rect(1, 1, 1, 1)])
        target = clear_region(back, region)

        stats = WangFiller(wang_set).fill_region(target, back, region)

        assert target.cell_at((1, 1)).is_empty
        assert stats.filled == 0
        assert stats.unfilled == [(1, 1)]
        assert not stats.complete

    def test_failure_does_not_stop_the_sweep(self):
        grass = WangTile(1, WangId((1, 0, 1, 0, 1, 0, 1, 0)))
        wang_set = WangSet("grass", [grass])

        back = TileLayer(4, 1)
        back.set_cell((0, 0), Cell(99))
        wang_ids = WangIdGrid({(1, 0): WangId.undefined().with_color(RIGHT, 2)})
        region = Region([Rect(1, 0, 3, 1)])
        target = TileLayer(4, 1)

        stats = WangFiller(wang_set).fill_region(target, back, region, wang_ids)

        assert stats.unfilled == [(1, 0)]
        assert target.cell_at((2, 0)) == Cell(1)
        assert target.cell_at((3, 0)) == Cell(1)


# =============================================================================
# Determinism
# =============================================================================

class TestDeterminism:
    """Tests for reproducible fills."""

    def _fill(self, wang_set, rng):
        back = TileLayer(10, 10)
        region = Region([Rect(1, 1, 8, 4), Rect(1, 6, 8, 3)])
        target = TileLayer(10, 10)
        WangFiller(wang_set, rng=rng).fill_region(target, back, region)
        return target

    def test_same_seed_same_layer(self, mixed_set):
        first = self._fill(mixed_set, random.Random(1234))
        second = self._fill(mixed_set, random.Random(1234))
        assert np.array_equal(first.tile_ids(), second.tile_ids())

    def test_global_seed(self, edge_set):
        random.seed(99)
        first = self._fill(edge_set, None)
        random.seed(99)
        second = self._fill(edge_set, None)
        assert first == second


# =============================================================================
# Staggered maps
# =============================================================================

class TestStaggeredFill:
    """Tests for fills on staggered maps."""

    @pytest.mark.parametrize("axis", ["x", "y"])
    def test_fill_is_consistent(self, edge_set, grass_tile_id, axis):
        grid = StaggeredGrid(axis, "odd")
        back = uniform_layer(8, 8, grass_tile_id)
        region = Region([Rect(3, 3, 2, 2)])
        target = clear_region(back, region)

        filler = WangFiller(edge_set, staggered_grid=grid, rng=random.Random(6))
        stats = filler.fill_region(target, back, region)

        assert stats.complete
        problems = incompatible_pairs(target, edge_set, region, make_geometry(grid))
        assert problems == []


class TestBorderPoints:
    """Tests for border_points function."""

    def test_reach_one_is_the_outline(self):
        points = list(border_points(Rect(0, 0, 3, 3), 1))
        assert len(points) == 8
        assert (1, 1) not in points

    def test_reach_two_includes_second_ring(self):
        points = set(border_points(Rect(0, 0, 5, 5), 2))
        assert len(points) == 24
        assert (2, 2) not in points

    def test_narrow_rect_has_no_duplicates(self):
        points = list(border_points(Rect(0, 0, 1, 4), 2))
        assert len(points) == len(set(points)) == 4
