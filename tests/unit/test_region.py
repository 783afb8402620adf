"""
Unit tests for Rect and Region.
"""

import pytest

from wangfill.core.region import Rect, Region


class TestRect:
    """Tests for Rect bounds and iteration."""

    def test_edges_are_inclusive(self):
        rect = Rect(2, 3, 4, 2)
        assert (rect.left, rect.top, rect.right, rect.bottom) == (2, 3, 5, 4)
        assert len(rect) == 8

    def test_non_positive_size_raises(self):
        with pytest.raises(ValueError, match="positive size"):
            Rect(0, 0, 0, 3)

    def test_contains(self):
        rect = Rect(0, 0, 2, 2)
        assert rect.contains((1, 1))
        assert not rect.contains((2, 0))
        assert not rect.contains((0, -1))

    def test_points_are_row_major(self):
        assert list(Rect(1, 1, 2, 2).points()) == [(1, 1), (2, 1), (1, 2), (2, 2)]


class TestRegion:
    """Tests for Region containment and ordering."""

    def test_empty_region(self):
        region = Region()
        assert region.is_empty()
        assert len(region) == 0
        assert list(region.points()) == []
        assert region.bounding_rect() is None

    def test_points_follow_rect_order(self):
        region = Region([Rect(5, 0, 1, 2), Rect(0, 0, 2, 1)])
        assert list(region.points()) == [(5, 0), (5, 1), (0, 0), (1, 0)]

    def test_contains(self):
        region = Region([Rect(0, 0, 2, 2), Rect(4, 4, 1, 1)])
        assert region.contains((1, 1))
        assert region.contains((4, 4))
        assert not region.contains((3, 3))

    def test_overlapping_rects_raise(self):
        with pytest.raises(ValueError, match="overlap"):
            Region([Rect(0, 0, 3, 3), Rect(2, 2, 3, 3)])

    def test_touching_rects_are_allowed(self):
        region = Region([Rect(0, 0, 2, 2), Rect(2, 0, 2, 2)])
        assert len(region) == 8

    def test_bounding_rect(self):
        region = Region([Rect(0, 0, 2, 2), Rect(4, 5, 1, 1)])
        assert region.bounding_rect() == Rect(0, 0, 5, 6)

    def test_iterates_rects(self):
        rects = [Rect(0, 0, 1, 1), Rect(3, 3, 1, 1)]
        assert list(Region(rects)) == rects


class TestRegionFromPoints:
    """Tests for Region.from_points."""

    def test_l_shape(self):
        points = {(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)}
        region = Region.from_points(points)
        assert region.rects == (Rect(0, 0, 2, 2), Rect(0, 2, 1, 1))
        assert set(region.points()) == points

    def test_gap_between_rows_splits_rects(self):
        region = Region.from_points([(0, 0), (0, 2)])
        assert region.rects == (Rect(0, 0, 1, 1), Rect(0, 2, 1, 1))

    def test_two_runs_in_a_row(self):
        points = {(0, 0), (1, 0), (3, 0), (0, 1), (1, 1), (3, 1)}
        region = Region.from_points(points)
        assert region.rects == (Rect(0, 0, 2, 2), Rect(3, 0, 1, 2))

    def test_duplicates_ignored(self):
        region = Region.from_points([(2, 2), (2, 2)])
        assert len(region) == 1

    def test_no_points(self):
        assert Region.from_points([]).is_empty()
