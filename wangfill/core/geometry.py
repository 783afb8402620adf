"""
wangfill - Neighbor Geometry

Enumerates the 8 neighbors of a cell, ordered like the WangId slots, for
orthogonal and staggered (hex-like) grids.
"""

from abc import ABC, abstractmethod

from .constants import AROUND_TILE_DELTAS, Point
from .wang_id import opposite_index as opposite

STAGGER_AXES = ("x", "y")
STAGGER_INDEXES = ("odd", "even")


class NeighborGeometry(ABC):
    """Strategy producing the 8 ordered neighbor points of a cell."""

    # Largest x or y distance between a cell and any of its neighbors
    reach: int = 1

    @abstractmethod
    def neighbors(self, point: Point) -> tuple[Point, ...]:
        """
        Get the neighbors of a point.

        Args:
            point: Cell position (x, y)

        Returns:
            8 points ordered N, NE, E, SE, S, SW, W, NW
        """
        pass


class OrthogonalGeometry(NeighborGeometry):
    """Plain square grid: neighbors are fixed offsets."""

    reach = 1

    def neighbors(self, point: Point) -> tuple[Point, ...]:
        x, y = point
        return tuple((x + dx, y + dy) for dx, dy in AROUND_TILE_DELTAS)


class StaggeredGrid:
    """
    Coordinate mapping for staggered maps.

    Every other row (stagger axis "y") or column (stagger axis "x") is shifted
    by half a cell. Which ones are shifted is chosen by the stagger index.
    """

    def __init__(self, stagger_axis: str = "y", stagger_index: str = "odd"):
        if stagger_axis not in STAGGER_AXES:
            raise ValueError(f"Invalid stagger axis: {stagger_axis!r}")
        if stagger_index not in STAGGER_INDEXES:
            raise ValueError(f"Invalid stagger index: {stagger_index!r}")
        self.stagger_axis = stagger_axis
        self.stagger_index = stagger_index

    def _is_shifted(self, value: int) -> bool:
        parity = value & 1
        if self.stagger_index == "even":
            parity ^= 1
        return bool(parity)

    def top_left(self, x: int, y: int) -> Point:
        if self.stagger_axis == "y":
            return (x, y - 1) if self._is_shifted(y) else (x - 1, y - 1)
        return (x - 1, y) if self._is_shifted(x) else (x - 1, y - 1)

    def top_right(self, x: int, y: int) -> Point:
        if self.stagger_axis == "y":
            return (x + 1, y - 1) if self._is_shifted(y) else (x, y - 1)
        return (x + 1, y) if self._is_shifted(x) else (x + 1, y - 1)

    def bottom_left(self, x: int, y: int) -> Point:
        if self.stagger_axis == "y":
            return (x, y + 1) if self._is_shifted(y) else (x - 1, y + 1)
        return (x - 1, y + 1) if self._is_shifted(x) else (x - 1, y)

    def bottom_right(self, x: int, y: int) -> Point:
        if self.stagger_axis == "y":
            return (x + 1, y + 1) if self._is_shifted(y) else (x, y + 1)
        return (x + 1, y + 1) if self._is_shifted(x) else (x + 1, y)


class StaggeredGeometry(NeighborGeometry):
    """
    Neighbors on a staggered grid.

    The diagonal-looking cells of the staggered layout take the even slots;
    the odd slots step two cells along the stagger axis or one across it.
    """

    reach = 2

    def __init__(self, grid: StaggeredGrid):
        self.grid = grid
        if grid.stagger_axis == "x":
            self._odd_deltas = ((2, 0), (0, 1), (-2, 0), (0, -1))
        else:
            self._odd_deltas = ((1, 0), (0, 2), (-1, 0), (0, -2))

    def neighbors(self, point: Point) -> tuple[Point, ...]:
        x, y = point
        (dx1, dy1), (dx3, dy3), (dx5, dy5), (dx7, dy7) = self._odd_deltas
        return (
            self.grid.top_right(x, y),
            (x + dx1, y + dy1),
            self.grid.bottom_right(x, y),
            (x + dx3, y + dy3),
            self.grid.bottom_left(x, y),
            (x + dx5, y + dy5),
            self.grid.top_left(x, y),
            (x + dx7, y + dy7),
        )


def make_geometry(staggered_grid: StaggeredGrid | None = None) -> NeighborGeometry:
    """Pick the neighbor strategy for a map; no staggered grid means orthogonal."""
    if staggered_grid is None:
        return OrthogonalGeometry()
    return StaggeredGeometry(staggered_grid)
