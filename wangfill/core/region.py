"""
wangfill - Fill Region

A set of disjoint rectangles describing which cells a fill may write.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from .constants import Point


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle of cells; right/bottom are inclusive."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Rect must have positive size: {self.width}x{self.height}")

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    def contains(self, point: Point) -> bool:
        px, py = point
        return self.left <= px <= self.right and self.top <= py <= self.bottom

    def intersects(self, other: Rect) -> bool:
        return not (
            other.left > self.right
            or other.right < self.left
            or other.top > self.bottom
            or other.bottom < self.top
        )

    def points(self) -> Iterator[Point]:
        """Cells in row-major order."""
        for y in range(self.top, self.bottom + 1):
            for x in range(self.left, self.right + 1):
                yield (x, y)

    def __len__(self) -> int:
        return self.width * self.height


class Region:
    """
    Ordered collection of non-overlapping rectangles.

    Iteration order is the rectangle order given at construction, then
    row-major inside each rectangle. The fill relies on this order being
    stable for reproducible results.
    """

    def __init__(self, rects: Iterable[Rect] = ()):
        self._rects: tuple[Rect, ...] = tuple(rects)
        for i, rect in enumerate(self._rects):
            for other in self._rects[i + 1:]:
                if rect.intersects(other):
                    raise ValueError(f"Region rects overlap: {rect} and {other}")

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Region:
        """
        Build a region from a set of cells, e.g. a painted selection.

        Each row is split into horizontal runs; a run that continues one of
        exactly the same extent in the previous row grows that rectangle.
        """
        rows: dict[int, list[int]] = {}
        for x, y in set(points):
            rows.setdefault(y, []).append(x)

        finished: list[Rect] = []
        # (left, right) -> (top, bottom) of rects still growing downward
        open_runs: dict[tuple[int, int], tuple[int, int]] = {}

        for y in sorted(rows):
            runs = _horizontal_runs(sorted(rows[y]))
            next_open: dict[tuple[int, int], tuple[int, int]] = {}
            for run in runs:
                previous = open_runs.pop(run, None)
                if previous is not None and previous[1] == y - 1:
                    next_open[run] = (previous[0], y)
                else:
                    if previous is not None:
                        finished.append(_run_rect(run, previous))
                    next_open[run] = (y, y)
            for run, span in open_runs.items():
                finished.append(_run_rect(run, span))
            open_runs = next_open

        for run, span in open_runs.items():
            finished.append(_run_rect(run, span))

        finished.sort(key=lambda r: (r.top, r.left))
        return cls(finished)

    @property
    def rects(self) -> tuple[Rect, ...]:
        return self._rects

    def contains(self, point: Point) -> bool:
        return any(rect.contains(point) for rect in self._rects)

    def points(self) -> Iterator[Point]:
        for rect in self._rects:
            yield from rect.points()

    def is_empty(self) -> bool:
        return not self._rects

    def bounding_rect(self) -> Optional[Rect]:
        if not self._rects:
            return None
        left = min(r.left for r in self._rects)
        top = min(r.top for r in self._rects)
        right = max(r.right for r in self._rects)
        bottom = max(r.bottom for r in self._rects)
        return Rect(left, top, right - left + 1, bottom - top + 1)

    def __len__(self) -> int:
        return sum(len(rect) for rect in self._rects)

    def __iter__(self) -> Iterator[Rect]:
        return iter(self._rects)

    def __repr__(self) -> str:
        return f"Region({list(self._rects)!r})"


def _horizontal_runs(xs: Sequence[int]) -> list[tuple[int, int]]:
    """Split sorted x values into (left, right) runs of consecutive cells."""
    runs: list[tuple[int, int]] = []
    for x in xs:
        if runs and runs[-1][1] == x - 1:
            runs[-1] = (runs[-1][0], x)
        else:
            runs.append((x, x))
    return runs


def _run_rect(run: tuple[int, int], span: tuple[int, int]) -> Rect:
    left, right = run
    top, bottom = span
    return Rect(left, top, right - left + 1, bottom - top + 1)
