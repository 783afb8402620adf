"""
wangfill - Wang ID Grid

Sparse map from grid point to the WangId wanted at that point. Points that
were never set read as fully undefined.
"""

from __future__ import annotations

from typing import Iterator, Mapping, Optional

from .constants import Point
from .wang_id import WangId


class WangIdGrid:
    """Sparse point -> WangId storage with an undefined default."""

    def __init__(self, wang_ids: Optional[Mapping[Point, WangId]] = None):
        self._wang_ids: dict[Point, WangId] = dict(wang_ids) if wang_ids else {}

    def get(self, point: Point) -> WangId:
        return self._wang_ids.get(point, WangId.undefined())

    def set(self, point: Point, wang_id: WangId) -> None:
        self._wang_ids[point] = wang_id

    def copy(self) -> WangIdGrid:
        return WangIdGrid(self._wang_ids)

    def items(self) -> Iterator[tuple[Point, WangId]]:
        return iter(self._wang_ids.items())

    def __contains__(self, point: Point) -> bool:
        return point in self._wang_ids

    def __len__(self) -> int:
        return len(self._wang_ids)
