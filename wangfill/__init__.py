"""
wangfill - Wang Tile Region Filling

Fills regions of a tile map with Wang tiles whose edge and corner colors
match the surrounding content.
"""

from .algorithms import FillStats, WangFiller, find_best_match
from .core import Cell, Rect, Region, TileLayer, WangId, WangIdGrid, WangSet, WangTile

__all__ = [
    "Cell",
    "FillStats",
    "Rect",
    "Region",
    "TileLayer",
    "WangFiller",
    "WangId",
    "WangIdGrid",
    "WangSet",
    "WangTile",
    "find_best_match",
]
