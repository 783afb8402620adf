"""
Core Wang tile types.

This package contains the WangId constraint value, neighbor geometry, the
in-memory Wang set catalog, tile layers, regions and the weighted picker.
"""

from .geometry import (
    NeighborGeometry,
    OrthogonalGeometry,
    StaggeredGeometry,
    StaggeredGrid,
    make_geometry,
)
from .random_picker import RandomPicker
from .region import Rect, Region
from .tile_layer import Cell, TileLayer
from .wang_id import WangId
from .wang_id_grid import WangIdGrid
from .wang_set import WangSet, WangTile, build_complete_wang_set

__all__ = [
    "Cell",
    "NeighborGeometry",
    "OrthogonalGeometry",
    "RandomPicker",
    "Rect",
    "Region",
    "StaggeredGeometry",
    "StaggeredGrid",
    "TileLayer",
    "WangId",
    "WangIdGrid",
    "WangSet",
    "WangTile",
    "build_complete_wang_set",
    "make_geometry",
]
