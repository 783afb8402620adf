"""Shared pytest fixtures for Wang fill tests."""

import pytest

from wangfill.core.tile_layer import TileLayer
from wangfill.core.wang_set import build_complete_wang_set

GRASS = 1
DIRT = 2


@pytest.fixture
def edge_set():
    """Complete edge-only set with grass and dirt (16 tiles, ids 0-15)."""
    return build_complete_wang_set("terrain", [GRASS, DIRT])


@pytest.fixture
def mixed_set():
    """Complete set using grass and dirt on edges and corners (256 tiles)."""
    return build_complete_wang_set("mixed", [GRASS, DIRT], [GRASS, DIRT])


@pytest.fixture
def grass_tile_id(edge_set):
    """Edge set tile with grass on all four edges."""
    return next(
        t.tile_id for t in edge_set.wang_tiles
        if set(t.wang_id.colors) - {0} == {GRASS}
    )


@pytest.fixture
def dirt_tile_id(edge_set):
    """Edge set tile with dirt on all four edges."""
    return next(
        t.tile_id for t in edge_set.wang_tiles
        if set(t.wang_id.colors) - {0} == {DIRT}
    )


@pytest.fixture
def grass_layer(grass_tile_id):
    """5x5 layer uniformly painted with the grass tile."""
    layer = TileLayer(5, 5)
    layer.tiles[:, :] = grass_tile_id
    return layer
