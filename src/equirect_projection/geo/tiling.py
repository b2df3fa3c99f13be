"""Tile addressing helpers on top of pixel rectangles."""

from __future__ import annotations

from math import floor
from typing import TYPE_CHECKING

from equirect_projection.contracts import TileCoord
from equirect_projection.geo.rectangle import Rectangle

if TYPE_CHECKING:
    from equirect_projection.projection.interfaces import PointLike, Projection


def _validate_tile_size(tile_size: int) -> None:
    if isinstance(tile_size, bool) or not isinstance(tile_size, int) or tile_size <= 0:
        raise ValueError("tile_size must be a positive integer")


def tile_rectangle(tile: PointLike, tile_size: int) -> Rectangle:
    """Return the pixel rectangle covered by a tile."""
    _validate_tile_size(tile_size)
    return Rectangle(tile.x * tile_size, tile.y * tile_size, tile_size, tile_size)


def tile_range(rect: Rectangle, tile_size: int) -> tuple[int, int, int, int]:
    """Return inclusive tile indices (min_x, min_y, max_x, max_y) overlapping rect."""
    _validate_tile_size(tile_size)
    return (
        floor(rect.left / tile_size),
        floor(rect.top / tile_size),
        floor(rect.right() / tile_size),
        floor(rect.bottom() / tile_size),
    )


def visible_tiles(projection: Projection, zoom: int, tile_size: int) -> list[TileCoord]:
    """List tiles, row by row, that the projection accepts at zoom."""
    min_x, min_y, max_x, max_y = tile_range(projection.bounds(zoom), tile_size)
    tiles: list[TileCoord] = []
    for y in range(min_y, max_y + 1):
        for x in range(min_x, max_x + 1):
            tile = TileCoord(x, y)
            if projection.tile_check_range(tile, zoom, tile_size):
                tiles.append(tile)
    return tiles
