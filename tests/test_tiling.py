"""Tests for tile addressing helpers."""

from __future__ import annotations

import pytest

from equirect_projection.contracts import TileCoord
from equirect_projection.geo.rectangle import Rectangle
from equirect_projection.geo.tiling import tile_range, tile_rectangle, visible_tiles
from equirect_projection.projection.equirectangular import create


def test_tile_rectangle_scales_tile_index() -> None:
    """Tile indices scale by tile size into pixel rectangles."""
    assert tile_rectangle(TileCoord(2, -1), 256) == Rectangle(512, -256, 256, 256)


def test_tile_range_uses_floor_division_on_negative_edges() -> None:
    """Negative edges map to negative tile indices via floor division."""
    assert tile_range(Rectangle(-50, -50, 100, 100), 100) == (-1, -1, 0, 0)
    assert tile_range(Rectangle(0, 0, 256, 256), 256) == (0, 0, 0, 0)


def test_visible_tiles_cover_world_quadrants() -> None:
    """A centered 100 px world touches one tile per quadrant."""
    tiles = visible_tiles(create(1), 0, 100)

    assert tiles == [TileCoord(-1, -1), TileCoord(0, -1), TileCoord(-1, 0), TileCoord(0, 0)]


def test_visible_tiles_grow_with_zoom() -> None:
    """Larger zoom levels are covered by more tiles."""
    projection = create(5)

    assert len(visible_tiles(projection, 0, 50)) == 4
    assert len(visible_tiles(projection, 4, 50)) == 100


@pytest.mark.parametrize("tile_size", [0, -256, 1.5, True])
def test_tile_size_must_be_positive_integer(tile_size: object) -> None:
    """Non-positive or non-integer tile sizes are rejected."""
    with pytest.raises(ValueError, match="tile_size"):
        tile_rectangle(TileCoord(0, 0), tile_size)  # type: ignore[arg-type]
