"""Equirectangular projection between geographic degrees and per-zoom pixel space.

Longitude maps linearly onto the configured width of each zoom level and
latitude onto its height. Pixel coordinates are measured from the center of
the map, so (0, 0) is the point at latitude 0, longitude 0.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from math import floor, inf, isfinite

from equirect_projection.contracts import LatLng, Point
from equirect_projection.errors import InvalidDimensions, InvalidZoomLevel, ProjectionError
from equirect_projection.geo.rectangle import Rectangle
from equirect_projection.geo.tiling import tile_rectangle
from equirect_projection.projection.interfaces import LatLngBoundsLike, LatLngLike, PointLike

logger = logging.getLogger(__name__)

DEFAULT_WIDTH_PER_ZOOM_LEVEL = 100
DEFAULT_HEIGHT_PER_ZOOM_LEVEL = 100

Dimensions = tuple[tuple[float, float], ...]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going toward positive infinity."""
    # Compare against the exact fractional part; value + 0.5 can round up in floating point.
    whole = floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def create_default_dimensions(
    zoom_levels: int,
    width_per_level: float = DEFAULT_WIDTH_PER_ZOOM_LEVEL,
    height_per_level: float = DEFAULT_HEIGHT_PER_ZOOM_LEVEL,
) -> list[list[float]]:
    """Return a square table growing linearly: level i is (i + 1) * per-level size."""
    if zoom_levels < 0:
        raise InvalidDimensions("zoom_levels must be non-negative")
    return [
        [(level + 1) * width_per_level, (level + 1) * height_per_level]
        for level in range(zoom_levels)
    ]


def _normalize_dimensions(zoom_levels: int, dimensions: Sequence[Sequence[float]]) -> Dimensions:
    """Validate a dimension table and freeze it into nested tuples."""
    if len(dimensions) != zoom_levels:
        raise InvalidDimensions(
            f"dimension table has {len(dimensions)} entries for {zoom_levels} zoom levels"
        )

    table: list[tuple[float, float]] = []
    for level, entry in enumerate(dimensions):
        if isinstance(entry, (str, bytes)) or not isinstance(entry, Sequence) or len(entry) != 2:
            raise InvalidDimensions(f"zoom level {level}: expected a (width, height) pair")
        width, height = entry
        for label, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidDimensions(f"zoom level {level}: {label} must be a number")
            if not isfinite(value) or value <= 0:
                raise InvalidDimensions(f"zoom level {level}: {label} must be positive, got {value!r}")
        table.append((width, height))
    return tuple(table)


class EquirectangularProjection:
    """Bidirectional lat/lng <-> pixel mapping over a fixed per-zoom dimension table."""

    def __init__(
        self,
        zoom_levels: int,
        dimensions: Sequence[Sequence[float]] | None = None,
        repeats_horizontally: bool = True,
    ) -> None:
        if isinstance(zoom_levels, bool) or not isinstance(zoom_levels, int) or zoom_levels < 0:
            raise InvalidDimensions(f"zoom_levels must be a non-negative integer, got {zoom_levels!r}")
        if dimensions is None:
            dimensions = create_default_dimensions(zoom_levels)

        self._zoom_levels = zoom_levels
        self._dimensions = _normalize_dimensions(zoom_levels, dimensions)
        self._repeats_horizontally = repeats_horizontally
        logger.debug(
            "equirectangular projection zoom_levels=%d dimensions=%s repeats=%s",
            zoom_levels,
            self._dimensions,
            repeats_horizontally,
        )

    @property
    def zoom_levels(self) -> int:
        return self._zoom_levels

    @property
    def dimensions(self) -> Dimensions:
        return self._dimensions

    @property
    def repeats_horizontally(self) -> bool:
        return self._repeats_horizontally

    def dimension(self, zoom: int) -> tuple[float, float]:
        """Return (width, height) at zoom, rejecting out-of-range levels."""
        if isinstance(zoom, bool) or not isinstance(zoom, int) or not 0 <= zoom < self._zoom_levels:
            raise InvalidZoomLevel(zoom, self._zoom_levels)
        return self._dimensions[zoom]

    def pixels_per_longitude_degree(self, zoom: int) -> float:
        return self.dimension(zoom)[0] / 360

    def pixels_per_latitude_degree(self, zoom: int) -> float:
        return self.dimension(zoom)[1] / 180

    def from_latlng_to_pixel(self, latlng: LatLngLike, zoom: int) -> Point:
        """Return the rounded pixel offset of latlng from the map center."""
        if not isfinite(latlng.lat) or not isfinite(latlng.lng):
            raise ProjectionError(f"lat and lng must be finite numbers, got ({latlng.lat!r}, {latlng.lng!r})")
        x = round_half_up(latlng.lng * self.pixels_per_longitude_degree(zoom))
        y = round_half_up(latlng.lat * self.pixels_per_latitude_degree(zoom))
        return Point(x, y)

    def from_pixel_to_latlng(self, pixel: PointLike, zoom: int, unbounded: bool = False) -> LatLng:
        """Return the geographic coordinate of a pixel offset.

        With ``unbounded`` the longitude is not wrapped at the antimeridian.
        """
        width, height = self.dimension(zoom)
        # Multiply before dividing so exact half-extents map back to exactly 180 and 90.
        lng = pixel.x * 360 / width
        lat = pixel.y * 180 / height
        return LatLng(lat, lng, unbounded)

    def tile_check_range(self, tile: PointLike, zoom: int, tile_size: int) -> bool:
        """Return whether the tile overlaps one copy of the world at zoom.

        Only range validity is reported; tile indices are never remapped onto
        an equivalent copy of the world.
        """
        return self.bounds(zoom).intersects(tile_rectangle(tile, tile_size))

    def get_wrap_width(self, zoom: int) -> float:
        """Return the world width at zoom, or infinity for a non-repeating map."""
        width = self.dimension(zoom)[0]
        if not self._repeats_horizontally:
            return inf
        return width

    def bounds(self, zoom: int) -> Rectangle:
        """Return the world rectangle centered on the origin.

        Halves use true division, so an odd width or height yields fractional
        left/top values; once truncated to integers the odd pixel falls on the
        negative side.
        """
        width, height = self.dimension(zoom)
        return Rectangle(width / -2, height / -2, width, height)

    def project_latlng_bounds(self, bounds: LatLngBoundsLike, zoom: int) -> Rectangle:
        """Convert a geographic box into a pixel rectangle.

        ``top`` comes from the north-east corner and ``height`` is the
        south-west y minus the north-east y.
        """
        sw_pixel = self.from_latlng_to_pixel(bounds.south_west, zoom)
        ne_pixel = self.from_latlng_to_pixel(bounds.north_east, zoom)
        return Rectangle(
            sw_pixel.x,
            ne_pixel.y,
            ne_pixel.x - sw_pixel.x,
            sw_pixel.y - ne_pixel.y,
        )

    def __repr__(self) -> str:
        return (
            f"EquirectangularProjection(zoom_levels={self._zoom_levels}, "
            f"dimensions={self._dimensions!r}, repeats_horizontally={self._repeats_horizontally})"
        )


def create(
    zoom_levels: int,
    dimensions: Sequence[Sequence[float]] | None = None,
    repeats_horizontally: bool = True,
) -> EquirectangularProjection:
    """Create a projection, synthesizing the default table when none is given."""
    return EquirectangularProjection(zoom_levels, dimensions, repeats_horizontally)
