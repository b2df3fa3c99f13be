"""Projection interface expected by tiling map hosts."""

from __future__ import annotations

from typing import Protocol

from equirect_projection.contracts import LatLng, Point
from equirect_projection.geo.rectangle import Rectangle


class LatLngLike(Protocol):
    """Any geographic coordinate exposing latitude/longitude in degrees."""

    @property
    def lat(self) -> float: ...

    @property
    def lng(self) -> float: ...


class PointLike(Protocol):
    """Any pixel or tile coordinate exposing x/y."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


class LatLngBoundsLike(Protocol):
    """Any geographic box exposing south-west and north-east corners."""

    @property
    def south_west(self) -> LatLngLike: ...

    @property
    def north_east(self) -> LatLngLike: ...


class Projection(Protocol):
    """Capability set a map host uses to place and interpret coordinates."""

    def from_latlng_to_pixel(self, latlng: LatLngLike, zoom: int) -> Point:
        """Return the pixel coordinate for a geographic point at zoom."""

    def from_pixel_to_latlng(self, pixel: PointLike, zoom: int, unbounded: bool = False) -> LatLng:
        """Return the geographic coordinate for a pixel at zoom."""

    def tile_check_range(self, tile: PointLike, zoom: int, tile_size: int) -> bool:
        """Return whether the tile lies within the projected world at zoom."""

    def get_wrap_width(self, zoom: int) -> float:
        """Return the horizontal pixel period after which the map repeats."""

    def bounds(self, zoom: int) -> Rectangle:
        """Return the pixel rectangle covering one copy of the world at zoom."""

    def project_latlng_bounds(self, bounds: LatLngBoundsLike, zoom: int) -> Rectangle:
        """Return the pixel rectangle for a geographic bounding box at zoom."""
