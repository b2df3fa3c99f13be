"""Geographic and pixel value types passed across the projection boundary."""

from __future__ import annotations

from dataclasses import InitVar, dataclass
from math import isfinite

LAT_MIN = -90.0
LAT_MAX = 90.0
LNG_MIN = -180.0
LNG_MAX = 180.0


def clamp_lat(lat: float) -> float:
    """Clamp latitude into [-90, 90]."""
    return max(LAT_MIN, min(LAT_MAX, lat))


def wrap_lng(lng: float) -> float:
    """Wrap longitude into [-180, 180], leaving in-range values untouched."""
    if LNG_MIN <= lng <= LNG_MAX:
        return lng
    return ((lng - LNG_MIN) % 360.0) + LNG_MIN


@dataclass(frozen=True, slots=True)
class LatLng:
    """Geographic coordinate in degrees.

    Latitude is always clamped to [-90, 90]. Longitude outside [-180, 180] is
    wrapped back into range unless ``unbounded`` is set, in which case it is
    stored verbatim (e.g. 400 stays 400 instead of becoming 40).
    """

    lat: float
    lng: float
    unbounded: InitVar[bool] = False

    def __post_init__(self, unbounded: bool) -> None:
        lat = float(self.lat)
        lng = float(self.lng)
        if not isfinite(lat) or not isfinite(lng):
            raise ValueError("lat and lng must be finite numbers.")
        object.__setattr__(self, "lat", clamp_lat(lat))
        object.__setattr__(self, "lng", lng if unbounded else wrap_lng(lng))

    def to_dict(self) -> dict[str, float]:
        """Serialize to a JSON-compatible dictionary."""
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True, slots=True)
class Point:
    """Pixel coordinate relative to the map center at some zoom level."""

    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        """Serialize to a JSON-compatible dictionary."""
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class TileCoord:
    """Tile address as (column, row) at some zoom level."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class LatLngBounds:
    """Geographic bounding box described by its south-west and north-east corners."""

    south_west: LatLng
    north_east: LatLng

    @classmethod
    def from_edges(
        cls, south: float, west: float, north: float, east: float, unbounded: bool = False
    ) -> LatLngBounds:
        """Build bounds from (south, west, north, east) edge degrees.

        With ``unbounded`` the edge longitudes are kept verbatim, so a box may
        extend past the antimeridian (e.g. west 170, east 190).
        """
        return cls(
            south_west=LatLng(south, west, unbounded),
            north_east=LatLng(north, east, unbounded),
        )
