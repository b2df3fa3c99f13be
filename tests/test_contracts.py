"""Unit tests for geographic and pixel value types."""

from __future__ import annotations

import pytest

from equirect_projection.contracts import LatLng, LatLngBounds, wrap_lng


def test_latlng_wraps_longitude_by_default() -> None:
    """Longitude beyond the antimeridian wraps back into range."""
    assert LatLng(0.0, 400.0).lng == pytest.approx(40.0)
    assert LatLng(0.0, -190.0).lng == pytest.approx(170.0)


def test_latlng_unbounded_keeps_longitude_verbatim() -> None:
    """Unbounded longitudes are stored as given."""
    assert LatLng(0.0, 400.0, True).lng == 400.0


def test_latlng_keeps_in_range_longitude_including_antimeridian() -> None:
    """In-range longitudes, including +/-180, are left untouched."""
    assert LatLng(10.0, 180.0).lng == 180.0
    assert LatLng(10.0, -180.0).lng == -180.0
    assert wrap_lng(45.5) == 45.5


def test_latlng_clamps_latitude_regardless_of_unbounded() -> None:
    """Latitude is clamped whether or not longitude is bounded."""
    assert LatLng(120.0, 0.0).lat == 90.0
    assert LatLng(-95.0, 0.0, True).lat == -90.0


def test_latlng_rejects_non_finite_values() -> None:
    """NaN coordinates are rejected on construction."""
    with pytest.raises(ValueError, match="finite"):
        LatLng(float("nan"), 0.0)


def test_latlng_bounds_from_edges() -> None:
    """Edge degrees build south-west and north-east corners."""
    bounds = LatLngBounds.from_edges(-10.0, -20.0, 10.0, 20.0)

    assert bounds.south_west == LatLng(-10.0, -20.0)
    assert bounds.north_east.to_dict() == {"lat": 10.0, "lng": 20.0}


def test_latlng_bounds_from_edges_unbounded_keeps_east_edge() -> None:
    """Unbounded edges keep a box that crosses the antimeridian intact."""
    wrapped = LatLngBounds.from_edges(-10.0, 170.0, 10.0, 190.0)
    unbounded = LatLngBounds.from_edges(-10.0, 170.0, 10.0, 190.0, unbounded=True)

    assert wrapped.north_east.lng == pytest.approx(-170.0)
    assert unbounded.north_east.lng == 190.0
