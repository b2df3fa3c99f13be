"""Vectorised forward/inverse mapping for batches of coordinates."""

from __future__ import annotations

import numpy as np

from equirect_projection.contracts import LAT_MAX, LAT_MIN, LNG_MAX, LNG_MIN
from equirect_projection.projection.equirectangular import EquirectangularProjection


def _paired(a: object, b: object, labels: tuple[str, str]) -> tuple[np.ndarray, np.ndarray]:
    first = np.asarray(a, dtype=float)
    second = np.asarray(b, dtype=float)
    if first.shape != second.shape:
        raise ValueError(f"{labels[0]} and {labels[1]} must have the same shape")
    return first.ravel(), second.ravel()


def _round_half_up(values: np.ndarray) -> np.ndarray:
    whole = np.floor(values)
    return np.where(values - whole >= 0.5, whole + 1, whole)


def latlng_to_pixel_array(
    projection: EquirectangularProjection,
    lats: object,
    lngs: object,
    zoom: int,
) -> np.ndarray:
    """Return an (N, 2) int64 array of rounded (x, y) pixels."""
    lat_arr, lng_arr = _paired(lats, lngs, ("lats", "lngs"))
    x = _round_half_up(lng_arr * projection.pixels_per_longitude_degree(zoom))
    y = _round_half_up(lat_arr * projection.pixels_per_latitude_degree(zoom))
    return np.stack([x, y], axis=-1).astype(np.int64)


def pixel_to_latlng_array(
    projection: EquirectangularProjection,
    xs: object,
    ys: object,
    zoom: int,
    unbounded: bool = False,
) -> np.ndarray:
    """Return an (N, 2) float array of (lat, lng) degrees.

    Latitude is clamped to [-90, 90]; longitude outside [-180, 180] wraps
    unless ``unbounded`` is set.
    """
    x_arr, y_arr = _paired(xs, ys, ("xs", "ys"))
    width, height = projection.dimension(zoom)
    lng = x_arr * 360.0 / width
    lat = np.clip(y_arr * 180.0 / height, LAT_MIN, LAT_MAX)
    if not unbounded:
        out_of_range = (lng < LNG_MIN) | (lng > LNG_MAX)
        lng = np.where(out_of_range, np.mod(lng - LNG_MIN, 360.0) + LNG_MIN, lng)
    return np.stack([lat, lng], axis=-1)
