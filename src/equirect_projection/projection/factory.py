"""Projection factory resolving configuration from arguments and environment."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Sequence

from equirect_projection.errors import InvalidDimensions
from equirect_projection.projection.equirectangular import EquirectangularProjection

logger = logging.getLogger(__name__)

DEFAULT_ZOOM_LEVELS = 5


def _resolve_zoom_levels(zoom_levels: int | None) -> int:
    """Resolve zoom level count from argument or environment."""
    if zoom_levels is not None:
        return zoom_levels
    raw = os.getenv("EQUIRECT_ZOOM_LEVELS", str(DEFAULT_ZOOM_LEVELS))
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"EQUIRECT_ZOOM_LEVELS must be an integer, got {raw!r}") from exc


def parse_dimensions(raw: str) -> list[list[float]]:
    """Parse a JSON ``[[width, height], ...]`` table."""
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidDimensions(f"dimensions must be a JSON array: {exc.msg}") from exc
    if not isinstance(parsed, list):
        raise InvalidDimensions("dimensions must be a JSON array of [width, height] pairs")
    return parsed


def _resolve_dimensions(dimensions: Sequence[Sequence[float]] | None) -> Sequence[Sequence[float]] | None:
    """Resolve dimension table from argument or environment."""
    if dimensions is not None:
        return dimensions
    raw = os.getenv("EQUIRECT_DIMENSIONS")
    if raw is None or not raw.strip():
        return None
    return parse_dimensions(raw)


def _resolve_repeats(repeats: bool | None) -> bool:
    """Resolve horizontal repetition from argument or environment."""
    if repeats is not None:
        return repeats
    raw = os.getenv("EQUIRECT_REPEATS", "1").strip()
    if raw not in {"0", "1"}:
        raise ValueError("EQUIRECT_REPEATS must be one of: 0, 1")
    return raw == "1"


def create_projection(
    zoom_levels: int | None = None,
    dimensions: Sequence[Sequence[float]] | None = None,
    repeats: bool | None = None,
) -> EquirectangularProjection:
    """Create a projection from explicit arguments, falling back to environment."""
    resolved_dimensions = _resolve_dimensions(dimensions)
    if zoom_levels is None and resolved_dimensions is not None and "EQUIRECT_ZOOM_LEVELS" not in os.environ:
        resolved_levels = len(resolved_dimensions)
    else:
        resolved_levels = _resolve_zoom_levels(zoom_levels)
    projection = EquirectangularProjection(
        resolved_levels,
        resolved_dimensions,
        repeats_horizontally=_resolve_repeats(repeats),
    )
    logger.info(
        "configured projection zoom_levels=%d custom_dimensions=%s repeats=%s",
        projection.zoom_levels,
        resolved_dimensions is not None,
        projection.repeats_horizontally,
    )
    return projection
