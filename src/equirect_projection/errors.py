"""Error types raised by projection operations."""

from __future__ import annotations


class ProjectionError(ValueError):
    """Base class for projection configuration and usage errors."""


class InvalidZoomLevel(ProjectionError):
    """Raised when a zoom index falls outside the configured dimension table."""

    def __init__(self, zoom: object, zoom_levels: int) -> None:
        self.zoom = zoom
        self.zoom_levels = zoom_levels
        super().__init__(f"zoom must be an integer in [0, {zoom_levels}), got {zoom!r}")


class InvalidDimensions(ProjectionError):
    """Raised when a dimension table cannot describe a projection."""
