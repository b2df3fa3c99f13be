"""FastAPI app exposing projection operations to map hosts."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from equirect_projection.contracts import LatLng, LatLngBounds, Point, TileCoord
from equirect_projection.errors import ProjectionError
from equirect_projection.geo.rectangle import Rectangle
from equirect_projection.projection.equirectangular import EquirectangularProjection
from equirect_projection.projection.factory import create_projection

logger = logging.getLogger(__name__)


class LatLngPayload(BaseModel):
    """Geographic coordinate in degrees."""

    lat: float = Field(ge=-90.0, le=90.0)
    lng: float


class PixelRequest(BaseModel):
    """Request schema for forward projection."""

    latlng: LatLngPayload
    zoom: int


class PixelResponse(BaseModel):
    """Pixel offset from the map center."""

    x: float
    y: float


class LatLngRequest(BaseModel):
    """Request schema for inverse projection."""

    x: float
    y: float
    zoom: int
    unbounded: bool = False


class LatLngResponse(BaseModel):
    """Geographic coordinate response."""

    lat: float
    lng: float


class TileCheckRequest(BaseModel):
    """Request schema for tile range validation."""

    x: int
    y: int
    zoom: int
    tile_size: int = Field(default=256, gt=0)


class TileCheckResponse(BaseModel):
    """Whether a tile lies within the projected world."""

    in_range: bool


class ProjectBoundsRequest(BaseModel):
    """Request schema for converting a geographic box into pixels."""

    south_west: LatLngPayload
    north_east: LatLngPayload
    zoom: int


class RectangleResponse(BaseModel):
    """Pixel rectangle with derived closed edges."""

    left: float
    top: float
    width: float
    height: float
    right: float
    bottom: float


class WrapWidthResponse(BaseModel):
    """Horizontal repeat period; null when the map does not repeat."""

    wrap_width: float | None


class DimensionsResponse(BaseModel):
    """Configured per-zoom dimension table."""

    zoom_levels: int
    dimensions: list[tuple[float, float]]
    repeats_horizontally: bool


def _rectangle_response(rect: Rectangle) -> RectangleResponse:
    return RectangleResponse(**rect.to_dict())


def _unprocessable(exc: ProjectionError) -> HTTPException:
    """Log and convert a projection error into a 422 response."""
    logger.warning("rejected projection request: %s", exc)
    return HTTPException(status_code=422, detail=str(exc))


def create_app(projection: EquirectangularProjection | None = None) -> FastAPI:
    """Create and configure the FastAPI app."""
    app = FastAPI(title="Equirectangular Projection API", version="0.1.0")
    proj = projection if projection is not None else create_projection()
    app.state.projection = proj

    @app.post("/pixel", response_model=PixelResponse)
    def post_pixel(payload: PixelRequest) -> PixelResponse:
        """Project a geographic point to pixel space."""
        try:
            pixel = proj.from_latlng_to_pixel(
                LatLng(payload.latlng.lat, payload.latlng.lng, True), payload.zoom
            )
        except ProjectionError as exc:
            raise _unprocessable(exc) from exc
        return PixelResponse(**pixel.to_dict())

    @app.post("/latlng", response_model=LatLngResponse)
    def post_latlng(payload: LatLngRequest) -> LatLngResponse:
        """Interpret a pixel location as a geographic coordinate."""
        try:
            latlng = proj.from_pixel_to_latlng(Point(payload.x, payload.y), payload.zoom, payload.unbounded)
        except ProjectionError as exc:
            raise _unprocessable(exc) from exc
        return LatLngResponse(**latlng.to_dict())

    @app.post("/tile-check", response_model=TileCheckResponse)
    def post_tile_check(payload: TileCheckRequest) -> TileCheckResponse:
        """Report whether a tile overlaps the projected world."""
        try:
            in_range = proj.tile_check_range(TileCoord(payload.x, payload.y), payload.zoom, payload.tile_size)
        except ProjectionError as exc:
            raise _unprocessable(exc) from exc
        return TileCheckResponse(in_range=in_range)

    @app.post("/project-bounds", response_model=RectangleResponse)
    def post_project_bounds(payload: ProjectBoundsRequest) -> RectangleResponse:
        """Convert a geographic bounding box into a pixel rectangle."""
        bounds = LatLngBounds(
            south_west=LatLng(payload.south_west.lat, payload.south_west.lng, True),
            north_east=LatLng(payload.north_east.lat, payload.north_east.lng, True),
        )
        try:
            rect = proj.project_latlng_bounds(bounds, payload.zoom)
        except ProjectionError as exc:
            raise _unprocessable(exc) from exc
        return _rectangle_response(rect)

    @app.get("/bounds/{zoom}", response_model=RectangleResponse)
    def get_bounds(zoom: int) -> RectangleResponse:
        """Return the world rectangle at zoom."""
        try:
            rect = proj.bounds(zoom)
        except ProjectionError as exc:
            raise _unprocessable(exc) from exc
        return _rectangle_response(rect)

    @app.get("/wrap-width/{zoom}", response_model=WrapWidthResponse)
    def get_wrap_width(zoom: int) -> WrapWidthResponse:
        """Return the horizontal repeat period at zoom."""
        try:
            width = proj.get_wrap_width(zoom)
        except ProjectionError as exc:
            raise _unprocessable(exc) from exc
        # JSON has no infinity; a non-repeating map reports null.
        return WrapWidthResponse(wrap_width=None if width == float("inf") else width)

    @app.get("/dimensions", response_model=DimensionsResponse)
    def get_dimensions() -> DimensionsResponse:
        """Return the configured dimension table."""
        return DimensionsResponse(
            zoom_levels=proj.zoom_levels,
            dimensions=[tuple(entry) for entry in proj.dimensions],
            repeats_horizontally=proj.repeats_horizontally,
        )

    return app


app = create_app()
