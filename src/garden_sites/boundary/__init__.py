"""Boundary module - coordinate model, WKT codec, map framing and drawing sessions."""

from garden_sites.boundary.types import MIN_COMPLETE_POINTS, Coordinate, Polygon
from garden_sites.boundary.wkt import ParseError, decode, encode
from garden_sites.boundary.framing import (
    MapRegion,
    ZoomLevel,
    centroid,
    frame_fix,
    frame_region,
    suggested_zoom,
)
from garden_sites.boundary.shapes import covers, is_simple_boundary
from garden_sites.boundary.session import (
    BoundarySession,
    InvalidTransitionError,
    SaveInProgressError,
    SessionState,
)

__all__ = [
    "MIN_COMPLETE_POINTS",
    "Coordinate",
    "Polygon",
    "ParseError",
    "decode",
    "encode",
    "MapRegion",
    "ZoomLevel",
    "centroid",
    "frame_fix",
    "frame_region",
    "suggested_zoom",
    "covers",
    "is_simple_boundary",
    "BoundarySession",
    "InvalidTransitionError",
    "SaveInProgressError",
    "SessionState",
]
