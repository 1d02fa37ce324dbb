"""Initial map framing for a site or garden.

The centroid here is a plain average of vertex latitudes and longitudes.
It is not a spherical or area-weighted centroid and is only meaningful for
small boundaries away from the poles and the antimeridian, which is what
gardens and sites are.
"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict

from garden_sites.boundary.types import Coordinate, Polygon
from garden_sites.collaborators import GeolocationFix
from garden_sites.config import settings


class ZoomLevel(IntEnum):
    """Qualitative map scale, ordered from widest to closest."""

    COUNTRY = 1
    NEIGHBORHOOD = 2
    CLOSE_UP = 3


class MapRegion(BaseModel):
    """Where a map should open and how close."""

    model_config = ConfigDict(frozen=True)

    center: Coordinate
    zoom: ZoomLevel


def default_center() -> Coordinate:
    """The configured fallback center used when nothing is known yet."""
    return Coordinate(
        latitude=settings.default_center_lat,
        longitude=settings.default_center_lng,
    )


def centroid(polygon: Polygon) -> Coordinate:
    """Arithmetic mean of the polygon's vertices.

    Raises:
        ValueError: If the polygon has no points.
    """
    if polygon.is_empty:
        raise ValueError("Cannot compute the centroid of an empty polygon")
    count = len(polygon)
    lat = sum(c.latitude for c in polygon) / count
    lng = sum(c.longitude for c in polygon) / count
    return Coordinate(latitude=lat, longitude=lng)


def suggested_zoom(has_point: bool, has_polygon: bool) -> ZoomLevel:
    """Pick a map scale from which inputs are available."""
    if has_polygon or has_point:
        return ZoomLevel.CLOSE_UP
    return ZoomLevel.COUNTRY


def frame_region(
    point: Coordinate | None = None,
    polygon: Polygon | None = None,
    fallback: Coordinate | None = None,
) -> MapRegion:
    """Frame a map around a boundary, a reference point, or neither.

    A drawn boundary wins over the reference point; with neither the map
    opens at country scale on ``fallback`` (the configured default center
    when not given).
    """
    has_polygon = polygon is not None and not polygon.is_empty
    zoom = suggested_zoom(point is not None, has_polygon)
    if has_polygon:
        center = centroid(polygon)
    elif point is not None:
        center = point
    else:
        center = fallback or default_center()
    return MapRegion(center=center, zoom=zoom)


def frame_fix(fix: GeolocationFix, max_close_up_accuracy_m: float | None = None) -> MapRegion:
    """Frame a map around a geolocation fix.

    Fixes with a reported accuracy worse than the limit open at
    neighborhood scale so the user can see how uncertain the position is.
    """
    limit = max_close_up_accuracy_m or settings.max_close_up_accuracy_m
    if fix.accuracy_m is not None and fix.accuracy_m > limit:
        return MapRegion(center=fix.coordinate, zoom=ZoomLevel.NEIGHBORHOOD)
    return MapRegion(center=fix.coordinate, zoom=ZoomLevel.CLOSE_UP)
