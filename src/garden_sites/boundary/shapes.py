"""Shapely-backed checks on drawn boundaries.

Shapely works in x/y, so coordinates go in as (longitude, latitude). Only
complete boundaries are converted; anything shorter has no area.
"""

import logging

from shapely.errors import GEOSException
from shapely.geometry import Point
from shapely.geometry import Polygon as ShapelyPolygon

from garden_sites.boundary.types import Coordinate, Polygon

logger = logging.getLogger(__name__)


def to_shapely(polygon: Polygon) -> ShapelyPolygon | None:
    """Convert a complete boundary to a Shapely polygon, else None."""
    if not polygon.is_complete:
        return None
    return ShapelyPolygon([(c.longitude, c.latitude) for c in polygon])


def is_simple_boundary(polygon: Polygon) -> bool:
    """True when a complete boundary has area and does not cross itself."""
    shape = to_shapely(polygon)
    if shape is None:
        return False
    try:
        return shape.is_valid and shape.area > 0
    except GEOSException as e:
        logger.warning("Validity check failed for %d-point boundary: %s", len(polygon), e)
        return False


def covers(polygon: Polygon, coordinate: Coordinate) -> bool:
    """True when the coordinate lies inside or on the boundary."""
    shape = to_shapely(polygon)
    if shape is None:
        return False
    return shape.covers(Point(coordinate.longitude, coordinate.latitude))
