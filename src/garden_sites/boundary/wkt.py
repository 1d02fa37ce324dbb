"""WKT codec for single-ring site and garden boundaries.

Boundaries are stored as ``POLYGON((lng lat, lng lat, ..., lng lat))``:
x is longitude, y is latitude, and the ring is closed by repeating the
first point. In memory a :class:`Polygon` is an open ring of
(latitude, longitude) coordinates. The axis swap and the closing point are
handled here and nowhere else, so callers never deal with either.
"""

import logging
import re
from decimal import Decimal

from pydantic import ValidationError

from garden_sites.boundary.types import Coordinate, Polygon

logger = logging.getLogger(__name__)

_PAIR_SEPARATOR = ", "

_POLYGON_RE = re.compile(r"^\s*POLYGON\s*\(\((?P<body>.*)\)\)\s*$", re.IGNORECASE | re.DOTALL)
_NUMBER_RE = re.compile(r"^[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?$")


class ParseError(ValueError):
    """Raised when text is not a single-ring WKT polygon."""


def format_number(value: float) -> str:
    """Format a degree value in plain decimal notation.

    Integral values drop the trailing ``.0``; everything else uses the
    shortest decimal that reads back as the same float, without exponent.
    """
    if value == 0:
        return "0"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def to_wkt_pair(coordinate: Coordinate) -> str:
    """Render a coordinate as a WKT ``x y`` pair (longitude first)."""
    return f"{format_number(coordinate.longitude)} {format_number(coordinate.latitude)}"


def from_wkt_pair(text: str) -> Coordinate:
    """Parse a WKT ``x y`` pair back into a (latitude, longitude) coordinate."""
    parts = text.split()
    if len(parts) != 2:
        raise ParseError(f"Expected two numbers in coordinate pair, got {text.strip()!r}")
    for part in parts:
        if not _NUMBER_RE.match(part):
            raise ParseError(f"Not a finite number: {part!r}")
    x, y = (float(part) for part in parts)
    try:
        return Coordinate(latitude=y, longitude=x)
    except ValidationError as e:
        raise ParseError(f"Coordinate out of range in pair {text.strip()!r}") from e


def encode(polygon: Polygon) -> str | None:
    """Encode a polygon as closed-ring WKT.

    Returns None for a boundary still in progress (fewer than three points).
    """
    if not polygon.is_complete:
        return None
    pairs = [to_wkt_pair(c) for c in polygon]
    pairs.append(pairs[0])
    return f"POLYGON(({_PAIR_SEPARATOR.join(pairs)}))"


def decode(wkt: str) -> Polygon:
    """Decode WKT polygon text into an open-ring polygon.

    Accepts ``POLYGON((...))`` and ``POLYGON ((...))`` in any letter case,
    with pairs separated by commas with or without spaces. The closing
    point, when present, is dropped.

    Raises:
        ParseError: If the wrapper is missing, the ring is empty, or a pair
            is not two finite in-range numbers.
    """
    if not isinstance(wkt, str):
        raise ParseError(f"Expected WKT text, got {type(wkt).__name__}")

    match = _POLYGON_RE.match(wkt)
    if match is None:
        raise ParseError("Missing POLYGON((...)) wrapper")

    body = match.group("body").strip()
    if not body:
        raise ParseError("Polygon ring is empty")

    points = [from_wkt_pair(pair) for pair in body.split(",")]
    if len(points) > 1 and points[-1] == points[0]:
        points.pop()

    logger.debug("Decoded boundary with %d points", len(points))
    return Polygon(points)
