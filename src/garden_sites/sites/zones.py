"""USDA hardiness zones.

Zones are never computed here. A site's zone comes from an external lookup
keyed by coordinate, or from the user picking one.
"""

import logging

from garden_sites.boundary.types import Coordinate
from garden_sites.collaborators import HardinessZoneLookup, ZoneLookupError

logger = logging.getLogger(__name__)

HARDINESS_ZONES: tuple[str, ...] = (
    "1a", "1b", "2a", "2b", "3a", "3b", "4a", "4b", "5a", "5b",
    "6a", "6b", "7a", "7b", "8a", "8b", "9a", "9b", "10a", "10b",
    "11a", "11b", "12a", "12b", "13a", "13b",
)


def is_valid_zone(code: str | None) -> bool:
    return code is not None and code.strip().lower() in HARDINESS_ZONES


async def detect_hardiness_zone(
    lookup: HardinessZoneLookup, coordinate: Coordinate
) -> str | None:
    """Ask the lookup service for the zone at a coordinate.

    Detection is optional, so a failed or unusable answer yields None
    rather than an error.
    """
    try:
        code = await lookup.lookup(coordinate)
    except (ZoneLookupError, TimeoutError) as e:
        logger.warning(
            "Hardiness zone lookup failed at (%s, %s): %s",
            coordinate.latitude,
            coordinate.longitude,
            e,
        )
        return None

    if code is None:
        return None
    if not is_valid_zone(code):
        logger.warning("Ignoring unknown hardiness zone code %r", code)
        return None
    return code.strip().lower()


def resolve_zone(selected: str | None, detected: str | None) -> str | None:
    """The user's explicit choice, falling back to the detected zone."""
    if selected:
        return selected
    return detected or None
