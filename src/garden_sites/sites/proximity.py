"""Matching unassigned gardens to a site.

Distances are planar, in degrees: ``sqrt(dlat**2 + dlng**2)``. This is not
a geodesic distance. It stretches east-west at high latitudes and does not
wrap at the antimeridian. Thresholds in use were tuned against this metric,
so changing it changes which gardens get suggested.
"""

import logging
import math
from collections.abc import Iterable

from garden_sites.boundary.shapes import covers
from garden_sites.boundary.types import Coordinate, Polygon
from garden_sites.config import settings
from garden_sites.sites.types import CandidateEntity, SiteSuggestions

logger = logging.getLogger(__name__)


def planar_distance(a: Coordinate, b: Coordinate) -> float:
    """Euclidean distance between two coordinates, in degrees."""
    lat_diff = a.latitude - b.latitude
    lng_diff = a.longitude - b.longitude
    return math.sqrt(lat_diff * lat_diff + lng_diff * lng_diff)


def find_nearby(
    reference: Coordinate,
    candidates: Iterable[CandidateEntity],
    threshold_degrees: float,
) -> list[CandidateEntity]:
    """Candidates strictly closer than the threshold, nearest first.

    Candidates without a coordinate are skipped. Equal distances keep their
    input order.

    Raises:
        ValueError: If the threshold is negative.
    """
    if threshold_degrees < 0:
        raise ValueError(f"threshold_degrees must be >= 0, got {threshold_degrees}")

    scored: list[tuple[float, CandidateEntity]] = []
    for candidate in candidates:
        if candidate.coordinate is None:
            continue
        d = planar_distance(reference, candidate.coordinate)
        if d < threshold_degrees:
            scored.append((d, candidate))

    scored.sort(key=lambda item: item[0])
    return [candidate for _, candidate in scored]


def list_unassigned(candidates: Iterable[CandidateEntity]) -> list[CandidateEntity]:
    """All candidates for manual assignment, sorted by name."""
    return sorted(candidates, key=lambda c: c.name.casefold())


def suggest_gardens(
    reference: Coordinate | None,
    candidates: Iterable[CandidateEntity],
    threshold_degrees: float | None = None,
) -> SiteSuggestions:
    """Nearby and unassigned gardens for a site.

    A site without a reference point gets no nearby suggestions, only the
    full unassigned list.
    """
    pool = list(candidates)
    threshold = (
        settings.nearby_threshold_degrees if threshold_degrees is None else threshold_degrees
    )
    nearby = find_nearby(reference, pool, threshold) if reference is not None else []
    logger.debug(
        "Site suggestions: %d nearby of %d unassigned (threshold=%s)",
        len(nearby),
        len(pool),
        threshold,
    )
    return SiteSuggestions(nearby=nearby, unassigned=list_unassigned(pool))


def within_boundary(
    boundary: Polygon, candidates: Iterable[CandidateEntity]
) -> list[CandidateEntity]:
    """Candidates whose coordinate lies inside or on a site boundary.

    An incomplete boundary contains nothing. Input order is kept.
    """
    if not boundary.is_complete:
        return []
    return [
        c for c in candidates if c.coordinate is not None and covers(boundary, c.coordinate)
    ]
