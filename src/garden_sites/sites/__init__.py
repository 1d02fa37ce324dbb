"""Sites module - garden-to-site matching and hardiness zones."""

from garden_sites.sites.types import (
    BoundaryRecord,
    CandidateEntity,
    OwnerKind,
    SiteSuggestions,
)
from garden_sites.sites.proximity import (
    find_nearby,
    list_unassigned,
    planar_distance,
    suggest_gardens,
    within_boundary,
)
from garden_sites.sites.zones import (
    HARDINESS_ZONES,
    detect_hardiness_zone,
    is_valid_zone,
    resolve_zone,
)

__all__ = [
    "BoundaryRecord",
    "CandidateEntity",
    "OwnerKind",
    "SiteSuggestions",
    "find_nearby",
    "list_unassigned",
    "planar_distance",
    "suggest_gardens",
    "within_boundary",
    "HARDINESS_ZONES",
    "detect_hardiness_zone",
    "is_valid_zone",
    "resolve_zone",
]
