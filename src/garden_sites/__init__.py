"""Boundary and site-association engine for gardens."""

from garden_sites.boundary import (
    BoundarySession,
    Coordinate,
    ParseError,
    Polygon,
    decode,
    encode,
)
from garden_sites.sites import BoundaryRecord, CandidateEntity, OwnerKind, find_nearby

__version__ = "0.1.0"
__all__ = [
    "BoundaryRecord",
    "BoundarySession",
    "CandidateEntity",
    "Coordinate",
    "OwnerKind",
    "ParseError",
    "Polygon",
    "decode",
    "encode",
    "find_nearby",
]
