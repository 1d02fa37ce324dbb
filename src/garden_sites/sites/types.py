"""Records exchanged with the storage layer for sites and gardens."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from garden_sites.boundary.types import Coordinate


class OwnerKind(StrEnum):
    """What a boundary belongs to."""

    GARDEN = "garden"
    SITE = "site"


class BoundaryRecord(BaseModel):
    """The persisted location and boundary of a garden or site.

    The reference point and the boundary are independent: a record may have
    either, both, or neither.
    """

    model_config = ConfigDict(frozen=True)

    owner_id: UUID
    owner_kind: OwnerKind
    location: Coordinate | None = None
    # WKT POLYGON text, or None when no boundary has been drawn
    boundary: str | None = None

    @classmethod
    def from_row(
        cls, owner_id: UUID, owner_kind: OwnerKind, row: Mapping[str, Any]
    ) -> "BoundaryRecord":
        """Build a record from a ``sites`` or ``gardens`` row mapping."""
        return cls(
            owner_id=owner_id,
            owner_kind=owner_kind,
            location=Coordinate.from_columns(row.get("location_lat"), row.get("location_lng")),
            boundary=row.get("boundary") or None,
        )

    def to_row(self) -> dict[str, Any]:
        """Column values for a full replace of the stored record."""
        return {
            "location_lat": self.location.latitude if self.location else None,
            "location_lng": self.location.longitude if self.location else None,
            "boundary": self.boundary,
        }


class CandidateEntity(BaseModel):
    """An unassigned garden that could be added to a site."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str = Field(..., min_length=1)
    coordinate: Coordinate | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CandidateEntity":
        """Build a candidate from a ``gardens`` row mapping."""
        return cls(
            id=row["id"],
            name=row["name"],
            coordinate=Coordinate.from_columns(row.get("location_lat"), row.get("location_lng")),
        )


@dataclass
class SiteSuggestions:
    """Gardens the manage-site screen offers for assignment."""

    nearby: list[CandidateEntity] = field(default_factory=list)
    unassigned: list[CandidateEntity] = field(default_factory=list)

    @property
    def primary(self) -> list[CandidateEntity]:
        """Nearby gardens when there are any, otherwise every unassigned one."""
        return self.nearby if self.nearby else self.unassigned
