"""Contracts for the external services the engine talks to.

The engine never reaches a database, a device GPS or the hardiness-zone
service directly. Screens pass in objects satisfying these protocols and
the engine awaits them.
"""

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel, ConfigDict, Field

from garden_sites.boundary.types import Coordinate

if TYPE_CHECKING:
    from garden_sites.sites.types import BoundaryRecord


class GeolocationFailure(StrEnum):
    """Reasons a device or browser could not produce a position."""

    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"


GEOLOCATION_MESSAGES: dict[GeolocationFailure, str] = {
    GeolocationFailure.PERMISSION_DENIED: (
        "Please allow location access in your browser or device settings."
    ),
    GeolocationFailure.POSITION_UNAVAILABLE: "Location information is unavailable.",
    GeolocationFailure.TIMEOUT: "The request to get your location timed out.",
}


class GeolocationError(Exception):
    """Raised by a geolocator that could not resolve a position."""

    def __init__(self, failure: GeolocationFailure, detail: str | None = None):
        self.failure = failure
        self.detail = detail
        super().__init__(detail or failure.value)

    @property
    def user_message(self) -> str:
        """Text a screen can show as-is."""
        return f"Failed to get your current location. {GEOLOCATION_MESSAGES[self.failure]}"


class ZoneLookupError(Exception):
    """Raised by a hardiness-zone lookup that failed outright."""


class GeolocationFix(BaseModel):
    """A resolved position and how far off it may be."""

    model_config = ConfigDict(frozen=True)

    coordinate: Coordinate
    accuracy_m: float | None = Field(default=None, ge=0.0)


class Geolocator(Protocol):
    async def locate(self) -> GeolocationFix:
        """Resolve the current position or raise GeolocationError."""
        ...


class BoundaryStore(Protocol):
    async def save_boundary(self, record: "BoundaryRecord") -> None:
        """Persist a full boundary record, replacing the previous one."""
        ...


class HardinessZoneLookup(Protocol):
    async def lookup(self, coordinate: Coordinate) -> str | None:
        """Return the zone code at a coordinate, or None if undetermined."""
        ...
