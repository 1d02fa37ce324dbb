"""Coordinate and polygon types shared by the boundary engine."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

# A boundary needs at least this many distinct points to be saved.
MIN_COMPLETE_POINTS = 3


class Coordinate(BaseModel):
    """A WGS84 point in decimal degrees."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    @classmethod
    def from_lat_lng(cls, latitude: float, longitude: float) -> "Coordinate":
        """Build a coordinate from a (latitude, longitude) pair."""
        return cls(latitude=latitude, longitude=longitude)

    @classmethod
    def from_columns(
        cls, latitude: float | None, longitude: float | None
    ) -> "Coordinate | None":
        """Build a coordinate from two nullable database columns.

        Returns None unless both columns hold a value.
        """
        if latitude is None or longitude is None:
            return None
        return cls(latitude=float(latitude), longitude=float(longitude))


@dataclass
class Polygon:
    """An open ring of coordinates in drawing order.

    The first point is never repeated at the end; closing the ring is the
    WKT codec's job.
    """

    points: list[Coordinate] = field(default_factory=list)

    @classmethod
    def from_lat_lng(cls, pairs: Iterable[tuple[float, float]]) -> "Polygon":
        """Build a polygon from (latitude, longitude) pairs."""
        return cls([Coordinate(latitude=lat, longitude=lng) for lat, lng in pairs])

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Coordinate:
        return self.points[index]

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def is_complete(self) -> bool:
        """True once the ring has enough points to be serialized."""
        return len(self.points) >= MIN_COMPLETE_POINTS

    def append(self, coordinate: Coordinate) -> None:
        self.points.append(coordinate)

    def replace(self, index: int, coordinate: Coordinate) -> None:
        """Move the point at ``index``. Negative indexes are rejected."""
        if not 0 <= index < len(self.points):
            raise IndexError(
                f"Point index {index} out of range for polygon with {len(self.points)} points"
            )
        self.points[index] = coordinate

    def copy(self) -> "Polygon":
        return Polygon(list(self.points))
