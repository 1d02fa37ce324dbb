"""Boundary drawing workflow for one map screen.

A session moves between three states:

    IDLE --start_drawing--> DRAWING --finish_drawing--> CLOSED
      ^                                                   |
      +------------------- clear (from any state) --------+

Map clicks only add points while DRAWING, and drags only move points while
DRAWING. The reference point is separate from the boundary and can be set
in any state. Saving rebuilds the full record and hands it to the store.

A session belongs to a single screen. Only one save may be in flight at a
time; a second request while one is pending is rejected with
:class:`SaveInProgressError`.
"""

import asyncio
import logging
from enum import StrEnum
from uuid import UUID

from garden_sites.boundary import wkt
from garden_sites.boundary.framing import MapRegion, frame_region
from garden_sites.boundary.shapes import is_simple_boundary
from garden_sites.boundary.types import Coordinate, Polygon
from garden_sites.collaborators import (
    BoundaryStore,
    GeolocationError,
    GeolocationFailure,
    GeolocationFix,
    Geolocator,
)
from garden_sites.config import settings
from garden_sites.sites.types import BoundaryRecord, OwnerKind

logger = logging.getLogger(__name__)


class SessionState(StrEnum):
    """Where a boundary session is in the drawing workflow."""

    IDLE = "idle"
    DRAWING = "drawing"
    CLOSED = "closed"


class InvalidTransitionError(Exception):
    """Raised when an operation is not allowed in the current state."""


class SaveInProgressError(Exception):
    """Raised when a save is requested while another is still pending."""


class BoundarySession:
    """Per-screen state for drawing and saving a boundary."""

    def __init__(
        self,
        owner_id: UUID,
        owner_kind: OwnerKind,
        reference_point: Coordinate | None = None,
        polygon: Polygon | None = None,
    ):
        self.owner_id = owner_id
        self.owner_kind = owner_kind
        self.reference_point = reference_point
        self.warnings: list[str] = []
        self.last_saved: BoundaryRecord | None = None
        self._polygon = polygon.copy() if polygon is not None else Polygon()
        self._state = SessionState.IDLE
        self._saving = False

    @classmethod
    def from_record(cls, record: BoundaryRecord) -> "BoundarySession":
        """Open a session on a stored record.

        Unreadable boundary text does not stop the screen from loading: the
        session starts with an empty boundary and keeps a warning.
        """
        session = cls(record.owner_id, record.owner_kind, reference_point=record.location)
        if record.boundary:
            try:
                session._polygon = wkt.decode(record.boundary)
            except wkt.ParseError as e:
                message = f"Stored boundary could not be read and was ignored: {e}"
                logger.warning(
                    "Unreadable boundary for %s %s: %s", record.owner_kind, record.owner_id, e
                )
                session.warnings.append(message)
        return session

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def polygon(self) -> Polygon:
        """A copy of the current boundary points."""
        return self._polygon.copy()

    @property
    def is_saving(self) -> bool:
        return self._saving

    @property
    def region(self) -> MapRegion:
        """Map framing for the current reference point and boundary."""
        return frame_region(self.reference_point, self._polygon)

    # -- Drawing -------------------------------------------------------------

    def start_drawing(self) -> None:
        """Enter DRAWING, keeping any existing boundary as the starting point."""
        if self._state is SessionState.DRAWING:
            raise InvalidTransitionError("Already drawing")
        self._state = SessionState.DRAWING
        logger.debug("Drawing started with %d existing points", len(self._polygon))

    def finish_drawing(self) -> None:
        """Close the boundary for this session."""
        if self._state is not SessionState.DRAWING:
            raise InvalidTransitionError(f"Cannot finish drawing from {self._state}")
        if self._polygon.is_empty:
            raise InvalidTransitionError("Cannot finish drawing without any points")
        self._state = SessionState.CLOSED
        logger.debug("Drawing finished with %d points", len(self._polygon))

    def toggle_drawing(self) -> SessionState:
        """The draw/finish button: finish if drawing with points, else start."""
        if self._state is SessionState.DRAWING:
            if not self._polygon.is_empty:
                self.finish_drawing()
        else:
            self.start_drawing()
        return self._state

    def add_point(self, coordinate: Coordinate) -> bool:
        """Append a map click to the boundary. Ignored unless drawing."""
        if self._state is not SessionState.DRAWING:
            return False
        self._polygon.append(coordinate)
        return True

    def move_point(self, index: int, coordinate: Coordinate) -> bool:
        """Move a dragged point. Ignored unless drawing.

        Raises:
            IndexError: If no point exists at ``index``.
        """
        if self._state is not SessionState.DRAWING:
            return False
        self._polygon.replace(index, coordinate)
        return True

    def clear(self) -> None:
        """Drop the boundary and return to IDLE."""
        self._polygon = Polygon()
        self._state = SessionState.IDLE

    # -- Reference point -----------------------------------------------------

    def set_reference_point(self, coordinate: Coordinate | None) -> None:
        """Set or remove the reference point. The boundary is not touched."""
        self.reference_point = coordinate

    async def use_current_location(
        self, geolocator: Geolocator, timeout: float | None = None
    ) -> GeolocationFix:
        """Set the reference point from the device position.

        Raises:
            GeolocationError: If the position could not be resolved. The
                session is left as it was.
        """
        timeout = timeout or settings.geolocation_timeout_seconds
        try:
            fix = await asyncio.wait_for(geolocator.locate(), timeout=timeout)
        except TimeoutError as e:
            logger.warning("Geolocation timed out after %ss", timeout)
            raise GeolocationError(GeolocationFailure.TIMEOUT) from e
        except GeolocationError as e:
            logger.warning("Geolocation failed: %s", e.failure)
            raise

        self.reference_point = fix.coordinate
        return fix

    # -- Saving --------------------------------------------------------------

    def to_record(self) -> BoundaryRecord:
        """Build the full record for the current point and boundary."""
        return BoundaryRecord(
            owner_id=self.owner_id,
            owner_kind=self.owner_kind,
            location=self.reference_point,
            boundary=wkt.encode(self._polygon),
        )

    async def save(self, store: BoundaryStore) -> BoundaryRecord:
        """Persist the reference point and boundary.

        A boundary under three points is saved as no boundary. While still
        drawing, saving needs a complete boundary.

        Raises:
            SaveInProgressError: If another save has not finished.
            InvalidTransitionError: If drawing with fewer than three points.
        """
        if self._saving:
            raise SaveInProgressError(
                f"A save for {self.owner_kind} {self.owner_id} is already in progress"
            )
        if self._state is SessionState.DRAWING and not self._polygon.is_complete:
            raise InvalidTransitionError(
                f"Cannot save while drawing with {len(self._polygon)} points"
            )

        record = self.to_record()
        if record.boundary is not None and not is_simple_boundary(self._polygon):
            logger.warning(
                "Saving self-intersecting or zero-area boundary for %s %s",
                self.owner_kind,
                self.owner_id,
            )

        self._saving = True
        try:
            await store.save_boundary(record)
        finally:
            self._saving = False

        self.last_saved = record
        logger.info(
            "Saved %s %s: location=%s boundary_points=%d",
            self.owner_kind,
            self.owner_id,
            "yes" if record.location else "no",
            len(self._polygon) if record.boundary else 0,
        )
        return record
