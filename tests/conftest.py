"""Pytest configuration and fixtures for engine tests."""

import asyncio
from uuid import UUID

import pytest

from garden_sites.boundary.types import Coordinate, Polygon
from garden_sites.collaborators import GeolocationError, GeolocationFix

TEST_SITE_ID = UUID("00000000-0000-0000-0000-000000000030")


class RecordingStore:
    """Store that keeps every record it is given."""

    def __init__(self):
        self.saved = []

    async def save_boundary(self, record) -> None:
        self.saved.append(record)


class FailingStore:
    """Store whose backend is down."""

    async def save_boundary(self, record) -> None:
        raise ConnectionError("database unavailable")


class GatedStore:
    """Store that holds each save until the test releases it."""

    def __init__(self):
        self.saved = []
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def save_boundary(self, record) -> None:
        self.started.set()
        await self.release.wait()
        self.saved.append(record)


class FakeGeolocator:
    """Geolocator returning a fixed fix or raising a fixed error."""

    def __init__(self, fix: GeolocationFix | None = None, error: Exception | None = None):
        self.fix = fix
        self.error = error
        self.calls = 0

    async def locate(self) -> GeolocationFix:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.fix


class HangingGeolocator:
    """Geolocator that never answers."""

    async def locate(self) -> GeolocationFix:
        await asyncio.Event().wait()


class FakeZoneLookup:
    """Zone lookup returning a fixed code or raising a fixed error."""

    def __init__(self, code: str | None = None, error: Exception | None = None):
        self.code = code
        self.error = error
        self.queried = []

    async def lookup(self, coordinate: Coordinate) -> str | None:
        self.queried.append(coordinate)
        if self.error is not None:
            raise self.error
        return self.code


@pytest.fixture
def square() -> Polygon:
    """A small garden-sized square near Portland, OR."""
    return Polygon.from_lat_lng(
        [
            (45.5200, -122.6800),
            (45.5200, -122.6790),
            (45.5210, -122.6790),
            (45.5210, -122.6800),
        ]
    )


@pytest.fixture
def site_point() -> Coordinate:
    return Coordinate(latitude=45.5205, longitude=-122.6795)


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture
def gated_store() -> GatedStore:
    return GatedStore()


@pytest.fixture
def make_geolocator():
    """Factory for geolocators with a canned answer."""

    def _make(fix: GeolocationFix | None = None, error: GeolocationError | None = None):
        return FakeGeolocator(fix=fix, error=error)

    return _make


@pytest.fixture
def hanging_geolocator() -> HangingGeolocator:
    return HangingGeolocator()


@pytest.fixture
def make_zone_lookup():
    """Factory for zone lookups with a canned answer."""

    def _make(code: str | None = None, error: Exception | None = None):
        return FakeZoneLookup(code=code, error=error)

    return _make
