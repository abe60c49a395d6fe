"""
Shared fixtures: in-memory database, API client and a fake route store.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.models import Base
from app.main import app
from app.core.database import get_db, get_route_store
from app.services.search.records import PermittedRouteRecord, SegmentRecord
from app.services.search.store import RouteStore


def make_segment(
    origin: str,
    destination: str,
    std: datetime,
    hours: float = 2,
    number: str = "100",
    airline: str = "S7"
) -> SegmentRecord:
    """Build a segment departing at std and flying for the given number of hours."""
    return SegmentRecord(
        airline=airline,
        segment_number=number,
        origin_iata=origin,
        destination_iata=destination,
        std=std,
        sta=std + timedelta(hours=hours)
    )


class FakeRouteStore(RouteStore):
    """In-memory RouteStore that records the segment queries it receives."""

    def __init__(
        self,
        routes: Iterable[PermittedRouteRecord] = (),
        segments: Iterable[SegmentRecord] = ()
    ):
        self.routes: Dict[Tuple[str, str, str], PermittedRouteRecord] = {
            (r.carrier, r.origin_iata, r.destination_iata): r for r in routes
        }
        self.segments: List[SegmentRecord] = list(segments)
        self.segment_queries = []

    def find_permitted_route(self, carrier, origin, destination) -> Optional[PermittedRouteRecord]:
        return self.routes.get((carrier, origin, destination))

    def find_segments(self, carrier, airports, departure_from, departure_to) -> List[SegmentRecord]:
        airports = set(airports)
        self.segment_queries.append((carrier, airports, departure_from, departure_to))
        return [
            s for s in self.segments
            if s.airline == carrier
            and s.origin_iata in airports
            and departure_from <= s.std <= departure_to
        ]


class FailingRouteStore(RouteStore):
    """Simulates a database outage on the segment preload."""

    def __init__(self, route: PermittedRouteRecord):
        self.route = route

    def find_permitted_route(self, carrier, origin, destination):
        return self.route

    def find_segments(self, carrier, airports, departure_from, departure_to):
        raise ConnectionError("database is unreachable")


class UnreachableRouteStore(RouteStore):
    """Simulates a database outage on the permitted route lookup."""

    def find_permitted_route(self, carrier, origin, destination):
        raise ConnectionError("database is unreachable")

    def find_segments(self, carrier, airports, departure_from, departure_to):
        return []


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    """API client whose requests share the test session."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def client_with_store():
    """Factory: API client backed by the given RouteStore instead of the database."""

    def _client(store: RouteStore) -> TestClient:
        app.dependency_overrides[get_route_store] = lambda: store
        return TestClient(app, raise_server_exceptions=False)

    yield _client
    app.dependency_overrides.clear()


@pytest.fixture
def departure_day():
    return datetime(2024, 1, 1)
