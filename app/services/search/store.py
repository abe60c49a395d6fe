"""
Store capability used by the search: permitted route lookup and segment preload
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from database.models import PermittedRoute, Segment
from .records import PermittedRouteRecord, SegmentRecord


class RouteStore(ABC):
    """
    The two lookups the search needs from persistent storage.

    Implementations raise on infrastructure failure; "nothing found" is
    expressed as None / an empty list, never as an exception.
    """

    @abstractmethod
    def find_permitted_route(
        self,
        carrier: str,
        origin: str,
        destination: str
    ) -> Optional[PermittedRouteRecord]:
        """Return the carrier's routing template for the airport pair, or None."""

    @abstractmethod
    def find_segments(
        self,
        carrier: str,
        airports: Iterable[str],
        departure_from: datetime,
        departure_to: datetime
    ) -> List[SegmentRecord]:
        """Return the carrier's segments departing any of airports with STD in [departure_from, departure_to]."""


class SqlAlchemyRouteStore(RouteStore):
    """RouteStore backed by the permitted_routes and segments tables"""

    def __init__(self, db: Session):
        self.db = db

    def find_permitted_route(
        self,
        carrier: str,
        origin: str,
        destination: str
    ) -> Optional[PermittedRouteRecord]:
        route = (
            self.db.query(PermittedRoute)
            .filter(
                PermittedRoute.carrier == carrier,
                PermittedRoute.origin_iata == origin,
                PermittedRoute.destination_iata == destination
            )
            .first()
        )

        if route is None:
            return None

        return PermittedRouteRecord.from_model(route)

    def find_segments(
        self,
        carrier: str,
        airports: Iterable[str],
        departure_from: datetime,
        departure_to: datetime
    ) -> List[SegmentRecord]:
        airports = sorted(set(airports))
        if not airports:
            return []

        segments = (
            self.db.query(Segment)
            .filter(
                Segment.airline == carrier,
                Segment.origin_iata.in_(airports),
                Segment.std.between(departure_from, departure_to)
            )
            .order_by(Segment.std, Segment.id)
            .all()
        )

        return [SegmentRecord.from_model(segment) for segment in segments]
