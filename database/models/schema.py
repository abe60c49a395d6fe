"""
Database models for the itinerary search service
Carrier routing policy (permitted routes) and the scheduled segments they are built from
"""

from sqlalchemy import (
    Column, String, Integer, Boolean, DateTime, JSON, Index, UniqueConstraint
)
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class PermittedRoute(Base):
    """
    Carrier-approved routing template between two airports.

    A route may be served directly and/or via transfer airports. Each entry of
    transfer_iata_codes is a concatenation of 3-letter IATA codes, e.g. "OVB"
    (one transfer) or "VVOOVB" (two transfers, VVO then OVB).
    """
    __tablename__ = 'permitted_routes'

    id = Column(Integer, primary_key=True, autoincrement=True)
    carrier = Column(String(3), nullable=False)
    origin_iata = Column(String(3), nullable=False)
    destination_iata = Column(String(3), nullable=False)
    direct = Column(Boolean, nullable=False, default=True)
    transfer_iata_codes = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint('carrier', 'origin_iata', 'destination_iata', name='idx_permitted_routes_key'),
    )

    def __repr__(self):
        return (
            f"<PermittedRoute(carrier='{self.carrier}', origin='{self.origin_iata}', "
            f"destination='{self.destination_iata}', direct={self.direct})>"
        )


class Segment(Base):
    """
    One scheduled flight leg. Times are stored as naive UTC.
    Core entity for search operations
    """
    __tablename__ = 'segments'

    id = Column(Integer, primary_key=True, autoincrement=True)
    airline = Column(String(3), nullable=False)
    segment_number = Column(String(10), nullable=False)
    origin_iata = Column(String(3), nullable=False)
    destination_iata = Column(String(3), nullable=False)

    # Scheduled time of departure / arrival (UTC)
    std = Column(DateTime, nullable=False)
    sta = Column(DateTime, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index('idx_segments_route_lookup', 'airline', 'origin_iata', 'destination_iata', 'std'),
        Index('idx_segments_airline_origin_std', 'airline', 'origin_iata', 'std'),
    )

    def __repr__(self):
        return (
            f"<Segment(airline='{self.airline}', number='{self.segment_number}', "
            f"{self.origin_iata}->{self.destination_iata}, std='{self.std}')>"
        )
