"""
Helper utilities for itinerary search operations
"""
from typing import Dict, Iterable, List, Tuple
from datetime import date, datetime, time
from collections import defaultdict

from app.models import FlightLeg
from .records import BlueprintPath, SegmentRecord


def departure_window(departure_from: date, departure_to: date) -> Tuple[datetime, datetime]:
    """
    Turn requested departure dates into an inclusive instant range.

    Returns:
        (start of departure_from, last microsecond of departure_to), naive UTC
    """
    return (
        datetime.combine(departure_from, time.min),
        datetime.combine(departure_to, time.max)
    )


def collect_airports(blueprint_paths: Iterable[BlueprintPath]) -> List[str]:
    """Distinct airport codes appearing anywhere in the paths, in first-seen order."""
    airports = {}
    for path in blueprint_paths:
        for airport in path:
            airports.setdefault(airport, None)
    return list(airports)


def count_transfers(path: BlueprintPath) -> int:
    """Number of intermediate airports in a blueprint path"""
    return max(len(path) - 2, 0)


def is_valid_connection(
    arriving_segment: SegmentRecord,
    departing_segment: SegmentRecord,
    min_connection: int,
    max_connection: int
) -> bool:
    """
    Check if a connection between two segments is valid.

    Args:
        arriving_segment: The segment arriving at the connecting airport
        departing_segment: The segment departing from it
        min_connection: Minimum connection time in minutes (inclusive)
        max_connection: Maximum connection time in minutes (inclusive)

    Returns:
        True if connection is valid, False otherwise
    """
    connection_time = (
        departing_segment.std - arriving_segment.sta
    ).total_seconds() / 60

    if connection_time < min_connection:
        return False

    if connection_time > max_connection:
        return False

    return True


def create_flight_leg_from_segment(segment: SegmentRecord) -> FlightLeg:
    """
    Create a FlightLeg response model from a SegmentRecord.
    """
    return FlightLeg(
        carrier=segment.airline,
        segment_number=segment.segment_number,
        origin=segment.origin_iata,
        destination=segment.destination_iata,
        std=segment.std,
        sta=segment.sta,
        duration_minutes=int((segment.sta - segment.std).total_seconds() / 60)
    )


def index_segments_by_origin(
    segments: Iterable[SegmentRecord]
) -> Dict[str, List[SegmentRecord]]:
    """
    Index segments by origin airport for faster lookup.

    Args:
        segments: Segments as returned by the store

    Returns:
        Dictionary mapping origin IATA code to its segments, store order preserved
    """
    segments_by_origin = defaultdict(list)
    for segment in segments:
        segments_by_origin[segment.origin_iata].append(segment)
    return dict(segments_by_origin)
