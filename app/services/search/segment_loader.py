"""
Segment preload - one store round trip covering every airport of every blueprint path
"""
import logging
from datetime import datetime, timedelta
from typing import Dict, List

from .helpers import collect_airports, index_segments_by_origin
from .records import BlueprintPath, SegmentRecord
from .store import RouteStore

logger = logging.getLogger(__name__)

# Connecting legs may depart up to this long after the last allowed first departure
DEPARTURE_LOOKAHEAD = timedelta(hours=48)


def load_segments_by_origin(
    store: RouteStore,
    carrier: str,
    blueprint_paths: List[BlueprintPath],
    departure_from: datetime,
    departure_to: datetime
) -> Dict[str, List[SegmentRecord]]:
    """
    Fetch candidate segments for all blueprint paths and group them by origin.

    Args:
        store: Store capability
        carrier: Airline code
        blueprint_paths: Paths produced by the route parser
        departure_from: Earliest first-leg departure
        departure_to: Latest first-leg departure

    Returns:
        Mapping of origin airport to segments departing it within
        [departure_from, departure_to + 48h]. Store errors propagate.
    """
    airports = collect_airports(blueprint_paths)
    window_end = departure_to + DEPARTURE_LOOKAHEAD

    logger.info(
        "Preloading segments for carrier=%s airports=%s from=%s to=%s",
        carrier, airports, departure_from.isoformat(), window_end.isoformat()
    )
    segments = store.find_segments(carrier, airports, departure_from, window_end)
    logger.info("Preloaded %d segments", len(segments))

    return index_segments_by_origin(segments)
