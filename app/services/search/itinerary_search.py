"""
Itinerary search - backtracking walk of preloaded segments along blueprint paths
"""
import logging
from datetime import datetime
from typing import Dict, List, Sequence

from .helpers import is_valid_connection
from .records import BlueprintPath, SegmentChain, SegmentRecord

logger = logging.getLogger(__name__)

MIN_CONNECTION_TIME = 480  # minutes (8h)
MAX_CONNECTION_TIME = 2880  # minutes (48h)


class ItinerarySearch:
    """
    Finds every chain of segments that visits a blueprint path's airports in order.

    The first leg must depart within [departure_from, departure_to]; every
    following leg must leave the connecting airport between min_connection and
    max_connection minutes after the previous leg arrives (both inclusive).
    The search holds no state between calls to search().
    """

    def __init__(
        self,
        segments_by_origin: Dict[str, List[SegmentRecord]],
        departure_from: datetime,
        departure_to: datetime,
        min_connection: int = MIN_CONNECTION_TIME,
        max_connection: int = MAX_CONNECTION_TIME
    ):
        self.segments_by_origin = segments_by_origin
        self.departure_from = departure_from
        self.departure_to = departure_to
        self.min_connection = min_connection
        self.max_connection = max_connection

    def search(self, blueprint_paths: Sequence[BlueprintPath]) -> List[SegmentChain]:
        """
        Search all blueprint paths.

        Returns:
            Complete chains grouped by path in input order, each group in
            depth-first discovery order. Not sorted or deduplicated.
        """
        itineraries: List[SegmentChain] = []

        for path in blueprint_paths:
            logger.debug("Processing blueprint path %s", path)
            self._find_initial_segments(list(path), itineraries)

        return itineraries

    def _find_initial_segments(
        self,
        path: BlueprintPath,
        itineraries: List[SegmentChain]
    ) -> None:
        if len(path) < 2:
            return

        origin, first_destination = path[0], path[1]

        for segment in self.segments_by_origin.get(origin, []):
            if segment.destination_iata != first_destination:
                continue
            if not self.departure_from <= segment.std <= self.departure_to:
                continue

            self._find_next_segments((segment,), path[2:], itineraries)

    def _find_next_segments(
        self,
        chain: SegmentChain,
        remaining_airports: BlueprintPath,
        itineraries: List[SegmentChain]
    ) -> None:
        if not remaining_airports:
            itineraries.append(chain)
            return

        last_segment = chain[-1]
        next_destination = remaining_airports[0]

        for segment in self.segments_by_origin.get(last_segment.destination_iata, []):
            if segment.destination_iata != next_destination:
                continue
            if not is_valid_connection(
                last_segment, segment,
                self.min_connection,
                self.max_connection
            ):
                continue

            # tuples: siblings never share a mutable chain
            self._find_next_segments(chain + (segment,), remaining_airports[1:], itineraries)


def search_itineraries(
    blueprint_paths: Sequence[BlueprintPath],
    segments_by_origin: Dict[str, List[SegmentRecord]],
    departure_from: datetime,
    departure_to: datetime
) -> List[SegmentChain]:
    """Run an ItinerarySearch with the default connection policy."""
    return ItinerarySearch(segments_by_origin, departure_from, departure_to).search(blueprint_paths)
