"""
Itinerary builder - maps completed segment chains to the response schema
"""
from typing import List

from app.models import Itinerary
from .helpers import create_flight_leg_from_segment
from .records import SegmentChain


class ItineraryBuilder:
    """
    Responsible for building Itinerary response objects from segment chains
    """

    def build(self, chain: SegmentChain) -> Itinerary:
        """
        Build an itinerary from a chain of segments.

        Args:
            chain: Non-empty tuple of segments in travel order

        Returns:
            Itinerary whose endpoints and times come from the first and last segment
        """
        first_segment = chain[0]
        last_segment = chain[-1]
        total_duration = int((last_segment.sta - first_segment.std).total_seconds() / 60)

        return Itinerary(
            origin=first_segment.origin_iata,
            destination=last_segment.destination_iata,
            departure_time=first_segment.std,
            arrival_time=last_segment.sta,
            stops=len(chain) - 1,
            total_duration_minutes=total_duration,
            segments=[create_flight_leg_from_segment(segment) for segment in chain]
        )

    def build_all(self, chains: List[SegmentChain]) -> List[Itinerary]:
        return [self.build(chain) for chain in chains]
