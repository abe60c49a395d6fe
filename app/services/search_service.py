"""
Flight Search Service - Main entry point for itinerary searches
Orchestrates route expansion, segment preload and the itinerary search
"""
import logging
from typing import List, Optional
from datetime import date

from app.models import Itinerary
from app.core.config import settings
from app.services.search.store import RouteStore
from app.services.search.route_parser import expand_blueprint_paths
from app.services.search.segment_loader import load_segments_by_origin
from app.services.search.itinerary_search import ItinerarySearch
from app.services.search.itinerary_builder import ItineraryBuilder
from app.services.search.helpers import departure_window, count_transfers

logger = logging.getLogger(__name__)


class FlightSearchService:
    """
    Main flight search service.

    Looks up the carrier's permitted route, expands it into blueprint paths,
    preloads candidate segments in one store call and searches them in memory.
    "Nothing matched" is an empty list; store failures are raised to the caller.
    """

    def __init__(self, store: RouteStore):
        self.store = store
        self.min_connection = settings.MINIMUM_CONNECTION_TIME
        self.max_connection = settings.MAXIMUM_CONNECTION_TIME

        # Initialize itinerary builder
        self.itinerary_builder = ItineraryBuilder()

    def search(
        self,
        carrier: str,
        origin: str,
        destination: str,
        departure_from: date,
        departure_to: date,
        max_transfers: Optional[int] = None
    ) -> List[Itinerary]:
        logger.info(
            "Search carrier=%s origin=%s destination=%s departure_from=%s departure_to=%s",
            carrier, origin, destination, departure_from, departure_to
        )

        # Step 1: Carrier routing policy
        permitted_route = self.store.find_permitted_route(carrier, origin, destination)
        if permitted_route is None:
            logger.info(
                "No permitted route for carrier=%s origin=%s destination=%s",
                carrier, origin, destination
            )
            return []

        # Step 2: Blueprint paths
        blueprint_paths = expand_blueprint_paths(permitted_route)
        if max_transfers is not None:
            blueprint_paths = [
                path for path in blueprint_paths
                if count_transfers(path) <= max_transfers
            ]

        if not blueprint_paths:
            logger.info("Permitted route %s yields no blueprint paths", permitted_route)
            return []

        # Step 3: Single preload of every candidate segment
        window_start, window_end = departure_window(departure_from, departure_to)
        segments_by_origin = load_segments_by_origin(
            self.store, carrier, blueprint_paths, window_start, window_end
        )

        # Step 4: In-memory search
        search = ItinerarySearch(
            segments_by_origin,
            window_start,
            window_end,
            self.min_connection,
            self.max_connection
        )
        chains = search.search(blueprint_paths)
        logger.info("Built %d itineraries", len(chains))

        return self.itinerary_builder.build_all(chains)
