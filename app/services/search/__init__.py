from .records import PermittedRouteRecord, SegmentRecord, BlueprintPath, SegmentChain
from .store import RouteStore, SqlAlchemyRouteStore
from .route_parser import expand_blueprint_paths, split_transfer_code
from .segment_loader import load_segments_by_origin, DEPARTURE_LOOKAHEAD
from .itinerary_search import (
    ItinerarySearch,
    search_itineraries,
    MIN_CONNECTION_TIME,
    MAX_CONNECTION_TIME
)
from .itinerary_builder import ItineraryBuilder
from .helpers import (
    departure_window,
    collect_airports,
    count_transfers,
    is_valid_connection,
    create_flight_leg_from_segment,
    index_segments_by_origin
)

__all__ = [
    'PermittedRouteRecord',
    'SegmentRecord',
    'BlueprintPath',
    'SegmentChain',
    'RouteStore',
    'SqlAlchemyRouteStore',
    'expand_blueprint_paths',
    'split_transfer_code',
    'load_segments_by_origin',
    'DEPARTURE_LOOKAHEAD',
    'ItinerarySearch',
    'search_itineraries',
    'MIN_CONNECTION_TIME',
    'MAX_CONNECTION_TIME',
    'ItineraryBuilder',
    'departure_window',
    'collect_airports',
    'count_transfers',
    'is_valid_connection',
    'create_flight_leg_from_segment',
    'index_segments_by_origin'
]
