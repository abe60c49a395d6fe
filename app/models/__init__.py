"""
API models package
"""

from .schemas import (
    SearchRequest,
    SearchResponse,
    FlightLeg,
    Itinerary,
    SearchMetadata,
    ErrorResponse,
    PermittedRouteIn,
    SegmentIn,
    PermittedRoutesImportRequest,
    SegmentsImportRequest,
    ImportRowError,
    ImportResponse
)

__all__ = [
    'SearchRequest',
    'SearchResponse',
    'FlightLeg',
    'Itinerary',
    'SearchMetadata',
    'ErrorResponse',
    'PermittedRouteIn',
    'SegmentIn',
    'PermittedRoutesImportRequest',
    'SegmentsImportRequest',
    'ImportRowError',
    'ImportResponse'
]
