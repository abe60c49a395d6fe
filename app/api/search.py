"""
Itinerary Search API endpoints
"""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from app.models import (
    SearchRequest, SearchResponse, SearchMetadata, ErrorResponse
)
from app.core import settings
from app.core.database import get_route_store
from app.services import FlightSearchService
from app.services.search.store import RouteStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.post(
    "",
    response_model=SearchResponse,
    status_code=status.HTTP_200_OK,
    responses={
        422: {"description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Internal server error"}
    },
    summary="Search for itineraries",
    description="Search for itineraries allowed by the carrier's permitted route within a departure date window"
)
def search_flights(
    request: SearchRequest,
    store: RouteStore = Depends(get_route_store)
) -> SearchResponse:
    """
    Search for itineraries based on criteria

    - **carrier**: Carrier IATA code
    - **origin**: Origin airport IATA code (3 letters)
    - **destination**: Destination airport IATA code (3 letters)
    - **departure_from**: First allowed departure date of the first segment
    - **departure_to**: Last allowed departure date of the first segment
    - **max_transfers**: Optional upper bound on the number of transfers

    Returns every itinerary matching the criteria; an empty list when nothing matches.
    """
    try:
        search_service = FlightSearchService(store)

        itineraries = search_service.search(
            carrier=request.carrier,
            origin=request.origin,
            destination=request.destination,
            departure_from=request.departure_from,
            departure_to=request.departure_to,
            max_transfers=request.max_transfers
        )

        return SearchResponse(
            search_id=str(uuid.uuid4()),
            carrier=request.carrier,
            origin=request.origin,
            destination=request.destination,
            itineraries=itineraries,
            meta=SearchMetadata(returned=len(itineraries))
        )

    except Exception as e:
        logger.exception("Search failed for %s %s-%s", request.carrier, request.origin, request.destination)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "INTERNAL_ERROR",
                "message": "An internal error occurred while processing the search",
                "details": {"error": str(e)}
            }
        )


@router.get(
    "/health",
    summary="Health check",
    description="Check if the search API is healthy"
)
async def health_check():
    """Simple health check endpoint"""
    return {
        "status": "healthy",
        "service": "itinerary-search-api",
        "version": settings.APP_VERSION
    }
