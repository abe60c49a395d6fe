"""
FastAPI Request/Response Models for the Itinerary Search API
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime, timezone
from datetime import date as DateType

IATA_PATTERN = r"^[A-Z]{3}$"
CARRIER_PATTERN = r"^[A-Z0-9]{2,3}$"


def _upper(v):
    return v.strip().upper() if isinstance(v, str) else v


def _as_utc(dt: datetime) -> datetime:
    """Naive datetimes are taken as UTC already"""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


class SearchRequest(BaseModel):
    """Itinerary search request model"""
    carrier: str = Field(..., pattern=CARRIER_PATTERN, description="Carrier IATA code")
    origin: str = Field(..., pattern=IATA_PATTERN, description="Origin airport IATA code")
    destination: str = Field(..., pattern=IATA_PATTERN, description="Destination airport IATA code")
    departure_from: DateType = Field(..., description="First allowed departure date (YYYY-MM-DD)")
    departure_to: DateType = Field(..., description="Last allowed departure date (YYYY-MM-DD)")
    max_transfers: Optional[int] = Field(default=None, ge=0, description="Maximum number of transfers")

    @field_validator('carrier', 'origin', 'destination', mode='before')
    @classmethod
    def validate_codes(cls, v):
        """Validate codes are uppercase"""
        return _upper(v)

    @model_validator(mode='after')
    def validate_request(self):
        """Ensure airports differ and the date window is not inverted"""
        if self.origin == self.destination:
            raise ValueError('Origin and destination must be different')
        if self.departure_to < self.departure_from:
            raise ValueError("departure_to can't be before departure_from")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "carrier": "S7",
                "origin": "UUS",
                "destination": "DME",
                "departure_from": "2024-01-01",
                "departure_to": "2024-01-07"
            }
        }


class FlightLeg(BaseModel):
    """Individual segment in an itinerary"""
    carrier: str = Field(..., description="Carrier IATA code")
    segment_number: str = Field(..., description="Flight/segment number")
    origin: str = Field(..., description="Origin airport IATA code")
    destination: str = Field(..., description="Destination airport IATA code")
    std: datetime = Field(..., description="Scheduled departure time (UTC)")
    sta: datetime = Field(..., description="Scheduled arrival time (UTC)")
    duration_minutes: int = Field(..., description="Flight duration in minutes")

    class Config:
        json_schema_extra = {
            "example": {
                "carrier": "S7",
                "segment_number": "1001",
                "origin": "UUS",
                "destination": "OVB",
                "std": "2024-01-01T10:00:00",
                "sta": "2024-01-01T15:00:00",
                "duration_minutes": 300
            }
        }


class Itinerary(BaseModel):
    """Complete itinerary with one or more segments"""
    origin: str = Field(..., description="Origin of the first segment")
    destination: str = Field(..., description="Destination of the last segment")
    departure_time: datetime = Field(..., description="Departure time of the first segment (UTC)")
    arrival_time: datetime = Field(..., description="Arrival time of the last segment (UTC)")
    stops: int = Field(..., ge=0, description="Number of transfers")
    total_duration_minutes: int = Field(..., description="Total journey duration")
    segments: List[FlightLeg] = Field(..., min_length=1, description="Segments in travel order")


class SearchMetadata(BaseModel):
    """Search result metadata"""
    returned: int = Field(..., description="Number of itineraries returned")


class SearchResponse(BaseModel):
    """Itinerary search response model"""
    search_id: str = Field(..., description="Unique search ID")
    carrier: str = Field(..., description="Carrier IATA code")
    origin: str = Field(..., description="Origin airport IATA code")
    destination: str = Field(..., description="Destination airport IATA code")
    itineraries: List[Itinerary] = Field(..., description="List of found itineraries")
    meta: SearchMetadata = Field(..., description="Search metadata")


class ErrorResponse(BaseModel):
    """Error response model"""
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = Field(default=None, description="Additional error details")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "INTERNAL_ERROR",
                "message": "An internal error occurred while processing the search",
                "details": {"error": "connection refused"}
            }
        }


class PermittedRouteIn(BaseModel):
    """One permitted route row of an import request"""
    carrier: str = Field(..., pattern=CARRIER_PATTERN)
    origin_iata: str = Field(..., pattern=IATA_PATTERN)
    destination_iata: str = Field(..., pattern=IATA_PATTERN)
    direct: Optional[bool] = Field(default=None, description="Keeps the stored flag when omitted")
    transfer_iata_codes: List[str] = Field(default_factory=list, description='e.g. ["OVB", "VVOOVB"]')

    @field_validator('carrier', 'origin_iata', 'destination_iata', mode='before')
    @classmethod
    def validate_codes(cls, v):
        return _upper(v)


class SegmentIn(BaseModel):
    """One segment row of an import request"""
    airline: str = Field(..., pattern=CARRIER_PATTERN)
    segment_number: str = Field(..., min_length=1, max_length=10)
    origin_iata: str = Field(..., pattern=IATA_PATTERN)
    destination_iata: str = Field(..., pattern=IATA_PATTERN)
    std: datetime
    sta: datetime

    @field_validator('airline', 'origin_iata', 'destination_iata', mode='before')
    @classmethod
    def validate_codes(cls, v):
        return _upper(v)

    @field_validator('segment_number', mode='before')
    @classmethod
    def validate_segment_number(cls, v):
        return str(v).strip() if v is not None else v

    @model_validator(mode='after')
    def validate_times(self):
        if _as_utc(self.sta) <= _as_utc(self.std):
            raise ValueError('sta must be after std')
        return self


class PermittedRoutesImportRequest(BaseModel):
    routes: List[dict] = Field(default_factory=list)


class SegmentsImportRequest(BaseModel):
    segments: List[dict] = Field(default_factory=list)


class ImportRowError(BaseModel):
    index: int = Field(..., description="Position of the rejected row in the request")
    key: str = Field(..., description="Identifying fields of the row")
    error: str = Field(..., description="Validation failure")


class ImportResponse(BaseModel):
    message: str
    imported_count: int
    errors: List[ImportRowError] = Field(default_factory=list)
