"""
Immutable records the search works on, detached from the ORM session
"""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Tuple


@dataclass(frozen=True)
class PermittedRouteRecord:
    """Carrier routing template: direct flag plus concatenated transfer codes"""
    carrier: str
    origin_iata: str
    destination_iata: str
    direct: bool = False
    transfer_iata_codes: Tuple[str, ...] = ()

    @classmethod
    def from_model(cls, route) -> "PermittedRouteRecord":
        return cls(
            carrier=route.carrier,
            origin_iata=route.origin_iata,
            destination_iata=route.destination_iata,
            direct=bool(route.direct),
            transfer_iata_codes=tuple(route.transfer_iata_codes or ())
        )


@dataclass(frozen=True)
class SegmentRecord:
    """One scheduled flight leg (times in naive UTC)"""
    airline: str
    segment_number: str
    origin_iata: str
    destination_iata: str
    std: datetime
    sta: datetime

    @classmethod
    def from_model(cls, segment) -> "SegmentRecord":
        return cls(
            airline=segment.airline,
            segment_number=segment.segment_number,
            origin_iata=segment.origin_iata,
            destination_iata=segment.destination_iata,
            std=segment.std,
            sta=segment.sta
        )


# Ordered airport codes, e.g. ["UUS", "OVB", "DME"]
BlueprintPath = List[str]

# Segments of one itinerary in travel order
SegmentChain = Tuple[SegmentRecord, ...]
