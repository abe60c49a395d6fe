"""
Import service - bulk upsert of permitted routes and segments
Rows are validated one by one; invalid rows are reported, valid rows are written.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.models import PermittedRouteIn, SegmentIn, ImportRowError
from database.ingestion.ingest_permitted_routes import upsert_permitted_route
from database.ingestion.ingest_segments import upsert_segment

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    imported_count: int = 0
    errors: List[ImportRowError] = field(default_factory=list)


def _format_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc']) or 'row'}: {item['msg']}"
        for item in error.errors()
    )


class ImportService:
    """
    Writes externally supplied routing data through the ingestion upserts.
    Database errors are not caught here; the whole batch is rolled back by the caller's session.
    """

    def __init__(self, db: Session):
        self.db = db

    def import_permitted_routes(self, rows: List[Dict[str, Any]]) -> ImportResult:
        result = ImportResult()

        for i, row in enumerate(rows):
            try:
                route = PermittedRouteIn.model_validate(row)
            except ValidationError as e:
                result.errors.append(ImportRowError(index=i, key=_row_key(row, 'carrier', 'origin_iata', 'destination_iata'),
                                                    error=_format_validation_error(e)))
                continue

            upsert_permitted_route(
                self.db,
                carrier=route.carrier,
                origin_iata=route.origin_iata,
                destination_iata=route.destination_iata,
                direct=route.direct,
                transfer_iata_codes=route.transfer_iata_codes
            )
            result.imported_count += 1

        self.db.commit()
        logger.info("Imported %d permitted routes, %d rejected", result.imported_count, len(result.errors))
        return result

    def import_segments(self, rows: List[Dict[str, Any]]) -> ImportResult:
        result = ImportResult()

        for i, row in enumerate(rows):
            try:
                segment = SegmentIn.model_validate(row)
            except ValidationError as e:
                result.errors.append(ImportRowError(index=i, key=_row_key(row, 'airline', 'segment_number', 'std'),
                                                    error=_format_validation_error(e)))
                continue

            upsert_segment(
                self.db,
                airline=segment.airline,
                segment_number=segment.segment_number,
                origin_iata=segment.origin_iata,
                destination_iata=segment.destination_iata,
                std=segment.std,
                sta=segment.sta
            )
            result.imported_count += 1

        self.db.commit()
        logger.info("Imported %d segments, %d rejected", result.imported_count, len(result.errors))
        return result


def _row_key(row: Any, *fields: str) -> str:
    if not isinstance(row, dict):
        return ""
    return "/".join(str(row.get(name, "")) for name in fields)
