"""
Data import endpoints for permitted routes and segments
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.models import (
    PermittedRoutesImportRequest, SegmentsImportRequest, ImportResponse, ErrorResponse
)
from app.core.database import get_db
from app.services import ImportService, ImportResult

router = APIRouter(tags=["import"])

IMPORT_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Empty import"},
    422: {"model": ImportResponse, "description": "Some rows were rejected"},
}


def _empty_import(collection: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "error": "EMPTY_IMPORT",
            "message": f"Empty list of {collection}",
            "details": None
        }
    )


def _import_response(result: ImportResult):
    if result.errors:
        body = ImportResponse(
            message="Some rows were rejected",
            imported_count=result.imported_count,
            errors=result.errors
        )
        return JSONResponse(
            status_code=422,
            content=body.model_dump(mode="json")
        )

    return ImportResponse(message="Data accepted", imported_count=result.imported_count)


@router.post(
    "/permitted_routes",
    response_model=ImportResponse,
    responses=IMPORT_RESPONSES,
    summary="Import permitted routes"
)
def import_permitted_routes(
    request: PermittedRoutesImportRequest,
    db: Session = Depends(get_db)
):
    """Create or update permitted routes keyed by carrier + origin + destination"""
    if not request.routes:
        raise _empty_import("routes")

    result = ImportService(db).import_permitted_routes(request.routes)
    return _import_response(result)


@router.post(
    "/segments",
    response_model=ImportResponse,
    responses=IMPORT_RESPONSES,
    summary="Import segments"
)
def import_segments(
    request: SegmentsImportRequest,
    db: Session = Depends(get_db)
):
    """Create or update segments keyed by airline + segment number + departure time"""
    if not request.segments:
        raise _empty_import("segments")

    result = ImportService(db).import_segments(request.segments)
    return _import_response(result)
