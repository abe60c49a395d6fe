"""
Ingest carrier permitted routes from a JSON file
Accepts either {"routes": [...]} or a bare list of route objects
"""

import json
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from database.models import PermittedRoute
from database.ingestion.utils import normalize_code, normalize_transfer_codes


def upsert_permitted_route(
    db: Session,
    carrier: str,
    origin_iata: str,
    destination_iata: str,
    direct: Optional[bool] = None,
    transfer_iata_codes: Optional[Iterable[str]] = None
) -> PermittedRoute:
    """
    Create or update the permitted route for carrier + airport pair.

    When direct is None an existing route keeps its flag (new routes default to direct).
    Transfer codes always replace the stored list.
    """
    carrier = normalize_code(carrier)
    origin_iata = normalize_code(origin_iata)
    destination_iata = normalize_code(destination_iata)

    route = (
        db.query(PermittedRoute)
        .filter(
            PermittedRoute.carrier == carrier,
            PermittedRoute.origin_iata == origin_iata,
            PermittedRoute.destination_iata == destination_iata
        )
        .one_or_none()
    )

    if route is None:
        route = PermittedRoute(
            carrier=carrier,
            origin_iata=origin_iata,
            destination_iata=destination_iata,
            direct=True if direct is None else direct
        )
        db.add(route)
    elif direct is not None:
        route.direct = direct

    route.transfer_iata_codes = normalize_transfer_codes(transfer_iata_codes)
    db.flush()
    return route


def ingest_permitted_routes(routes_path: str, db: Session) -> int:
    """
    Ingest permitted routes from a JSON file

    Args:
        routes_path: Path to the routes JSON file
        db: Database session (committed on success)

    Returns:
        Number of routes written
    """
    print(f"Loading permitted routes from {routes_path}...")

    with open(routes_path, 'r') as f:
        data = json.load(f)

    rows = data.get('routes', []) if isinstance(data, dict) else data

    if not rows:
        print("No permitted routes found")
        return 0

    count = 0
    for i, row in enumerate(rows):
        carrier = row.get('carrier')
        origin = row.get('origin_iata')
        destination = row.get('destination_iata')

        if not carrier or not origin or not destination:
            print(f"Skipping route #{i}: missing carrier, origin_iata or destination_iata")
            continue

        upsert_permitted_route(
            db,
            carrier=carrier,
            origin_iata=origin,
            destination_iata=destination,
            direct=row.get('direct'),
            transfer_iata_codes=row.get('transfer_iata_codes')
        )
        count += 1

    db.commit()
    print(f"✓ Permitted routes ingested: {count}")
    return count
