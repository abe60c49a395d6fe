"""
Ingest scheduled segments from a CSV file
Column order: airline, segment_number, origin_iata, destination_iata, std, sta (no header)
"""

import csv
from datetime import datetime

from sqlalchemy.orm import Session

from database.models import Segment
from database.ingestion.utils import normalize_code, parse_datetime_from_api


def upsert_segment(
    db: Session,
    airline: str,
    segment_number: str,
    origin_iata: str,
    destination_iata: str,
    std: datetime,
    sta: datetime
) -> Segment:
    """
    Create or update a segment keyed by airline + segment number + departure time.
    Timestamps are converted to naive UTC before storing.
    """
    airline = normalize_code(airline)
    segment_number = str(segment_number).strip()
    std = parse_datetime_from_api(std)
    sta = parse_datetime_from_api(sta)

    segment = (
        db.query(Segment)
        .filter(
            Segment.airline == airline,
            Segment.segment_number == segment_number,
            Segment.std == std
        )
        .first()
    )

    if segment is None:
        segment = Segment(airline=airline, segment_number=segment_number, std=std)
        db.add(segment)

    segment.origin_iata = normalize_code(origin_iata)
    segment.destination_iata = normalize_code(destination_iata)
    segment.sta = sta
    db.flush()
    return segment


def ingest_segments(segments_path: str, db: Session) -> int:
    """
    Ingest segments from a CSV file

    Args:
        segments_path: Path to the segments CSV file
        db: Database session (committed on success)

    Returns:
        Number of segments written
    """
    print(f"Loading segments from {segments_path}...")

    count = 0
    skipped = 0

    with open(segments_path, 'r', newline='') as f:
        for line_number, row in enumerate(csv.reader(f), start=1):
            if not row:
                continue

            if len(row) < 6 or not all(value.strip() for value in row[:6]):
                print(f"Skipping line {line_number}: expected 6 non-empty columns")
                skipped += 1
                continue

            airline, segment_number, origin, destination, std_str, sta_str = row[:6]

            try:
                std = parse_datetime_from_api(std_str)
                sta = parse_datetime_from_api(sta_str)
            except ValueError as e:
                print(f"Skipping line {line_number}: {e}")
                skipped += 1
                continue

            upsert_segment(
                db,
                airline=airline,
                segment_number=segment_number,
                origin_iata=origin,
                destination_iata=destination,
                std=std,
                sta=sta
            )
            count += 1

    db.commit()
    print(f"✓ Segments ingested: {count} (skipped {skipped})")
    return count
