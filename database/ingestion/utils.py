"""
Utilities for data ingestion
"""

from datetime import datetime, timezone
from typing import Optional, Union
import pytz


def parse_datetime_from_api(value: Union[str, datetime], timezone_str: str = 'UTC') -> datetime:
    """
    Parse a timestamp and convert it to naive UTC, the form stored in the segments table

    Args:
        value: ISO format datetime string (e.g., "2024-01-02T08:00:00+07:00") or a datetime
        timezone_str: Timezone assumed when the value carries no offset

    Returns:
        naive datetime object in UTC
    """
    if isinstance(value, datetime):
        dt = value
    else:
        dt = datetime.fromisoformat(str(value).strip().replace('Z', '+00:00'))

    # If no timezone info, assume the provided timezone
    if dt.tzinfo is None:
        tz = pytz.timezone(timezone_str)
        dt = tz.localize(dt)

    # Convert to UTC
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def normalize_code(value: Optional[str]) -> str:
    """Upper-case and strip an airline or airport code"""
    return str(value or '').strip().upper()


def normalize_transfer_codes(codes) -> list:
    """
    Normalize transfer code strings ("ovb", " VVOOVB ") to upper case.
    Blank entries are dropped; length is not checked here, the search tolerates bad codes.
    """
    if not codes:
        return []
    if isinstance(codes, str):
        codes = [codes]
    return [normalize_code(code) for code in codes if normalize_code(code)]

