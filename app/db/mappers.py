"""
Conversions between the domain representation of a practice and its
storage representation.

Both the insert and the list paths go through these functions; nothing
else in the code base converts dates, numbers or notes for storage.
"""

import datetime
from decimal import Decimal
from typing import Any, Optional, Union

from app.models.swimming_practice import SwimmingPractice
from app.schemas.swimming_practice import SwimmingPracticeCreate, SwimmingPracticeResponse

UTC = datetime.timezone.utc


# ----------------------------------------------------------------------
# Domain -> storage
# ----------------------------------------------------------------------

def to_storage_date(value: datetime.datetime) -> datetime.date:
    """Calendar date of ``value`` in UTC; the time of day is dropped."""
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(UTC).date()


def normalize_notes(value: Optional[str]) -> Optional[str]:
    """Empty or missing notes are stored as NULL."""
    return value or None


def to_storage_row(data: SwimmingPracticeCreate) -> SwimmingPractice:
    return SwimmingPractice(date=to_storage_date(data.date), duration_minutes=data.duration_minutes,
                            distance_meters=data.distance_meters, notes=normalize_notes(data.notes), )


# ----------------------------------------------------------------------
# Storage -> domain
# ----------------------------------------------------------------------

def from_storage_date(value: Union[datetime.date, str]) -> datetime.datetime:
    """Midnight UTC of a stored calendar date.

    Accepts ``date`` objects and the ``YYYY-MM-DD`` text some drivers return.
    """
    if isinstance(value, datetime.datetime):
        value = value.date()
    elif isinstance(value, str):
        value = datetime.date.fromisoformat(value[:10])
    return datetime.datetime.combine(value, datetime.time.min, tzinfo=UTC)


def from_storage_number(value: Union[float, int, Decimal, str]) -> float:
    """Force a numeric column value to ``float``.

    Fixed-point columns come back as ``Decimal`` or text depending on the driver.
    """
    return float(value)


def from_storage_timestamp(value: Union[datetime.datetime, str]) -> datetime.datetime:
    """Stored timestamps are UTC; naive values get an explicit UTC tzinfo."""
    if isinstance(value, str):
        value = datetime.datetime.fromisoformat(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def from_storage_row(row: Any) -> SwimmingPracticeResponse:
    """Map a stored row (ORM object or mapping-like record) to the response schema."""
    return SwimmingPracticeResponse(id=int(row.id), date=from_storage_date(row.date),
                                    duration_minutes=int(row.duration_minutes),
                                    distance_meters=from_storage_number(row.distance_meters),
                                    notes=normalize_notes(row.notes),
                                    created_at=from_storage_timestamp(row.created_at), )
