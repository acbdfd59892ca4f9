"""
Swimming practice API schemas.

Also owns the field rules for practice input and the conversion of
pydantic failures into :class:`app.core.exceptions.ValidationError`.
Empty ``notes`` are accepted here; turning them into ``None`` is the
persistence layer's job.
"""

import datetime
import math
from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import FieldError, ValidationError

# Upper bound of the INTEGER storage column
MAX_DURATION_MINUTES = 2_147_483_647

_DATETIME_ADAPTER = TypeAdapter(datetime.datetime)


def coerce_practice_date(value: Any) -> datetime.datetime:
    """Coerce a date, datetime, ISO string or Unix timestamp to an aware UTC datetime.

    Bare calendar dates map to midnight UTC. Naive datetimes are taken as UTC.

    Raises:
        ValueError: if the value cannot be read as a point in time.
    """
    if isinstance(value, bool):
        raise ValueError("date must be a calendar date, not a boolean")

    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time.min, tzinfo=datetime.timezone.utc)
    elif isinstance(value, str):
        text = value.strip()
        try:
            return coerce_practice_date(datetime.date.fromisoformat(text))
        except ValueError:
            parsed = _parse_datetime(text)
    elif isinstance(value, (int, float)):
        parsed = _parse_datetime(value)
    else:
        raise ValueError(f"date must be a date, an ISO-8601 string or a timestamp, got {type(value).__name__}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=datetime.timezone.utc)
    try:
        return parsed.astimezone(datetime.timezone.utc)
    except OverflowError as e:
        raise ValueError("date is out of range") from e


def _parse_datetime(value: Any) -> datetime.datetime:
    try:
        return _DATETIME_ADAPTER.validate_python(value)
    except PydanticValidationError as e:
        raise ValueError(f"could not read {value!r} as a date") from e


class _PracticeFieldRules(BaseModel):
    """Field rules shared by the create and update schemas."""

    @field_validator("date", mode="before", check_fields=False)
    @classmethod
    def _coerce_date(cls, value: Any) -> Any:
        if value is None:
            return value
        return coerce_practice_date(value)

    @field_validator("duration_minutes", "distance_meters", mode="before", check_fields=False)
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value

    @field_validator("distance_meters", mode="after", check_fields=False)
    @classmethod
    def _finite_distance(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and not math.isfinite(value):
            raise ValueError("must be a finite number")
        return value


class SwimmingPracticeCreate(_PracticeFieldRules):
    """Schema for logging a new practice."""

    date: datetime.datetime = Field(
        ..., description="Practice date; a calendar date, ISO-8601 string or Unix timestamp"
    )
    duration_minutes: int = Field(..., gt=0, le=MAX_DURATION_MINUTES, description="Minutes spent in the water")
    distance_meters: float = Field(..., gt=0, description="Total distance in meters, decimals allowed")
    notes: Optional[str] = Field(None, description="Optional free-text notes")


class SwimmingPracticeUpdate(_PracticeFieldRules):
    """Schema for a partial update of a practice.

    Not exposed by any endpoint; kept so the update shape is validated
    the same way as creation if editing is ever added.
    """

    date: Optional[datetime.datetime] = None
    duration_minutes: Optional[int] = Field(None, gt=0, le=MAX_DURATION_MINUTES)
    distance_meters: Optional[float] = Field(None, gt=0)
    notes: Optional[str] = None


class SwimmingPracticeResponse(BaseModel):
    """Schema for a stored practice in API responses."""

    id: int
    date: datetime.datetime
    duration_minutes: int
    distance_meters: float
    notes: Optional[str]
    created_at: datetime.datetime

    class Config:
        from_attributes = True


def field_errors_from_pydantic(entries: Iterable[dict]) -> list[FieldError]:
    """Flatten pydantic error entries into one FieldError per failing rule."""
    errors = []
    for err in entries:
        # Body-level errors from FastAPI are prefixed with "body"
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append(FieldError(field=".".join(loc) or "input", message=err.get("msg", "invalid value")))
    return errors


def validate_practice_input(raw: Mapping[str, Any]) -> SwimmingPracticeCreate:
    """Validate raw practice input.

    Raises:
        ValidationError: listing every failing field.
    """
    if isinstance(raw, SwimmingPracticeCreate):
        return raw
    if not isinstance(raw, Mapping):
        raise ValidationError([FieldError("input", f"expected an object, got {type(raw).__name__}")])
    try:
        return SwimmingPracticeCreate.model_validate(dict(raw))
    except PydanticValidationError as e:
        raise ValidationError(field_errors_from_pydantic(e.errors())) from e
