"""Pydantic schemas for request/response validation."""

from app.schemas.swimming_practice import (
    SwimmingPracticeCreate,
    SwimmingPracticeUpdate,
    SwimmingPracticeResponse,
    coerce_practice_date,
    validate_practice_input,
)

__all__ = [
    "SwimmingPracticeCreate",
    "SwimmingPracticeUpdate",
    "SwimmingPracticeResponse",
    "coerce_practice_date",
    "validate_practice_input",
]
