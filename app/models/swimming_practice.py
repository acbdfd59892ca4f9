"""
Swimming practice database model.

One row per logged session. The calendar date is a plain SQL ``DATE``;
``created_at`` is filled in by the database at insert time.
"""

import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, Column, DateTime, Float, Text, func
from sqlmodel import Field, SQLModel


class SwimmingPractice(SQLModel, table=True):
    """A single swimming practice session."""

    __tablename__ = "swimming_practices"
    __table_args__ = (
        CheckConstraint("duration_minutes > 0", name="ck_swimming_practices_duration_positive"),
        CheckConstraint("distance_meters > 0", name="ck_swimming_practices_distance_positive"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    date: datetime.date = Field(nullable=False, index=True)
    duration_minutes: int = Field(nullable=False)
    distance_meters: float = Field(sa_column=Column(Float, nullable=False))
    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    created_at: Optional[datetime.datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=False, server_default=func.now()),
    )
