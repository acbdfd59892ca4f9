"""SQLModel database models."""

from app.models.swimming_practice import SwimmingPractice

__all__ = [
    "SwimmingPractice",
]
