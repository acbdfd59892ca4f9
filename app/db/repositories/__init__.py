"""Database repositories."""

from app.db.repositories.swimming_practice import SwimmingPracticeRepository

__all__ = [
    "SwimmingPracticeRepository",
]
