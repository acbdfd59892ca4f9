"""Business logic services."""

from app.services.swimming_practice_service import SwimmingPracticeService

__all__ = [
    "SwimmingPracticeService",
]
