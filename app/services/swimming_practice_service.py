"""
Swimming practice service.

Validates practice input and hands it to the repository. Validation and
persistence errors propagate unchanged to the caller.
"""

from typing import Any, Mapping, Union

from loguru import logger
from sqlmodel import Session

from app.db.repositories.swimming_practice import SwimmingPracticeRepository
from app.schemas.swimming_practice import (SwimmingPracticeCreate, SwimmingPracticeResponse,
                                           validate_practice_input, )


class SwimmingPracticeService:
    """Service for swimming practice business logic."""

    def __init__(self, session: Session):
        self.repository = SwimmingPracticeRepository(session)

    def create_practice(self, data: Union[SwimmingPracticeCreate, Mapping[str, Any]]) -> SwimmingPracticeResponse:
        validated = validate_practice_input(data)
        practice = self.repository.insert(validated)
        logger.info("Logged swimming practice {} for {}", practice.id, practice.date.date().isoformat())
        return practice

    def get_practices(self) -> list[SwimmingPracticeResponse]:
        practices = self.repository.list_all()
        logger.debug("Loaded {} swimming practices", len(practices))
        return practices
