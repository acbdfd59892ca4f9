"""
Swimming practice repository.

Handles database operations for :class:`SwimmingPractice` and is the only
place where rows are mapped to and from the API representation
(via :mod:`app.db.mappers`).
"""

from loguru import logger
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.core.exceptions import PersistenceError
from app.db.mappers import from_storage_row, to_storage_row
from app.models.swimming_practice import SwimmingPractice
from app.schemas.swimming_practice import SwimmingPracticeCreate, SwimmingPracticeResponse


class SwimmingPracticeRepository:
    """Repository for SwimmingPractice database operations."""

    def __init__(self, session: Session):
        self.session = session

    def insert(self, data: SwimmingPracticeCreate) -> SwimmingPracticeResponse:
        entry = to_storage_row(data)
        try:
            self.session.add(entry)
            self.session.commit()
            self.session.refresh(entry)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.opt(exception=e).error("Swimming practice insert failed")
            raise PersistenceError(f"Could not store swimming practice: {type(e).__name__}") from e
        return from_storage_row(entry)

    def list_all(self) -> list[SwimmingPracticeResponse]:
        """All practices, most recent calendar date first.

        Same-day practices come back in insertion order (ascending id).
        """
        statement = select(SwimmingPractice).order_by(SwimmingPractice.date.desc(), SwimmingPractice.id)
        try:
            rows = list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.opt(exception=e).error("Swimming practice read failed")
            raise PersistenceError(f"Could not read swimming practices: {type(e).__name__}") from e
        return [from_storage_row(row) for row in rows]

    def count(self) -> int:
        statement = select(func.count()).select_from(SwimmingPractice)
        try:
            return self.session.exec(statement).one()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise PersistenceError(f"Could not count swimming practices: {type(e).__name__}") from e
