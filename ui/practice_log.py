"""
Client-side state of the practice page.

State is an immutable :class:`PracticeLog` value; every transition takes
the current log and returns the next one. The Streamlit page keeps the
latest value in ``st.session_state``.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Protocol

from loguru import logger

from app.schemas.swimming_practice import SwimmingPracticeResponse
from ui.client import PracticeApiError


class PracticeSource(Protocol):
    def create_practice(self, payload: dict[str, Any]) -> SwimmingPracticeResponse: ...

    def get_practices(self) -> list[SwimmingPracticeResponse]: ...


@dataclass(frozen=True)
class PracticeDraft:
    """Editable form values for a new practice."""

    date: datetime.date = field(default_factory=datetime.date.today)
    duration_minutes: int = 0
    distance_meters: float = 0.0
    notes: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        notes = self.notes.strip() if self.notes else None
        return {
            "date": self.date.isoformat(),
            "duration_minutes": self.duration_minutes,
            "distance_meters": self.distance_meters,
            "notes": notes or None,
        }


@dataclass(frozen=True)
class PracticeLog:
    """Practices shown on the page, the form draft and the last error."""

    practices: tuple[SwimmingPracticeResponse, ...] = ()
    draft: PracticeDraft = field(default_factory=PracticeDraft)
    error: Optional[str] = None

    @property
    def total(self) -> int:
        return len(self.practices)


def load_practices(source: PracticeSource, log: PracticeLog) -> PracticeLog:
    """Replace the list with the server's ordering; keep it on failure."""
    try:
        practices = source.get_practices()
    except PracticeApiError as e:
        logger.error("Failed to load practices: {}", e)
        return replace(log, error=f"Failed to load practices: {e}")
    return replace(log, practices=tuple(practices), error=None)


def submit_draft(source: PracticeSource, log: PracticeLog,
                 draft: Optional[PracticeDraft] = None) -> PracticeLog:
    """Create a practice from ``draft`` (default: the log's draft).

    The created record is prepended whatever its date, so a backfilled
    practice sits at the top until the next :func:`load_practices`.
    On failure the list is kept and the submitted draft stays in the form.
    """
    draft = draft or log.draft
    try:
        created = source.create_practice(draft.to_payload())
    except PracticeApiError as e:
        logger.error("Failed to create practice: {}", e)
        return replace(log, draft=draft, error=f"Failed to create practice: {e}")
    return PracticeLog(practices=(created, *log.practices), draft=PracticeDraft(), error=None)
