"""
Custom exceptions for the application.
"""

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class FieldError:
    """A single failed field rule."""

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class SwimLogError(Exception):
    """Base exception for all application exceptions."""
    pass


class ValidationError(SwimLogError):
    """Raised when practice input fails one or more field rules.

    Never reaches storage.
    """

    def __init__(self, errors: Sequence[FieldError], message: Optional[str] = None):
        self.errors = list(errors)
        if message is None:
            fields = ", ".join(sorted({e.field for e in self.errors})) or "input"
            message = f"Invalid practice input: {fields}"
        super().__init__(message)

    @property
    def fields(self) -> list[str]:
        return [e.field for e in self.errors]


class PersistenceError(SwimLogError):
    """Raised when the store rejects a read or a write.

    The driver exception is chained as ``__cause__``.
    """
    pass
