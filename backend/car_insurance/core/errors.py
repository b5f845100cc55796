"""
Domain exception hierarchy.

Services raise these; the API layer maps them to HTTP responses
(see ``car_insurance.main``).  Each exception carries structured
``details`` for logging.
"""

from __future__ import annotations


class InsuranceError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, *, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(InsuranceError):
    """A referenced record (car, policy) does not exist."""
    pass


class InvalidInputError(InsuranceError):
    """Caller supplied a value that violates a validation rule."""
    pass


class InvalidDateFormatError(InvalidInputError):
    """A date string is malformed or names an impossible calendar date."""

    def __init__(self, message: str, *, value: str | None = None, **kwargs) -> None:
        self.value = value
        super().__init__(message, **kwargs)
