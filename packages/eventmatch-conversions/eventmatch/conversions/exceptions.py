"""Custom exceptions for conversion events."""

from __future__ import annotations


class ConversionEventError(Exception):
    """Base exception for conversion event errors."""

    pass


class EventValidationError(ConversionEventError):
    """Raised when a caller asks for a rejected event to be treated as an error.

    The validator itself returns errors as data; this exception only wraps
    them for callers that prefer exceptions.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Event is invalid")
