"""
Event validation and payload preparation for the Conversions API.

Validation never stops at the first problem: every violated rule adds one
message, so an operator gets the complete correction list in one pass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from eventmatch.conversions.exceptions import EventValidationError
from eventmatch.conversions.rules import find_disallowed_combinations
from eventmatch.conversions.schema import ConversionEvent, populated_keys

logger = logging.getLogger(__name__)

MISSING_CLIENT_PARAMETER = (
    "At least one customer information parameter is required (email, phone, IP, etc)"
)

# (attribute, error message) for the scalar fields the API requires
REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("event_name", "event_name is required"),
    ("event_time", "event_time is required"),
    ("action_source", "action_source is required"),
    ("event_id", "event_id is required for deduplication"),
)


@dataclass
class ValidationResult:
    """Result of event validation."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)

    def raise_for_errors(self) -> None:
        """Raise EventValidationError if the event was rejected."""
        if not self.is_valid:
            raise EventValidationError(self.errors)


@dataclass
class PreparedEvent:
    """Result of preparing an event for the Conversions API.

    Exactly one of payload (success) or errors (failure) is set.
    """

    success: bool
    payload: dict[str, Any] | None = None
    errors: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict, omitting whichever side is unset."""
        data: dict[str, Any] = {"success": self.success}
        if self.payload is not None:
            data["payload"] = self.payload
        if self.errors is not None:
            data["errors"] = self.errors
        return data


def validate_event_parameters(event: ConversionEvent) -> ValidationResult:
    """
    Check that an event is complete enough to submit.

    Checks, in order:
    1. event_name, event_time, action_source and event_id are set
    2. user_data holds at least one recognized identity signal
    3. The signals do not form a disallowed combination (see rules.py)

    Args:
        event: The event to check

    Returns:
        ValidationResult listing one message per violated rule
    """
    errors: list[str] = []

    for attribute, message in REQUIRED_FIELDS:
        if not getattr(event, attribute):
            errors.append(message)

    keys = populated_keys(event.user_data)
    if not keys:
        errors.append(MISSING_CLIENT_PARAMETER)

    for rule in find_disallowed_combinations(keys):
        errors.append(rule.message)

    if errors:
        logger.debug(
            f"Event {event.event_name or '<unnamed>'} ({event.event_id or 'no id'}) "
            f"failed validation with {len(errors)} error(s)"
        )

    return ValidationResult(is_valid=not errors, errors=errors)


def prepare_event_for_api(event: ConversionEvent) -> PreparedEvent:
    """
    Validate an event and wrap it in the Conversions API payload.

    The payload is {"data": [<event>]}; custom_data is included only when
    non-empty and user_data is passed through unchanged.

    Args:
        event: The event to prepare

    Returns:
        PreparedEvent with the payload, or with the validation errors
    """
    validation = validate_event_parameters(event)

    if not validation.is_valid:
        logger.info(
            f"Rejected event {event.event_name or '<unnamed>'}: "
            f"{len(validation.errors)} validation error(s)"
        )
        return PreparedEvent(success=False, errors=validation.errors)

    payload = {"data": [event.to_dict()]}
    logger.debug(f"Prepared event {event.event_name} ({event.event_id}) for delivery")

    return PreparedEvent(success=True, payload=payload)
