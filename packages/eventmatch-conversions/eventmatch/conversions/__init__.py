"""
EventMatch Conversions - validation and match-quality scoring for
Conversions API events.

Provides:
- ConversionEvent schema and recognized identity signal keys
- Validation against required fields and disallowed signal combinations
- Payload preparation in the shape the Conversions API expects
- Event Match Quality (EMQ) scoring and recommendations

Everything here is a pure function of its input: no network calls,
no persistence, no hashing.

Usage:
    from eventmatch.conversions import (
        ConversionEvent,
        prepare_event_for_api,
        calculate_event_match_quality_score,
    )

    event = ConversionEvent.create("Lead", {"em": [hashed_email], "fbp": fbp})
    result = prepare_event_for_api(event)
    if result.success:
        transport.send(result.payload)

    score = calculate_event_match_quality_score(event.user_data)
"""

from eventmatch.conversions.config import EngineConfig
from eventmatch.conversions.exceptions import (
    ConversionEventError,
    EventValidationError,
)
from eventmatch.conversions.quality import (
    MatchQualityReport,
    MatchQualityTier,
    assess_match_quality,
    calculate_event_match_quality_score,
    get_emq_recommendations,
    match_quality_frame,
)
from eventmatch.conversions.rules import (
    DISALLOWED_COMBINATIONS,
    InvalidCombinationRule,
)
from eventmatch.conversions.schema import (
    RECOGNIZED_KEYS,
    ActionSource,
    ConversionEvent,
    UserDataKey,
)
from eventmatch.conversions.validator import (
    PreparedEvent,
    ValidationResult,
    prepare_event_for_api,
    validate_event_parameters,
)

__all__ = [
    # Schema
    "ConversionEvent",
    "UserDataKey",
    "ActionSource",
    "RECOGNIZED_KEYS",
    # Validation
    "validate_event_parameters",
    "prepare_event_for_api",
    "ValidationResult",
    "PreparedEvent",
    "InvalidCombinationRule",
    "DISALLOWED_COMBINATIONS",
    # Match quality
    "calculate_event_match_quality_score",
    "get_emq_recommendations",
    "assess_match_quality",
    "match_quality_frame",
    "MatchQualityReport",
    "MatchQualityTier",
    # Config and errors
    "EngineConfig",
    "ConversionEventError",
    "EventValidationError",
]
