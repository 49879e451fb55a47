"""Configuration for the conversion event engine."""

from __future__ import annotations

import os

from pydantic import BaseModel, model_validator


class EngineConfig(BaseModel):
    """Defaults used when building events and grading match quality.

    Example:
        config = EngineConfig.from_env()
        event = ConversionEvent.create("Lead", {"em": ["<sha256>"]}, config=config)
    """

    default_action_source: str = "website"
    default_currency: str = "USD"

    # EMQ tier thresholds (inclusive lower bounds)
    great_threshold: int = 80
    good_threshold: int = 60
    ok_threshold: int = 40

    @model_validator(mode="after")
    def check_thresholds(self) -> EngineConfig:
        for name in ("great_threshold", "good_threshold", "ok_threshold"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be between 0 and 100, got {value}")
        if not self.ok_threshold <= self.good_threshold <= self.great_threshold:
            raise ValueError(
                "EMQ thresholds must satisfy ok_threshold <= good_threshold <= great_threshold"
            )
        return self

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Load configuration from environment variables."""
        return cls(
            default_action_source=os.getenv("EVENTMATCH_DEFAULT_ACTION_SOURCE", "website"),
            default_currency=os.getenv("EVENTMATCH_DEFAULT_CURRENCY", "USD"),
            great_threshold=int(os.getenv("EVENTMATCH_EMQ_GREAT_THRESHOLD", "80")),
            good_threshold=int(os.getenv("EVENTMATCH_EMQ_GOOD_THRESHOLD", "60")),
            ok_threshold=int(os.getenv("EVENTMATCH_EMQ_OK_THRESHOLD", "40")),
        )
