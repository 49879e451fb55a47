"""
Conversion event schema - the event record reported to the Conversions API.

A ConversionEvent carries:
- The scalar fields the API requires (name, time, action source, event ID)
- user_data: identity signals keyed by their wire names (em, ph, fbp, ...)
- custom_data: event-specific fields (value, currency, ...)

Identity values arrive already hashed where the API expects hashing;
nothing in this package hashes or normalizes them.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from uuid import uuid4

from eventmatch.conversions.config import EngineConfig


class UserDataKey(str, Enum):
    """Identity signal keys recognized in user_data."""

    EMAIL = "em"  # Hashed email
    PHONE = "ph"  # Hashed phone
    FIRST_NAME = "fn"
    LAST_NAME = "ln"
    CITY = "ct"
    STATE = "st"
    ZIP = "zp"
    COUNTRY = "country"
    GENDER = "ge"
    DATE_OF_BIRTH = "db"
    CLIENT_IP_ADDRESS = "client_ip_address"
    CLIENT_USER_AGENT = "client_user_agent"
    CLICK_ID = "click_id"  # fbclid captured from the landing URL
    FBC = "fbc"  # _fbc click cookie
    FBP = "fbp"  # _fbp browser cookie
    EXTERNAL_ID = "external_id"


RECOGNIZED_KEYS: frozenset[str] = frozenset(key.value for key in UserDataKey)


class ActionSource(str, Enum):
    """Where the conversion happened."""

    WEBSITE = "website"
    APP = "app"
    EMAIL = "email"
    PHONE_CALL = "phone_call"
    CHAT = "chat"
    PHYSICAL_STORE = "physical_store"
    SYSTEM_GENERATED = "system_generated"
    BUSINESS_MESSAGING = "business_messaging"
    OTHER = "other"


def populated_keys(user_data: Mapping[str, Any] | None) -> frozenset[str]:
    """Return the recognized user_data keys holding a value.

    Args:
        user_data: Identity signals, or None.

    Returns:
        Frozenset of wire key names. None and empty strings count as
        absent; an empty list is still a present key. Unrecognized keys
        are ignored.
    """
    if not user_data:
        return frozenset()
    return frozenset(
        key
        for key in RECOGNIZED_KEYS
        if key in user_data and user_data[key] is not None and user_data[key] != ""
    )


def new_event_id(event_name: str, event_time: int) -> str:
    """Generate a de-duplication key shared by the Pixel and server events."""
    return f"{event_name}-{event_time}-{uuid4().hex[:9]}"


# camelCase input names accepted by ConversionEvent.from_dict
_FIELD_ALIASES = {
    "event_name": ("event_name", "eventName"),
    "event_time": ("event_time", "eventTime"),
    "action_source": ("action_source", "actionSource"),
    "event_id": ("event_id", "eventId"),
    "user_data": ("user_data", "userData"),
    "custom_data": ("custom_data", "customData"),
}


def _lookup(data: Mapping[str, Any], field_name: str) -> Any:
    for alias in _FIELD_ALIASES[field_name]:
        if data.get(alias) is not None:
            return data[alias]
    return None


@dataclass(frozen=True)
class ConversionEvent:
    """
    A single marketing event to be reported.

    Instances are never mutated; validation and payload preparation are
    pure functions of the event.

    Example:
        event = ConversionEvent(
            event_name="Purchase",
            event_time=1736937000,
            action_source="website",
            event_id="order-123",
            user_data={"em": ["<sha256>"], "fbp": "fb.1.1736936000.1234"},
            custom_data={"value": 97.0, "currency": "USD"},
        )
    """

    event_name: str
    event_time: int
    action_source: str
    event_id: str
    user_data: dict[str, Any] = field(default_factory=dict, hash=False)
    custom_data: dict[str, Any] = field(default_factory=dict, hash=False)

    @property
    def signals(self) -> frozenset[str]:
        """Recognized identity signals present on this event."""
        return populated_keys(self.user_data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire-form event placed in the API payload."""
        data: dict[str, Any] = {
            "event_name": self.event_name,
            "event_time": self.event_time,
            "action_source": self.action_source,
            "event_id": self.event_id,
            "user_data": self.user_data,
        }
        if self.custom_data:
            data["custom_data"] = self.custom_data
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConversionEvent:
        """Create ConversionEvent from a dictionary.

        Accepts both camelCase (eventName, userData, ...) and snake_case
        wire names. Missing scalar fields become empty values so that
        validation can report them.

        Args:
            data: Dictionary containing event data.

        Returns:
            ConversionEvent instance.

        Raises:
            ValueError: If event_time cannot be converted to an integer.
        """
        raw_time = _lookup(data, "event_time")
        try:
            event_time = int(raw_time) if raw_time is not None else 0
        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid event_time: {raw_time}") from e

        return cls(
            event_name=str(_lookup(data, "event_name") or ""),
            event_time=event_time,
            action_source=str(_lookup(data, "action_source") or ""),
            event_id=str(_lookup(data, "event_id") or ""),
            user_data=dict(_lookup(data, "user_data") or {}),
            custom_data=dict(_lookup(data, "custom_data") or {}),
        )

    @classmethod
    def create(
        cls,
        event_name: str,
        user_data: Mapping[str, Any] | None = None,
        *,
        event_time: int | None = None,
        event_id: str | None = None,
        action_source: str | ActionSource | None = None,
        value: float | None = None,
        currency: str | None = None,
        custom_data: Mapping[str, Any] | None = None,
        config: EngineConfig | None = None,
    ) -> ConversionEvent:
        """Build an event the way the tracking hooks do.

        Args:
            event_name: Event type, e.g. "Purchase".
            user_data: Identity signals, already hashed where required.
            event_time: Unix seconds; defaults to now.
            event_id: De-duplication key; generated when omitted.
            action_source: Defaults to config.default_action_source.
            value: Conversion value; adds value and currency to custom_data.
            currency: Defaults to config.default_currency when value is set.
            custom_data: Extra event fields.
            config: Engine defaults; loaded from the environment when omitted.

        Returns:
            ConversionEvent instance.
        """
        if config is None:
            config = EngineConfig.from_env()

        if event_time is None:
            event_time = int(time.time())
        if action_source is None:
            action_source = config.default_action_source
        elif isinstance(action_source, ActionSource):
            action_source = action_source.value

        extra = dict(custom_data or {})
        if value is not None:
            extra["value"] = value
            extra["currency"] = currency or config.default_currency

        return cls(
            event_name=event_name,
            event_time=event_time,
            action_source=action_source,
            event_id=event_id or new_event_id(event_name, event_time),
            user_data=dict(user_data or {}),
            custom_data=extra,
        )
