"""
Disallowed identity-signal combinations.

The Conversions API treats some user_data combinations as too weak or
ambiguous to match on. Each combination is a standalone predicate over the
set of populated keys; DISALLOWED_COMBINATIONS lists them in the order their
errors are reported. Several rules can fire for the same event.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from eventmatch.conversions.schema import UserDataKey as K

# client_user_agent counts as a geographic trigger here, so a lone user agent
# is rejected as well.
GEO_TRIGGER_KEYS = frozenset({K.CITY, K.COUNTRY, K.STATE, K.ZIP, K.GENDER, K.CLIENT_USER_AGENT})
GEO_BLOCKING_KEYS = frozenset({
    K.EMAIL, K.PHONE, K.FIRST_NAME, K.LAST_NAME, K.DATE_OF_BIRTH,
    K.CLICK_ID, K.FBC, K.FBP, K.EXTERNAL_ID,
})

_LOCATION_KEYS = frozenset({K.CITY, K.STATE, K.ZIP, K.COUNTRY})


def _values(keys: frozenset[K]) -> frozenset[str]:
    return frozenset(key.value for key in keys)


_GEO_TRIGGERS = _values(GEO_TRIGGER_KEYS)
_GEO_BLOCKERS = _values(GEO_BLOCKING_KEYS)
_DB_UA_BLOCKERS = _values(
    frozenset({K.EMAIL, K.PHONE, K.FIRST_NAME, K.LAST_NAME, K.GENDER}) | _LOCATION_KEYS
)
_FN_GE_BLOCKERS = _values(
    frozenset({K.EMAIL, K.PHONE, K.LAST_NAME, K.DATE_OF_BIRTH}) | _LOCATION_KEYS
)
_LN_GE_BLOCKERS = _values(
    frozenset({K.EMAIL, K.PHONE, K.FIRST_NAME, K.DATE_OF_BIRTH}) | _LOCATION_KEYS
)


def has_only_geographic_data(keys: frozenset[str]) -> bool:
    """Location/gender/user-agent signals with nothing that identifies a person."""
    return bool(keys & _GEO_TRIGGERS) and not keys & _GEO_BLOCKERS


def has_only_db_and_user_agent(keys: frozenset[str]) -> bool:
    """Birthdate plus user agent, without name, contact or location."""
    return (
        {K.DATE_OF_BIRTH.value, K.CLIENT_USER_AGENT.value} <= keys
        and not keys & _DB_UA_BLOCKERS
    )


def has_only_first_name_and_gender(keys: frozenset[str]) -> bool:
    """First name plus gender, without contact, last name, location or birthdate."""
    return {K.FIRST_NAME.value, K.GENDER.value} <= keys and not keys & _FN_GE_BLOCKERS


def has_only_last_name_and_gender(keys: frozenset[str]) -> bool:
    """Last name plus gender, without contact, first name, location or birthdate."""
    return {K.LAST_NAME.value, K.GENDER.value} <= keys and not keys & _LN_GE_BLOCKERS


@dataclass(frozen=True)
class InvalidCombinationRule:
    """A named predicate and the error reported when it matches."""

    name: str
    predicate: Callable[[frozenset[str]], bool]
    message: str

    def matches(self, keys: frozenset[str]) -> bool:
        return self.predicate(keys)


DISALLOWED_COMBINATIONS: tuple[InvalidCombinationRule, ...] = (
    InvalidCombinationRule(
        name="geo_only",
        predicate=has_only_geographic_data,
        message="Invalid combination: do not send only geographic data. Include email or phone.",
    ),
    InvalidCombinationRule(
        name="db_user_agent_only",
        predicate=has_only_db_and_user_agent,
        message="Invalid combination: do not send only db + user_agent. Include email or phone.",
    ),
    InvalidCombinationRule(
        name="fn_ge_only",
        predicate=has_only_first_name_and_gender,
        message="Invalid combination: do not send only fn + ge. Include email or phone.",
    ),
    InvalidCombinationRule(
        name="ln_ge_only",
        predicate=has_only_last_name_and_gender,
        message="Invalid combination: do not send only ln + ge. Include email or phone.",
    ),
)


def find_disallowed_combinations(keys: frozenset[str]) -> list[InvalidCombinationRule]:
    """Return every rule matching the populated key set, in table order."""
    return [rule for rule in DISALLOWED_COMBINATIONS if rule.matches(keys)]
