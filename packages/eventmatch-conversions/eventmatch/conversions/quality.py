"""
Event Match Quality (EMQ) - how well an event's identity signals will match.

The score is additive over a fixed point table and capped at 100; the
recommendations list the missing signals worth adding, in table order.
Both work on any user_data, valid or not.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import pandas as pd
from eventmatch.conversions.config import EngineConfig
from eventmatch.conversions.schema import UserDataKey as K
from eventmatch.conversions.schema import populated_keys

MAX_EMQ_SCORE = 100

# (signals that must all be present, points)
EMQ_POINTS: tuple[tuple[tuple[str, ...], int], ...] = (
    ((K.EMAIL.value,), 30),
    ((K.PHONE.value,), 25),
    ((K.CLIENT_IP_ADDRESS.value,), 15),
    ((K.CLIENT_USER_AGENT.value,), 10),
    ((K.FBP.value,), 20),
    ((K.FBC.value,), 15),
    ((K.CLICK_ID.value,), 10),
    ((K.FIRST_NAME.value, K.LAST_NAME.value), 10),
    ((K.EXTERNAL_ID.value,), 5),
)

# (signals that must all be present, advice when any is missing)
EMQ_RECOMMENDATIONS: tuple[tuple[tuple[str, ...], str], ...] = (
    ((K.EMAIL.value,), "Add email (em) to increase match rate by +30%"),
    ((K.PHONE.value,), "Add phone (ph) to increase match rate by +25%"),
    ((K.CLIENT_IP_ADDRESS.value,), "Add IP address to increase match rate by +15%"),
    ((K.CLIENT_USER_AGENT.value,), "Add user agent to increase match rate by +10%"),
    ((K.FBP.value,), "Keep FBP updated to increase match rate by +20%"),
    ((K.FBC.value,), "Keep FBC updated to increase match rate by +15%"),
    ((K.FIRST_NAME.value, K.LAST_NAME.value), "Add full name to increase match rate by +10%"),
)


class MatchQualityTier(str, Enum):
    """Coarse EMQ bands for dashboards."""

    GREAT = "great"
    GOOD = "good"
    OK = "ok"
    POOR = "poor"


@dataclass
class MatchQualityReport:
    """Score, tier and advice for one user_data mapping."""

    score: int
    tier: MatchQualityTier
    recommendations: list[str] = field(default_factory=list)


def calculate_event_match_quality_score(user_data: Mapping[str, Any] | None) -> int:
    """
    Score identity signals from 0 to 100.

    Points from EMQ_POINTS are summed for every entry whose signals are all
    present, then capped at MAX_EMQ_SCORE.

    Args:
        user_data: Identity signals keyed by wire name, or None

    Returns:
        Integer score between 0 and 100
    """
    keys = populated_keys(user_data)
    score = sum(points for signals, points in EMQ_POINTS if keys.issuperset(signals))
    return min(score, MAX_EMQ_SCORE)


def get_emq_recommendations(user_data: Mapping[str, Any] | None) -> list[str]:
    """List advice for each missing signal, in EMQ_RECOMMENDATIONS order."""
    keys = populated_keys(user_data)
    return [advice for signals, advice in EMQ_RECOMMENDATIONS if not keys.issuperset(signals)]


def tier_for_score(score: int, config: EngineConfig | None = None) -> MatchQualityTier:
    """Map a score onto its tier using the configured thresholds."""
    config = config or EngineConfig()
    if score >= config.great_threshold:
        return MatchQualityTier.GREAT
    elif score >= config.good_threshold:
        return MatchQualityTier.GOOD
    elif score >= config.ok_threshold:
        return MatchQualityTier.OK
    return MatchQualityTier.POOR


def assess_match_quality(
    user_data: Mapping[str, Any] | None,
    config: EngineConfig | None = None,
) -> MatchQualityReport:
    """Score, tier and recommendations in one call."""
    score = calculate_event_match_quality_score(user_data)
    return MatchQualityReport(
        score=score,
        tier=tier_for_score(score, config),
        recommendations=get_emq_recommendations(user_data),
    )


def _drop_missing(row: Mapping[str, Any]) -> dict[str, Any]:
    """Remove None/NaN cells that a DataFrame adds for absent keys."""
    return {
        key: value
        for key, value in row.items()
        if not (pd.api.types.is_scalar(value) and pd.isna(value))
    }


def match_quality_frame(
    rows: pd.DataFrame | list[dict[str, Any]],
    config: EngineConfig | None = None,
) -> pd.DataFrame:
    """
    Assess match quality for many events at once.

    Args:
        rows: One user_data mapping per row, as a DataFrame or list of dicts
        config: Tier thresholds; defaults apply when omitted

    Returns:
        DataFrame with columns score, tier and recommendation_count,
        indexed like the input
    """
    df = rows if isinstance(rows, pd.DataFrame) else pd.DataFrame(rows)
    records = []

    for _, row in df.iterrows():
        report = assess_match_quality(_drop_missing(row.to_dict()), config)
        records.append({
            "score": report.score,
            "tier": report.tier.value,
            "recommendation_count": len(report.recommendations),
        })

    return pd.DataFrame(
        records,
        index=df.index,
        columns=["score", "tier", "recommendation_count"],
    )
