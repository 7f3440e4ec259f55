"""Body-part injury risk model.

The risk percentage adds up five capped components (current session load,
weekly load, acute:chronic load ratio, recovery deficit and training
frequency) and is amplified when the body part carries an active injury.
"""

from __future__ import annotations

import math

from .constants import RISK_THRESHOLDS

RISK_LEVELS = ("minimal", "low", "medium", "high", "critical")


def calculate_injury_risk_percentage(
    current_workload: float = 0,
    cumulative_7day: float = 0,
    cumulative_30day: float = 0,
    recovery_rate: float = 100,
    activity_count: int = 0,
    has_active_injury: bool = False,
) -> int:
    """Injury risk for one body part as an integer percentage in ``[0, 100]``.

    Args:
        current_workload: Workload of the latest session
        cumulative_7day: Load over the last seven days
        cumulative_30day: Load over the last thirty days
        recovery_rate: Recovery percentage (100 is fully recovered)
        activity_count: Sessions in the last seven days
        has_active_injury: Whether an active injury is recorded for the part
    """
    risk = 0.0

    # Current session load (max 30)
    risk += min((current_workload / 100) * 30, 30)

    # Weekly load (max 25)
    risk += min(((cumulative_7day / 7) / 50) * 25, 25)

    # Acute:chronic workload ratio (max 20)
    chronic_load = cumulative_30day / 30
    acute_chronic_ratio = cumulative_7day / (chronic_load * 7) if chronic_load > 0 else 0
    if acute_chronic_ratio > 1.5:
        risk += min((acute_chronic_ratio - 1.5) * 20, 20)
    elif acute_chronic_ratio < 0.5 and chronic_load > 10:
        risk += min((0.5 - acute_chronic_ratio) * 15, 15)

    # Recovery deficit (max 15)
    risk += ((100 - recovery_rate) / 100) * 15

    # Training frequency (max 10)
    if activity_count > 6:
        risk += min((activity_count - 6) * 2, 10)

    if has_active_injury:
        risk *= 1.5

    # Half-up rounding, not round()'s banker's rounding
    return int(max(0, min(100, math.floor(risk + 0.5))))


def get_risk_level(percentage: float) -> str:
    """Map a risk percentage onto ``minimal``/``low``/``medium``/``high``/``critical``."""
    if percentage >= RISK_THRESHOLDS["CRITICAL"]:
        return "critical"
    if percentage >= RISK_THRESHOLDS["HIGH"]:
        return "high"
    if percentage >= RISK_THRESHOLDS["MEDIUM"]:
        return "medium"
    if percentage >= RISK_THRESHOLDS["LOW"]:
        return "low"
    return "minimal"


def get_risk_message(percentage: float, body_part: str) -> str:
    """Short coach-facing description of a body part's risk level."""
    level = get_risk_level(percentage)
    messages = {
        "critical": f"CRITICAL: {body_part} shows very high injury risk. Immediate rest recommended.",
        "high": f"HIGH RISK: {body_part} is significantly overworked. Reduce intensity and volume.",
        "medium": f"MODERATE: {body_part} approaching overuse. Monitor closely and consider active recovery.",
        "low": f"LOW RISK: {body_part} is within safe training load. Continue monitoring.",
        "minimal": f"OPTIMAL: {body_part} is well-recovered and ready for training.",
    }
    return messages[level]

