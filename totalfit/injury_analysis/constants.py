"""
Injury-analysis tuning constants.

Multipliers applied by the workload model and the thresholds that turn a
risk percentage into a risk level.
"""

from typing import Dict

INTENSITY_MULTIPLIERS: Dict[str, float] = {
    "very-light": 0.3,
    "light": 0.5,
    "moderate": 1.0,
    "hard": 1.5,
    "very-hard": 2.0,
    "maximum": 2.5,
}

RECOVERY_MODIFIERS: Dict[str, float] = {
    "excellent": 0.7,
    "good": 0.85,
    "normal": 1.0,
    "mild-soreness": 1.15,
    "significant-fatigue": 1.4,
    "concerning": 1.7,
    "injured": 2.0,
}

MATCH_TYPE_MULTIPLIERS: Dict[str, float] = {
    "training": 0.5,
    "practice": 0.6,
    "friendly": 0.8,
    "competitive": 1.5,
    "tournament": 1.8,
    "playoff": 2.0,
}

RISK_THRESHOLDS: Dict[str, int] = {
    "LOW": 30,
    "MEDIUM": 60,
    "HIGH": 80,
    "CRITICAL": 90,
}

# Recovery rate gained per rest day, in percentage points
DAILY_RECOVERY_POINTS = 8

# Days assumed since the last activity when a body part has no history
DEFAULT_DAYS_SINCE_LAST_ACTIVITY = 7

# Decay applied by the daily recovery job to a rested body part
WORKLOAD_DECAY = 0.92
CUMULATIVE_7DAY_DECAY = 0.92
CUMULATIVE_30DAY_DECAY = 0.97
INTENSITY_DECAY = 0.95

# Thresholds for classifying body parts in an athlete snapshot
HIGH_RISK_BODY_PART = 60
MEDIUM_RISK_BODY_PART = 40

DEFAULT_BODY_PARTS = ("abdomen", "chest", "right-leg", "left-leg")
