"""
Injury-analysis engine.

Scores the load each logged activity puts on individual body parts, tracks
rolling 7-day and 30-day loads per body part and turns them into injury-risk
percentages, snapshots and coaching recommendations.
"""

from .athlete_service import AthleteService
from .body_part_mapping import get_affected_body_parts, get_body_part_intensity_multiplier
from .injury_risk import calculate_injury_risk_percentage, get_risk_level, get_risk_message
from .performance_metrics import build_performance_metrics
from .recovery import apply_daily_recovery
from .workload import calculate_body_part_workload, calculate_recovery_rate

__all__ = [
    "AthleteService",
    "apply_daily_recovery",
    "build_performance_metrics",
    "calculate_body_part_workload",
    "calculate_injury_risk_percentage",
    "calculate_recovery_rate",
    "get_affected_body_parts",
    "get_body_part_intensity_multiplier",
    "get_risk_level",
    "get_risk_message",
]
