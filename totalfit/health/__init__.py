"""Health scoring and wellness risk from manually logged daily metrics."""

from .scoring import HealthScore, calculate_health_score, get_health_score_interpretation
from .wellness_risk import RiskForecast, WellnessRisk, calculate_wellness_risk, predict_future_risk

__all__ = [
    "HealthScore",
    "RiskForecast",
    "WellnessRisk",
    "calculate_health_score",
    "calculate_wellness_risk",
    "get_health_score_interpretation",
    "predict_future_risk",
]
