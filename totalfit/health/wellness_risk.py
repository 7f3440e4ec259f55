"""
Wellness-level injury risk from daily health metrics.

A coarse LOW/MEDIUM/HIGH estimate for users who only log daily totals (no
per-exercise detail). Each detected pattern adds points to the risk score:

- week-over-week training spike above 30%: +30
- no rest day this week: +25, a single rest day: +10
- poor recovery (high heart rate with short sleep, or sleep dropping): +20
- more than three high-intensity days in a row: +15
- average sleep under 6h: +20, under 7h: +10

Metrics are expected oldest first.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Sequence

from pydantic import BaseModel, Field

from totalfit.core.database.entities.health_metrics import HealthMetric

from .scoring import REST_DAY_ACTIVE_MINUTES, WEEK, round_half_up

RiskLevel = Literal["LOW", "MEDIUM", "HIGH"]

SPIKE_THRESHOLD_PERCENT = 30
HIGH_INTENSITY_ACTIVE_MINUTES = 60
MAX_RECOMMENDATIONS = 3


class WellnessRisk(BaseModel):
    level: RiskLevel
    score: int = Field(ge=0, le=100)
    factors: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class RiskForecast(BaseModel):
    """Expected risk level for the coming week."""

    next_week_risk: RiskLevel
    confidence: int
    reasoning: str


def _sleep(metric: HealthMetric) -> float:
    return metric.sleep_hours or 0


def _rest_days(week: Sequence[HealthMetric]) -> int:
    return sum(1 for m in week if m.active_minutes < REST_DAY_ACTIVE_MINUTES)


def detect_training_spike(metrics: Sequence[HealthMetric]) -> Optional[str]:
    """Describe a >30% rise in active minutes over the previous week, if any."""
    if len(metrics) < 2 * WEEK:
        return None
    last_week_load = sum(m.active_minutes for m in metrics[-WEEK:])
    previous_week_load = sum(m.active_minutes for m in metrics[-2 * WEEK : -WEEK])
    if previous_week_load == 0:
        return None

    change = (last_week_load - previous_week_load) / previous_week_load * 100
    if change > SPIKE_THRESHOLD_PERCENT:
        return f"Training intensity increased by {round_half_up(change)}% this week"
    return None


def detect_poor_recovery(week: Sequence[HealthMetric]) -> Optional[str]:
    avg_heart_rate = sum(m.heart_rate or 0 for m in week) / len(week)
    avg_sleep = sum(_sleep(m) for m in week) / len(week)
    if avg_heart_rate > 80 and avg_sleep < 6.5:
        return "Elevated heart rate and insufficient sleep indicate poor recovery"

    middle = len(week) // 2
    first_half, second_half = week[:middle], week[middle:]
    if first_half and second_half:
        first_sleep = sum(_sleep(m) for m in first_half) / len(first_half)
        second_sleep = sum(_sleep(m) for m in second_half) / len(second_half)
        if first_sleep - second_sleep > 1:
            return "Sleep quality declining over the week"
    return None


def longest_high_intensity_streak(week: Sequence[HealthMetric]) -> int:
    """Longest run of days with over an hour of activity or more than one workout."""
    longest = current = 0
    for metric in week:
        if metric.active_minutes > HIGH_INTENSITY_ACTIVE_MINUTES or metric.workout_sessions > 1:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def calculate_wellness_risk(metrics: Sequence[HealthMetric]) -> WellnessRisk:
    if len(metrics) < WEEK:
        return WellnessRisk(
            level="LOW",
            score=10,
            factors=["Not enough data to assess risk"],
            recommendations=["Continue tracking your activity for better insights"],
        )

    week = metrics[-WEEK:]
    factors: List[str] = []
    recommendations: List[str] = []
    score = 0

    spike = detect_training_spike(metrics)
    if spike:
        score += 30
        factors.append(spike)
        recommendations.append("Reduce training intensity by 20-30% this week")

    rest_days = _rest_days(week)
    if rest_days < 1:
        score += 25
        factors.append("No rest days in the past week")
        recommendations.append("Take at least 1-2 rest days per week")
    elif rest_days == 1:
        score += 10
        factors.append("Only 1 rest day this week")
        recommendations.append("Consider adding another rest day")

    poor_recovery = detect_poor_recovery(week)
    if poor_recovery:
        score += 20
        factors.append(poor_recovery)
        recommendations.append("Prioritize sleep and recovery")

    streak = longest_high_intensity_streak(week)
    if streak > 3:
        score += 15
        factors.append(f"{streak} consecutive high-intensity days")
        recommendations.append("Include low-intensity recovery sessions")

    avg_sleep = sum(_sleep(m) for m in week) / WEEK
    if avg_sleep < 6:
        score += 20
        factors.append(f"Average sleep: {avg_sleep:.1f}h (below recommended 7-9h)")
        recommendations.append("Aim for 7-9 hours of sleep per night")
    elif avg_sleep < 7:
        score += 10
        factors.append(f"Sleep could be improved: {avg_sleep:.1f}h average")
        recommendations.append("Try to get closer to 8 hours of sleep")

    if score >= 70:
        level: RiskLevel = "HIGH"
    elif score >= 40:
        level = "MEDIUM"
    else:
        level = "LOW"

    if level == "LOW" and not factors:
        factors.extend(
            ["Good recovery patterns detected", "Consistent training schedule", "Adequate rest days included"]
        )
        recommendations.extend(
            ["Maintain current training intensity", "Continue prioritizing sleep", "Stay hydrated during workouts"]
        )

    return WellnessRisk(
        level=level,
        score=min(score, 100),
        factors=factors,
        recommendations=recommendations[:MAX_RECOMMENDATIONS],
    )


def predict_future_risk(metrics: Sequence[HealthMetric]) -> RiskForecast:
    """Forecast next week's risk level from the last two weeks of metrics."""
    current = calculate_wellness_risk(metrics)
    if len(metrics) < 2 * WEEK:
        return RiskForecast(
            next_week_risk=current.level,
            confidence=50,
            reasoning="Not enough historical data for accurate prediction",
        )

    recent_week = metrics[-WEEK:]
    previous_week = metrics[-2 * WEEK : -WEEK]

    recent_load = sum(m.active_minutes for m in recent_week)
    previous_load = sum(m.active_minutes for m in previous_week)
    if recent_load > previous_load * 1.3:
        return RiskForecast(
            next_week_risk="HIGH",
            confidence=75,
            reasoning="Rapidly increasing training load suggests elevated future risk",
        )

    rest_days = _rest_days(recent_week)
    if current.level == "HIGH" and rest_days == 0:
        return RiskForecast(next_week_risk="HIGH", confidence=85, reasoning="High current risk without adequate rest")

    recent_sleep = sum(_sleep(m) for m in recent_week) / WEEK
    previous_sleep = sum(_sleep(m) for m in previous_week) / WEEK
    if recent_sleep > previous_sleep + 0.5 and rest_days >= 2:
        return RiskForecast(next_week_risk="LOW", confidence=70, reasoning="Improving sleep and adequate rest days")

    return RiskForecast(next_week_risk=current.level, confidence=60, reasoning="Maintaining current patterns")
