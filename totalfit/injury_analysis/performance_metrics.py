"""
Chart-ready performance metrics built from an athlete's activity log.

Every series is keyed by calendar day (or by Sunday-start week) ending at
``today``; days without data are zero or ``None`` so the charts keep a
continuous x-axis.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence

from totalfit.core.database.entities.activity_logs import ActivityLog

from .constants import INTENSITY_MULTIPLIERS

INTENSITY_LABELS = ["Very Light", "Light", "Moderate", "Hard", "Very Hard", "Maximum"]

HEART_RATE_COLOR = "#1f8ef1"
CALORIES_COLOR = "#f96332"
FATIGUE_COLOR = "#fd5d93"


def format_label(day: date) -> str:
    """``date(2024, 1, 5)`` -> ``"Jan 5"``."""
    return f"{day:%b} {day.day}"


def week_start(day: date) -> date:
    """The Sunday that starts ``day``'s week."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def _last_days(today: date, days: int) -> List[date]:
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def _mean(values: Sequence[float]) -> Optional[float]:
    return sum(values) / len(values) if values else None


def _rounded(value: Optional[float]) -> Optional[int]:
    return None if value is None else int(value + 0.5)


def daily_activity_count(activities: Sequence[ActivityLog], today: date, days: int = 30) -> Dict[str, Any]:
    counts = {day: 0 for day in _last_days(today, days)}
    for activity in activities:
        if activity.date in counts:
            counts[activity.date] += 1
    return {"labels": [format_label(day) for day in counts], "data": list(counts.values())}


def weekly_training_hours(activities: Sequence[ActivityLog], today: date, weeks: int = 12) -> Dict[str, Any]:
    """Training hours per Sunday-start week for the last ``weeks`` weeks."""
    current = week_start(today)
    minutes = {current - timedelta(weeks=offset): 0 for offset in range(weeks - 1, -1, -1)}
    for activity in activities:
        key = week_start(activity.date)
        if key in minutes:
            minutes[key] += activity.duration or 0
    return {
        "labels": [format_label(day) for day in minutes],
        "data": [round(total / 60, 1) for total in minutes.values()],
    }


def heart_rate_trend(activities: Sequence[ActivityLog], today: date, days: int = 30) -> Dict[str, Any]:
    readings: Dict[date, List[int]] = {day: [] for day in _last_days(today, days)}
    for activity in activities:
        if activity.heart_rate_avg and activity.date in readings:
            readings[activity.date].append(activity.heart_rate_avg)
    return {
        "labels": [format_label(day) for day in readings],
        "data": [_rounded(_mean(values)) for values in readings.values()],
    }


def multi_metric_comparison(activities: Sequence[ActivityLog], today: date, days: int = 30) -> Dict[str, Any]:
    """Daily heart rate, calories (scaled down by 10) and fatigue (scaled up by 10) on one axis."""
    window = _last_days(today, days)
    heart_rates: Dict[date, List[int]] = {day: [] for day in window}
    calories: Dict[date, List[int]] = {day: [] for day in window}
    fatigue: Dict[date, List[int]] = {day: [] for day in window}

    for activity in activities:
        if activity.date not in heart_rates:
            continue
        if activity.heart_rate_avg:
            heart_rates[activity.date].append(activity.heart_rate_avg)
        if activity.calories_burned:
            calories[activity.date].append(activity.calories_burned)
        if activity.fatigue_level:
            fatigue[activity.date].append(activity.fatigue_level)

    def scaled(series: Dict[date, List[int]], factor: float) -> List[Optional[int]]:
        return [_rounded(None if not values else _mean(values) * factor) for values in series.values()]

    return {
        "labels": [format_label(day) for day in window],
        "datasets": [
            {"label": "Heart Rate (bpm)", "data": scaled(heart_rates, 1), "color": HEART_RATE_COLOR, "fill": True},
            {"label": "Calories (x10)", "data": scaled(calories, 0.1), "color": CALORIES_COLOR, "fill": False},
            {"label": "Fatigue Level (x10)", "data": scaled(fatigue, 10), "color": FATIGUE_COLOR, "fill": False},
        ],
    }


def intensity_distribution(activities: Sequence[ActivityLog], today: date, days: int = 30) -> Dict[str, Any]:
    start = today - timedelta(days=days)
    counts = {level: 0 for level in INTENSITY_MULTIPLIERS}
    for activity in activities:
        if activity.date >= start and activity.intensity_level in counts:
            counts[activity.intensity_level] += 1
    return {"labels": list(INTENSITY_LABELS), "data": list(counts.values())}


def build_performance_metrics(activities: Sequence[ActivityLog], today: date) -> Dict[str, Any]:
    """All chart series for the performance dashboard.

    Args:
        activities: The athlete's activities, typically the last 90 days
        today: Last day shown on the charts
    """
    return {
        "dailyActivityCount": daily_activity_count(activities, today, 30),
        "weeklyTrainingHours": weekly_training_hours(activities, today, 12),
        "heartRateTrend": heart_rate_trend(activities, today, 30),
        "multiMetricComparison": multi_metric_comparison(activities, today, 30),
        "intensityDistribution": intensity_distribution(activities, today, 30),
    }
