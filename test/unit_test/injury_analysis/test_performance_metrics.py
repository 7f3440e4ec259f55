"""Unit tests for the performance-chart series."""

from datetime import date, timedelta

import pytest

from totalfit.core.database.entities.activity_logs import ActivityLog
from totalfit.injury_analysis.performance_metrics import (
    build_performance_metrics,
    daily_activity_count,
    format_label,
    heart_rate_trend,
    intensity_distribution,
    multi_metric_comparison,
    week_start,
    weekly_training_hours,
)

# A Saturday
TODAY = date(2025, 3, 15)


def activity(days_ago: int = 0, **fields) -> ActivityLog:
    return ActivityLog(athlete_id="a1", activity_type="workout", date=TODAY - timedelta(days=days_ago), **fields)


def test_format_label():
    assert format_label(date(2024, 1, 5)) == "Jan 5"
    assert format_label(date(2024, 12, 25)) == "Dec 25"


@pytest.mark.parametrize(
    "day,expected",
    [(date(2025, 3, 15), date(2025, 3, 9)), (date(2025, 3, 9), date(2025, 3, 9)), (date(2025, 3, 10), date(2025, 3, 9))],
)
def test_week_start_is_sunday(day, expected):
    assert week_start(day) == expected


def test_daily_activity_count():
    series = daily_activity_count([activity(0), activity(0), activity(2), activity(40)], TODAY, days=3)
    assert series == {"labels": ["Mar 13", "Mar 14", "Mar 15"], "data": [1, 0, 2]}


def test_weekly_training_hours():
    activities = [activity(0, duration=90), activity(6, duration=30), activity(7, duration=45)]
    series = weekly_training_hours(activities, TODAY, weeks=2)
    assert series["labels"] == ["Mar 2", "Mar 9"]
    assert series["data"] == [0.8, 2.0]


def test_heart_rate_trend_averages_and_gaps():
    activities = [activity(0, heart_rate_avg=140), activity(0, heart_rate_avg=151), activity(1)]
    series = heart_rate_trend(activities, TODAY, days=2)
    assert series["data"] == [None, 146]


def test_multi_metric_comparison():
    activities = [activity(0, heart_rate_avg=150, calories_burned=455, fatigue_level=6)]
    series = multi_metric_comparison(activities, TODAY, days=2)

    assert series["labels"] == ["Mar 14", "Mar 15"]
    heart, calories, fatigue = series["datasets"]
    assert heart == {"label": "Heart Rate (bpm)", "data": [None, 150], "color": "#1f8ef1", "fill": True}
    assert calories["label"] == "Calories (x10)"
    assert calories["color"] == "#f96332"
    assert calories["data"] == [None, 46]
    assert fatigue["label"] == "Fatigue Level (x10)"
    assert fatigue["color"] == "#fd5d93"
    assert fatigue["data"] == [None, 60]


def test_intensity_distribution():
    activities = [
        activity(0, intensity_level="hard"),
        activity(3, intensity_level="hard"),
        activity(5, intensity_level="very-light"),
        activity(31, intensity_level="maximum"),
        activity(1),
    ]
    series = intensity_distribution(activities, TODAY)
    assert series["labels"] == ["Very Light", "Light", "Moderate", "Hard", "Very Hard", "Maximum"]
    assert series["data"] == [1, 0, 0, 2, 0, 0]


def test_build_performance_metrics_keys_and_lengths():
    metrics = build_performance_metrics([activity(0, duration=60)], TODAY)
    assert set(metrics) == {
        "dailyActivityCount",
        "weeklyTrainingHours",
        "heartRateTrend",
        "multiMetricComparison",
        "intensityDistribution",
    }
    assert len(metrics["dailyActivityCount"]["data"]) == 30
    assert len(metrics["weeklyTrainingHours"]["data"]) == 12
    assert metrics["weeklyTrainingHours"]["data"][-1] == 1.0
