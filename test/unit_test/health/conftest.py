from datetime import date, timedelta
from typing import List

import pytest

from totalfit.core.database.entities.health_metrics import HealthMetric

END = date(2025, 3, 15)


def make_week(days: int = 7, end: date = END, **fields) -> List[HealthMetric]:
    """``days`` identical daily metrics ending at ``end``, oldest first."""
    values = {"steps": 8000, "active_minutes": 40, "heart_rate": 60, "sleep_hours": 8.0, "workout_sessions": 1}
    values.update(fields)
    return [
        HealthMetric(user_id="user-1", date=end - timedelta(days=offset), **values)
        for offset in range(days - 1, -1, -1)
    ]


@pytest.fixture
def metrics_end() -> date:
    return END


@pytest.fixture
def week_factory():
    return make_week
