"""Unit tests for the daily recovery endpoint."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_daily_update_decays_yesterdays_loads(client: AsyncClient, created_athlete, fixed_today):
    await client.post(
        "/api/activities/log",
        json={
            "athlete_id": created_athlete["id"],
            "activity_type": "workout",
            "date": "2025-03-14",
            "duration": 60,
            "exercises": [{"exercise": "Bench Press", "sets": 3, "reps": 10, "weight": 100}],
        },
    )

    response = await client.post("/api/recovery/daily-update")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Updated recovery rates for 5 body parts"

    rows = {row["body_part"]: row for row in body["data"]}
    chest = rows["chest"]
    assert chest["date"] == "2025-03-15"
    assert chest["workload_score"] == pytest.approx(55.2)
    assert chest["recovery_rate"] == 64
    assert chest["days_since_last_activity"] == 1


async def test_daily_update_is_idempotent(client: AsyncClient, created_athlete, fixed_today):
    await client.post(
        "/api/activities/log",
        json={"athlete_id": created_athlete["id"], "activity_type": "sports", "sport": "Soccer", "date": "2025-03-14"},
    )
    await client.post("/api/recovery/daily-update")
    response = await client.post("/api/recovery/daily-update")
    assert response.json() == {"success": True, "data": [], "message": "Updated recovery rates for 0 body parts"}


async def test_daily_update_without_workloads(client: AsyncClient, fixed_today):
    response = await client.post("/api/recovery/daily-update")
    assert response.status_code == 200
    assert response.json()["data"] == []
