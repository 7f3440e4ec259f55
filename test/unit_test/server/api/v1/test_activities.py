"""
Unit tests for the activity logging endpoints.

A moderate one-hour Bench Press of 3x10 at 100 loads the chest with 60 points
and the shoulders and arms with 40 each.
"""

from datetime import date, timedelta

import pytest
from httpx import AsyncClient

from totalfit.core.database.repositories import InjuryHistoryRepository

pytestmark = pytest.mark.asyncio

BENCH_PARTS = ["chest", "right-shoulder", "left-shoulder", "right-arm", "left-arm"]


@pytest.fixture
def failing_left_arm(monkeypatch):
    original = InjuryHistoryRepository.has_active_injury

    async def has_active_injury(self, athlete_id: str, body_part: str) -> bool:
        if body_part == "left-arm":
            raise RuntimeError("injury lookup failed")
        return await original(self, athlete_id, body_part)

    monkeypatch.setattr(InjuryHistoryRepository, "has_active_injury", has_active_injury)


def bench_press(athlete_id: str, day: date = date(2025, 3, 15), **overrides) -> dict:
    payload = {
        "athlete_id": athlete_id,
        "activity_type": "workout",
        "date": day.isoformat(),
        "duration": 60,
        "exercises": [{"exercise": "Bench Press", "sets": 3, "reps": 10, "weight": 100}],
    }
    payload.update(overrides)
    return payload


class TestLogActivity:
    async def test_log_workout(self, client: AsyncClient, created_athlete):
        response = await client.post("/api/activities/log", json=bench_press(created_athlete["id"]))
        assert response.status_code == 201
        data = response.json()["data"]

        activity = data["activity"]
        assert activity["athlete_id"] == created_athlete["id"]
        assert activity["affected_body_parts"] == BENCH_PARTS
        assert activity["recovery_status"] == "normal"
        assert activity["exercises"][0]["exercise"] == "Bench Press"

        workloads = {row["body_part"]: row for row in data["workload_updates"]}
        assert set(workloads) == set(BENCH_PARTS)
        assert workloads["chest"]["workload_score"] == pytest.approx(60.0)
        assert workloads["chest"]["injury_risk_percentage"] == 49
        assert workloads["left-arm"]["workload_score"] == pytest.approx(40.0)

        assert data["injury_risk"]["overall_risk_score"] == 43
        assert data["injury_risk"]["risk_level"] == "low"

    async def test_explicit_body_parts_are_kept(self, client: AsyncClient, created_athlete):
        response = await client.post(
            "/api/activities/log",
            json=bench_press(created_athlete["id"], affected_body_parts=["chest"]),
        )
        data = response.json()["data"]
        assert data["activity"]["affected_body_parts"] == ["chest"]
        assert [row["body_part"] for row in data["workload_updates"]] == ["chest"]

    async def test_date_defaults_to_today(self, client: AsyncClient, created_athlete, fixed_today):
        payload = bench_press(created_athlete["id"])
        del payload["date"]
        response = await client.post("/api/activities/log", json=payload)
        assert response.json()["data"]["activity"]["date"] == fixed_today.isoformat()

    async def test_requires_athlete_and_type(self, client: AsyncClient, created_athlete):
        response = await client.post("/api/activities/log", json={"athlete_id": created_athlete["id"]})
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "athlete_id and activity_type are required"}

    async def test_unknown_athlete(self, client: AsyncClient):
        response = await client.post("/api/activities/log", json=bench_press("missing"))
        assert response.status_code == 404
        assert response.json()["success"] is False

    async def test_rejects_invalid_fatigue_level(self, client: AsyncClient, created_athlete):
        response = await client.post(
            "/api/activities/log", json=bench_press(created_athlete["id"], fatigue_level=11)
        )
        assert response.status_code == 422

    async def test_rejects_overlong_activity_type(self, client: AsyncClient, created_athlete):
        response = await client.post(
            "/api/activities/log", json=bench_press(created_athlete["id"], activity_type="x" * 17)
        )
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"].startswith("Invalid activity")

    async def test_failed_body_part_is_skipped(self, client: AsyncClient, created_athlete, failing_left_arm):
        response = await client.post("/api/activities/log", json=bench_press(created_athlete["id"]))
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["activity"]["affected_body_parts"] == BENCH_PARTS
        assert {row["body_part"] for row in data["workload_updates"]} == set(BENCH_PARTS) - {"left-arm"}
        assert data["injury_risk"] is not None


class TestListAndGetActivities:
    async def test_most_recent_first_with_pagination(self, client: AsyncClient, created_athlete):
        athlete_id = created_athlete["id"]
        for offset in (2, 0, 1):
            await client.post(
                "/api/activities/log",
                json=bench_press(athlete_id, day=date(2025, 3, 15) - timedelta(days=offset)),
            )

        response = await client.get(f"/api/athletes/{athlete_id}/activities")
        assert [a["date"] for a in response.json()["data"]] == ["2025-03-15", "2025-03-14", "2025-03-13"]

        page = await client.get(f"/api/athletes/{athlete_id}/activities", params={"limit": 1, "offset": 1})
        assert [a["date"] for a in page.json()["data"]] == ["2025-03-14"]

    async def test_limit_is_validated(self, client: AsyncClient, created_athlete):
        response = await client.get(f"/api/athletes/{created_athlete['id']}/activities", params={"limit": 0})
        assert response.status_code == 422

    async def test_get_activity(self, client: AsyncClient, created_athlete):
        logged = await client.post("/api/activities/log", json=bench_press(created_athlete["id"]))
        activity_id = logged.json()["data"]["activity"]["id"]

        response = await client.get(f"/api/activities/{activity_id}")
        assert response.status_code == 200
        assert response.json()["data"]["id"] == activity_id

    async def test_get_unknown_activity(self, client: AsyncClient):
        response = await client.get("/api/activities/missing")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Activity not found"}


class TestUpdateActivity:
    async def test_update_recomputes_workloads(self, client: AsyncClient, created_athlete):
        athlete_id = created_athlete["id"]
        logged = await client.post("/api/activities/log", json=bench_press(athlete_id))
        activity_id = logged.json()["data"]["activity"]["id"]

        response = await client.put(f"/api/activities/{activity_id}", json={"duration": 120, "notes": "felt strong"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["activity"]["duration"] == 120
        assert data["activity"]["notes"] == "felt strong"
        assert data["injury_risk"] is not None

        workloads = await client.get(f"/api/athletes/{athlete_id}/body-part-workloads")
        chest = next(row for row in workloads.json()["data"] if row["body_part"] == "chest")
        assert chest["total_duration"] == 120
        assert chest["activity_count"] == 1

    async def test_null_leaves_required_field_unchanged(self, client: AsyncClient, created_athlete):
        logged = await client.post("/api/activities/log", json=bench_press(created_athlete["id"]))
        activity_id = logged.json()["data"]["activity"]["id"]

        response = await client.put(f"/api/activities/{activity_id}", json={"duration": None, "notes": "x"})
        assert response.status_code == 200
        activity = response.json()["data"]["activity"]
        assert activity["duration"] == 60
        assert activity["notes"] == "x"

    async def test_rejects_overlong_activity_type(self, client: AsyncClient, created_athlete):
        logged = await client.post("/api/activities/log", json=bench_press(created_athlete["id"]))
        activity_id = logged.json()["data"]["activity"]["id"]

        response = await client.put(f"/api/activities/{activity_id}", json={"activity_type": "x" * 17})
        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid activity")
        assert (await client.get(f"/api/activities/{activity_id}")).json()["data"]["activity_type"] == "workout"

    async def test_failed_body_part_is_skipped(self, client: AsyncClient, created_athlete, failing_left_arm):
        logged = await client.post(
            "/api/activities/log", json=bench_press(created_athlete["id"], affected_body_parts=["chest"])
        )
        activity_id = logged.json()["data"]["activity"]["id"]

        response = await client.put(f"/api/activities/{activity_id}", json={"affected_body_parts": BENCH_PARTS})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["activity"]["affected_body_parts"] == BENCH_PARTS
        assert data["injury_risk"] is not None

    async def test_update_unknown_activity(self, client: AsyncClient):
        response = await client.put("/api/activities/missing", json={"duration": 30})
        assert response.status_code == 404


class TestDeleteActivity:
    async def test_delete_rebuilds_the_day(self, client: AsyncClient, created_athlete):
        athlete_id = created_athlete["id"]
        first = await client.post("/api/activities/log", json=bench_press(athlete_id))
        await client.post("/api/activities/log", json=bench_press(athlete_id))
        activity_id = first.json()["data"]["activity"]["id"]

        response = await client.delete(f"/api/activities/{activity_id}")
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Activity deleted successfully",
            "athlete_id": athlete_id,
        }

        workloads = await client.get(f"/api/athletes/{athlete_id}/body-part-workloads")
        chest = next(row for row in workloads.json()["data"] if row["body_part"] == "chest")
        assert chest["activity_count"] == 1
        assert chest["workload_score"] == pytest.approx(60.0)
        assert (await client.get(f"/api/activities/{activity_id}")).status_code == 404

    async def test_delete_unknown_activity(self, client: AsyncClient):
        response = await client.delete("/api/activities/missing")
        assert response.status_code == 404
