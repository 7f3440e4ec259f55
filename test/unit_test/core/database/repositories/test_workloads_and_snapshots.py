"""Unit tests for the body-part workload and risk snapshot repositories."""

from datetime import date, timedelta

import pytest

from totalfit.core.database.repositories import BodyPartWorkloadRepository, InjuryRiskSnapshotRepository

pytestmark = pytest.mark.asyncio


@pytest.fixture
def workloads(session) -> BodyPartWorkloadRepository:
    return BodyPartWorkloadRepository(session)


@pytest.fixture
def snapshots(session) -> InjuryRiskSnapshotRepository:
    return InjuryRiskSnapshotRepository(session)


class TestBodyPartWorkloadRepository:
    async def test_upsert_inserts_then_overwrites(self, workloads, day: date):
        first = await workloads.upsert("a1", "chest", day, {"workload_score": 60.0, "activity_count": 1})
        second = await workloads.upsert("a1", "chest", day, {"workload_score": 120.0, "activity_count": 2})

        assert second.id == first.id
        row = await workloads.get_for_day("a1", "chest", day)
        assert row.workload_score == 120.0
        assert row.activity_count == 2

    async def test_history_before_only_counts_training_rows_in_window(self, workloads, day: date):
        await workloads.upsert("a1", "chest", day - timedelta(days=2), {"activity_count": 1})
        await workloads.upsert("a1", "chest", day - timedelta(days=1), {"activity_count": 0})
        await workloads.upsert("a1", "chest", day - timedelta(days=10), {"activity_count": 1})
        await workloads.upsert("a1", "chest", day, {"activity_count": 1})

        rows = await workloads.history_before("a1", "chest", day, since=day - timedelta(days=7))
        assert [r.date for r in rows] == [day - timedelta(days=2)]

    async def test_latest_training_before(self, workloads, day: date):
        await workloads.upsert("a1", "chest", day - timedelta(days=5), {"activity_count": 1})
        await workloads.upsert("a1", "chest", day - timedelta(days=3), {"activity_count": 1})
        await workloads.upsert("a1", "chest", day - timedelta(days=1), {"activity_count": 0})

        latest = await workloads.latest_training_before("a1", "chest", day)
        assert latest.date == day - timedelta(days=3)
        assert await workloads.latest_training_before("a1", "knee", day) is None

    async def test_list_for_date_orders_by_risk(self, workloads, day: date):
        await workloads.upsert("a1", "chest", day, {"injury_risk_percentage": 30})
        await workloads.upsert("a1", "left-arm", day, {"injury_risk_percentage": 55})
        await workloads.upsert("a1", "head", day, {"injury_risk_percentage": 30})

        rows = await workloads.list_for_date("a1", day)
        assert [r.body_part for r in rows] == ["left-arm", "chest", "head"]

    async def test_latest_per_body_part_and_athlete_ids(self, workloads, day: date):
        await workloads.upsert("a1", "chest", day - timedelta(days=1), {})
        await workloads.upsert("a1", "chest", day, {})
        await workloads.upsert("a1", "head", day - timedelta(days=4), {})
        await workloads.upsert("a2", "head", day, {})

        latest = {r.body_part: r.date for r in await workloads.latest_per_body_part("a1")}
        assert latest == {"chest": day, "head": day - timedelta(days=4)}
        assert sorted(await workloads.athlete_ids()) == ["a1", "a2"]

    async def test_delete_for_day(self, workloads, day: date):
        for part in ("chest", "head", "left-arm"):
            await workloads.upsert("a1", part, day, {})

        await workloads.delete_for_day("a1", ["chest", "head"], day)
        await workloads.delete_for_day("a1", [], day)

        assert [r.body_part for r in await workloads.list_for_date("a1", day)] == ["left-arm"]


class TestInjuryRiskSnapshotRepository:
    async def test_upsert_and_get(self, snapshots, day: date):
        await snapshots.upsert("a1", day, {"overall_risk_score": 43, "risk_level": "low"})
        await snapshots.upsert("a1", day, {"overall_risk_score": 61, "high_risk_body_parts": ["chest"]})

        snapshot = await snapshots.get_for_date("a1", day)
        assert snapshot.overall_risk_score == 61
        assert snapshot.high_risk_body_parts == ["chest"]

    async def test_list_most_recent_first_with_limit(self, snapshots, day: date):
        for offset in range(3):
            await snapshots.upsert("a1", day - timedelta(days=offset), {})

        assert [s.date for s in await snapshots.list_for_athlete("a1", limit=2)] == [day, day - timedelta(days=1)]

    async def test_delete_for_date(self, snapshots, day: date):
        await snapshots.upsert("a1", day, {})
        await snapshots.delete_for_date("a1", day)
        assert await snapshots.get_for_date("a1", day) is None
