"""Unit tests for the shared CRUD repository and query helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from totalfit.core.database.base import UTCDateTime
from totalfit.core.database.entities.athletes import Athlete
from totalfit.core.database.repositories import AsyncBaseRepository, QueryBuilder

pytestmark = pytest.mark.asyncio


@pytest.fixture
def repository(session) -> AsyncBaseRepository[Athlete]:
    return AsyncBaseRepository(session, Athlete)


class TestAsyncBaseRepository:
    async def test_create_assigns_id_and_timestamps(self, repository):
        athlete = await repository.create(Athlete(name="Jordan Lee"))
        assert athlete.id
        assert athlete.created_at is not None
        assert await repository.get_by_id(athlete.id) is athlete

    async def test_timestamps_read_back_as_aware_utc(self, repository, session):
        berlin_morning = datetime(2025, 3, 15, 8, 30, tzinfo=timezone(timedelta(hours=1)))
        athlete = await repository.create(Athlete(name="Jordan Lee", created_at=berlin_morning))
        session.expunge_all()

        loaded = await repository.get_by_id(athlete.id)
        assert loaded.created_at == datetime(2025, 3, 15, 7, 30, tzinfo=timezone.utc)
        assert loaded.created_at.utcoffset() == timedelta(0)
        assert loaded.updated_at.tzinfo is not None

    async def test_get_missing(self, repository):
        assert await repository.get_by_id("missing") is None

    async def test_update_persists_changes(self, repository):
        athlete = await repository.create(Athlete(name="Jordan Lee"))
        athlete.team = "Hawks"

        updated = await repository.update(athlete)
        assert updated.team == "Hawks"
        assert (await repository.get_by_id(athlete.id)).team == "Hawks"

    async def test_update_fields_ignores_unknown_keys(self, repository):
        athlete = await repository.create(Athlete(name="Jordan Lee"))
        updated = await repository.update_fields(athlete, {"status": "injured", "not_a_column": 1})
        assert updated.status == "injured"
        assert not hasattr(updated, "not_a_column")

    async def test_delete(self, repository):
        athlete = await repository.create(Athlete(name="Jordan Lee"))
        assert await repository.delete(athlete.id) is True
        assert await repository.get_by_id(athlete.id) is None
        assert await repository.delete(athlete.id) is False

    async def test_list_with_filters_and_pagination(self, repository):
        for name, user_id in [("A", "coach-1"), ("B", "coach-1"), ("C", "coach-2")]:
            await repository.create(Athlete(name=name, user_id=user_id))

        assert len(await repository.list()) == 3
        assert {a.name for a in await repository.list(filters={"user_id": "coach-1"})} == {"A", "B"}
        assert len(await repository.list(filters={"user_id": None})) == 3
        assert len(await repository.list(limit=2)) == 2
        assert len(await repository.list(limit=2, offset=2)) == 1


class TestQueryBuilder:
    def test_filters_skip_unknown_fields(self):
        from sqlmodel import select

        stmt = QueryBuilder.apply_filters(select(Athlete), Athlete, {"status": "active", "bogus": "x"})
        compiled = str(stmt)
        assert "athletes.status" in compiled
        assert "bogus" not in compiled


class TestUTCDateTime:
    def test_naive_values_are_taken_as_utc(self):
        column_type = UTCDateTime()
        stored = column_type.process_bind_param(datetime(2025, 3, 15, 8, 0), None)
        assert stored == datetime(2025, 3, 15, 8, 0, tzinfo=timezone.utc)

    def test_offsets_are_normalised_to_utc(self):
        column_type = UTCDateTime()
        stored = column_type.process_bind_param(datetime(2025, 3, 15, 8, 0, tzinfo=timezone(timedelta(hours=-5))), None)
        assert stored.tzinfo is timezone.utc
        assert stored.hour == 13

    def test_none_passes_through(self):
        column_type = UTCDateTime()
        assert column_type.process_bind_param(None, None) is None
        assert column_type.process_result_value(None, None) is None
