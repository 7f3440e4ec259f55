"""Unit tests for the database engine and session helpers."""

import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from totalfit.core.database.utils import create_all, create_engine, create_sessionmaker, normalize_database_url


@pytest.mark.parametrize(
    "url,expected",
    [
        ("postgres://u:p@db:5432/totalfit", "postgresql+asyncpg://u:p@db:5432/totalfit"),
        ("postgresql://u:p@db/totalfit", "postgresql+asyncpg://u:p@db/totalfit"),
        ("postgresql+psycopg2://u:p@db/totalfit", "postgresql+asyncpg://u:p@db/totalfit"),
        ("postgresql+asyncpg://u:p@db/totalfit", "postgresql+asyncpg://u:p@db/totalfit"),
        ("sqlite+aiosqlite:///./totalfit.db", "sqlite+aiosqlite:///./totalfit.db"),
    ],
)
def test_normalize_database_url(url, expected):
    assert normalize_database_url(url) == expected


def test_create_engine_for_sqlite():
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    assert isinstance(engine, AsyncEngine)
    assert engine.url.get_backend_name() == "sqlite"


def test_create_engine_uses_asyncpg_for_postgres():
    engine = create_engine("postgres://u:p@db:5432/totalfit")
    assert engine.url.drivername == "postgresql+asyncpg"


def test_sessionmaker_keeps_objects_after_commit():
    factory = create_sessionmaker(create_engine("sqlite+aiosqlite:///:memory:"))
    assert factory.class_ is AsyncSession
    assert factory.kw["expire_on_commit"] is False


@pytest.mark.asyncio
async def test_create_all_creates_every_table(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'totalfit.db'}")
    try:
        await create_all(engine)
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: set(inspect(sync_conn).get_table_names()))
    finally:
        await engine.dispose()

    assert tables == {
        "users",
        "athletes",
        "activity_logs",
        "body_part_workload",
        "injury_risk_snapshots",
        "injury_history",
        "health_metrics",
    }
