"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from totalfit.core.logging_config import get_logger
from totalfit.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Against SQLite the tables are created from ORM metadata so a local server
    works out of the box. Postgres deployments are migrated with Alembic and
    are left untouched here.
    """
    if engine.url.get_backend_name() == "sqlite":
        await create_all(engine)
        logger.info("SQLite schema created from ORM metadata")
    else:
        logger.info("Skipping schema creation; Postgres schema is managed by Alembic migrations")
