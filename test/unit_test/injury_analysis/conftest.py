"""Fixtures for injury-analysis tests backed by the in-memory database."""

import pytest
import pytest_asyncio

from totalfit.core.database.entities.athletes import Athlete
from totalfit.core.database.repositories import AthleteRepository
from totalfit.injury_analysis import AthleteService


@pytest_asyncio.fixture
async def athlete(session) -> Athlete:
    return await AthleteRepository(session).create(
        Athlete(name="Sam Rivera", user_id="coach-1", primary_sport="Soccer", position="Midfielder")
    )


@pytest.fixture
def service(session) -> AthleteService:
    return AthleteService(session)
