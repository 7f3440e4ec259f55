"""
Athlete management endpoints.

Coaches keep a roster of athletes; deleting an athlete removes their
activities, workloads, risk snapshots and injury history as well.
"""

from typing import List

from fastapi import APIRouter, status

from totalfit.core.database.entities.athletes import Athlete
from totalfit.core.database.repositories import AthleteRepository
from totalfit.core.errors import NotFoundError
from totalfit.core.logging_config import get_logger
from totalfit.core.models.io.athletes import AthleteCreate, AthleteRead, AthleteUpdate
from totalfit.core.models.io.common import Envelope
from totalfit.server.services.deps import SessionDep

logger = get_logger(__name__)

router = APIRouter(tags=["athletes"])


async def _get_athlete_or_404(repository: AthleteRepository, athlete_id: str) -> Athlete:
    athlete = await repository.get_by_id(athlete_id)
    if athlete is None:
        raise NotFoundError("Athlete not found")
    return athlete


@router.post(
    "/athletes",
    response_model=Envelope[AthleteRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create Athlete",
    description="Add an athlete to a coach's roster. Status defaults to `active`.",
)
async def create_athlete(athlete: AthleteCreate, session: SessionDep):
    created = await AthleteRepository(session).create(Athlete.model_validate(athlete.model_dump()))
    logger.info(f"Created athlete {created.id} for user {created.user_id}")
    return Envelope(data=AthleteRead.model_validate(created))


@router.get(
    "/athletes/{athlete_id}",
    response_model=Envelope[AthleteRead],
    summary="Get Athlete",
    responses={404: {"description": "Athlete not found"}},
)
async def get_athlete(athlete_id: str, session: SessionDep):
    athlete = await _get_athlete_or_404(AthleteRepository(session), athlete_id)
    return Envelope(data=AthleteRead.model_validate(athlete))


@router.get(
    "/users/{user_id}/athletes",
    response_model=Envelope[List[AthleteRead]],
    summary="List Coach's Athletes",
    description="All athletes owned by a user, newest first.",
)
async def list_user_athletes(user_id: str, session: SessionDep):
    athletes = await AthleteRepository(session).list_for_user(user_id)
    return Envelope(data=[AthleteRead.model_validate(a) for a in athletes])


@router.put(
    "/athletes/{athlete_id}",
    response_model=Envelope[AthleteRead],
    summary="Update Athlete",
    description="Partially update an athlete. `id`, `user_id` and `created_at` cannot be changed.",
    responses={404: {"description": "Athlete not found"}},
)
async def update_athlete(athlete_id: str, changes: AthleteUpdate, session: SessionDep):
    repository = AthleteRepository(session)
    athlete = await _get_athlete_or_404(repository, athlete_id)
    updated = await repository.update_fields(athlete, changes.model_dump(exclude_unset=True))
    return Envelope(data=AthleteRead.model_validate(updated))


@router.delete(
    "/athletes/{athlete_id}",
    summary="Delete Athlete",
    description="Delete an athlete together with all related activity, workload, snapshot and injury rows.",
    responses={404: {"description": "Athlete not found"}},
)
async def delete_athlete(athlete_id: str, session: SessionDep):
    if not await AthleteRepository(session).delete_with_related(athlete_id):
        raise NotFoundError("Athlete not found")
    logger.info(f"Deleted athlete {athlete_id} and related records")
    return {"success": True, "message": "Athlete deleted successfully"}
