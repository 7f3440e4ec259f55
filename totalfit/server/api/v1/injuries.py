"""
Injury-risk and injury-history endpoints.

Exposes the per-body-part workloads and daily risk snapshots written by the
injury-analysis engine, the athlete's recorded injuries, body-part advice
and the performance-chart series.
"""

import datetime as dt
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Query, status

from totalfit.core import clock
from totalfit.core.database.entities.injury_history import InjuryHistory
from totalfit.core.database.repositories import InjuryHistoryRepository
from totalfit.core.errors import NotFoundError
from totalfit.core.logging_config import get_logger
from totalfit.core.models.io.common import Envelope
from totalfit.core.models.io.injuries import (
    BodyPartWorkloadRead,
    InjuryHistoryCreate,
    InjuryHistoryRead,
    InjuryHistoryUpdate,
    InjuryRiskOverview,
    InjuryRiskSnapshotRead,
    Recommendation,
)
from totalfit.injury_analysis import build_performance_metrics
from totalfit.injury_analysis.recommendations import generate_body_part_recommendations
from totalfit.server.services.deps import AthleteServiceDep, SessionDep

logger = get_logger(__name__)

router = APIRouter(tags=["injury-analysis"])


@router.get(
    "/athletes/{athlete_id}/injury-risk",
    response_model=Envelope[InjuryRiskOverview],
    summary="Get Injury Risk",
    description="Body-part risks, the athlete's risk snapshot and the raw workload rows for one day (default today).",
)
async def get_injury_risk(
    athlete_id: str,
    service: AthleteServiceDep,
    date: Optional[dt.date] = Query(default=None, description="Day to report, YYYY-MM-DD"),
):
    overview = await service.get_injury_risk_overview(athlete_id, date)
    return Envelope(data=InjuryRiskOverview.model_validate(overview, from_attributes=True))


@router.get(
    "/athletes/{athlete_id}/body-part-workloads",
    response_model=Envelope[List[BodyPartWorkloadRead]],
    summary="List Body-Part Workloads",
    description="Daily workload rows for every body part, most recent first.",
)
async def list_body_part_workloads(
    athlete_id: str,
    service: AthleteServiceDep,
    limit: int = Query(default=100, ge=1, le=1000),
):
    rows = await service.workloads.list_for_athlete(athlete_id, limit=limit)
    return Envelope(data=[BodyPartWorkloadRead.model_validate(r) for r in rows])


@router.get(
    "/athletes/{athlete_id}/injury-risk-history",
    response_model=Envelope[List[InjuryRiskSnapshotRead]],
    summary="List Injury Risk History",
    description="Daily athlete risk snapshots, most recent first.",
)
async def list_injury_risk_history(
    athlete_id: str,
    service: AthleteServiceDep,
    limit: int = Query(default=30, ge=1, le=365),
):
    snapshots = await service.snapshots.list_for_athlete(athlete_id, limit=limit)
    return Envelope(data=[InjuryRiskSnapshotRead.model_validate(s) for s in snapshots])


@router.post(
    "/athletes/{athlete_id}/injuries",
    response_model=Envelope[InjuryHistoryRead],
    status_code=status.HTTP_201_CREATED,
    summary="Record Injury",
    description="Record an injury. While its status is `active` the body part's computed risk is raised.",
    responses={404: {"description": "Athlete not found"}},
)
async def create_injury(
    athlete_id: str, injury: InjuryHistoryCreate, service: AthleteServiceDep, session: SessionDep
):
    if await service.athletes.get_by_id(athlete_id) is None:
        raise NotFoundError("Athlete not found")
    created = await InjuryHistoryRepository(session).create(
        InjuryHistory.model_validate({**injury.model_dump(), "athlete_id": athlete_id})
    )
    logger.info(f"Recorded {created.status} {created.body_part} injury for athlete {athlete_id}")
    return Envelope(data=InjuryHistoryRead.model_validate(created))


@router.get(
    "/athletes/{athlete_id}/injuries",
    response_model=Envelope[List[InjuryHistoryRead]],
    summary="List Injuries",
)
async def list_injuries(athlete_id: str, session: SessionDep):
    injuries = await InjuryHistoryRepository(session).list_for_athlete(athlete_id)
    return Envelope(data=[InjuryHistoryRead.model_validate(i) for i in injuries])


@router.put(
    "/injuries/{injury_id}",
    response_model=Envelope[InjuryHistoryRead],
    summary="Update Injury",
    description="Partially update an injury, e.g. mark it `recovered`.",
    responses={404: {"description": "Injury not found"}},
)
async def update_injury(injury_id: str, changes: InjuryHistoryUpdate, session: SessionDep):
    repository = InjuryHistoryRepository(session)
    injury = await repository.get_by_id(injury_id)
    if injury is None:
        raise NotFoundError("Injury not found")
    updated = await repository.update_fields(injury, changes.model_dump(exclude_unset=True))
    return Envelope(data=InjuryHistoryRead.model_validate(updated))


@router.get(
    "/body-parts/{body_part}/recommendations",
    response_model=Envelope[List[Recommendation]],
    summary="Get Body-Part Recommendations",
    description="Coaching advice for a body part at a risk percentage.",
)
async def get_body_part_recommendations(
    body_part: str,
    risk: float = Query(default=0, ge=0, le=100, description="Risk percentage"),
):
    return Envelope(data=generate_body_part_recommendations(body_part, risk))


@router.get(
    "/athletes/{athlete_id}/performance-metrics",
    response_model=Envelope[Dict[str, Any]],
    summary="Get Performance Metrics",
    description="Chart series built from the athlete's activities over the last `days` days.",
)
async def get_performance_metrics(
    athlete_id: str,
    service: AthleteServiceDep,
    days: int = Query(default=90, ge=1, le=365),
):
    today = clock.utc_today()
    activities = await service.activities.list_since(athlete_id, today - dt.timedelta(days=days))
    return Envelope(data=build_performance_metrics(activities, today))
