"""
Activity logging endpoints.

Logging, editing or deleting an activity keeps the athlete's body-part
workloads and daily injury-risk snapshot in step with the activity log.
"""

from typing import List

from fastapi import APIRouter, Query, status

from totalfit.core.logging_config import get_logger
from totalfit.core.models.io.activities import (
    ActivityLogCreate,
    ActivityLogRead,
    ActivityLogResult,
    ActivityLogUpdate,
    ActivityUpdateResult,
)
from totalfit.core.models.io.common import Envelope
from totalfit.core.models.io.injuries import BodyPartWorkloadRead, InjuryRiskSnapshotRead
from totalfit.server.services.deps import AthleteServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["activities"])


def _snapshot_or_none(snapshot):
    return InjuryRiskSnapshotRead.model_validate(snapshot) if snapshot is not None else None


@router.post(
    "/activities/log",
    response_model=Envelope[ActivityLogResult],
    status_code=status.HTTP_201_CREATED,
    summary="Log Activity",
    description="Record a workout or sports session and update the athlete's body-part workloads and risk.",
    responses={
        400: {"description": "athlete_id or activity_type missing, or a value does not fit the stored activity"},
        404: {"description": "Athlete not found"},
    },
)
async def log_activity(activity: ActivityLogCreate, service: AthleteServiceDep):
    """
    Log an activity.

    - **affected_body_parts**: detected from the exercises, workout type, sport
      or position when omitted.
    - **date**: defaults to today; **recovery_status** defaults to `normal`.
    """
    stored, workloads, snapshot = await service.log_activity(activity.model_dump(exclude_none=True))
    return Envelope(
        data=ActivityLogResult(
            activity=ActivityLogRead.model_validate(stored),
            workload_updates=[BodyPartWorkloadRead.model_validate(w) for w in workloads],
            injury_risk=_snapshot_or_none(snapshot),
        )
    )


@router.get(
    "/athletes/{athlete_id}/activities",
    response_model=Envelope[List[ActivityLogRead]],
    summary="List Athlete Activities",
    description="An athlete's activities, most recent first.",
)
async def list_athlete_activities(
    athlete_id: str,
    service: AthleteServiceDep,
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
):
    activities = await service.activities.list_for_athlete(athlete_id, limit=limit, offset=offset)
    return Envelope(data=[ActivityLogRead.model_validate(a) for a in activities])


@router.get(
    "/activities/{activity_id}",
    response_model=Envelope[ActivityLogRead],
    summary="Get Activity",
    responses={404: {"description": "Activity not found"}},
)
async def get_activity(activity_id: str, service: AthleteServiceDep):
    return Envelope(data=ActivityLogRead.model_validate(await service.get_activity(activity_id)))


@router.put(
    "/activities/{activity_id}",
    response_model=Envelope[ActivityUpdateResult],
    summary="Update Activity",
    description="Partially update an activity and recalculate the workloads and risk of its day.",
    responses={
        400: {"description": "A value does not fit the stored activity"},
        404: {"description": "Activity not found"},
    },
)
async def update_activity(activity_id: str, changes: ActivityLogUpdate, service: AthleteServiceDep):
    activity, snapshot = await service.update_activity(activity_id, changes.model_dump(exclude_unset=True))
    return Envelope(
        data=ActivityUpdateResult(
            activity=ActivityLogRead.model_validate(activity), injury_risk=_snapshot_or_none(snapshot)
        )
    )


@router.delete(
    "/activities/{activity_id}",
    summary="Delete Activity",
    description="Delete an activity and rebuild the workloads of its day from the remaining activities.",
    responses={404: {"description": "Activity not found"}},
)
async def delete_activity(activity_id: str, service: AthleteServiceDep):
    athlete_id = await service.delete_activity(activity_id)
    return {"success": True, "message": "Activity deleted successfully", "athlete_id": athlete_id}
