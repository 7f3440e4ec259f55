"""
Health metric and scoring endpoints.

Users log daily wellness totals (steps, active minutes, sleep, heart rate);
these endpoints store them and derive a health score and a wellness-level
injury risk from the most recent days.
"""

from datetime import timedelta
from typing import List

from fastapi import APIRouter, Query, status

from totalfit.core import clock
from totalfit.core.database.repositories import HealthMetricRepository
from totalfit.core.logging_config import get_logger
from totalfit.core.models.io.common import Envelope
from totalfit.core.models.io.health_metrics import (
    HealthMetricCreate,
    HealthMetricRead,
    HealthScoreResponse,
    WellnessRiskResponse,
)
from totalfit.health import (
    calculate_health_score,
    calculate_wellness_risk,
    get_health_score_interpretation,
    predict_future_risk,
)
from totalfit.server.services.deps import SessionDep

logger = get_logger(__name__)

router = APIRouter(tags=["health-metrics"])


async def _recent_metrics(session: SessionDep, user_id: str, days: int):
    start = clock.utc_today() - timedelta(days=days - 1)
    return await HealthMetricRepository(session).list_since(user_id, start)


@router.post(
    "/users/{user_id}/health-metrics",
    response_model=Envelope[HealthMetricRead],
    status_code=status.HTTP_201_CREATED,
    summary="Log Health Metrics",
    description="Store a day's wellness metrics for a user, replacing any already logged for that day.",
)
async def log_health_metrics(user_id: str, metrics: HealthMetricCreate, session: SessionDep):
    day = metrics.date or clock.utc_today()
    values = metrics.model_dump(exclude={"date"})
    metric = await HealthMetricRepository(session).upsert(user_id, day, values)
    logger.info(f"Stored health metrics for user {user_id} on {day}")
    return Envelope(data=HealthMetricRead.model_validate(metric))


@router.get(
    "/users/{user_id}/health-metrics",
    response_model=Envelope[List[HealthMetricRead]],
    summary="List Health Metrics",
    description="A user's logged metrics for the last `days` days, oldest first.",
)
async def list_health_metrics(user_id: str, session: SessionDep, days: int = Query(default=30, ge=1, le=365)):
    metrics = await _recent_metrics(session, user_id, days)
    return Envelope(data=[HealthMetricRead.model_validate(m) for m in metrics])


@router.get(
    "/users/{user_id}/health-score",
    response_model=Envelope[HealthScoreResponse],
    summary="Get Health Score",
    description="Overall and component health scores (activity, sleep, recovery, consistency) "
    "computed from the last `days` days of metrics.",
)
async def get_health_score(user_id: str, session: SessionDep, days: int = Query(default=30, ge=1, le=365)):
    metrics = await _recent_metrics(session, user_id, days)
    score = calculate_health_score(metrics)
    return Envelope(
        data=HealthScoreResponse(score=score, interpretation=get_health_score_interpretation(score.overall_score))
    )


@router.get(
    "/users/{user_id}/wellness-risk",
    response_model=Envelope[WellnessRiskResponse],
    summary="Get Wellness Risk",
    description="Injury-risk level from training-load, rest and sleep patterns, with a one-week forecast.",
)
async def get_wellness_risk(user_id: str, session: SessionDep, days: int = Query(default=30, ge=1, le=365)):
    metrics = await _recent_metrics(session, user_id, days)
    risk = calculate_wellness_risk(metrics)
    return Envelope(data=WellnessRiskResponse(risk=risk, forecast=predict_future_risk(metrics)))
