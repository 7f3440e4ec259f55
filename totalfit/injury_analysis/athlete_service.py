"""
Athlete injury-analysis service.

Turns logged activities into per-body-part daily workload rows and
athlete-level risk snapshots:

1. Each activity is resolved to the body parts it loads.
2. For every body part the session workload is added to that day's row,
   and the rolling 7/30-day loads, recovery rate and injury risk are
   recomputed from the previous training days.
3. The day's body-part risks are rolled up into an ``InjuryRiskSnapshot``.

Editing or deleting an activity rebuilds the rows of the affected day by
replaying the activities that remain on it.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from totalfit.core import clock
from totalfit.core.database.entities.activity_logs import ActivityLog
from totalfit.core.database.entities.body_part_workloads import BodyPartWorkload
from totalfit.core.database.entities.injury_risk_snapshots import InjuryRiskSnapshot
from totalfit.core.database.repositories import (
    ActivityLogRepository,
    AthleteRepository,
    BodyPartWorkloadRepository,
    InjuryHistoryRepository,
    InjuryRiskSnapshotRepository,
)
from totalfit.core.errors import NotFoundError, ValidationFailedError
from totalfit.core.logging_config import get_logger

from .body_part_mapping import (
    EXERCISE_BODY_PART_MAP,
    get_affected_body_parts,
    get_body_part_intensity_multiplier,
)
from .constants import (
    DEFAULT_DAYS_SINCE_LAST_ACTIVITY,
    HIGH_RISK_BODY_PART,
    INTENSITY_MULTIPLIERS,
    MEDIUM_RISK_BODY_PART,
)
from .injury_risk import calculate_injury_risk_percentage, get_risk_level
from .recommendations import generate_athlete_recommendations, generate_body_part_recommendations, generate_risk_message
from .workload import calculate_body_part_workload, calculate_recovery_rate

logger = get_logger(__name__)

# Fields a client may not overwrite on an existing activity
PROTECTED_ACTIVITY_FIELDS = ("id", "athlete_id", "created_at", "updated_at")

# Fields whose change alters which body parts an activity loads
BODY_PART_SOURCE_FIELDS = ("activity_type", "exercises", "workout_type", "sport", "position")


def _as_mapping(activity: ActivityLog | Mapping[str, Any]) -> Mapping[str, Any]:
    if isinstance(activity, ActivityLog):
        return activity.model_dump()
    return activity


def _is_nullable_activity_field(name: str) -> bool:
    field = ActivityLog.model_fields.get(name)
    return field is None or field.default is None


def validate_activity(data: Mapping[str, Any]) -> ActivityLog:
    """Build an ``ActivityLog`` from request values.

    Raises:
        ValidationFailedError: A value does not fit the stored column
    """
    try:
        return ActivityLog.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in e.errors())
        raise ValidationFailedError(f"Invalid activity: {problems}") from e


def default_intensity(activity: Mapping[str, Any]) -> str:
    """Intensity assumed when none is logged: sports sessions count as hard."""
    if activity.get("intensity_level"):
        return activity["intensity_level"]
    return "hard" if activity.get("activity_type") == "sports" else "moderate"


def body_part_session_workload(body_part: str, activity: Mapping[str, Any]) -> float:
    """Workload one activity puts on ``body_part``.

    Workouts with catalogued exercises sum the exercises that hit the body
    part, spreading the session duration evenly over the exercises. Other
    workouts, and sports sessions, are scored as one block.
    """
    activity_type = activity.get("activity_type")
    duration = activity.get("duration") or 0
    exercises = activity.get("exercises") or []

    if activity_type == "workout" and exercises:
        per_exercise_duration = duration / len(exercises)
        total = 0.0
        matched = False
        for exercise in exercises:
            if body_part not in EXERCISE_BODY_PART_MAP.get(exercise.get("exercise") or "", []):
                continue
            matched = True
            base = calculate_body_part_workload(
                intensity=exercise.get("intensity") or activity.get("intensity_level") or "moderate",
                duration=per_exercise_duration,
                recovery_status=activity.get("recovery_status"),
                sets=exercise.get("sets") or 0,
                reps=exercise.get("reps") or 0,
                weight=exercise.get("weight") or 0,
            )
            total += base * get_body_part_intensity_multiplier(body_part, {**activity, "exercises": [exercise]})
        if matched:
            return total

    if activity_type == "sports":
        base = calculate_body_part_workload(
            intensity=default_intensity(activity),
            duration=activity.get("minutes_played") or duration,
            recovery_status=activity.get("recovery_status"),
            sport=activity.get("sport"),
            match_type=activity.get("match_type"),
        )
        return base * get_body_part_intensity_multiplier(body_part, activity)

    if activity_type == "workout":
        # Logged by workout type only, or none of the exercises are catalogued
        base = calculate_body_part_workload(
            intensity=default_intensity(activity),
            duration=duration,
            recovery_status=activity.get("recovery_status"),
        )
        return base * get_body_part_intensity_multiplier(body_part, activity)

    return 0.0


def workload_to_risk_entry(workload: BodyPartWorkload) -> Dict[str, Any]:
    """Coach-facing risk summary for one body-part row."""
    return {
        "part": workload.body_part,
        "risk": workload.risk_level,
        "percentage": workload.injury_risk_percentage,
        "message": generate_risk_message(workload),
        "recommendations": generate_body_part_recommendations(workload.body_part, workload.injury_risk_percentage),
    }


class AthleteService:
    """Service for athlete activity logging and injury-risk bookkeeping."""

    def __init__(self, session: AsyncSession):
        """Initialize the service with a database session."""
        self.session = session
        self.athletes = AthleteRepository(session)
        self.activities = ActivityLogRepository(session)
        self.workloads = BodyPartWorkloadRepository(session)
        self.snapshots = InjuryRiskSnapshotRepository(session)
        self.injuries = InjuryHistoryRepository(session)

    # ------------------------------------------------------------------
    # Workload and risk calculation
    # ------------------------------------------------------------------

    async def update_body_part_workloads(
        self, athlete_id: str, body_parts: Iterable[str], activity: ActivityLog | Mapping[str, Any]
    ) -> List[BodyPartWorkload]:
        """Add one activity's load to the athlete's body-part rows for the activity date.

        A body part whose update fails is logged and skipped; the remaining
        parts are still processed.

        Args:
            athlete_id: Athlete the activity belongs to
            body_parts: Body parts the activity loads
            activity: The stored activity or its field mapping

        Returns:
            The upserted workload rows
        """
        fields = _as_mapping(activity)
        day: date = fields.get("date") or clock.utc_today()
        session_intensity = INTENSITY_MULTIPLIERS.get(default_intensity(fields), 1.0)
        updates: List[BodyPartWorkload] = []
        rolled_back = False

        for body_part in body_parts:
            try:
                row = await self._apply_session_to_body_part(
                    athlete_id, body_part, day, fields, session_intensity
                )
                updates.append(row)
            except Exception as e:
                await self.session.rollback()
                rolled_back = True
                logger.error(f"Error updating workload for {body_part} of athlete {athlete_id}: {e}", exc_info=True)

        if rolled_back:
            # The rollback expired every loaded instance; reload the ones handed back to callers
            survivors: List[Any] = list(updates)
            if isinstance(activity, ActivityLog) and activity in self.session:
                survivors.append(activity)
            for instance in survivors:
                await self.session.refresh(instance)

        return updates

    async def _apply_session_to_body_part(
        self,
        athlete_id: str,
        body_part: str,
        day: date,
        activity: Mapping[str, Any],
        session_intensity: float,
    ) -> BodyPartWorkload:
        session_score = body_part_session_workload(body_part, activity)

        # Rows written by the daily recovery job (no sessions) carry no load of their own
        today = await self.workloads.get_for_day(athlete_id, body_part, day)
        trained_today = today is not None and today.activity_count > 0
        sessions_today = today.activity_count if trained_today else 0

        history = await self.workloads.history_before(athlete_id, body_part, day, since=day - timedelta(days=29))
        week = [row for row in history if row.date > day - timedelta(days=7)]

        workload_score = round((today.workload_score if trained_today else 0.0) + session_score, 1)
        cumulative_7day = round(sum(row.workload_score for row in week) + workload_score, 1)
        cumulative_30day = round(sum(row.workload_score for row in history) + workload_score, 1)

        if trained_today:
            days_since_last_activity = 0
        else:
            last = await self.workloads.latest_training_before(athlete_id, body_part, day)
            days_since_last_activity = (day - last.date).days if last else DEFAULT_DAYS_SINCE_LAST_ACTIVITY
        recovery_rate = calculate_recovery_rate(days_since_last_activity)

        weekly_sessions = sum(row.activity_count for row in week) + sessions_today + 1
        has_active_injury = await self.injuries.has_active_injury(athlete_id, body_part)

        risk = calculate_injury_risk_percentage(
            current_workload=workload_score,
            cumulative_7day=cumulative_7day,
            cumulative_30day=cumulative_30day,
            recovery_rate=recovery_rate,
            activity_count=weekly_sessions,
            has_active_injury=has_active_injury,
        )

        avg_intensity = session_intensity
        if trained_today:
            avg_intensity = (today.avg_intensity * sessions_today + session_intensity) / (sessions_today + 1)

        return await self.workloads.upsert(
            athlete_id,
            body_part,
            day,
            {
                "workload_score": workload_score,
                "cumulative_7day": cumulative_7day,
                "cumulative_30day": cumulative_30day,
                "injury_risk_percentage": risk,
                "risk_level": get_risk_level(risk),
                "recovery_rate": recovery_rate,
                "days_since_last_activity": 0,
                "activity_count": sessions_today + 1,
                "total_duration": (today.total_duration if trained_today else 0) + (activity.get("duration") or 0),
                "avg_intensity": round(avg_intensity, 2),
            },
        )

    async def calculate_athlete_injury_risk(
        self, athlete_id: str, target_date: Optional[date] = None
    ) -> Optional[InjuryRiskSnapshot]:
        """Roll the athlete's body-part risks for a day up into a stored snapshot.

        Args:
            athlete_id: Athlete to summarize
            target_date: Day to summarize, today by default

        Returns:
            The upserted snapshot, or None when the athlete has no workload rows that day
        """
        day = target_date or clock.utc_today()
        workloads = await self.workloads.list_for_date(athlete_id, day)
        if not workloads:
            return None

        risks = [w.injury_risk_percentage for w in workloads]
        overall_risk = int(sum(risks) / len(risks) + 0.5)
        high_risk_parts = [w.body_part for w in workloads if w.injury_risk_percentage >= HIGH_RISK_BODY_PART]
        medium_risk_parts = [
            w.body_part
            for w in workloads
            if MEDIUM_RISK_BODY_PART <= w.injury_risk_percentage < HIGH_RISK_BODY_PART
        ]
        training_load = sum(w.cumulative_7day for w in workloads) / len(workloads)
        avg_recovery = sum(w.recovery_rate for w in workloads) / len(workloads)

        return await self.snapshots.upsert(
            athlete_id,
            day,
            {
                "overall_risk_score": overall_risk,
                "risk_level": get_risk_level(overall_risk),
                "training_load_score": round(training_load, 1),
                "fatigue_index": round(100 - avg_recovery, 1),
                "recovery_score": round(avg_recovery, 1),
                "high_risk_body_parts": high_risk_parts,
                "medium_risk_body_parts": medium_risk_parts,
                "recommendations": generate_athlete_recommendations(overall_risk, high_risk_parts, avg_recovery),
            },
        )

    async def rebuild_day(self, athlete_id: str, day: date, body_parts: Iterable[str]) -> Optional[InjuryRiskSnapshot]:
        """Recompute the rows of ``body_parts`` on ``day`` from the activities stored for that day.

        Returns:
            The refreshed snapshot, or None when no workload rows remain that day
        """
        parts = set(body_parts)
        await self.workloads.delete_for_day(athlete_id, parts, day)

        # Replay from plain values so a failed body part cannot expire the activities still to replay
        replays = [activity.model_dump() for activity in await self.activities.list_on_date(athlete_id, day)]
        for activity in replays:
            replay_parts = [part for part in activity["affected_body_parts"] if part in parts]
            if replay_parts:
                await self.update_body_part_workloads(athlete_id, replay_parts, activity)

        snapshot = await self.calculate_athlete_injury_risk(athlete_id, day)
        if snapshot is None:
            await self.snapshots.delete_for_date(athlete_id, day)
        return snapshot

    async def recalculate_after_activity_removal(self, activity: ActivityLog) -> Optional[InjuryRiskSnapshot]:
        """Rebuild the day of an activity that is no longer stored."""
        return await self.rebuild_day(activity.athlete_id, activity.date, activity.affected_body_parts)

    # ------------------------------------------------------------------
    # Activity lifecycle
    # ------------------------------------------------------------------

    async def log_activity(
        self, payload: Mapping[str, Any]
    ) -> Tuple[ActivityLog, List[BodyPartWorkload], Optional[InjuryRiskSnapshot]]:
        """Store an activity and update the athlete's workloads and risk snapshot.

        Raises:
            ValidationFailedError: ``athlete_id`` or ``activity_type`` is missing
            NotFoundError: The athlete does not exist
        """
        athlete_id = payload.get("athlete_id")
        if not athlete_id or not payload.get("activity_type"):
            raise ValidationFailedError("athlete_id and activity_type are required")
        if await self.athletes.get_by_id(athlete_id) is None:
            raise NotFoundError(f"Athlete {athlete_id} not found")

        data = {key: value for key, value in payload.items() if value is not None}
        data.setdefault("date", clock.utc_today())
        data.setdefault("recovery_status", "normal")
        if not data.get("affected_body_parts"):
            data["affected_body_parts"] = get_affected_body_parts(data)

        activity = await self.activities.create(validate_activity(data))
        day, body_parts = activity.date, list(activity.affected_body_parts)
        logger.info(
            f"Logged {activity.activity_type} activity {activity.id} for athlete {athlete_id} "
            f"affecting {len(body_parts)} body parts"
        )

        workload_updates = await self.update_body_part_workloads(athlete_id, body_parts, activity)
        injury_risk = await self.calculate_athlete_injury_risk(athlete_id, day)
        return activity, workload_updates, injury_risk

    async def get_activity(self, activity_id: str) -> ActivityLog:
        activity = await self.activities.get_by_id(activity_id)
        if activity is None:
            raise NotFoundError("Activity not found")
        return activity

    async def update_activity(
        self, activity_id: str, changes: Mapping[str, Any]
    ) -> Tuple[ActivityLog, Optional[InjuryRiskSnapshot]]:
        """Apply a partial update to an activity and rebuild the affected day(s).

        Body parts are re-detected when the update changes what the activity
        consists of and does not name the body parts explicitly.
        """
        activity = await self.get_activity(activity_id)
        old_date = activity.date
        old_parts = list(activity.affected_body_parts)

        values = {
            key: value
            for key, value in changes.items()
            if key not in PROTECTED_ACTIVITY_FIELDS and (value is not None or _is_nullable_activity_field(key))
        }
        merged = validate_activity({**activity.model_dump(), **values})
        values = {key: getattr(merged, key) for key in values if key in ActivityLog.model_fields}
        if "affected_body_parts" not in values and any(key in values for key in BODY_PART_SOURCE_FIELDS):
            values["affected_body_parts"] = get_affected_body_parts(merged.model_dump())

        activity = await self.activities.update_fields(activity, values)
        athlete_id, day, parts = activity.athlete_id, activity.date, set(activity.affected_body_parts)

        if day != old_date:
            await self.rebuild_day(athlete_id, old_date, old_parts)
            old_parts = []
        injury_risk = await self.rebuild_day(athlete_id, day, set(old_parts) | parts)
        await self.session.refresh(activity)
        return activity, injury_risk

    async def delete_activity(self, activity_id: str) -> str:
        """Delete an activity and rebuild the workloads of its day.

        Returns:
            The ID of the athlete the activity belonged to
        """
        activity = await self.get_activity(activity_id)
        athlete_id = activity.athlete_id
        removed = ActivityLog.model_validate(activity.model_dump())
        await self.activities.delete(activity_id)
        await self.recalculate_after_activity_removal(removed)
        logger.info(f"Deleted activity {activity_id} of athlete {athlete_id}")
        return athlete_id

    # ------------------------------------------------------------------
    # Read models
    # ------------------------------------------------------------------

    async def get_injury_risk_overview(self, athlete_id: str, target_date: Optional[date] = None) -> Dict[str, Any]:
        """Body-part risks, the stored snapshot and the raw rows for one day."""
        day = target_date or clock.utc_today()
        workloads = await self.workloads.list_for_date(athlete_id, day)
        snapshot = await self.snapshots.get_for_date(athlete_id, day)
        return {
            "body_part_risks": [workload_to_risk_entry(w) for w in workloads],
            "overall_risk": snapshot,
            "workloads": workloads,
        }
