"""
Daily recovery endpoint.

Meant to be called once a day by a scheduler; decays every body part's load
for the days since its last record and refreshes the affected snapshots.
"""

from typing import List

from fastapi import APIRouter

from totalfit.core.models.io.common import Envelope
from totalfit.core.models.io.injuries import BodyPartWorkloadRead
from totalfit.injury_analysis import apply_daily_recovery
from totalfit.server.services.deps import SessionDep

router = APIRouter(tags=["injury-analysis"])


@router.post(
    "/recovery/daily-update",
    response_model=Envelope[List[BodyPartWorkloadRead]],
    summary="Run Daily Recovery",
)
async def daily_recovery_update(session: SessionDep):
    rows = await apply_daily_recovery(session)
    return Envelope(
        data=[BodyPartWorkloadRead.model_validate(r) for r in rows],
        message=f"Updated recovery rates for {len(rows)} body parts",
    )
