"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Modules:
- common: Response envelope
- athletes, activities, injuries: Injury-analysis I/O models
- users, auth: Google sign-in and user records
- health_metrics: Manual wellness metrics and scores
- proxy: FatSecret/Clarifai proxy payloads
"""

from .activities import (
    ActivityLogCreate,
    ActivityLogRead,
    ActivityLogResult,
    ActivityLogUpdate,
    ActivityUpdateResult,
    ExerciseEntry,
)
from .athletes import AthleteCreate, AthleteRead, AthleteUpdate
from .auth import RefreshTokenRequest, RefreshTokenResponse, RevokeTokenRequest, TokenExchangeRequest
from .common import Envelope, ErrorResponse
from .health_metrics import HealthMetricCreate, HealthMetricRead, HealthScoreResponse, WellnessRiskResponse
from .injuries import (
    BodyPartRisk,
    BodyPartWorkloadRead,
    InjuryHistoryCreate,
    InjuryHistoryRead,
    InjuryHistoryUpdate,
    InjuryRiskOverview,
    InjuryRiskSnapshotRead,
    Recommendation,
)
from .proxy import ClarifaiRequest, FoodConcept
from .users import UserRead, UserUpsert, UserUpsertResponse

__all__ = [
    "ActivityLogCreate",
    "ActivityLogRead",
    "ActivityLogResult",
    "ActivityLogUpdate",
    "ActivityUpdateResult",
    "AthleteCreate",
    "AthleteRead",
    "AthleteUpdate",
    "BodyPartRisk",
    "BodyPartWorkloadRead",
    "ClarifaiRequest",
    "Envelope",
    "ErrorResponse",
    "ExerciseEntry",
    "FoodConcept",
    "HealthMetricCreate",
    "HealthMetricRead",
    "HealthScoreResponse",
    "InjuryHistoryCreate",
    "InjuryHistoryRead",
    "InjuryHistoryUpdate",
    "InjuryRiskOverview",
    "InjuryRiskSnapshotRead",
    "Recommendation",
    "RefreshTokenRequest",
    "RefreshTokenResponse",
    "RevokeTokenRequest",
    "TokenExchangeRequest",
    "UserRead",
    "UserUpsert",
    "UserUpsertResponse",
    "WellnessRiskResponse",
]
