"""
Database repository layer using SQLModel.

Each module provides async data access for its corresponding entity.

Modules:
- base: AsyncBaseRepository CRUD and QueryBuilder utilities
- users, athletes, activity_logs, body_part_workloads,
  injury_risk_snapshots, injury_history, health_metrics: per-table repositories
"""

from .activity_logs import ActivityLogRepository
from .athletes import AthleteRepository
from .base import AsyncBaseRepository, QueryBuilder
from .body_part_workloads import BodyPartWorkloadRepository
from .health_metrics import HealthMetricRepository
from .injury_history import InjuryHistoryRepository
from .injury_risk_snapshots import InjuryRiskSnapshotRepository
from .users import UserRepository

__all__ = [
    "ActivityLogRepository",
    "AsyncBaseRepository",
    "AthleteRepository",
    "BodyPartWorkloadRepository",
    "HealthMetricRepository",
    "InjuryHistoryRepository",
    "InjuryRiskSnapshotRepository",
    "QueryBuilder",
    "UserRepository",
]
