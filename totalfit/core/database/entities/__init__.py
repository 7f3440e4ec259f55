"""
Database entity models.

Each module represents a single database table.

Modules:
- users: Google-authenticated users
- athletes: Athletes managed by a coach
- activity_logs: Workout and sports activity records
- body_part_workloads: Daily workload and risk per body part
- injury_risk_snapshots: Daily athlete-level risk summaries
- injury_history: Injuries per body part
- health_metrics: Manually logged daily wellness metrics
"""

from . import (
    activity_logs,
    athletes,
    body_part_workloads,
    health_metrics,
    injury_history,
    injury_risk_snapshots,
    users,
)

__all__ = [
    "activity_logs",
    "athletes",
    "body_part_workloads",
    "health_metrics",
    "injury_history",
    "injury_risk_snapshots",
    "users",
]
