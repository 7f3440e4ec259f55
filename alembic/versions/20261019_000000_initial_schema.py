"""Initial schema for TotalFit

Revision ID: 20261019_000000
Revises: None
Create Date: 2026-10-19 00:00:00.000000

Creates the tables behind the TotalFit backend:
- users (Google-authenticated accounts)
- health_metrics (manually logged daily wellness metrics)
- athletes, activity_logs, injury_history (coach athlete management)
- body_part_workload, injury_risk_snapshots (injury-analysis results)

JSON columns use the generic ``sa.JSON`` type so the schema also builds on
SQLite for local development.

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        "users",
        sa.Column("id", sa.String(128), nullable=False),
        sa.Column("google_id", sa.String(128), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("name", sa.String(256), nullable=True),
        sa.Column("picture_url", sa.String(), nullable=True),
        sa.Column("access_token", sa.String(), nullable=True),
        sa.Column("refresh_token", sa.String(), nullable=True),
        sa.Column("last_sync_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_users_google_id", "google_id", unique=True),
    )

    op.create_table(
        "health_metrics",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("steps", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("active_minutes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("heart_rate", sa.Integer(), nullable=True),
        sa.Column("sleep_hours", sa.Float(), nullable=True),
        sa.Column("calories_burned", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("workout_sessions", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "date", name="uq_health_metrics_user_date"),
        sa.Index("ix_health_metrics_user_id", "user_id"),
        sa.Index("ix_health_metrics_date", "date"),
    )

    op.create_table(
        "athletes",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(128), nullable=True),
        sa.Column("name", sa.String(256), nullable=False),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("position", sa.String(128), nullable=True),
        sa.Column("height", sa.String(32), nullable=True),
        sa.Column("weight", sa.String(32), nullable=True),
        sa.Column("primary_sport", sa.String(128), nullable=True),
        sa.Column("team", sa.String(256), nullable=True),
        sa.Column("status", sa.String(32), nullable=False, server_default="active"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_athletes_user_id", "user_id"),
        sa.Index("ix_athletes_created_at", "created_at"),
    )

    op.create_table(
        "activity_logs",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("athlete_id", sa.String(64), nullable=False),
        sa.Column("activity_type", sa.String(16), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.String(16), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("workout_type", sa.String(64), nullable=True),
        sa.Column("exercises", sa.JSON(), nullable=False),
        sa.Column("equipment_used", sa.JSON(), nullable=False),
        sa.Column("sport", sa.String(64), nullable=True),
        sa.Column("position", sa.String(64), nullable=True),
        sa.Column("match_type", sa.String(32), nullable=True),
        sa.Column("location", sa.String(256), nullable=True),
        sa.Column("opponent", sa.String(256), nullable=True),
        sa.Column("result", sa.String(64), nullable=True),
        sa.Column("minutes_played", sa.Integer(), nullable=True),
        sa.Column("intensity_level", sa.String(16), nullable=True),
        sa.Column("performance_metrics", sa.JSON(), nullable=False),
        sa.Column("injuries", sa.JSON(), nullable=False),
        sa.Column("medical_attention", sa.String(), nullable=True),
        sa.Column("surface_type", sa.String(64), nullable=True),
        sa.Column("weather_conditions", sa.String(64), nullable=True),
        sa.Column("heart_rate_avg", sa.Integer(), nullable=True),
        sa.Column("heart_rate_max", sa.Integer(), nullable=True),
        sa.Column("calories_burned", sa.Integer(), nullable=True),
        sa.Column("affected_body_parts", sa.JSON(), nullable=False),
        sa.Column("recovery_status", sa.String(32), nullable=False, server_default="normal"),
        sa.Column("fatigue_level", sa.Integer(), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("coach_feedback", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_activity_logs_athlete_id", "athlete_id"),
        sa.Index("ix_activity_logs_date", "date"),
    )

    op.create_table(
        "body_part_workload",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("athlete_id", sa.String(64), nullable=False),
        sa.Column("body_part", sa.String(32), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("workload_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("cumulative_7day", sa.Float(), nullable=False, server_default="0"),
        sa.Column("cumulative_30day", sa.Float(), nullable=False, server_default="0"),
        sa.Column("injury_risk_percentage", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("risk_level", sa.String(16), nullable=False, server_default="minimal"),
        sa.Column("recovery_rate", sa.Float(), nullable=False, server_default="100"),
        sa.Column("days_since_last_activity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("activity_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_duration", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("avg_intensity", sa.Float(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("athlete_id", "body_part", "date", name="uq_body_part_workload_athlete_part_date"),
        sa.Index("ix_body_part_workload_athlete_id", "athlete_id"),
        sa.Index("ix_body_part_workload_body_part", "body_part"),
        sa.Index("ix_body_part_workload_date", "date"),
    )

    op.create_table(
        "injury_risk_snapshots",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("athlete_id", sa.String(64), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("overall_risk_score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("risk_level", sa.String(16), nullable=False, server_default="minimal"),
        sa.Column("training_load_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("fatigue_index", sa.Float(), nullable=False, server_default="0"),
        sa.Column("recovery_score", sa.Float(), nullable=False, server_default="100"),
        sa.Column("high_risk_body_parts", sa.JSON(), nullable=False),
        sa.Column("medium_risk_body_parts", sa.JSON(), nullable=False),
        sa.Column("recommendations", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("athlete_id", "date", name="uq_injury_risk_snapshots_athlete_date"),
        sa.Index("ix_injury_risk_snapshots_athlete_id", "athlete_id"),
        sa.Index("ix_injury_risk_snapshots_date", "date"),
    )

    op.create_table(
        "injury_history",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("athlete_id", sa.String(64), nullable=False),
        sa.Column("body_part", sa.String(32), nullable=False),
        sa.Column("injury_type", sa.String(128), nullable=True),
        sa.Column("severity", sa.String(32), nullable=True),
        sa.Column("mechanism", sa.String(256), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="active"),
        sa.Column("date_occurred", sa.Date(), nullable=True),
        sa.Column("date_recovered", sa.Date(), nullable=True),
        sa.Column("activity_id", sa.String(64), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_injury_history_athlete_id", "athlete_id"),
        sa.Index("ix_injury_history_body_part", "body_part"),
    )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("injury_history")
    op.drop_table("injury_risk_snapshots")
    op.drop_table("body_part_workload")
    op.drop_table("activity_logs")
    op.drop_table("athletes")
    op.drop_table("health_metrics")
    op.drop_table("users")
