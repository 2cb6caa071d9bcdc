"""Initial schema: sessions, exercises, sets, personal records, streaks.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

RECORD_TYPES = ("MAX_WEIGHT", "MAX_REPS", "MAX_VOLUME", "BEST_ESTIMATED_1RM")


def upgrade() -> None:
    op.create_table(
        "workout_sessions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("session_date", sa.Date(), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("ended_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_sessions")),
    )
    op.create_index("ix_workout_sessions_user_date", "workout_sessions", ["user_id", "session_date"])

    op.create_table(
        "session_exercises",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("session_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_id", sa.Uuid(), nullable=False),
        sa.Column("name_at_time", sa.String(length=255), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("notes", sa.String(length=500), nullable=True),
        sa.ForeignKeyConstraint(
            ["session_id"],
            ["workout_sessions.id"],
            name=op.f("fk_session_exercises_session_id_workout_sessions"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_session_exercises")),
    )
    op.create_index("ix_session_exercises_session_id", "session_exercises", ["session_id"])
    op.create_index("ix_session_exercises_exercise_id", "session_exercises", ["exercise_id"])

    op.create_table(
        "set_entries",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("session_exercise_id", sa.Uuid(), nullable=False),
        sa.Column("index", sa.Integer(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=True),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("rpe", sa.Integer(), nullable=True),
        sa.Column("is_warmup", sa.Boolean(), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.String(length=500), nullable=True),
        sa.ForeignKeyConstraint(
            ["session_exercise_id"],
            ["session_exercises.id"],
            name=op.f("fk_set_entries_session_exercise_id_session_exercises"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_set_entries")),
    )
    op.create_index("ix_set_entries_session_exercise_id", "set_entries", ["session_exercise_id"])

    op.create_table(
        "personal_records",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.Column("record_type", sa.Enum(*RECORD_TYPES, name="recordtype"), nullable=False),
        sa.Column("value", sa.Float(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("reps", sa.Integer(), nullable=True),
        sa.Column("achieved_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("session_id", sa.Uuid(), nullable=False),
        sa.Column("set_id", sa.Uuid(), nullable=False),
        sa.Column("previous_record", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_personal_records")),
    )
    op.create_index("ix_personal_records_user_exercise", "personal_records", ["user_id", "exercise_id"])
    op.create_index("ix_personal_records_user_type", "personal_records", ["user_id", "record_type"])
    op.create_index("ix_personal_records_user_achieved", "personal_records", ["user_id", "achieved_at"])

    op.create_table(
        "workout_streaks",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("workout_count", sa.Integer(), nullable=False),
        sa.Column("is_current", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_streaks")),
    )
    op.create_index("ix_workout_streaks_user_current", "workout_streaks", ["user_id", "is_current"])


def downgrade() -> None:
    op.drop_index("ix_workout_streaks_user_current", table_name="workout_streaks")
    op.drop_table("workout_streaks")
    op.drop_index("ix_personal_records_user_achieved", table_name="personal_records")
    op.drop_index("ix_personal_records_user_type", table_name="personal_records")
    op.drop_index("ix_personal_records_user_exercise", table_name="personal_records")
    op.drop_table("personal_records")
    if op.get_bind().dialect.name == "postgresql":
        op.execute("DROP TYPE IF EXISTS recordtype")
    op.drop_index("ix_set_entries_session_exercise_id", table_name="set_entries")
    op.drop_table("set_entries")
    op.drop_index("ix_session_exercises_exercise_id", table_name="session_exercises")
    op.drop_index("ix_session_exercises_session_id", table_name="session_exercises")
    op.drop_table("session_exercises")
    op.drop_index("ix_workout_sessions_user_date", table_name="workout_sessions")
    op.drop_table("workout_sessions")
