"""Derived statistics returned by the aggregator. Nothing here is persisted."""

import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from app.core.enums import ProgressTrend
from app.schemas.record import PersonalRecordRead


class FavoriteExercise(BaseModel):
    model_config = ConfigDict(frozen=True)

    exercise_id: UUID
    exercise_name: str
    session_count: int


class WorkoutStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_workouts: int = 0
    workouts_this_week: int = 0
    workouts_this_month: int = 0
    total_duration_minutes: int = 0
    average_duration_minutes: float = 0.0
    total_volume: float = 0.0
    current_streak: int = 0
    longest_streak: int = 0
    favorite_exercises: list[FavoriteExercise] = []
    recent_records: list[PersonalRecordRead] = []


class ExerciseProgress(BaseModel):
    model_config = ConfigDict(frozen=True)

    exercise_id: UUID
    exercise_name: str
    total_sessions: int
    total_sets: int
    total_volume: float
    max_weight: float | None = None
    max_reps: int | None = None
    best_estimated_1rm: float | None = None
    last_performed: datetime.date | None = None
    trend: ProgressTrend = ProgressTrend.NEW
    recent_records: list[PersonalRecordRead] = []


class ProgressPoint(BaseModel):
    """One point of a chart series."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    value: float
    session_id: UUID | None = None
    set_id: UUID | None = None
    weight: float | None = None
    reps: int | None = None


class SessionSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_sets: int
    total_reps: int
    total_weight: float
    total_volume: float
    duration_minutes: int
    exercise_count: int
