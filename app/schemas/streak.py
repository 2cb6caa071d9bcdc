"""Workout streak schemas."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class WorkoutLogged(BaseModel):
    workout_date: date


class WorkoutStreakRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    user_id: UUID
    start_date: date
    end_date: date | None = None
    workout_count: int
    is_current: bool
