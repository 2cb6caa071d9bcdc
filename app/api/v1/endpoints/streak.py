"""Streak endpoints."""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.streak import WorkoutLogged, WorkoutStreakRead
from app.services.streak_engine import get_current_streak, update_streak_for_workout

router = APIRouter()


@router.post("/streak/workouts", response_model=WorkoutStreakRead)
async def log_workout(
    user_id: uuid.UUID,
    payload: WorkoutLogged,
    db: AsyncSession = Depends(get_db),
):
    """
    Called when a session is finished. Extends the current streak when the date is the
    same or next day, otherwise closes it and starts a new one.
    Dates earlier than the current streak's end are rejected with 409.
    """
    return await update_streak_for_workout(db, user_id, payload.workout_date)


@router.get("/streak", response_model=Optional[WorkoutStreakRead])
async def current_streak(user_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """The current streak, or null when the user has none."""
    return await get_current_streak(db, user_id)
