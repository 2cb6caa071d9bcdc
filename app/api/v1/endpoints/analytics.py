"""Data insights: workout stats, exercise progress, volume and frequency series."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import DEFAULT_FREQUENCY_DAYS
from app.db.session import get_db
from app.schemas.stats import ExerciseProgress, ProgressPoint, WorkoutStats
from app.services.stats_aggregator import (
    get_exercise_progress,
    get_volume_progress,
    get_workout_frequency,
    get_workout_stats,
)

router = APIRouter()


@router.get("/stats", response_model=WorkoutStats)
async def workout_stats(user_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """Summary stats; all zeros/empty for a user with no history."""
    return await get_workout_stats(db, user_id)


@router.get("/exercises/{exercise_id}/progress", response_model=ExerciseProgress)
async def exercise_progress(
    user_id: uuid.UUID,
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    progress = await get_exercise_progress(db, user_id, exercise_id)
    if progress is None:
        raise HTTPException(status_code=404, detail="No sessions found for this exercise")
    return progress


@router.get("/analytics/volume", response_model=list[ProgressPoint])
async def volume_progress(user_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """Volume per finished session, oldest first."""
    return await get_volume_progress(db, user_id)


@router.get("/analytics/frequency", response_model=list[ProgressPoint])
async def workout_frequency(
    user_id: uuid.UUID,
    days: int = Query(DEFAULT_FREQUENCY_DAYS, ge=1, le=366),
    db: AsyncSession = Depends(get_db),
):
    """Finished sessions per day over the last ``days`` days, zero-filled."""
    return await get_workout_frequency(db, user_id, days)
