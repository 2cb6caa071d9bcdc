"""Workout streak tracking: consecutive days with at least one finished session."""

from __future__ import annotations

import logging
import uuid
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import OutOfOrderWorkoutError, StorageError
from app.repositories.streak_repo import StreakRepository
from app.schemas.streak import WorkoutStreakRead
from app.services.locks import KeyedLock

logger = logging.getLogger(__name__)

# A gap of at most this many days keeps the streak alive
MAX_GAP_DAYS = 1

# Serialises updates per user_id
streak_locks = KeyedLock()


async def update_streak_for_workout(
    db: AsyncSession,
    user_id: uuid.UUID,
    workout_date: date,
) -> WorkoutStreakRead:
    """
    Extend, break or start the user's streak for a finished session on ``workout_date``.

    Dates must arrive in non-decreasing order. A date before the current streak's end
    raises OutOfOrderWorkoutError and changes nothing. Same-day repeats still count.
    Closing the old streak and opening the new one are committed together.
    """
    repo = StreakRepository(db)
    async with streak_locks.hold(user_id):
        current = await repo.get_current(user_id)

        if current is None:
            streak = await repo.start_streak(user_id, workout_date)
            logger.debug("Started streak for user %s on %s", user_id, workout_date)
        else:
            last = current.end_date or current.start_date
            days_diff = (workout_date - last).days
            if days_diff < 0:
                raise OutOfOrderWorkoutError(workout_date, last)
            if days_diff <= MAX_GAP_DAYS:
                streak = await repo.extend_streak(current, workout_date)
            else:
                try:
                    await repo.close_streak(current)
                    streak = await repo.start_streak(user_id, workout_date)
                except StorageError:
                    await db.rollback()
                    raise
                logger.info(
                    "Streak for user %s ended at %d workouts (%s..%s)",
                    user_id, current.workout_count, current.start_date, last,
                )

        await repo.commit()
        return WorkoutStreakRead.model_validate(streak)


async def get_current_streak(db: AsyncSession, user_id: uuid.UUID) -> WorkoutStreakRead | None:
    current = await StreakRepository(db).get_current(user_id)
    return WorkoutStreakRead.model_validate(current) if current else None


async def list_streaks(db: AsyncSession, user_id: uuid.UUID) -> list[WorkoutStreakRead]:
    streaks = await StreakRepository(db).list_by_user(user_id)
    return [WorkoutStreakRead.model_validate(s) for s in streaks]
