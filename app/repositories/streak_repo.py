"""Streak store."""

from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import select

from app.core.exceptions import InvariantViolationError
from app.models.streak import WorkoutStreak
from app.repositories.base import BaseRepository, storage_errors


class StreakRepository(BaseRepository):
    async def get_current(self, user_id: uuid.UUID) -> WorkoutStreak | None:
        """The single current streak, or None. Two or more is a hard failure."""
        with storage_errors("load current streak"):
            result = await self.db.execute(
                select(WorkoutStreak).where(
                    WorkoutStreak.user_id == user_id,
                    WorkoutStreak.is_current.is_(True),
                )
            )
            current = list(result.scalars().all())
        if len(current) > 1:
            raise InvariantViolationError(
                f"user {user_id} has {len(current)} streaks marked current"
            )
        return current[0] if current else None

    async def list_by_user(self, user_id: uuid.UUID) -> list[WorkoutStreak]:
        with storage_errors("list streaks"):
            result = await self.db.execute(
                select(WorkoutStreak)
                .where(WorkoutStreak.user_id == user_id)
                .order_by(WorkoutStreak.start_date)
            )
            return list(result.scalars().all())

    async def start_streak(self, user_id: uuid.UUID, workout_date: date) -> WorkoutStreak:
        streak = WorkoutStreak(
            user_id=user_id,
            start_date=workout_date,
            end_date=workout_date,
            workout_count=1,
            is_current=True,
        )
        with storage_errors("start streak"):
            return await self.add_and_flush(streak)

    async def extend_streak(self, streak: WorkoutStreak, end_date: date) -> WorkoutStreak:
        streak.end_date = end_date
        streak.workout_count += 1
        with storage_errors("extend streak"):
            await self.db.flush()
        return streak

    async def close_streak(self, streak: WorkoutStreak) -> WorkoutStreak:
        """Mark the streak finished; its end_date stays as last extended."""
        streak.is_current = False
        with storage_errors("close streak"):
            await self.db.flush()
        return streak
