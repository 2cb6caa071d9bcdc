"""Session store: completed workout sessions with their exercises and sets."""

from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.models.workout import SessionExercise, WorkoutSession
from app.repositories.base import BaseRepository, storage_errors


def _with_sets():
    return selectinload(WorkoutSession.exercises).selectinload(SessionExercise.sets)


class SessionRepository(BaseRepository):
    async def get(self, session_id: uuid.UUID) -> WorkoutSession | None:
        with storage_errors("load session"):
            result = await self.db.execute(
                select(WorkoutSession).where(WorkoutSession.id == session_id).options(_with_sets())
            )
            return result.scalar_one_or_none()

    async def list_by_user(
        self,
        user_id: uuid.UUID,
        *,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> list[WorkoutSession]:
        """Sessions for a user, newest first, with exercises and sets loaded."""
        stmt = select(WorkoutSession).where(WorkoutSession.user_id == user_id)
        if from_date:
            stmt = stmt.where(WorkoutSession.session_date >= from_date)
        if to_date:
            stmt = stmt.where(WorkoutSession.session_date <= to_date)
        stmt = stmt.options(_with_sets()).order_by(
            WorkoutSession.session_date.desc(), WorkoutSession.created_at.desc()
        )
        with storage_errors("list sessions"):
            result = await self.db.execute(stmt)
            return list(result.scalars().all())

    async def list_by_exercise(self, user_id: uuid.UUID, exercise_id: uuid.UUID) -> list[WorkoutSession]:
        """Sessions containing the exercise, oldest first."""
        containing = select(SessionExercise.session_id).where(SessionExercise.exercise_id == exercise_id)
        stmt = (
            select(WorkoutSession)
            .where(WorkoutSession.user_id == user_id, WorkoutSession.id.in_(containing))
            .options(_with_sets())
            .order_by(WorkoutSession.session_date, WorkoutSession.created_at)
        )
        with storage_errors("list sessions by exercise"):
            result = await self.db.execute(stmt)
            return list(result.scalars().all())

    async def add(self, session: WorkoutSession) -> WorkoutSession:
        with storage_errors("save session"):
            return await self.add_and_flush(session)
