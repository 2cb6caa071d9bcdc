"""WorkoutStreak model."""

from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import Boolean, Date, Index, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class WorkoutStreak(Base):
    """A run of workout days; at most one per user has is_current set."""

    __tablename__ = "workout_streaks"
    __table_args__ = (Index("ix_workout_streaks_user_current", "user_id", "is_current"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    workout_count: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    is_current: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
