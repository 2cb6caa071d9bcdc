"""PersonalRecord model - append-only PR history."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Float, Index, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.core.enums import RecordType
from app.db.base import Base


class PersonalRecord(Base):
    """A best-ever value in one category, with the value it superseded.

    Rows are only ever inserted; history is kept for charting.
    """

    __tablename__ = "personal_records"
    __table_args__ = (
        Index("ix_personal_records_user_exercise", "user_id", "exercise_id"),
        Index("ix_personal_records_user_type", "user_id", "record_type"),
        Index("ix_personal_records_user_achieved", "user_id", "achieved_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    exercise_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    exercise_name: Mapped[str] = mapped_column(String(255), nullable=False)
    record_type: Mapped[RecordType] = mapped_column(Enum(RecordType), nullable=False)
    value: Mapped[float] = mapped_column(Float, nullable=False)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    achieved_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    session_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    set_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    previous_record: Mapped[float | None] = mapped_column(Float, nullable=True)
