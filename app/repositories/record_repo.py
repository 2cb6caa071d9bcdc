"""Record store: append-only personal records."""

from __future__ import annotations

import uuid

from sqlalchemy import select

from app.core.enums import RecordType
from app.models.record import PersonalRecord
from app.repositories.base import BaseRepository, storage_errors


class RecordRepository(BaseRepository):
    async def list_by_exercise(
        self,
        user_id: uuid.UUID,
        exercise_id: uuid.UUID,
        *,
        record_type: RecordType | None = None,
        limit: int | None = None,
    ) -> list[PersonalRecord]:
        """Records for one exercise, newest first."""
        stmt = select(PersonalRecord).where(
            PersonalRecord.user_id == user_id,
            PersonalRecord.exercise_id == exercise_id,
        )
        if record_type is not None:
            stmt = stmt.where(PersonalRecord.record_type == record_type)
        stmt = stmt.order_by(PersonalRecord.achieved_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        with storage_errors("list records by exercise"):
            result = await self.db.execute(stmt)
            return list(result.scalars().all())

    async def list_by_user(
        self,
        user_id: uuid.UUID,
        *,
        record_type: RecordType | None = None,
        limit: int | None = None,
    ) -> list[PersonalRecord]:
        """All records for a user, newest first."""
        stmt = select(PersonalRecord).where(PersonalRecord.user_id == user_id)
        if record_type is not None:
            stmt = stmt.where(PersonalRecord.record_type == record_type)
        stmt = stmt.order_by(PersonalRecord.achieved_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        with storage_errors("list records"):
            result = await self.db.execute(stmt)
            return list(result.scalars().all())

    async def add_record(self, record: PersonalRecord) -> PersonalRecord:
        """Insert one record. Existing rows are never touched."""
        with storage_errors(f"save {record.record_type.value} record"):
            return await self.add_and_flush(record)
