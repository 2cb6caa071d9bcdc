"""Personal record endpoints: check a completed set, list and chart records."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import RecordType
from app.db.session import get_db
from app.repositories.record_repo import RecordRepository
from app.schemas.record import PersonalBests, PersonalRecordRead, RecordCheckRequest
from app.schemas.stats import ProgressPoint
from app.services.record_engine import check_for_new_record
from app.services.stats_aggregator import get_personal_bests, get_strength_progress

router = APIRouter()


@router.post("/records/check", response_model=list[PersonalRecordRead])
async def check_set(
    user_id: uuid.UUID,
    payload: RecordCheckRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Called when a set is marked complete. Returns the records it set (possibly none).
    Sets missing weight or reps never produce a record.
    """
    return await check_for_new_record(
        db,
        user_id,
        payload.exercise_id,
        payload.exercise_name,
        payload,
    )


@router.get("/records", response_model=list[PersonalRecordRead])
async def list_records(
    user_id: uuid.UUID,
    record_type: RecordType | None = None,
    limit: int = 50,
    db: AsyncSession = Depends(get_db),
):
    """All records for the user, newest first."""
    records = await RecordRepository(db).list_by_user(user_id, record_type=record_type, limit=limit)
    return [PersonalRecordRead.model_validate(r) for r in records]


@router.get("/exercises/{exercise_id}/personal-bests", response_model=PersonalBests)
async def personal_bests(
    user_id: uuid.UUID,
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    return await get_personal_bests(db, user_id, exercise_id)


@router.get("/exercises/{exercise_id}/strength-progress", response_model=list[ProgressPoint])
async def strength_progress(
    user_id: uuid.UUID,
    exercise_id: uuid.UUID,
    record_type: RecordType = RecordType.MAX_WEIGHT,
    db: AsyncSession = Depends(get_db),
):
    """Chronological record values of one category, for charting."""
    return await get_strength_progress(db, user_id, exercise_id, record_type)
