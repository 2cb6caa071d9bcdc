"""PR detection: record every category a completed set beats for its exercise."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import OneRepMaxFormula, RecordType
from app.models.record import PersonalRecord
from app.repositories.record_repo import RecordRepository
from app.schemas.record import PersonalRecordRead, SetData
from app.services.calculations import brzycki_eligible, calculate_one_rep_max, calculate_volume
from app.services.locks import KeyedLock

logger = logging.getLogger(__name__)

# Serialises checks per (user_id, exercise_id)
record_locks = KeyedLock()


def _best_value(records: list[PersonalRecord], record_type: RecordType) -> float | None:
    values = [r.value for r in records if r.record_type == record_type]
    return max(values) if values else None


def _max_reps_at_or_above(records: list[PersonalRecord], weight: float) -> int | None:
    """Most reps on any record for this exercise logged at a weight >= ``weight``."""
    reps = [
        r.reps
        for r in records
        if r.weight is not None and r.reps is not None and r.weight >= weight
    ]
    return max(reps) if reps else None


def evaluate_records(
    existing: list[PersonalRecord],
    weight: float,
    reps: int,
) -> list[tuple[RecordType, float, float | None]]:
    """
    Categories this weight/reps pair newly sets, as (type, value, previous value).
    Each category is judged on its own; a set can win all four.
    """
    wins: list[tuple[RecordType, float, float | None]] = []

    prev_weight = _best_value(existing, RecordType.MAX_WEIGHT)
    if prev_weight is None or weight > prev_weight:
        wins.append((RecordType.MAX_WEIGHT, weight, prev_weight))

    prev_reps = _max_reps_at_or_above(existing, weight)
    if reps > (prev_reps or 0):
        wins.append((RecordType.MAX_REPS, float(reps), prev_reps))

    volume = calculate_volume(weight, reps)
    prev_volume = _best_value(existing, RecordType.MAX_VOLUME)
    if prev_volume is None or volume > prev_volume:
        wins.append((RecordType.MAX_VOLUME, volume, prev_volume))

    # Brzycki breaks down at 37+ reps; such sets are not 1RM candidates
    if brzycki_eligible(reps):
        estimated = round(calculate_one_rep_max(weight, reps, OneRepMaxFormula.BRZYCKI), 2)
        prev_1rm = _best_value(existing, RecordType.BEST_ESTIMATED_1RM)
        if prev_1rm is None or estimated > prev_1rm:
            wins.append((RecordType.BEST_ESTIMATED_1RM, estimated, prev_1rm))

    return wins


async def check_for_new_record(
    db: AsyncSession,
    user_id: uuid.UUID,
    exercise_id: uuid.UUID,
    exercise_name: str,
    set_data: SetData,
) -> list[PersonalRecordRead]:
    """
    Compare a completed set against the exercise's record history and persist each
    category it beats. Returns the records created (empty when weight or reps is missing
    or zero). Each record is committed on its own, so a storage failure midway keeps
    earlier ones.
    """
    # A zero-rep or zero-weight set is not a lift
    if not set_data.weight or not set_data.reps:
        return []
    weight = float(set_data.weight)
    reps = int(set_data.reps)
    achieved_at = set_data.achieved_at or datetime.now(timezone.utc)

    repo = RecordRepository(db)
    created: list[PersonalRecordRead] = []
    async with record_locks.hold((user_id, exercise_id)):
        existing = await repo.list_by_exercise(user_id, exercise_id)
        for record_type, value, previous in evaluate_records(existing, weight, reps):
            record = PersonalRecord(
                user_id=user_id,
                exercise_id=exercise_id,
                exercise_name=exercise_name,
                record_type=record_type,
                value=value,
                weight=weight,
                reps=reps,
                achieved_at=achieved_at,
                session_id=set_data.session_id,
                set_id=set_data.set_id,
                previous_record=previous,
            )
            await repo.add_record(record)
            await repo.commit()
            created.append(PersonalRecordRead.model_validate(record))
            logger.info(
                "New %s record for user %s exercise %s: %s (previous %s)",
                record_type.value, user_id, exercise_id, value, previous,
            )
    return created
