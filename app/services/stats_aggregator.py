"""Workout statistics, per-exercise progress and chart series over a user's history."""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import (
    DEFAULT_FREQUENCY_DAYS,
    EXERCISE_RECENT_RECORDS_LIMIT,
    FAVORITE_EXERCISES_LIMIT,
    MONTH_WINDOW_DAYS,
    RECENT_RECORDS_LIMIT,
    WEEK_WINDOW_DAYS,
)
from app.core.enums import OneRepMaxFormula, RecordType
from app.models.record import PersonalRecord
from app.models.workout import SessionExercise
from app.repositories.record_repo import RecordRepository
from app.repositories.session_repo import SessionRepository
from app.repositories.streak_repo import StreakRepository
from app.schemas.record import PersonalBests, PersonalRecordRead
from app.schemas.stats import ExerciseProgress, FavoriteExercise, ProgressPoint, WorkoutStats
from app.services.calculations import (
    brzycki_eligible,
    calculate_one_rep_max,
    classify_trend,
    is_qualifying_set,
    session_duration_minutes,
    session_volume,
    set_volume,
)

logger = logging.getLogger(__name__)


def _today() -> date:
    return datetime.now(timezone.utc).date()


async def get_workout_stats(
    db: AsyncSession,
    user_id: uuid.UUID,
    today: date | None = None,
) -> WorkoutStats:
    """
    Summary over all of a user's sessions:
    - workout counts (all time, trailing 7 and 30 days inclusive)
    - total/average duration over sessions with both start and end
    - total volume of qualifying sets
    - current and longest streak lengths
    - top exercises by number of sessions they appear in
    - most recent personal records
    """
    today = today or _today()
    sessions = await SessionRepository(db).list_by_user(user_id)
    streaks = StreakRepository(db)
    current = await streaks.get_current(user_id)
    all_streaks = await streaks.list_by_user(user_id)
    recent_records = await RecordRepository(db).list_by_user(user_id, limit=RECENT_RECORDS_LIMIT)

    logger.debug("Computing stats for user %s over %d sessions", user_id, len(sessions))

    week_start = today - timedelta(days=WEEK_WINDOW_DAYS)
    month_start = today - timedelta(days=MONTH_WINDOW_DAYS)

    durations: list[int] = []
    total_volume = 0.0
    # Insertion order of the dict is discovery order (sessions newest first)
    appearances: dict[uuid.UUID, list] = {}
    for session in sessions:
        minutes = session_duration_minutes(session)
        if minutes is not None:
            durations.append(minutes)
        total_volume += session_volume(session)
        seen: set[uuid.UUID] = set()
        for ex in session.exercises:
            if ex.exercise_id in seen:
                continue
            seen.add(ex.exercise_id)
            entry = appearances.setdefault(ex.exercise_id, [ex.name_at_time, 0])
            entry[1] += 1

    favorites = sorted(appearances.items(), key=lambda item: -item[1][1])[:FAVORITE_EXERCISES_LIMIT]
    total_duration = sum(durations)

    return WorkoutStats(
        total_workouts=len(sessions),
        workouts_this_week=sum(1 for s in sessions if week_start <= s.session_date <= today),
        workouts_this_month=sum(1 for s in sessions if month_start <= s.session_date <= today),
        total_duration_minutes=total_duration,
        average_duration_minutes=round(total_duration / len(durations), 1) if durations else 0.0,
        total_volume=round(total_volume, 2),
        current_streak=current.workout_count if current else 0,
        longest_streak=max((s.workout_count for s in all_streaks), default=0),
        favorite_exercises=[
            FavoriteExercise(exercise_id=ex_id, exercise_name=name, session_count=count)
            for ex_id, (name, count) in favorites
        ],
        recent_records=[PersonalRecordRead.model_validate(r) for r in recent_records],
    )


async def get_exercise_progress(
    db: AsyncSession,
    user_id: uuid.UUID,
    exercise_id: uuid.UUID,
) -> ExerciseProgress | None:
    """Progress for one exercise, or None if the user has never performed it."""
    sessions = await SessionRepository(db).list_by_exercise(user_id, exercise_id)
    if not sessions:
        return None

    # One entry per time the exercise appears in a session, oldest first
    entries: list[SessionExercise] = [
        ex for session in sessions for ex in session.exercises if ex.exercise_id == exercise_id
    ]

    total_sets = 0
    total_volume = 0.0
    max_weight: float | None = None
    max_reps: int | None = None
    best_1rm: float | None = None
    entry_volumes: list[float] = []
    for ex in entries:
        entry_volume = 0.0
        for s in ex.sets:
            if is_qualifying_set(s):
                total_sets += 1
                entry_volume += set_volume(s)
            if s.completed_at is None:
                continue
            # Max tracking includes warmups
            if s.weight is not None:
                max_weight = float(s.weight) if max_weight is None else max(max_weight, float(s.weight))
            if s.reps is not None:
                max_reps = s.reps if max_reps is None else max(max_reps, s.reps)
            if s.weight is not None and brzycki_eligible(s.reps):
                est = calculate_one_rep_max(float(s.weight), s.reps, OneRepMaxFormula.BRZYCKI)
                best_1rm = est if best_1rm is None else max(best_1rm, est)
        entry_volumes.append(entry_volume)
        total_volume += entry_volume

    recent = await RecordRepository(db).list_by_exercise(
        user_id, exercise_id, limit=EXERCISE_RECENT_RECORDS_LIMIT
    )

    return ExerciseProgress(
        exercise_id=exercise_id,
        exercise_name=entries[-1].name_at_time,
        total_sessions=len(sessions),
        total_sets=total_sets,
        total_volume=round(total_volume, 2),
        max_weight=max_weight,
        max_reps=max_reps,
        best_estimated_1rm=round(best_1rm, 2) if best_1rm is not None else None,
        last_performed=max(s.session_date for s in sessions),
        trend=classify_trend(entry_volumes),
        recent_records=[PersonalRecordRead.model_validate(r) for r in recent],
    )


def _best_of(records: list[PersonalRecord], record_type: RecordType) -> PersonalRecordRead | None:
    best: PersonalRecord | None = None
    for r in records:
        if r.record_type == record_type and (best is None or r.value > best.value):
            best = r
    return PersonalRecordRead.model_validate(best) if best else None


async def get_personal_bests(
    db: AsyncSession,
    user_id: uuid.UUID,
    exercise_id: uuid.UUID,
) -> PersonalBests:
    records = await RecordRepository(db).list_by_exercise(user_id, exercise_id)
    return PersonalBests(
        max_weight=_best_of(records, RecordType.MAX_WEIGHT),
        max_reps=_best_of(records, RecordType.MAX_REPS),
        max_volume=_best_of(records, RecordType.MAX_VOLUME),
        best_estimated_1rm=_best_of(records, RecordType.BEST_ESTIMATED_1RM),
    )


async def get_strength_progress(
    db: AsyncSession,
    user_id: uuid.UUID,
    exercise_id: uuid.UUID,
    record_type: RecordType = RecordType.MAX_WEIGHT,
) -> list[ProgressPoint]:
    """Records of one category as a chronological series."""
    records = await RecordRepository(db).list_by_exercise(user_id, exercise_id, record_type=record_type)
    return [
        ProgressPoint(
            date=r.achieved_at.date(),
            value=r.value,
            session_id=r.session_id,
            set_id=r.set_id,
            weight=r.weight,
            reps=r.reps,
        )
        for r in sorted(records, key=lambda r: r.achieved_at)
    ]


async def get_volume_progress(db: AsyncSession, user_id: uuid.UUID) -> list[ProgressPoint]:
    """Qualifying volume per finished session, oldest first."""
    sessions = await SessionRepository(db).list_by_user(user_id)
    finished = [s for s in sessions if s.ended_at is not None]
    return [
        ProgressPoint(date=s.session_date, value=round(session_volume(s), 2), session_id=s.id)
        for s in sorted(finished, key=lambda s: (s.session_date, s.created_at))
    ]


async def get_workout_frequency(
    db: AsyncSession,
    user_id: uuid.UUID,
    days: int = DEFAULT_FREQUENCY_DAYS,
    today: date | None = None,
) -> list[ProgressPoint]:
    """Finished sessions per calendar day from ``today - days`` to ``today``, zero-filled."""
    today = today or _today()
    start = today - timedelta(days=days)
    sessions = await SessionRepository(db).list_by_user(user_id, from_date=start, to_date=today)

    counts: dict[date, int] = {start + timedelta(days=i): 0 for i in range(days + 1)}
    for s in sessions:
        if s.ended_at is not None:
            counts[s.session_date] += 1
    return [ProgressPoint(date=d, value=float(n)) for d, n in counts.items()]
