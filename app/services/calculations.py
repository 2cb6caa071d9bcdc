"""Pure training formulas: one-rep max, set volume, session summary, trend."""

from __future__ import annotations

from collections.abc import Sequence

from app.core.constants import BRZYCKI_MAX_REPS, TREND_THRESHOLD_PERCENT, TREND_WINDOW
from app.core.enums import OneRepMaxFormula, ProgressTrend
from app.models.workout import SetEntry, WorkoutSession
from app.schemas.stats import SessionSummary


def calculate_one_rep_max(
    weight: float,
    reps: int,
    formula: OneRepMaxFormula = OneRepMaxFormula.BRZYCKI,
) -> float:
    """
    Estimated 1RM from a set. A single rep is its own 1RM for every formula.
    Brzycki: weight * 36 / (37 - reps). Epley: weight * (1 + reps / 30).
    Raises ValueError outside the formula's domain.
    """
    if reps < 1:
        raise ValueError(f"reps must be at least 1, got {reps}")
    if reps == 1:
        return float(weight)
    if formula == OneRepMaxFormula.EPLEY:
        return weight * (1 + reps / 30)
    if reps >= BRZYCKI_MAX_REPS:
        raise ValueError(f"Brzycki is undefined for {reps} reps")
    return weight * 36 / (37 - reps)


def brzycki_eligible(reps: int | None) -> bool:
    return reps is not None and 1 <= reps < BRZYCKI_MAX_REPS


def calculate_volume(weight: float, reps: int) -> float:
    return weight * reps


def is_qualifying_set(s: SetEntry) -> bool:
    """Completed, not a warmup, and both weight and reps logged."""
    return (
        s.completed_at is not None
        and not s.is_warmup
        and s.weight is not None
        and s.reps is not None
    )


def set_volume(s: SetEntry) -> float:
    if is_qualifying_set(s):
        return calculate_volume(float(s.weight), int(s.reps))
    return 0.0


def session_volume(session: WorkoutSession) -> float:
    return sum(set_volume(s) for ex in session.exercises for s in ex.sets)


def session_duration_minutes(session: WorkoutSession) -> int | None:
    """Whole minutes between start and end, or None unless both are set."""
    if session.started_at is None or session.ended_at is None:
        return None
    started, ended = session.started_at, session.ended_at
    # Stores without tz support hand back naive datetimes; compare like with like
    if (started.tzinfo is None) != (ended.tzinfo is None):
        started = started.replace(tzinfo=None)
        ended = ended.replace(tzinfo=None)
    seconds = (ended - started).total_seconds()
    return max(0, int(seconds / 60 + 0.5))


def session_summary(session: WorkoutSession) -> SessionSummary:
    """Totals over a session's working (non-warmup) sets."""
    total_sets = 0
    total_reps = 0
    total_weight = 0.0
    total_volume = 0.0
    for ex in session.exercises:
        for s in ex.sets:
            if s.is_warmup:
                continue
            total_sets += 1
            if s.reps:
                total_reps += s.reps
            if s.weight:
                total_weight += float(s.weight)
            total_volume += set_volume(s)
    return SessionSummary(
        total_sets=total_sets,
        total_reps=total_reps,
        total_weight=round(total_weight, 2),
        total_volume=round(total_volume, 2),
        duration_minutes=session_duration_minutes(session) or 0,
        exercise_count=len(session.exercises),
    )


def classify_trend(values: Sequence[float]) -> ProgressTrend:
    """
    Compare the mean of the last TREND_WINDOW values with the TREND_WINDOW before them.
    Values must be in chronological order.
    """
    if len(values) < TREND_WINDOW:
        return ProgressTrend.NEW
    recent = values[-TREND_WINDOW:]
    older = values[-2 * TREND_WINDOW : -TREND_WINDOW]
    if len(older) < TREND_WINDOW:
        return ProgressTrend.NEW

    recent_avg = sum(recent) / len(recent)
    older_avg = sum(older) / len(older)
    if older_avg == 0:
        return ProgressTrend.IMPROVING if recent_avg > 0 else ProgressTrend.STABLE

    percent_change = (recent_avg - older_avg) / older_avg * 100
    if percent_change > TREND_THRESHOLD_PERCENT:
        return ProgressTrend.IMPROVING
    if percent_change < -TREND_THRESHOLD_PERCENT:
        return ProgressTrend.DECLINING
    return ProgressTrend.STABLE
