from datetime import date, datetime

import pytest

from app.core.enums import OneRepMaxFormula, ProgressTrend
from app.models.workout import SessionExercise, WorkoutSession
from app.services.calculations import (
    brzycki_eligible,
    calculate_one_rep_max,
    classify_trend,
    is_qualifying_set,
    session_duration_minutes,
    session_summary,
    set_volume,
)
from conftest import BENCH, working_set


@pytest.mark.parametrize("formula", list(OneRepMaxFormula))
@pytest.mark.parametrize("weight", [0.0, 20.0, 102.5, 250.0])
def test_single_rep_is_its_own_max(formula, weight):
    assert calculate_one_rep_max(weight, 1, formula) == weight


def test_brzycki_and_epley_values():
    assert calculate_one_rep_max(100, 5) == pytest.approx(112.5)
    assert calculate_one_rep_max(100, 6) == pytest.approx(116.129, abs=1e-3)
    assert calculate_one_rep_max(100, 10, OneRepMaxFormula.EPLEY) == pytest.approx(133.333, abs=1e-3)


def test_brzycki_monotonic_in_weight_and_reps():
    by_reps = [calculate_one_rep_max(100, r) for r in range(1, 37)]
    assert all(a < b for a, b in zip(by_reps, by_reps[1:]))
    by_weight = [calculate_one_rep_max(w, 8) for w in (20, 40, 60, 80, 100)]
    assert all(a < b for a, b in zip(by_weight, by_weight[1:]))


@pytest.mark.parametrize("reps", [0, 37, 40])
def test_brzycki_out_of_domain(reps):
    with pytest.raises(ValueError):
        calculate_one_rep_max(100, reps)
    assert not brzycki_eligible(reps)


def test_brzycki_eligible():
    assert brzycki_eligible(1)
    assert brzycki_eligible(36)
    assert not brzycki_eligible(None)


def test_qualifying_sets():
    assert is_qualifying_set(working_set(100, 5))
    assert not is_qualifying_set(working_set(100, 5, warmup=True))
    assert not is_qualifying_set(working_set(100, 5, completed=False))
    assert not is_qualifying_set(working_set(None, 5))
    assert not is_qualifying_set(working_set(100, None))
    assert set_volume(working_set(100, 5)) == 500
    assert set_volume(working_set(60, 10, warmup=True)) == 0


def _session(sets, started=None, ended=None):
    return WorkoutSession(
        session_date=date(2026, 1, 1),
        started_at=started,
        ended_at=ended,
        exercises=[SessionExercise(exercise_id=BENCH, name_at_time="Bench Press", sets=sets)],
    )


def test_session_duration():
    start = datetime(2026, 1, 1, 18, 0)
    assert session_duration_minutes(_session([], start, datetime(2026, 1, 1, 19, 15))) == 75
    assert session_duration_minutes(_session([], start, None)) is None
    assert session_duration_minutes(_session([], None, None)) is None


def test_session_summary_skips_warmups():
    summary = session_summary(
        _session(
            [
                working_set(40, 10, warmup=True),
                working_set(100, 5, index=1),
                working_set(100, 4, index=2),
                working_set(None, 8, index=3),
            ],
            datetime(2026, 1, 1, 18, 0),
            datetime(2026, 1, 1, 18, 45),
        )
    )
    assert summary.total_sets == 3
    assert summary.total_reps == 17
    assert summary.total_weight == 200
    assert summary.total_volume == 900
    assert summary.duration_minutes == 45
    assert summary.exercise_count == 1


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], ProgressTrend.NEW),
        ([100, 200], ProgressTrend.NEW),
        ([100, 100, 100], ProgressTrend.NEW),
        ([100, 100, 100, 110], ProgressTrend.NEW),
        ([100, 100, 100, 120, 120, 120], ProgressTrend.IMPROVING),
        ([100, 100, 100, 80, 80, 80], ProgressTrend.DECLINING),
        ([100, 100, 100, 104, 103, 102], ProgressTrend.STABLE),
        ([0, 0, 0, 50, 50, 50], ProgressTrend.IMPROVING),
        ([0, 0, 0, 0, 0, 0], ProgressTrend.STABLE),
        # only the last six count
        ([999, 100, 100, 100, 100, 100, 100], ProgressTrend.STABLE),
    ],
)
def test_classify_trend(values, expected):
    assert classify_trend(values) == expected
