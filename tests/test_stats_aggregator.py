import uuid
from datetime import date, datetime, timedelta, timezone

import pytest

from app.core.enums import ProgressTrend, RecordType
from app.schemas.record import SetData
from app.services.record_engine import check_for_new_record
from app.services.stats_aggregator import (
    get_exercise_progress,
    get_personal_bests,
    get_strength_progress,
    get_volume_progress,
    get_workout_frequency,
    get_workout_stats,
)
from app.services.streak_engine import update_streak_for_workout
from conftest import BENCH, SQUAT, working_set

TODAY = date(2026, 6, 30)
ROW = uuid.UUID("00000000-0000-0000-0000-0000000000c1")


def days_ago(n):
    return TODAY - timedelta(days=n)


async def log_record(db, user_id, exercise_id, name, weight, reps, when):
    return await check_for_new_record(
        db,
        user_id,
        exercise_id,
        name,
        SetData(
            weight=weight,
            reps=reps,
            session_id=uuid.uuid4(),
            set_id=uuid.uuid4(),
            achieved_at=datetime.combine(when, datetime.min.time(), tzinfo=timezone.utc),
        ),
    )


@pytest.mark.asyncio
async def test_stats_for_user_without_history(db, user_id):
    stats = await get_workout_stats(db, user_id, today=TODAY)
    assert stats.total_workouts == 0
    assert stats.workouts_this_week == 0
    assert stats.total_duration_minutes == 0
    assert stats.average_duration_minutes == 0
    assert stats.total_volume == 0
    assert stats.current_streak == 0
    assert stats.longest_streak == 0
    assert stats.favorite_exercises == []
    assert stats.recent_records == []


@pytest.mark.asyncio
async def test_workout_stats(db, user_id, add_session):
    await add_session(user_id, days_ago(0), [(BENCH, "Bench Press", [working_set(100, 5)])], minutes=60)
    await add_session(
        user_id,
        days_ago(7),
        [(BENCH, "Bench Press", [working_set(40, 10, warmup=True), working_set(100, 5, index=1)])],
        minutes=30,
    )
    await add_session(user_id, days_ago(8), [(SQUAT, "Squat", [working_set(140, 3)])], minutes=None)
    await add_session(user_id, days_ago(30), [(SQUAT, "Squat", [working_set(140, 3, completed=False)])])
    await add_session(user_id, days_ago(31), [(ROW, "Row", [working_set(80, 10)])])
    await add_session(uuid.uuid4(), days_ago(0), [(BENCH, "Bench Press", [working_set(500, 5)])])

    stats = await get_workout_stats(db, user_id, today=TODAY)
    assert stats.total_workouts == 5
    assert stats.workouts_this_week == 2
    assert stats.workouts_this_month == 4
    assert stats.total_duration_minutes == 60 + 30 + 60 + 60
    assert stats.average_duration_minutes == 52.5
    assert stats.total_volume == 500 + 500 + 420 + 800
    assert [(f.exercise_id, f.session_count) for f in stats.favorite_exercises] == [
        (BENCH, 2),
        (SQUAT, 2),
        (ROW, 1),
    ]
    assert stats.favorite_exercises[0].exercise_name == "Bench Press"


@pytest.mark.asyncio
async def test_future_sessions_are_outside_the_windows(db, user_id, add_session):
    await add_session(user_id, TODAY + timedelta(days=20), [(BENCH, "Bench Press", [working_set(100, 5)])])
    await add_session(user_id, days_ago(2), [(BENCH, "Bench Press", [working_set(100, 5)])])

    stats = await get_workout_stats(db, user_id, today=TODAY)
    assert stats.total_workouts == 2
    assert stats.workouts_this_week == 1
    assert stats.workouts_this_month == 1


@pytest.mark.asyncio
async def test_favorites_count_sessions_not_entries_and_cap_at_five(db, user_id, add_session):
    ids = [uuid.uuid4() for _ in range(6)]
    await add_session(
        user_id,
        days_ago(1),
        [(ids[0], "A", [working_set(10, 1)]), (ids[0], "A", [working_set(10, 1)])],
    )
    await add_session(user_id, days_ago(0), [(ex_id, f"E{i}", []) for i, ex_id in enumerate(ids)])

    stats = await get_workout_stats(db, user_id, today=TODAY)
    assert len(stats.favorite_exercises) == 5
    assert stats.favorite_exercises[0].exercise_id == ids[0]
    assert stats.favorite_exercises[0].session_count == 2
    # ties keep discovery order over sessions newest first
    assert [f.exercise_id for f in stats.favorite_exercises[1:]] == ids[1:5]


@pytest.mark.asyncio
async def test_stats_include_streaks_and_recent_records(db, user_id):
    for d in (days_ago(10), days_ago(9), days_ago(8), days_ago(1), days_ago(0)):
        await update_streak_for_workout(db, user_id, d)
    for i, weight in enumerate((60, 70, 80)):
        await log_record(db, user_id, BENCH, "Bench Press", weight, 5, days_ago(3 - i))

    stats = await get_workout_stats(db, user_id, today=TODAY)
    assert stats.current_streak == 2
    assert stats.longest_streak == 3
    assert len(stats.recent_records) == 5
    assert stats.recent_records[0].weight == 80
    assert stats.recent_records[-1].weight == 70


@pytest.mark.asyncio
async def test_progress_for_unknown_exercise_is_absent(db, user_id, add_session):
    await add_session(user_id, days_ago(0), [(BENCH, "Bench Press", [working_set(100, 5)])])
    assert await get_exercise_progress(db, user_id, SQUAT) is None
    assert await get_exercise_progress(db, uuid.uuid4(), BENCH) is None


@pytest.mark.asyncio
async def test_exercise_progress(db, user_id, add_session):
    await add_session(
        user_id,
        days_ago(5),
        [(BENCH, "Bench", [working_set(120, 1, warmup=True), working_set(100, 5, index=1)])],
    )
    await add_session(
        user_id,
        days_ago(2),
        [
            (SQUAT, "Squat", [working_set(200, 2)]),
            (BENCH, "Bench Press", [working_set(100, 6), working_set(105, 12, index=1, completed=False)]),
        ],
    )
    await log_record(db, user_id, BENCH, "Bench Press", 100, 5, days_ago(5))

    progress = await get_exercise_progress(db, user_id, BENCH)
    assert progress.exercise_name == "Bench Press"
    assert progress.total_sessions == 2
    assert progress.total_sets == 2
    assert progress.total_volume == 1100
    assert progress.max_weight == 120  # warmups count for max tracking
    assert progress.max_reps == 6  # uncompleted sets do not
    assert progress.best_estimated_1rm == 120
    assert progress.last_performed == days_ago(2)
    assert progress.trend == ProgressTrend.NEW
    assert len(progress.recent_records) == 3


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "reps, expected",
    [
        ([5, 5, 5, 6, 6, 6], ProgressTrend.IMPROVING),
        ([6, 6, 6, 5, 5, 5], ProgressTrend.DECLINING),
        ([5, 5, 5, 5, 5, 5], ProgressTrend.STABLE),
    ],
)
async def test_exercise_trend(db, user_id, add_session, reps, expected):
    for i, r in enumerate(reps):
        await add_session(user_id, days_ago(len(reps) - i), [(BENCH, "Bench Press", [working_set(100, r)])])
    progress = await get_exercise_progress(db, user_id, BENCH)
    assert progress.trend == expected


@pytest.mark.asyncio
async def test_personal_bests_and_strength_progress(db, user_id):
    await log_record(db, user_id, BENCH, "Bench Press", 100, 5, days_ago(10))
    await log_record(db, user_id, BENCH, "Bench Press", 110, 3, days_ago(5))
    await log_record(db, user_id, BENCH, "Bench Press", 90, 10, days_ago(1))

    bests = await get_personal_bests(db, user_id, BENCH)
    assert bests.max_weight.value == 110
    assert bests.max_reps.value == 10
    assert bests.max_volume.value == 900
    assert bests.best_estimated_1rm.value == 120.0
    assert (await get_personal_bests(db, user_id, SQUAT)).max_weight is None

    series = await get_strength_progress(db, user_id, BENCH, RecordType.MAX_WEIGHT)
    assert [(p.date, p.value) for p in series] == [(days_ago(10), 100), (days_ago(5), 110)]


@pytest.mark.asyncio
async def test_volume_and_frequency_series(db, user_id, add_session):
    await add_session(user_id, days_ago(3), [(BENCH, "Bench Press", [working_set(100, 5)])])
    await add_session(user_id, days_ago(3), [(SQUAT, "Squat", [working_set(100, 3)])])
    await add_session(user_id, days_ago(1), [(BENCH, "Bench Press", [working_set(100, 6)])])
    await add_session(user_id, days_ago(0), [(BENCH, "Bench Press", [working_set(100, 8)])], minutes=None)

    volume = await get_volume_progress(db, user_id)
    # same-day sessions keep the order they were logged in
    assert [p.value for p in volume] == [500, 300, 600]
    assert [p.date for p in volume] == [days_ago(3), days_ago(3), days_ago(1)]

    freq = await get_workout_frequency(db, user_id, days=7, today=TODAY)
    assert len(freq) == 8
    assert freq[0].date == days_ago(7)
    assert freq[-1].date == TODAY
    counts = {p.date: p.value for p in freq}
    assert counts[days_ago(3)] == 2
    assert counts[days_ago(1)] == 1
    assert counts[TODAY] == 0
