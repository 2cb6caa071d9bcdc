"""
Each test gets its own in-memory SQLite database (aiosqlite) with the full schema.
DATABASE_URI is pointed at SQLite before any app module builds its engine.
"""
import os

os.environ.setdefault("DATABASE_URI", "sqlite+aiosqlite://")

import uuid
from datetime import date, datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.base import Base
import app.models  # noqa: F401
from app.models.workout import SessionExercise, SetEntry, WorkoutSession

BENCH = uuid.UUID("00000000-0000-0000-0000-0000000000b1")
SQUAT = uuid.UUID("00000000-0000-0000-0000-0000000000a1")
DONE_AT = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def session_maker():
    """Factory bound to a fresh database, for tests that need several sessions."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def user_id():
    return uuid.uuid4()


def working_set(weight, reps, *, index=0, warmup=False, completed=True):
    return SetEntry(
        index=index,
        weight=weight,
        reps=reps,
        is_warmup=warmup,
        completed_at=DONE_AT if completed else None,
    )


@pytest.fixture
def add_session(db):
    """
    Persist a session. ``exercises`` is a list of (exercise_id, name, [SetEntry, ...]).
    ``minutes`` sets started_at/ended_at; None leaves the session unfinished.
    """

    async def _add(user_id, session_date: date, exercises, minutes: int | None = 60):
        started = datetime.combine(session_date, datetime.min.time()).replace(hour=18)
        session = WorkoutSession(
            user_id=user_id,
            session_date=session_date,
            started_at=started if minutes is not None else None,
            ended_at=started + timedelta(minutes=minutes) if minutes is not None else None,
            exercises=[
                SessionExercise(exercise_id=ex_id, name_at_time=name, order_index=i, sets=sets)
                for i, (ex_id, name, sets) in enumerate(exercises)
            ],
        )
        db.add(session)
        await db.commit()
        return session

    return _add
