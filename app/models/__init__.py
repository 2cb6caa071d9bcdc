"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.record import PersonalRecord
from app.models.streak import WorkoutStreak
from app.models.workout import SessionExercise, SetEntry, WorkoutSession

__all__ = [
    "PersonalRecord",
    "SessionExercise",
    "SetEntry",
    "WorkoutSession",
    "WorkoutStreak",
]
