"""Domain errors raised by the stores and engines."""


class ProgressTrackerError(Exception):
    """Base for all errors raised by the progress core."""


class StorageError(ProgressTrackerError):
    """The underlying store was unreachable or rejected a read/write."""


class InvariantViolationError(ProgressTrackerError):
    """Persisted state broke a rule the core relies on (e.g. two current streaks)."""


class OutOfOrderWorkoutError(ProgressTrackerError):
    """A streak update arrived with a date earlier than the current streak's end."""

    def __init__(self, workout_date, current_end_date):
        self.workout_date = workout_date
        self.current_end_date = current_end_date
        super().__init__(
            f"workout date {workout_date.isoformat()} is before current streak end "
            f"{current_end_date.isoformat()}"
        )
