"""Shared enums for models and API."""

from enum import Enum


class RecordType(str, Enum):
    """Personal record category."""

    MAX_WEIGHT = "max_weight"  # Heaviest weight
    MAX_REPS = "max_reps"  # Most reps at or above a weight
    MAX_VOLUME = "max_volume"  # Highest single-set volume (weight × reps)
    BEST_ESTIMATED_1RM = "best_estimated_1rm"  # Highest estimated one-rep max


class OneRepMaxFormula(str, Enum):
    """Formula used to estimate a one-rep max."""

    BRZYCKI = "brzycki"
    EPLEY = "epley"


class ProgressTrend(str, Enum):
    """Direction of an exercise's recent training volume."""

    NEW = "new"  # Not enough history to compare
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"
