"""Async stores over the database session."""

from app.repositories.record_repo import RecordRepository
from app.repositories.session_repo import SessionRepository
from app.repositories.streak_repo import StreakRepository

__all__ = ["RecordRepository", "SessionRepository", "StreakRepository"]
