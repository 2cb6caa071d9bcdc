"""Shared plumbing for the async stores."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy failure inside the block as StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception("%s failed: %s", operation, e)
        raise StorageError(f"{operation} failed") from e


class BaseRepository:
    """Lightweight base for repositories using SQLAlchemy 2.0 async style."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add_and_flush(self, entity):
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def commit(self) -> None:
        with storage_errors("commit"):
            await self.db.commit()
