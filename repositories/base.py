"""
Base repository interface for data access layer.
This follows the Repository pattern to separate request handling from data access.
"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Generic, Iterator, TypeVar, Optional, Type
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from abc import ABC

from app.exceptions import StorageError

ModelType = TypeVar("ModelType")

logger = logging.getLogger("macrotracker.repositories")


def to_naive_utc(value: datetime) -> datetime:
    """Strip timezone info after converting to UTC; columns are TIMESTAMP without zone."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.

    Every database error is rolled back and re-raised as StorageError.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    @contextmanager
    def storage_guard(self) -> Iterator[None]:
        """Roll back and translate SQLAlchemy errors raised inside the block."""
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(
                f"storage_failure repository={self.__class__.__name__} error={exc}"
            )
            raise StorageError.from_exception(exc) from exc

    def execute_write(self, statement):
        """Run a bulk UPDATE or DELETE without syncing objects held by the session."""
        return self.db.execute(
            statement, execution_options={"synchronize_session": False}
        )

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """Get entity by ID, bypassing any stale copy in the identity map"""
        with self.storage_guard():
            return self.db.get(self.model, entity_id, populate_existing=True)

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        with self.storage_guard():
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
        return entity

    def delete(self, entity_id: int) -> None:
        """Delete entity by ID. Dependent junction rows go with it via ON DELETE CASCADE."""
        with self.storage_guard():
            self.execute_write(delete(self.model).where(self.model.id == entity_id))
            self.db.commit()
