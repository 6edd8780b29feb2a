# workout_tracker/repositories/base.py
from __future__ import annotations
from typing import Generic, Protocol, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy import select

T = TypeVar("T")  # SQLAlchemy model type


class ExistenceLookup(Protocol):
    """Anything that can tell whether a row with the given id exists."""
    def exists_by_id(self, entity_id: int) -> bool: ...


class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def exists_by_id(self, entity_id: int) -> bool:
        stmt = select(self.model.id).where(self.model.id == entity_id)
        return self.db.execute(stmt).first() is not None

    def add_and_refresh(self, entity: T) -> T:
        self.db.add(entity)
        self.commit()
        self.db.refresh(entity)
        return entity

    def commit(self) -> None:
        """Commit the unit of work, rolling back if the store rejects it."""
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
