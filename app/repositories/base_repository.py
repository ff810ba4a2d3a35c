# app/repositories/base_repository.py
"""
Shared plumbing for the single-table repositories.
A repository is built per request around the request's Session; every
SQLAlchemy failure is rolled back and re-raised as StorageError.
"""

import functools
from typing import Any, Optional

from pydantic import BaseModel
from sqlalchemy import exists
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.utils.exceptions import StorageError
from app.utils.logger import get_logger

logger = get_logger(__name__)


def storage_guard(method):
    """Roll back and translate SQLAlchemy errors raised by a repository method."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError as exc:
            self.db.rollback()
            table = self.model.__tablename__
            logger.error(f"[{table}] {method.__name__} failed: {exc}")
            raise StorageError(f"Database error in {table}.{method.__name__}") from exc
    return wrapper


class BaseRepository:
    model: Any = None
    id_field: str = "id"

    def __init__(self, db: Session):
        self.db = db

    @property
    def id_column(self):
        return getattr(self.model, self.id_field)

    @storage_guard
    def list_all(self) -> list:
        return self.db.query(self.model).all()

    @storage_guard
    def get_by_id(self, id: int) -> Optional[Any]:
        return self.db.query(self.model).filter(self.id_column == id).first()

    @storage_guard
    def exists(self, id: int) -> bool:
        return bool(self.db.query(exists().where(self.id_column == id)).scalar())

    def _fields(self, data: BaseModel) -> dict:
        """Column values from a transfer object, without the identity."""
        return data.model_dump(exclude={self.id_field})

    def _insert(self, data: BaseModel) -> Optional[Any]:
        row = self.model(**self._fields(data))
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        if getattr(row, self.id_field) is None:
            return None
        logger.info(f"[{self.model.__tablename__}] added id={getattr(row, self.id_field)}")
        return row

    def _replace(self, id: int, data: BaseModel) -> Optional[Any]:
        """Overwrite every column of row `id`. None on id mismatch or unknown id."""
        supplied = getattr(data, self.id_field)
        if supplied != id:
            logger.warning(f"[{self.model.__tablename__}] update rejected: path id {id} != body id {supplied}")
            return None
        row = self.db.query(self.model).filter(self.id_column == id).first()
        if row is None:
            return None
        for field, value in self._fields(data).items():
            setattr(row, field, value)
        self.db.commit()
        self.db.refresh(row)
        logger.info(f"[{self.model.__tablename__}] updated id={id}")
        return row
