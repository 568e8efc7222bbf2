"""SQLite storage backend built on SQLModel."""

from __future__ import annotations

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from .. import models
from ..database import create_db_and_tables, make_engine
from ..errors import NotFoundError, StorageError
from ..repositories import StudentRepository
from ..schemas import StudentIn, StudentRead
from .base import Storage

logger = logging.getLogger("students_api.storage")


def _to_read(row: models.Student) -> StudentRead:
    return StudentRead(id=row.id, name=row.name, email=row.email, age=row.age)


class SQLiteStorage(Storage):
    """Relational backend; one short-lived session per operation."""

    def __init__(self, engine: Engine):
        self.engine = engine
        try:
            create_db_and_tables(engine)
        except SQLAlchemyError as exc:
            raise StorageError("failed to initialize storage") from exc

    @classmethod
    def from_path(cls, storage_path: str) -> "SQLiteStorage":
        return cls(make_engine(storage_path))

    def create(self, name: str, email: str, age: int) -> int:
        try:
            with Session(self.engine) as session:
                row = StudentRepository(session).create(models.Student(name=name, email=email, age=age))
                return row.id
        except (SQLAlchemyError, OverflowError) as exc:
            logger.exception("insert failed")
            raise StorageError("failed to create student") from exc

    def get_by_id(self, student_id: int) -> StudentRead:
        try:
            with Session(self.engine) as session:
                row = StudentRepository(session).get(student_id)
                if row is None:
                    raise NotFoundError(student_id)
                return _to_read(row)
        except (SQLAlchemyError, OverflowError) as exc:
            logger.exception("select failed id=%s", student_id)
            raise StorageError("failed to load student") from exc

    def get_all(self) -> list[StudentRead]:
        try:
            with Session(self.engine) as session:
                return [_to_read(r) for r in StudentRepository(session).list_all()]
        except (SQLAlchemyError, OverflowError) as exc:
            logger.exception("list failed")
            raise StorageError("failed to list students") from exc

    def update_by_id(self, student_id: int, patch: StudentIn) -> StudentRead:
        try:
            with Session(self.engine) as session:
                repo = StudentRepository(session)
                row = repo.get(student_id)
                if row is None:
                    raise NotFoundError(student_id)
                return _to_read(repo.update(row, patch.name, patch.email, patch.age))
        except (SQLAlchemyError, OverflowError) as exc:
            logger.exception("update failed id=%s", student_id)
            raise StorageError("failed to update student") from exc
