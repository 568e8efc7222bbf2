"""Database engine helpers.

This module builds the SQLModel/SQLAlchemy engine for a SQLite file and
creates the schema. The file location comes from `Settings.STORAGE_PATH`;
the parent directory is created when missing.
"""

from pathlib import Path

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from . import models  # noqa: F401  (registers tables on SQLModel.metadata)


def make_engine(storage_path: str) -> Engine:
    """Return an engine bound to the SQLite file at `storage_path`.

    `check_same_thread` is disabled because storage calls run on the
    request threadpool rather than the thread that opened the connection.
    """
    path = Path(storage_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return create_engine(f"sqlite:///{path}", echo=False, connect_args={"check_same_thread": False})


def create_db_and_tables(engine: Engine):
    """Create database tables using SQLModel metadata. Idempotent."""
    SQLModel.metadata.create_all(engine)
