"""In-memory storage backend."""

from __future__ import annotations

import threading

from ..errors import NotFoundError
from ..schemas import StudentIn, StudentRead
from .base import Storage


class InMemoryStorage(Storage):
    """Dict-backed store with a monotonically increasing id counter."""

    def __init__(self):
        self._rows: dict[int, StudentRead] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, name: str, email: str, age: int) -> int:
        with self._lock:
            student_id = self._next_id
            self._next_id += 1
            self._rows[student_id] = StudentRead(id=student_id, name=name, email=email, age=age)
        return student_id

    def get_by_id(self, student_id: int) -> StudentRead:
        with self._lock:
            row = self._rows.get(student_id)
            if row is None:
                raise NotFoundError(student_id)
            return row.model_copy()

    def get_all(self) -> list[StudentRead]:
        with self._lock:
            return [self._rows[k].model_copy() for k in sorted(self._rows)]

    def update_by_id(self, student_id: int, patch: StudentIn) -> StudentRead:
        with self._lock:
            if student_id not in self._rows:
                raise NotFoundError(student_id)
            row = StudentRead(id=student_id, name=patch.name, email=patch.email, age=patch.age)
            self._rows[student_id] = row
            return row.model_copy()
