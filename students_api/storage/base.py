"""Abstract storage contract for students."""

from abc import ABC, abstractmethod
from typing import List

from ..schemas import StudentIn, StudentRead


class Storage(ABC):
    """Create/read/list/update capability over student records.

    Implementations raise `NotFoundError` for unknown ids and wrap every
    engine failure into `StorageError`. Each call is one transaction.
    """

    @abstractmethod
    def create(self, name: str, email: str, age: int) -> int:
        """Persist a new student and return its assigned id."""

    @abstractmethod
    def get_by_id(self, student_id: int) -> StudentRead:
        """Return the student with `student_id`."""

    @abstractmethod
    def get_all(self) -> List[StudentRead]:
        """Return every student ordered by ascending id."""

    @abstractmethod
    def update_by_id(self, student_id: int, patch: StudentIn) -> StudentRead:
        """Overwrite name, email and age of an existing student."""
