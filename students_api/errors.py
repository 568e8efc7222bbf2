"""Error taxonomy shared by storage backends and request handlers."""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .validation import Violation


class StorageError(Exception):
    """The storage engine failed (connectivity, IO, constraint, timeout)."""


class NotFoundError(StorageError):
    """No record exists for the requested id."""

    def __init__(self, student_id: int):
        super().__init__(f"student {student_id} not found")
        self.student_id = student_id


class MalformedRequest(Exception):
    """The request body or path parameter could not be decoded."""


class ValidationFailed(Exception):
    """One or more field constraints were violated.

    `violations` is the full ordered list reported by the validator.
    """

    def __init__(self, violations: List["Violation"]):
        super().__init__(", ".join(f"{v.field}:{v.tag}" for v in violations))
        self.violations = violations
