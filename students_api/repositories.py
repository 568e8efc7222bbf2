"""Repository classes encapsulating database operations.

Repositories work on an open `Session`, return SQLModel objects and
perform commits/refreshes where appropriate. Error translation lives one
level up in `storage.sqlite`.
"""

from typing import List, Optional
from sqlmodel import Session, select
from . import models


class StudentRepository:
    """CRUD operations for `Student` rows."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, student: models.Student) -> models.Student:
        """Persist a new student and return the managed instance with its id."""
        self.session.add(student)
        self.session.commit()
        self.session.refresh(student)
        return student

    def get(self, student_id: int) -> Optional[models.Student]:
        """Get a `Student` by primary key or `None`."""
        return self.session.get(models.Student, student_id)

    def list_all(self) -> List[models.Student]:
        """Return all students in insertion (ascending id) order."""
        stmt = select(models.Student).order_by(models.Student.id)
        return self.session.exec(stmt).all()

    def update(self, student: models.Student, name: str, email: str, age: int) -> models.Student:
        """Overwrite the mutable fields of a managed `Student`."""
        student.name = name
        student.email = email
        student.age = age
        self.session.add(student)
        self.session.commit()
        self.session.refresh(student)
        return student
