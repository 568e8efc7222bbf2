"""SQLModel data models.

The registry has a single table; `id` is assigned by the database on
insert and never rewritten afterwards.
"""

from typing import Optional
from sqlmodel import SQLModel, Field


class Student(SQLModel, table=True):
    """A registered student.

    Fields:
    - `name`: display name, never empty
    - `email`: contact address, checked before it reaches the table
    - `age`: whole years, strictly positive
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    email: str = Field(nullable=False)
    age: int = Field(nullable=False)
