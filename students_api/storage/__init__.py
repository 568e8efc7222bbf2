"""Persistence backends for student records.

Handlers depend only on `Storage`; `SQLiteStorage` is used by the running
service and `InMemoryStorage` by tests and local experiments.
"""

from .base import Storage
from .memory import InMemoryStorage
from .sqlite import SQLiteStorage

__all__ = ["Storage", "InMemoryStorage", "SQLiteStorage"]
