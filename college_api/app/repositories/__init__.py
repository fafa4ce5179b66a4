"""
Lecturer storage.

``LecturerRepository`` is the contract the service layer depends on;
the SQLite and in-memory classes implement it and ``factory`` picks one
by name.
"""

from .base import LecturerRepository
from .factory import create_lecturer_repository, register_backend
from .memory_repository import InMemoryLecturerRepository
from .sqlite_repository import SQLiteLecturerRepository

__all__ = [
    "LecturerRepository",
    "InMemoryLecturerRepository",
    "SQLiteLecturerRepository",
    "create_lecturer_repository",
    "register_backend",
]
