"""
Lecturer store factory.
"""
import logging
from typing import Dict, Optional, Type

from .base import LecturerRepository
from .memory_repository import InMemoryLecturerRepository
from .sqlite_repository import SQLiteLecturerRepository

logger = logging.getLogger(__name__)

_backends: Dict[str, Type[LecturerRepository]] = {
    "sqlite": SQLiteLecturerRepository,
    "memory": InMemoryLecturerRepository,
}


def create_lecturer_repository(backend: str, db_path: Optional[str] = None) -> LecturerRepository:
    """Create the lecturer store for ``backend``.

    Args:
        backend: registered backend name (``sqlite``, ``memory``, ...).
        db_path: database file for the ``sqlite`` backend; ignored by others.

    Raises:
        ValueError: the backend is not registered.
    """
    if backend not in _backends:
        raise ValueError(f"Unsupported lecturer storage backend: {backend}")

    repository_class = _backends[backend]
    logger.info("Using %s lecturer storage", backend)
    if repository_class is SQLiteLecturerRepository:
        return SQLiteLecturerRepository(db_path)
    return repository_class()


def register_backend(name: str, repository_class: Type[LecturerRepository]) -> None:
    """Register an additional store implementation under ``name``."""
    if not issubclass(repository_class, LecturerRepository):
        raise ValueError("Repository class must implement LecturerRepository")
    _backends[name] = repository_class
    logger.info("Registered lecturer storage backend: %s", name)
