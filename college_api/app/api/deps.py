"""
FastAPI dependencies shared by the REST and GraphQL surfaces.

The lecturer store is created once per process from ``settings``.
Tests replace ``get_lecturer_service`` through
``app.dependency_overrides`` to run against an isolated store.
"""

from functools import lru_cache

from college_api.app.core.config import settings
from college_api.app.repositories import LecturerRepository, create_lecturer_repository
from college_api.app.services.lecturer_service import LecturerService


@lru_cache(maxsize=1)
def get_lecturer_repository() -> LecturerRepository:
    return create_lecturer_repository(settings.storage_backend, settings.database_url)


def get_lecturer_service() -> LecturerService:
    """Dependency returning a service bound to the configured store."""
    return LecturerService(get_lecturer_repository())
