"""
Pytest configuration and fixtures
"""
import os
import sys
from pathlib import Path

import pytest

# Make the project root importable when the package is not installed
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Never touch the on-disk database when the app module is imported by tests
os.environ.setdefault("STORAGE_BACKEND", "memory")

from fastapi.testclient import TestClient

from college_api.app.api.deps import get_lecturer_service
from college_api.app.core.db import init_db
from college_api.app.main import create_app
from college_api.app.repositories import InMemoryLecturerRepository, SQLiteLecturerRepository
from college_api.app.services.lecturer_service import LecturerService


@pytest.fixture
def memory_repository():
    """Fresh in-memory lecturer store"""
    return InMemoryLecturerRepository()


@pytest.fixture
def sqlite_repository(tmp_path):
    """Lecturer store on a migrated SQLite file in a temp directory"""
    db_path = str(tmp_path / "college_test.db")
    init_db(db_path)
    return SQLiteLecturerRepository(db_path)


@pytest.fixture(params=["memory", "sqlite"])
def repository(request):
    """Run a test once against every store implementation"""
    return request.getfixturevalue(f"{request.param}_repository")


@pytest.fixture
def service(repository):
    return LecturerService(repository)


@pytest.fixture
def client(memory_repository):
    """Test client whose REST and GraphQL surfaces share one in-memory store"""
    app = create_app()
    app.dependency_overrides[get_lecturer_service] = lambda: LecturerService(memory_repository)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
