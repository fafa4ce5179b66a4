"""
In-memory lecturer store.

Used by the test-suite and for throwaway deployments.  A single lock
serialises every operation so uniqueness checks and writes are atomic,
and identifiers come from a counter that never goes backwards.
"""

import threading
from typing import Dict, List, Optional

from college_api.app.core.exceptions import LecturerConstraintError, LecturerNotFoundError
from college_api.app.repositories.base import LecturerRepository
from college_api.app.schemas.lecturer import LecturerCreate, LecturerRead


class InMemoryLecturerRepository(LecturerRepository):
    """Lecturer store keeping records in a dict keyed by id."""

    def __init__(self) -> None:
        self._records: Dict[int, LecturerRead] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def insert(self, data: LecturerCreate) -> LecturerRead:
        with self._lock:
            self._check_email_free(data.email)
            self._last_id += 1
            lecturer = LecturerRead(id=self._last_id, **data.model_dump())
            self._records[lecturer.id] = lecturer
            return lecturer.model_copy()

    def get(self, lecturer_id: int) -> Optional[LecturerRead]:
        with self._lock:
            lecturer = self._records.get(lecturer_id)
            return lecturer.model_copy() if lecturer else None

    def list(self) -> List[LecturerRead]:
        with self._lock:
            return [self._records[key].model_copy() for key in sorted(self._records)]

    def find_by_department(self, department: Optional[str]) -> List[LecturerRead]:
        if department is None:
            return []
        with self._lock:
            return [
                self._records[key].model_copy()
                for key in sorted(self._records)
                if self._records[key].department == department
            ]

    def replace(self, lecturer: LecturerRead) -> LecturerRead:
        with self._lock:
            if lecturer.id not in self._records:
                raise LecturerNotFoundError(lecturer.id)
            self._check_email_free(lecturer.email, exclude_id=lecturer.id)
            stored = lecturer.model_copy()
            self._records[lecturer.id] = stored
            return stored.model_copy()

    def delete(self, lecturer_id: int) -> bool:
        with self._lock:
            return self._records.pop(lecturer_id, None) is not None

    def _check_email_free(self, email: str, exclude_id: Optional[int] = None) -> None:
        # Caller must hold the lock.
        for record in self._records.values():
            if record.email == email and record.id != exclude_id:
                raise LecturerConstraintError("email", email)
