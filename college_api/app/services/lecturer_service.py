"""
Service layer for lecturers.

``LecturerService`` is the single entry point used by both the REST and
the GraphQL surface.  It delegates storage to a ``LecturerRepository``
and owns two policies:

* a lookup by id returns ``None`` for a missing lecturer; absence is a
  normal result, not an error;
* an update is a full replacement.  The stored id is kept and all six
  data fields are taken from the request, so an optional field left out
  of the request is cleared.

Errors from the store (``LecturerNotFoundError``,
``LecturerConstraintError``) propagate unchanged; translating them is
up to the calling surface.
"""

import logging
from typing import List, Optional

from college_api.app.core.exceptions import LecturerNotFoundError
from college_api.app.repositories.base import LecturerRepository
from college_api.app.schemas.lecturer import LecturerBase, LecturerCreate, LecturerRead

logger = logging.getLogger(__name__)


class LecturerService:
    """Create, read, replace, delete and search lecturers."""

    def __init__(self, repository: LecturerRepository) -> None:
        self.repository = repository

    async def create_lecturer(self, data: LecturerCreate) -> LecturerRead:
        """Store a new lecturer and return it with its assigned id."""
        lecturer = self.repository.insert(data)
        logger.info("Created lecturer %s", lecturer.id)
        return lecturer

    async def get_all_lecturers(self) -> List[LecturerRead]:
        return self.repository.list()

    async def get_lecturer_by_id(self, lecturer_id: int) -> Optional[LecturerRead]:
        """Return the lecturer or ``None`` when no record has ``lecturer_id``."""
        return self.repository.get(lecturer_id)

    async def update_lecturer(self, lecturer_id: int, data: LecturerBase) -> LecturerRead:
        """Replace every data field of an existing lecturer.

        Raises ``LecturerNotFoundError`` without touching the store when
        the lecturer does not exist.  If the record is deleted between
        the lookup and the write, the store raises the same error.
        """
        existing = self.repository.get(lecturer_id)
        if existing is None:
            raise LecturerNotFoundError(lecturer_id)
        merged = LecturerRead(
            id=existing.id,
            name=data.name,
            address=data.address,
            department=data.department,
            email=data.email,
            phone=data.phone,
            course_handled=data.course_handled,
        )
        lecturer = self.repository.replace(merged)
        logger.info("Updated lecturer %s", lecturer_id)
        return lecturer

    async def delete_lecturer(self, lecturer_id: int) -> None:
        """Delete a lecturer; deleting a missing id is a no-op."""
        if self.repository.delete(lecturer_id):
            logger.info("Deleted lecturer %s", lecturer_id)

    async def find_lecturers_by_department(self, department: Optional[str]) -> List[LecturerRead]:
        return self.repository.find_by_department(department)
