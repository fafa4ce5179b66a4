"""
Abstract lecturer store.

Every API surface reaches lecturer records through a
``LecturerRepository``.  Implementations own persistence and the
uniqueness of ``email``; they must make each single operation atomic
with respect to concurrent callers.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from college_api.app.schemas.lecturer import LecturerCreate, LecturerRead


class LecturerRepository(ABC):
    """Keyed storage for lecturers with a department lookup."""

    @abstractmethod
    def insert(self, data: LecturerCreate) -> LecturerRead:
        """Store a new lecturer and return it with its assigned id.

        Raises:
            LecturerConstraintError: ``email`` is already taken.
        """

    @abstractmethod
    def get(self, lecturer_id: int) -> Optional[LecturerRead]:
        """Return the lecturer with ``lecturer_id`` or ``None``."""

    @abstractmethod
    def list(self) -> List[LecturerRead]:
        """Return all lecturers ordered by id."""

    @abstractmethod
    def find_by_department(self, department: Optional[str]) -> List[LecturerRead]:
        """Return lecturers whose department equals ``department`` exactly.

        ``None`` matches nothing, following SQL comparison semantics.
        """

    @abstractmethod
    def replace(self, lecturer: LecturerRead) -> LecturerRead:
        """Overwrite every data field of the lecturer at ``lecturer.id``.

        Raises:
            LecturerNotFoundError: no lecturer has that id.
            LecturerConstraintError: the new ``email`` belongs to another lecturer.
        """

    @abstractmethod
    def delete(self, lecturer_id: int) -> bool:
        """Remove a lecturer if present.

        Returns ``True`` if a record was removed.  A missing id is not an
        error.
        """
