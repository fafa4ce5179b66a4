"""
SQLite-backed lecturer store.

Each call opens its own connection through ``core.db`` and commits on
success.  The ``UNIQUE`` constraint on ``lecturers.email`` decides
races between writers; the losing writer gets a
``LecturerConstraintError``.  All statements are parameterised.
"""

import logging
import sqlite3
from typing import List, Optional

from college_api.app.core.db import get_cursor
from college_api.app.core.exceptions import LecturerConstraintError, LecturerNotFoundError
from college_api.app.repositories.base import LecturerRepository
from college_api.app.schemas.lecturer import LecturerCreate, LecturerRead

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, address, department, email, phone, course_handled"


def _is_email_conflict(exc: sqlite3.IntegrityError) -> bool:
    return "lecturers.email" in str(exc)


class SQLiteLecturerRepository(LecturerRepository):
    """Lecturer store on top of the ``lecturers`` table."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def insert(self, data: LecturerCreate) -> LecturerRead:
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    """
                    INSERT INTO lecturers (name, address, department, email, phone, course_handled)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        data.name,
                        data.address,
                        data.department,
                        data.email,
                        data.phone,
                        data.course_handled,
                    ),
                )
                lecturer_id = cursor.lastrowid
                row = cursor.execute(
                    f"SELECT {_COLUMNS} FROM lecturers WHERE id = ?",
                    (lecturer_id,),
                ).fetchone()
        except sqlite3.IntegrityError as exc:
            if _is_email_conflict(exc):
                logger.info("Rejected duplicate lecturer email %s", data.email)
                raise LecturerConstraintError("email", data.email) from exc
            raise
        return self._row_to_lecturer(row)

    def get(self, lecturer_id: int) -> Optional[LecturerRead]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM lecturers WHERE id = ?",
                (lecturer_id,),
            ).fetchone()
        if not row:
            return None
        return self._row_to_lecturer(row)

    def list(self) -> List[LecturerRead]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                f"SELECT {_COLUMNS} FROM lecturers ORDER BY id"
            ).fetchall()
        return [self._row_to_lecturer(row) for row in rows]

    def find_by_department(self, department: Optional[str]) -> List[LecturerRead]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                f"SELECT {_COLUMNS} FROM lecturers WHERE department = ? ORDER BY id",
                (department,),
            ).fetchall()
        return [self._row_to_lecturer(row) for row in rows]

    def replace(self, lecturer: LecturerRead) -> LecturerRead:
        # A single UPDATE both checks existence and overwrites, so a
        # concurrent delete either happens before (rowcount 0) or after.
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    """
                    UPDATE lecturers
                    SET name = ?, address = ?, department = ?, email = ?, phone = ?, course_handled = ?
                    WHERE id = ?
                    """,
                    (
                        lecturer.name,
                        lecturer.address,
                        lecturer.department,
                        lecturer.email,
                        lecturer.phone,
                        lecturer.course_handled,
                        lecturer.id,
                    ),
                )
                if cursor.rowcount == 0:
                    raise LecturerNotFoundError(lecturer.id)
                row = cursor.execute(
                    f"SELECT {_COLUMNS} FROM lecturers WHERE id = ?",
                    (lecturer.id,),
                ).fetchone()
        except sqlite3.IntegrityError as exc:
            if _is_email_conflict(exc):
                logger.info("Rejected duplicate lecturer email %s", lecturer.email)
                raise LecturerConstraintError("email", lecturer.email) from exc
            raise
        return self._row_to_lecturer(row)

    def delete(self, lecturer_id: int) -> bool:
        with get_cursor(self.db_path) as cursor:
            cursor.execute("DELETE FROM lecturers WHERE id = ?", (lecturer_id,))
            affected = cursor.rowcount
        return affected > 0

    @staticmethod
    def _row_to_lecturer(row: sqlite3.Row) -> LecturerRead:
        """Convert a database row to a LecturerRead schema instance."""
        return LecturerRead(
            id=row["id"],
            name=row["name"],
            address=row["address"],
            department=row["department"],
            email=row["email"],
            phone=row["phone"],
            course_handled=row["course_handled"],
        )
