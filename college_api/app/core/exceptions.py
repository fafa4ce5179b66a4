"""
Exceptions raised by the lecturer store and service layer.

Only two failure kinds exist: a requested lecturer does not exist
(raised by updates only; lookups return ``None`` instead) and a write
would break the unique ``email`` constraint.  API surfaces translate
both into their own error representation.
"""

from typing import Any


class CollegeAPIError(Exception):
    """Base class for domain errors of the college API."""


class LecturerNotFoundError(CollegeAPIError):
    """No lecturer exists with the requested identifier."""

    def __init__(self, lecturer_id: int) -> None:
        self.lecturer_id = lecturer_id
        super().__init__(f"Lecturer not found with id {lecturer_id}")


class LecturerConstraintError(CollegeAPIError):
    """A write violated a uniqueness constraint of the lecturer table."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Lecturer with {field} '{value}' already exists")
