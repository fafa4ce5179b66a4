"""
Pydantic schemas for lecturer records.

A lecturer carries six data fields.  ``name`` and ``email`` are
required; the rest are free-form optional strings.  ``LecturerUpdate``
is a full replacement payload: any optional field left out of the
request is stored as ``null``.
"""

from typing import Optional

from pydantic import BaseModel, Field


class LecturerBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["John Doe"])
    address: Optional[str] = Field(None, examples=["12 College Road"])
    department: Optional[str] = Field(None, examples=["Computer Science"])
    email: str = Field(..., examples=["john@college.com"])
    phone: Optional[str] = Field(None, examples=["+1 555 0100"])
    course_handled: Optional[str] = Field(None, examples=["Distributed Systems"])


class LecturerCreate(LecturerBase):
    """Schema for creating a lecturer; the identifier is assigned by the store."""


class LecturerUpdate(LecturerBase):
    """Schema for replacing every data field of an existing lecturer."""


class LecturerRead(LecturerBase):
    """Schema for reading a lecturer from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
