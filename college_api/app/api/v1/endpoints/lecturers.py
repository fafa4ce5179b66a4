"""
Lecturer endpoints for API v1.

These routes expose create, list, retrieve, replace, delete and a
department search over lecturer records.  A lecturer that does not
exist is answered with an empty 404 on retrieval and a 404 error on
update; deleting a missing lecturer still returns 204.  Email
collisions are turned into 409 responses by the handler registered in
``main.py``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from college_api.app.api.deps import get_lecturer_service
from college_api.app.core.exceptions import LecturerNotFoundError
from college_api.app.schemas.lecturer import LecturerCreate, LecturerRead, LecturerUpdate
from college_api.app.services.lecturer_service import LecturerService

router = APIRouter()


@router.post("/", response_model=LecturerRead, status_code=status.HTTP_201_CREATED)
async def create_lecturer(
    lecturer_in: LecturerCreate,
    service: LecturerService = Depends(get_lecturer_service),
) -> LecturerRead:
    """Create a new lecturer."""
    return await service.create_lecturer(lecturer_in)


@router.get("/", response_model=List[LecturerRead])
async def list_lecturers(
    service: LecturerService = Depends(get_lecturer_service),
) -> List[LecturerRead]:
    """Return every lecturer ordered by id."""
    return await service.get_all_lecturers()


# Declared before ``/{lecturer_id}`` so "search" is not parsed as an id.
@router.get("/search", response_model=List[LecturerRead])
async def search_lecturers(
    department: str = Query(..., description="Exact, case-sensitive department name"),
    service: LecturerService = Depends(get_lecturer_service),
) -> List[LecturerRead]:
    """Return lecturers of a department; an unknown department yields an empty list."""
    return await service.find_lecturers_by_department(department)


@router.get(
    "/{lecturer_id}",
    response_model=LecturerRead,
    responses={status.HTTP_404_NOT_FOUND: {"description": "No lecturer with this id; empty body"}},
)
async def get_lecturer(
    lecturer_id: int,
    service: LecturerService = Depends(get_lecturer_service),
):
    """Retrieve a single lecturer by ID.

    A missing lecturer is not an error condition for the service, so
    the 404 carries no error detail.
    """
    lecturer = await service.get_lecturer_by_id(lecturer_id)
    if lecturer is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return lecturer


@router.put("/{lecturer_id}", response_model=LecturerRead)
async def update_lecturer(
    lecturer_id: int,
    lecturer_in: LecturerUpdate,
    service: LecturerService = Depends(get_lecturer_service),
) -> LecturerRead:
    """Replace every field of an existing lecturer.

    Optional fields missing from the body are cleared.
    """
    try:
        return await service.update_lecturer(lecturer_id, lecturer_in)
    except LecturerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.delete("/{lecturer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_lecturer(
    lecturer_id: int,
    service: LecturerService = Depends(get_lecturer_service),
) -> None:
    """Delete a lecturer; succeeds whether or not it existed."""
    await service.delete_lecturer(lecturer_id)
    return None
