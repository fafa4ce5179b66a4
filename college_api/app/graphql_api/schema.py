"""
GraphQL schema for lecturers.

Queries return lecturer records; mutations take the six lecturer
fields as individual arguments rather than an input object, matching
the operations offered by the REST surface.  Resolvers reach the
``LecturerService`` through the request context, which is built from
the same FastAPI dependency the REST endpoints use.  Service errors
surface as GraphQL errors carrying the exception message.
"""

from typing import List, Optional

import strawberry
from fastapi import Depends
from strawberry.fastapi import GraphQLRouter

from college_api.app.api.deps import get_lecturer_service
from college_api.app.schemas.lecturer import LecturerCreate, LecturerRead, LecturerUpdate
from college_api.app.services.lecturer_service import LecturerService

DELETE_CONFIRMATION = "Lecturer deleted successfully!"


@strawberry.type
class Lecturer:
    lecturer_id: int
    lecturer_name: str
    address: Optional[str]
    department: Optional[str]
    email: str
    phone: Optional[str]
    course_handled: Optional[str]

    @classmethod
    def from_read(cls, lecturer: LecturerRead) -> "Lecturer":
        return cls(
            lecturer_id=lecturer.id,
            lecturer_name=lecturer.name,
            address=lecturer.address,
            department=lecturer.department,
            email=lecturer.email,
            phone=lecturer.phone,
            course_handled=lecturer.course_handled,
        )


def _service(info: strawberry.Info) -> LecturerService:
    return info.context["lecturer_service"]


@strawberry.type
class Query:
    @strawberry.field
    async def get_all_lecturers(self, info: strawberry.Info) -> List[Lecturer]:
        lecturers = await _service(info).get_all_lecturers()
        return [Lecturer.from_read(lecturer) for lecturer in lecturers]

    @strawberry.field
    async def get_lecturer_by_id(self, info: strawberry.Info, id: int) -> Optional[Lecturer]:
        lecturer = await _service(info).get_lecturer_by_id(id)
        return Lecturer.from_read(lecturer) if lecturer else None

    @strawberry.field
    async def find_lecturers_by_department(
        self, info: strawberry.Info, department: str
    ) -> List[Lecturer]:
        lecturers = await _service(info).find_lecturers_by_department(department)
        return [Lecturer.from_read(lecturer) for lecturer in lecturers]


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_lecturer(
        self,
        info: strawberry.Info,
        lecturer_name: str,
        email: str,
        address: Optional[str] = None,
        department: Optional[str] = None,
        phone: Optional[str] = None,
        course_handled: Optional[str] = None,
    ) -> Lecturer:
        data = LecturerCreate(
            name=lecturer_name,
            address=address,
            department=department,
            email=email,
            phone=phone,
            course_handled=course_handled,
        )
        return Lecturer.from_read(await _service(info).create_lecturer(data))

    @strawberry.mutation
    async def update_lecturer(
        self,
        info: strawberry.Info,
        id: int,
        lecturer_name: str,
        email: str,
        address: Optional[str] = None,
        department: Optional[str] = None,
        phone: Optional[str] = None,
        course_handled: Optional[str] = None,
    ) -> Lecturer:
        data = LecturerUpdate(
            name=lecturer_name,
            address=address,
            department=department,
            email=email,
            phone=phone,
            course_handled=course_handled,
        )
        return Lecturer.from_read(await _service(info).update_lecturer(id, data))

    @strawberry.mutation
    async def delete_lecturer(self, info: strawberry.Info, id: int) -> str:
        await _service(info).delete_lecturer(id)
        return DELETE_CONFIRMATION


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_context(
    service: LecturerService = Depends(get_lecturer_service),
) -> dict:
    return {"lecturer_service": service}


def create_graphql_router() -> GraphQLRouter:
    """Build the ``/graphql`` router; call once per application."""
    return GraphQLRouter(schema, context_getter=get_context)
