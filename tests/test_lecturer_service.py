"""
Tests for LecturerService against both lecturer stores
"""
from unittest.mock import MagicMock

import pytest

from college_api.app.core.exceptions import LecturerConstraintError, LecturerNotFoundError
from college_api.app.repositories import InMemoryLecturerRepository, LecturerRepository
from college_api.app.schemas.lecturer import LecturerCreate, LecturerUpdate
from college_api.app.services.lecturer_service import LecturerService


@pytest.mark.asyncio
async def test_create_then_get_returns_same_fields(service):
    data = LecturerCreate(
        name="Grace Hopper",
        address="Navy Yard",
        department="Computer Science",
        email="grace@college.com",
        phone="555-0101",
        course_handled="Compilers",
    )

    created = await service.create_lecturer(data)
    fetched = await service.get_lecturer_by_id(created.id)

    assert created.id is not None
    assert fetched == created
    assert fetched.model_dump(exclude={"id"}) == data.model_dump()


@pytest.mark.asyncio
async def test_get_missing_returns_none(service):
    assert await service.get_lecturer_by_id(404) is None


@pytest.mark.asyncio
async def test_create_duplicate_email_keeps_count(service):
    await service.create_lecturer(LecturerCreate(name="A", email="same@college.com"))

    with pytest.raises(LecturerConstraintError):
        await service.create_lecturer(LecturerCreate(name="B", email="same@college.com"))

    assert len(await service.get_all_lecturers()) == 1


@pytest.mark.asyncio
async def test_update_missing_raises_without_mutation():
    repository = MagicMock(spec=LecturerRepository)
    repository.get.return_value = None
    service = LecturerService(repository)

    with pytest.raises(LecturerNotFoundError) as exc_info:
        await service.update_lecturer(7, LecturerUpdate(name="X", email="x@college.com"))

    assert exc_info.value.lecturer_id == 7
    repository.replace.assert_not_called()
    repository.insert.assert_not_called()
    repository.delete.assert_not_called()


@pytest.mark.asyncio
async def test_update_is_full_replace(service):
    created = await service.create_lecturer(
        LecturerCreate(
            name="Alan Turing",
            address="Bletchley Park",
            department="Mathematics",
            email="alan@college.com",
            phone="555-0199",
            course_handled="Computability",
        )
    )

    updated = await service.update_lecturer(
        created.id, LecturerUpdate(name="Alan M. Turing", email="alan@college.com")
    )

    assert updated.id == created.id
    assert updated.name == "Alan M. Turing"
    assert updated.address is None
    assert updated.department is None
    assert updated.phone is None
    assert updated.course_handled is None
    assert await service.get_lecturer_by_id(created.id) == updated


@pytest.mark.asyncio
async def test_update_to_taken_email_rejected(service):
    await service.create_lecturer(LecturerCreate(name="A", email="a@college.com"))
    second = await service.create_lecturer(LecturerCreate(name="B", email="b@college.com"))

    with pytest.raises(LecturerConstraintError):
        await service.update_lecturer(second.id, LecturerUpdate(name="B", email="a@college.com"))


@pytest.mark.asyncio
async def test_update_loses_race_with_delete():
    class DeletingRepository(InMemoryLecturerRepository):
        """Deletes the record right after the service looked it up"""

        def get(self, lecturer_id):
            lecturer = super().get(lecturer_id)
            self.delete(lecturer_id)
            return lecturer

    repository = DeletingRepository()
    created = repository.insert(LecturerCreate(name="Racer", email="racer@college.com"))
    service = LecturerService(repository)

    with pytest.raises(LecturerNotFoundError):
        await service.update_lecturer(created.id, LecturerUpdate(name="Late", email="late@college.com"))

    assert repository.list() == []


@pytest.mark.asyncio
async def test_delete_missing_does_not_affect_others(service):
    kept = await service.create_lecturer(LecturerCreate(name="Kept", email="kept@college.com"))

    await service.delete_lecturer(kept.id + 100)

    assert await service.get_all_lecturers() == [kept]


@pytest.mark.asyncio
async def test_find_by_department(service):
    cs1 = await service.create_lecturer(
        LecturerCreate(name="One", email="one@college.com", department="Computer Science")
    )
    await service.create_lecturer(
        LecturerCreate(name="Two", email="two@college.com", department="Electrical Engineering")
    )
    cs3 = await service.create_lecturer(
        LecturerCreate(name="Three", email="three@college.com", department="Computer Science")
    )

    assert await service.find_lecturers_by_department("Computer Science") == [cs1, cs3]
    assert await service.find_lecturers_by_department("COMPUTER SCIENCE") == []
    assert await service.find_lecturers_by_department("History") == []


@pytest.mark.asyncio
async def test_john_doe_lifecycle(service):
    created = await service.create_lecturer(
        LecturerCreate(name="John Doe", email="john@x.com", department="CS")
    )
    assert created.id is not None
    assert (created.name, created.email, created.department) == ("John Doe", "john@x.com", "CS")

    updated = await service.update_lecturer(
        created.id,
        LecturerUpdate(
            name="John Doe Updated",
            email="john2@x.com",
            department="SE",
            address="",
            phone="",
            course_handled="",
        ),
    )
    assert updated.model_dump() == {
        "id": created.id,
        "name": "John Doe Updated",
        "address": "",
        "department": "SE",
        "email": "john2@x.com",
        "phone": "",
        "course_handled": "",
    }

    await service.delete_lecturer(created.id)
    assert await service.get_lecturer_by_id(created.id) is None
