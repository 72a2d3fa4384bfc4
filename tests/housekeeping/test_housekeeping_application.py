"""
Тесты для сервиса приложения и репозиториев контекста уборки.
"""

from uuid import uuid4

import pytest

from tests.factories import RecordingLogger, dec
from unmanned_hotel.housekeeping.application import HousekeepingApplicationService
from unmanned_hotel.housekeeping.domain import CleaningTask, CleaningTaskStatus
from unmanned_hotel.housekeeping.infrastructure import (
    InMemoryCleaningTaskRepository,
    JsonFileCleaningTaskRepository,
)
from unmanned_hotel.shared_kernel import InvalidTransitionError, NotFoundException


def _task(room_id="101") -> CleaningTask:
    return CleaningTask(
        id=uuid4(), room_id=room_id, booking_id=uuid4(), scheduled_at=dec(22, 14)
    )


@pytest.fixture(params=["memory", "json"])
def repository(request, tmp_path):
    if request.param == "memory":
        return InMemoryCleaningTaskRepository()
    return JsonFileCleaningTaskRepository(tmp_path / "tasks.json")


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def service(repository, logger):
    return HousekeepingApplicationService(repository, logger)


async def test_start_and_complete(service, repository, logger):
    task = _task()
    await repository.save(task)

    started = await service.start_task(task.id)
    completed = await service.complete_task(task.id)

    assert started.status == CleaningTaskStatus.IN_PROGRESS
    assert completed.status == CleaningTaskStatus.COMPLETED
    assert (await repository.find_by_id(task.id)).status == CleaningTaskStatus.COMPLETED
    assert logger.levels() == ["info", "info"]


async def test_pending_list_excludes_started_tasks(service, repository):
    first, second = _task("101"), _task("102")
    await repository.save(first)
    await repository.save(second)

    await service.start_task(first.id)

    pending = await service.list_pending_tasks()
    assert [dto.id for dto in pending] == [second.id]
    assert len(await service.list_tasks()) == 2


async def test_get_task_for_booking(service, repository):
    task = _task()
    await repository.save(task)

    dto = await service.get_task_for_booking(task.booking_id)

    assert dto.id == task.id
    assert dto.scheduled_at == dec(22, 14)


async def test_unknown_task(service):
    with pytest.raises(NotFoundException):
        await service.start_task(uuid4())
    with pytest.raises(NotFoundException):
        await service.get_task_for_booking(uuid4())


async def test_invalid_transition_propagates(service, repository):
    task = _task()
    await repository.save(task)
    await service.complete_task(task.id)

    with pytest.raises(InvalidTransitionError):
        await service.start_task(task.id)


async def test_json_repository_reloads_status(tmp_path):
    path = tmp_path / "tasks.json"
    repository = JsonFileCleaningTaskRepository(path)
    task = _task()
    await repository.save(task)
    await HousekeepingApplicationService(repository, RecordingLogger()).start_task(
        task.id
    )

    restored = await JsonFileCleaningTaskRepository(path).find_by_id(task.id)

    assert restored.status == CleaningTaskStatus.IN_PROGRESS
    assert restored.scheduled_at == dec(22, 14)
    assert await JsonFileCleaningTaskRepository(path).find_pending() == []
