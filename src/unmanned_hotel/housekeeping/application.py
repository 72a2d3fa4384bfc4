"""
Прикладной слой контекста уборки.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from ..core.logging import StructuredLogger, get_logger
from ..shared_kernel import EntityId, ILogger, NotFoundException
from . import interfaces as ports
from .domain import CleaningTask, CleaningTaskStatus


class CleaningTaskDTO(BaseModel):
    """DTO для представления задачи на уборку."""

    id: EntityId
    room_id: str
    booking_id: EntityId
    scheduled_at: datetime
    status: CleaningTaskStatus

    @classmethod
    def from_domain(cls, task: CleaningTask) -> "CleaningTaskDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=task.id,
            room_id=task.room_id,
            booking_id=task.booking_id,
            scheduled_at=task.scheduled_at,
            status=task.status,
        )


class HousekeepingApplicationService:
    """Сервис приложения для работы с задачами на уборку."""

    def __init__(
        self,
        repository: ports.ICleaningTaskRepository,
        logger: Optional[ILogger] = None,
    ):
        """Инициализирует сервис."""
        self._repository = repository
        self._logger = logger or StructuredLogger(get_logger(__name__))

    async def list_tasks(self) -> List[CleaningTaskDTO]:
        tasks = await self._repository.find_all()
        return [CleaningTaskDTO.from_domain(task) for task in tasks]

    async def list_pending_tasks(self) -> List[CleaningTaskDTO]:
        tasks = await self._repository.find_pending()
        return [CleaningTaskDTO.from_domain(task) for task in tasks]

    async def get_task_for_booking(self, booking_id: EntityId) -> CleaningTaskDTO:
        task = await self._repository.find_by_booking_id(booking_id)
        if task is None:
            raise NotFoundException("Задача на уборку для бронирования", booking_id)
        return CleaningTaskDTO.from_domain(task)

    async def start_task(self, task_id: EntityId) -> CleaningTaskDTO:
        """Начинает уборку."""
        task = await self._get(task_id)
        task.start_cleaning()
        await self._repository.save(task)
        self._logger.info("Уборка начата", task_id=str(task.id), room_id=task.room_id)
        return CleaningTaskDTO.from_domain(task)

    async def complete_task(self, task_id: EntityId) -> CleaningTaskDTO:
        """Завершает уборку."""
        task = await self._get(task_id)
        task.complete()
        await self._repository.save(task)
        self._logger.info(
            "Уборка завершена", task_id=str(task.id), room_id=task.room_id
        )
        return CleaningTaskDTO.from_domain(task)

    async def _get(self, task_id: EntityId) -> CleaningTask:
        task = await self._repository.find_by_id(task_id)
        if task is None:
            raise NotFoundException("Задача на уборку", task_id)
        return task
