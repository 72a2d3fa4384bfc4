"""
Инфраструктурный слой контекста уборки.
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel

from ..shared_kernel import EntityId, JsonFileStore
from . import interfaces as ports
from .domain import CleaningTask, CleaningTaskStatus


class InMemoryCleaningTaskRepository(ports.ICleaningTaskRepository):
    """Реализация репозитория задач на уборку в памяти."""

    def __init__(self):
        self._tasks: Dict[EntityId, CleaningTask] = {}

    async def save(self, task: CleaningTask) -> None:
        self._tasks[task.id] = task

    async def find_by_id(self, task_id: EntityId) -> Optional[CleaningTask]:
        return self._tasks.get(task_id)

    async def find_by_booking_id(self, booking_id: EntityId) -> Optional[CleaningTask]:
        for task in self._tasks.values():
            if task.booking_id == booking_id:
                return task
        return None

    async def find_pending(self) -> List[CleaningTask]:
        return [
            task
            for task in self._tasks.values()
            if task.status == CleaningTaskStatus.PENDING
        ]

    async def find_all(self) -> List[CleaningTask]:
        return list(self._tasks.values())

    def clear(self) -> None:
        """Удаляет все задачи (для тестов)."""
        self._tasks.clear()


class CleaningTaskRecord(BaseModel):
    """Запись задачи на уборку в JSON-файле."""

    id: EntityId
    room_id: str
    booking_id: EntityId
    scheduled_at: datetime
    status: CleaningTaskStatus

    @classmethod
    def from_domain(cls, task: CleaningTask) -> "CleaningTaskRecord":
        return cls(
            id=task.id,
            room_id=task.room_id,
            booking_id=task.booking_id,
            scheduled_at=task.scheduled_at,
            status=task.status,
        )

    def to_domain(self) -> CleaningTask:
        return CleaningTask.restore(
            id=self.id,
            room_id=self.room_id,
            booking_id=self.booking_id,
            scheduled_at=self.scheduled_at,
            status=self.status,
        )


class JsonFileCleaningTaskRepository(InMemoryCleaningTaskRepository):
    """Репозиторий задач с копией данных в JSON-файле."""

    def __init__(self, file_path: Union[str, Path]):
        super().__init__()
        self._store = JsonFileStore(file_path)
        for item in self._store.load():
            task = CleaningTaskRecord.model_validate(item).to_domain()
            self._tasks[task.id] = task

    async def save(self, task: CleaningTask) -> None:
        await super().save(task)
        self._store.save(
            [
                CleaningTaskRecord.from_domain(t).model_dump(mode="json")
                for t in self._tasks.values()
            ]
        )
