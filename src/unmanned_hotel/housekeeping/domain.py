"""
Доменная модель контекста уборки.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING

from ..booking.events import BookingCheckedOut
from ..shared_kernel import EntityId, InvalidTransitionError, generate_id

if TYPE_CHECKING:
    from .interfaces import ICleaningTaskRepository

# Время между выездом гостя и уборкой номера
DEFAULT_CLEANING_DELAY = timedelta(hours=3)


class CleaningTaskStatus(str, Enum):
    """Статусы задачи на уборку."""

    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"


class CleaningTask:
    """Задача на уборку номера после выезда гостя."""

    def __init__(
        self,
        id: EntityId,
        room_id: str,
        booking_id: EntityId,
        scheduled_at: datetime,
    ):
        self._id = id
        self._room_id = room_id
        self._booking_id = booking_id
        self._scheduled_at = scheduled_at
        self._status = CleaningTaskStatus.PENDING

    @classmethod
    def restore(
        cls,
        id: EntityId,
        room_id: str,
        booking_id: EntityId,
        scheduled_at: datetime,
        status: CleaningTaskStatus,
    ) -> CleaningTask:
        """Восстанавливает сохраненную задачу."""
        task = cls(id, room_id, booking_id, scheduled_at)
        task._status = CleaningTaskStatus(status)
        return task

    @property
    def id(self) -> EntityId:
        return self._id

    @property
    def room_id(self) -> str:
        return self._room_id

    @property
    def booking_id(self) -> EntityId:
        return self._booking_id

    @property
    def scheduled_at(self) -> datetime:
        return self._scheduled_at

    @property
    def status(self) -> CleaningTaskStatus:
        return self._status

    def start_cleaning(self) -> None:
        """Переводит задачу в работу."""
        if self._status != CleaningTaskStatus.PENDING:
            raise InvalidTransitionError(
                self._status.value,
                CleaningTaskStatus.IN_PROGRESS.value,
                "Невозможно начать уборку: задача не в статусе ожидания",
            )
        self._status = CleaningTaskStatus.IN_PROGRESS

    def complete(self) -> None:
        """Завершает задачу; разрешено и из ожидания, и из работы."""
        if self._status == CleaningTaskStatus.COMPLETED:
            raise InvalidTransitionError(
                self._status.value,
                CleaningTaskStatus.COMPLETED.value,
                "Задача уже завершена",
            )
        self._status = CleaningTaskStatus.COMPLETED

    def __eq__(self, other):
        if not isinstance(other, CleaningTask):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"CleaningTask(id={self._id}, room_id={self._room_id!r}, "
            f"status={self._status.value})"
        )


class HousekeepingService:
    """Доменный сервис планирования уборки."""

    def __init__(
        self,
        task_repository: ICleaningTaskRepository,
        cleaning_delay: timedelta = DEFAULT_CLEANING_DELAY,
    ):
        self.task_repository = task_repository
        self.cleaning_delay = cleaning_delay

    async def schedule_cleaning_from_checkout(
        self, event: BookingCheckedOut
    ) -> CleaningTask:
        """Планирует уборку номера через заданное время после выезда."""
        task = CleaningTask(
            id=generate_id(),
            room_id=event.room_id,
            booking_id=event.aggregate_id,
            scheduled_at=event.check_out_time + self.cleaning_delay,
        )
        await self.task_repository.save(task)
        return task
