"""
Интерфейсы (порты) для контекста уборки.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ..shared_kernel import EntityId
from .domain import CleaningTask


class ICleaningTaskRepository(Protocol):
    """Интерфейс репозитория для задач на уборку."""

    async def save(self, task: CleaningTask) -> None: ...
    async def find_by_id(self, task_id: EntityId) -> Optional[CleaningTask]: ...
    async def find_by_booking_id(
        self, booking_id: EntityId
    ) -> Optional[CleaningTask]: ...
    async def find_pending(self) -> List[CleaningTask]: ...
    async def find_all(self) -> List[CleaningTask]: ...
