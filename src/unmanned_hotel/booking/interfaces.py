"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ..shared_kernel import DateRange, EntityId
from .domain import Booking


class IBookingRepository(Protocol):
    """Интерфейс репозитория для бронирований."""

    async def save(self, booking: Booking) -> None: ...
    async def find_by_id(self, booking_id: EntityId) -> Optional[Booking]: ...
    async def find_by_room_and_date_range(
        self, room_id: str, date_range: DateRange
    ) -> List[Booking]: ...
    async def find_all(self) -> List[Booking]: ...
