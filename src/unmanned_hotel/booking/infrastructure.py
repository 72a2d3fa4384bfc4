"""
Инфраструктурный слой контекста бронирования.

Содержит реализации репозиториев: в памяти и с сохранением в JSON-файл.
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel

from ..shared_kernel import DateRange, EntityId, JsonFileStore
from . import interfaces as ports
from .domain import Booking, BookingStatus


class InMemoryBookingRepository(ports.IBookingRepository):
    """Реализация репозитория бронирований в памяти."""

    def __init__(self):
        self._bookings: Dict[EntityId, Booking] = {}

    async def save(self, booking: Booking) -> None:
        self._bookings[booking.id] = booking

    async def find_by_id(self, booking_id: EntityId) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    async def find_by_room_and_date_range(
        self, room_id: str, date_range: DateRange
    ) -> List[Booking]:
        # Отмененные и завершенные бронирования номер не занимают
        return [
            booking
            for booking in self._bookings.values()
            if booking.room_id == room_id
            and booking.status == BookingStatus.CONFIRMED
            and booking.date_range.overlaps(date_range)
        ]

    async def find_all(self) -> List[Booking]:
        return list(self._bookings.values())

    def clear(self) -> None:
        """Удаляет все бронирования (для тестов)."""
        self._bookings.clear()


class BookingRecord(BaseModel):
    """Запись бронирования в JSON-файле."""

    id: EntityId
    room_id: str
    guest_id: str
    start: datetime
    end: datetime
    status: BookingStatus

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingRecord":
        return cls(
            id=booking.id,
            room_id=booking.room_id,
            guest_id=booking.guest_id,
            start=booking.date_range.start,
            end=booking.date_range.end,
            status=booking.status,
        )

    def to_domain(self) -> Booking:
        return Booking.restore(
            id=self.id,
            room_id=self.room_id,
            guest_id=self.guest_id,
            date_range=DateRange(start=self.start, end=self.end),
            status=self.status,
        )


class JsonFileBookingRepository(InMemoryBookingRepository):
    """Репозиторий бронирований с копией данных в JSON-файле."""

    def __init__(self, file_path: Union[str, Path]):
        super().__init__()
        self._store = JsonFileStore(file_path)
        for item in self._store.load():
            booking = BookingRecord.model_validate(item).to_domain()
            self._bookings[booking.id] = booking

    async def save(self, booking: Booking) -> None:
        await super().save(booking)
        self._store.save(
            [
                BookingRecord.from_domain(b).model_dump(mode="json")
                for b in self._bookings.values()
            ]
        )
