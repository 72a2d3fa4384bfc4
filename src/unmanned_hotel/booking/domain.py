"""
Доменная модель контекста бронирования.

Содержит агрегат ``Booking`` и доменный сервис, проверяющий
пересечения бронирований перед созданием нового.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List

from ..shared_kernel import (
    DateRange,
    DomainEvent,
    EntityId,
    InvalidTransitionError,
    OverlappingBookingError,
    generate_id,
)
from .events import BookingCheckedOut, BookingConfirmed

if TYPE_CHECKING:
    from .interfaces import IBookingRepository


class BookingStatus(str, Enum):
    """Статусы бронирования."""

    CONFIRMED = "Confirmed"
    CHECKED_OUT = "CheckedOut"
    CANCELLED = "Cancelled"


class Booking:
    """
    Агрегат 'Бронирование'.

    Создается сразу в статусе CONFIRMED. Из CONFIRMED возможен выезд
    (CHECKED_OUT) или отмена (CANCELLED); оба статуса конечные.
    События накапливаются в агрегате и публикуются вызывающим кодом,
    после чего очищаются через ``mark_committed``.
    """

    def __init__(
        self,
        id: EntityId,
        room_id: str,
        guest_id: str,
        date_range: DateRange,
    ):
        self._id = id
        self._room_id = room_id
        self._guest_id = guest_id
        self._date_range = date_range
        self._status = BookingStatus.CONFIRMED
        self._events: List[DomainEvent] = []

        self._add_event(
            BookingConfirmed(
                aggregate_id=self._id,
                room_id=self._room_id,
                guest_id=self._guest_id,
                date_range=self._date_range,
            )
        )

    @classmethod
    def restore(
        cls,
        id: EntityId,
        room_id: str,
        guest_id: str,
        date_range: DateRange,
        status: BookingStatus,
    ) -> Booking:
        """Восстанавливает сохраненное бронирование без событий."""
        booking = cls(id, room_id, guest_id, date_range)
        booking._status = BookingStatus(status)
        booking.mark_committed()
        return booking

    @property
    def id(self) -> EntityId:
        return self._id

    @property
    def room_id(self) -> str:
        return self._room_id

    @property
    def guest_id(self) -> str:
        return self._guest_id

    @property
    def date_range(self) -> DateRange:
        return self._date_range

    @property
    def status(self) -> BookingStatus:
        return self._status

    def check_out(self, check_out_time: datetime) -> None:
        """Оформляет выезд гостя."""
        if self._status != BookingStatus.CONFIRMED:
            raise InvalidTransitionError(
                self._status.value,
                BookingStatus.CHECKED_OUT.value,
                f"Невозможно оформить выезд: бронирование в статусе {self._status.value}",
            )

        self._status = BookingStatus.CHECKED_OUT
        self._add_event(
            BookingCheckedOut(
                aggregate_id=self._id,
                room_id=self._room_id,
                guest_id=self._guest_id,
                check_out_time=check_out_time,
            )
        )

    def cancel(self) -> None:
        """Отменяет бронирование. Событие не генерируется."""
        if self._status != BookingStatus.CONFIRMED:
            raise InvalidTransitionError(
                self._status.value,
                BookingStatus.CANCELLED.value,
                f"Невозможно отменить бронирование в статусе {self._status.value}",
            )

        self._status = BookingStatus.CANCELLED

    def uncommitted_events(self) -> List[DomainEvent]:
        """Возвращает копию списка неопубликованных событий."""
        return list(self._events)

    def mark_committed(self) -> None:
        """Очищает список событий после их публикации."""
        self._events.clear()

    def _add_event(self, event: DomainEvent) -> None:
        self._events.append(event)

    def __eq__(self, other):
        if not isinstance(other, Booking):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Booking(id={self._id}, room_id={self._room_id!r}, "
            f"status={self._status.value}, date_range={self._date_range})"
        )


class BookingService:
    """Доменный сервис для создания бронирований без пересечений."""

    def __init__(self, booking_repository: IBookingRepository):
        self.booking_repository = booking_repository

    async def create_booking(
        self,
        room_id: str,
        guest_id: str,
        date_range: DateRange,
    ) -> Booking:
        """
        Создает новое бронирование.

        Конфликтом считаются только подтвержденные бронирования того же
        номера; отмененные и завершенные не мешают. Публикация событий
        созданного агрегата остается на вызывающем коде.

        Raises:
            OverlappingBookingError: если номер занят на пересекающийся период
        """
        candidates = await self.booking_repository.find_by_room_and_date_range(
            room_id, date_range
        )
        conflicts = [
            booking
            for booking in candidates
            if booking.status == BookingStatus.CONFIRMED
            and booking.date_range.overlaps(date_range)
        ]
        if conflicts:
            raise OverlappingBookingError(room_id, conflicts[0].id)

        booking = Booking(generate_id(), room_id, guest_id, date_range)
        await self.booking_repository.save(booking)
        return booking
