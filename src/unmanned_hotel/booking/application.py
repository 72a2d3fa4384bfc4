"""
Прикладной слой контекста бронирования.

Сервис приложения координирует доменную модель и публикацию событий:
только здесь накопленные агрегатом события передаются в шину.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import AwareDatetime, BaseModel, Field

from ..core.logging import StructuredLogger, get_logger
from ..shared_kernel import (
    DateRange,
    EntityId,
    IEventBus,
    ILogger,
    NotFoundException,
    now,
)
from . import interfaces as ports
from .domain import Booking, BookingService, BookingStatus

# DTO (Data Transfer Objects) для входящих данных


class CreateBookingRequest(BaseModel):
    """Запрос на создание бронирования."""

    room_id: str = Field(..., min_length=1)
    guest_id: str = Field(..., min_length=1)
    check_in: AwareDatetime
    check_out: AwareDatetime


class CheckOutBookingRequest(BaseModel):
    """Запрос на выезд гостя."""

    booking_id: EntityId
    check_out_time: Optional[AwareDatetime] = None


# DTO для исходящих данных


class BookingDTO(BaseModel):
    """DTO для представления бронирования."""

    id: EntityId
    room_id: str
    guest_id: str
    check_in: datetime
    check_out: datetime
    status: BookingStatus

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=booking.id,
            room_id=booking.room_id,
            guest_id=booking.guest_id,
            check_in=booking.date_range.start,
            check_out=booking.date_range.end,
            status=booking.status,
        )


# Сервисы приложения


class BookingApplicationService:
    """Сервис приложения для работы с бронированиями."""

    def __init__(
        self,
        repository: ports.IBookingRepository,
        event_bus: IEventBus,
        logger: Optional[ILogger] = None,
    ):
        """Инициализирует сервис."""
        self._repository = repository
        self._event_bus = event_bus
        self._booking_service = BookingService(repository)
        self._logger = logger or StructuredLogger(get_logger(__name__))

    async def create_booking(self, request: CreateBookingRequest) -> BookingDTO:
        """Создает бронирование и публикует событие подтверждения."""
        date_range = DateRange(start=request.check_in, end=request.check_out)
        booking = await self._booking_service.create_booking(
            room_id=request.room_id,
            guest_id=request.guest_id,
            date_range=date_range,
        )
        self._logger.info(
            "Создано бронирование",
            booking_id=str(booking.id),
            room_id=booking.room_id,
        )

        await self._commit_events(booking)
        return BookingDTO.from_domain(booking)

    async def check_out(self, request: CheckOutBookingRequest) -> BookingDTO:
        """Оформляет выезд и публикует событие выезда."""
        booking = await self._get(request.booking_id)
        booking.check_out(request.check_out_time or now())
        await self._repository.save(booking)
        self._logger.info(
            "Оформлен выезд",
            booking_id=str(booking.id),
            room_id=booking.room_id,
        )

        await self._commit_events(booking)
        return BookingDTO.from_domain(booking)

    async def cancel_booking(self, booking_id: EntityId) -> BookingDTO:
        """Отменяет бронирование."""
        booking = await self._get(booking_id)
        booking.cancel()
        await self._repository.save(booking)
        self._logger.info("Бронирование отменено", booking_id=str(booking.id))
        return BookingDTO.from_domain(booking)

    async def get_booking(self, booking_id: EntityId) -> BookingDTO:
        """Возвращает информацию о бронировании."""
        return BookingDTO.from_domain(await self._get(booking_id))

    async def list_bookings(self) -> List[BookingDTO]:
        """Возвращает все бронирования."""
        bookings = await self._repository.find_all()
        return [BookingDTO.from_domain(booking) for booking in bookings]

    async def _get(self, booking_id: EntityId) -> Booking:
        booking = await self._repository.find_by_id(booking_id)
        if booking is None:
            raise NotFoundException("Бронирование", booking_id)
        return booking

    async def _commit_events(self, booking: Booking) -> None:
        # Публикуем только после сохранения агрегата
        await self._event_bus.publish_all(booking.uncommitted_events())
        booking.mark_committed()
