"""
Доменные события контекста бронирования.

Это опубликованный язык контекста: другие контексты подписываются
на эти события, но не обращаются к агрегату напрямую.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from ..shared_kernel import DateRange, DomainEvent


@dataclass(frozen=True)
class BookingConfirmed(DomainEvent):
    """Событие: бронирование подтверждено."""

    event_type: ClassVar[str] = "BookingConfirmed"

    room_id: str
    guest_id: str
    date_range: DateRange


@dataclass(frozen=True)
class BookingCheckedOut(DomainEvent):
    """Событие: гость выехал."""

    event_type: ClassVar[str] = "BookingCheckedOut"

    room_id: str
    guest_id: str
    check_out_time: datetime
