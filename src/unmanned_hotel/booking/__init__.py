"""
Модуль контекста бронирования (Booking Context).

Отвечает за бронирование номеров:
- создание бронирований без пересечений по датам;
- выезд и отмену;
- генерацию событий BookingConfirmed и BookingCheckedOut.
"""

from . import application, domain, events, infrastructure, interfaces

__all__ = [
    "domain",
    "events",
    "application",
    "infrastructure",
    "interfaces",
]
