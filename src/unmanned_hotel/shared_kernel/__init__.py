"""
Общее ядро (Shared Kernel) для системы управления беспилотным отелем.

Содержит общие типы данных, исключения и механизм доставки событий,
используемые во всех ограниченных контекстах.
"""

from .domain import (
    BusinessRuleValidationException,
    DateRange,
    DomainEvent,
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    InvalidFormatError,
    InvalidRangeError,
    InvalidTransitionError,
    NotFoundException,
    OverlappingBookingError,
    generate_id,
    is_aware,
    # Утилиты
    now,
)
from .infrastructure import EventDispatcher, JsonFileStore, event_tag
from .interfaces import EventHandler, IEventBus, ILogger

__all__ = [
    # Базовые типы
    "EntityId",
    "generate_id",
    "DateRange",
    "DomainEvent",
    # Исключения
    "DomainException",
    "InvalidRangeError",
    "InvalidFormatError",
    "BusinessRuleValidationException",
    "InvalidTransitionError",
    "OverlappingBookingError",
    "NotFoundException",
    # События
    "EventDispatcher",
    "EventHandler",
    "IEventBus",
    "ILogger",
    "event_tag",
    # Хранилище
    "JsonFileStore",
    # Утилиты
    "now",
    "is_aware",
]
