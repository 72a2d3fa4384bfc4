"""
Основные доменные типы и утилиты общего ядра.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import ClassVar
from uuid import UUID

# Общие типы идентификаторов
EntityId = UUID


def generate_id() -> UUID:
    """Генерирует новый UUID."""
    return uuid.uuid4()


def now() -> datetime:
    """Возвращает текущий момент времени в UTC."""
    return datetime.now(timezone.utc)


def is_aware(moment: datetime) -> bool:
    """Проверяет, что у момента времени задан часовой пояс."""
    return moment.tzinfo is not None and moment.utcoffset() is not None


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class InvalidRangeError(DomainException):
    """Некорректный интервал: начало не раньше конца."""

    def __init__(self, message: str = "Начало интервала должно быть раньше его конца"):
        super().__init__(message)


class InvalidFormatError(DomainException):
    """Значение не соответствует ожидаемому формату."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class InvalidTransitionError(BusinessRuleValidationException):
    """Недопустимый переход между состояниями агрегата или сущности."""

    def __init__(self, current_state: str, attempted_state: str, message: str = ""):
        self.current_state = current_state
        self.attempted_state = attempted_state
        super().__init__(
            message
            or f"Недопустимый переход: из {current_state} в {attempted_state}"
        )


class OverlappingBookingError(BusinessRuleValidationException):
    """Номер уже забронирован на пересекающийся период."""

    def __init__(self, room_id: str, conflicting_booking_id: EntityId):
        self.room_id = room_id
        self.conflicting_booking_id = conflicting_booking_id
        super().__init__(
            f"Номер {room_id} уже забронирован на выбранные даты "
            f"(пересечение с бронированием {conflicting_booking_id})"
        )


class NotFoundException(DomainException):
    """Сущность с указанным идентификатором не найдена."""

    def __init__(self, entity: str, entity_id: object):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} с id {entity_id} не найден(о)")


@dataclass(frozen=True)
class DateRange:
    """
    Полуоткрытый интервал времени [start, end).

    Смежные интервалы (конец одного совпадает с началом другого)
    не пересекаются.
    """

    start: datetime
    end: datetime

    def __post_init__(self):
        if not (is_aware(self.start) and is_aware(self.end)):
            raise InvalidRangeError(
                "Границы интервала должны содержать часовой пояс"
            )
        if self.start >= self.end:
            raise InvalidRangeError(
                f"Начало интервала ({self.start.isoformat()}) должно быть "
                f"раньше его конца ({self.end.isoformat()})"
            )

    def overlaps(self, other: "DateRange") -> bool:
        """Проверяет, есть ли у интервалов общий отрезок времени."""
        return self.start < other.end and self.end > other.start

    def contains(self, moment: datetime) -> bool:
        """Начало включается, конец нет."""
        return self.start <= moment < self.end

    def equals(self, other: "DateRange") -> bool:
        return self.start == other.start and self.end == other.end

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def widen(self, before: timedelta, after: timedelta) -> "DateRange":
        """Возвращает интервал, расширенный на ``before`` и ``after``."""
        return DateRange(start=self.start - before, end=self.end + after)

    def __str__(self) -> str:
        return f"[{self.start.isoformat()} - {self.end.isoformat()})"


@dataclass(frozen=True)
class DomainEvent:
    """
    Базовый класс для всех доменных событий.

    ``event_type`` задается на уровне класса и служит ключом
    для подписки в диспетчере.
    """

    event_type: ClassVar[str] = "DomainEvent"

    aggregate_id: EntityId
    event_id: UUID = field(default_factory=uuid.uuid4, init=False)
    occurred_at: datetime = field(default_factory=now, init=False)
