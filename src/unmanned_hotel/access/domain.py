"""
Доменная модель контекста доступа.

Код доступа выдается на каждое подтвержденное бронирование и действует
в пределах периода проживания с запасом времени до заезда и после выезда.
"""

from __future__ import annotations

import re
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Optional, Union

from ..booking.events import BookingConfirmed
from ..shared_kernel import (
    DateRange,
    DomainException,
    EntityId,
    InvalidFormatError,
    InvalidRangeError,
    generate_id,
    is_aware,
)

if TYPE_CHECKING:
    from .interfaces import IAccessTokenRepository

CODE_LENGTH = 6
_CODE_PATTERN = re.compile(r"[0-9]{6}")

# Запас времени на ранний заезд и поздний выезд
DEFAULT_GRACE_PERIOD = timedelta(hours=1)

# Сколько раз пытаться подобрать код, не занятый в номере
MAX_CODE_ATTEMPTS = 20

REASON_NO_MATCHING_TOKEN = "Не найден код доступа для этого номера"
REASON_OUTSIDE_TIME_WINDOW = "Код доступа вне периода действия"


@dataclass(frozen=True)
class AccessCode:
    """Код доступа: ровно шесть цифр с ведущими нулями."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not _CODE_PATTERN.fullmatch(self.value):
            raise InvalidFormatError("Код доступа должен состоять ровно из 6 цифр")

    @classmethod
    def generate(cls) -> AccessCode:
        """Генерирует случайный код от 000000 до 999999."""
        return cls(str(secrets.randbelow(10**CODE_LENGTH)).zfill(CODE_LENGTH))

    @classmethod
    def from_string(cls, value: str) -> AccessCode:
        return cls(value)

    def equals(self, other: AccessCode) -> bool:
        return self.value == other.value

    def __str__(self) -> str:
        return self.value


class AccessToken:
    """
    Токен доступа к номеру.

    Действителен, только если одновременно совпадают период действия,
    номер и код.
    """

    def __init__(
        self,
        id: EntityId,
        room_id: str,
        booking_id: EntityId,
        code: AccessCode,
        valid_from: datetime,
        valid_to: datetime,
    ):
        if not (is_aware(valid_from) and is_aware(valid_to)):
            raise InvalidRangeError(
                "Период действия токена должен содержать часовой пояс"
            )
        if valid_from >= valid_to:
            raise InvalidRangeError(
                "Начало действия токена должно быть раньше его окончания"
            )

        self._id = id
        self._room_id = room_id
        self._booking_id = booking_id
        self._code = code
        self._valid_from = valid_from
        self._valid_to = valid_to

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
    def code(self) -> AccessCode:
        return self._code

    @property
    def valid_from(self) -> datetime:
        return self._valid_from

    @property
    def valid_to(self) -> datetime:
        return self._valid_to

    def is_valid(
        self, now: datetime, room_id: str, code: Union[str, AccessCode]
    ) -> bool:
        """Проверяет время, номер и код."""
        return (
            self.is_within_time_window(now)
            and room_id == self._room_id
            and str(code) == self._code.value
        )

    def is_within_time_window(self, now: datetime) -> bool:
        return self._valid_from <= now < self._valid_to

    def __eq__(self, other):
        if not isinstance(other, AccessToken):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"AccessToken(id={self._id}, room_id={self._room_id!r}, "
            f"valid_from={self._valid_from.isoformat()}, "
            f"valid_to={self._valid_to.isoformat()})"
        )


@dataclass(frozen=True)
class AccessResult:
    """Результат попытки открыть дверь."""

    granted: bool
    reason: Optional[str] = None


class AccessService:
    """Доменный сервис выдачи и проверки кодов доступа."""

    def __init__(
        self,
        token_repository: IAccessTokenRepository,
        grace_period: timedelta = DEFAULT_GRACE_PERIOD,
    ):
        self.token_repository = token_repository
        self.grace_period = grace_period

    async def generate_token_from_booking(self, event: BookingConfirmed) -> AccessToken:
        """
        Выдает токен доступа по событию подтверждения бронирования.

        Период действия: [начало - запас, конец + запас). Код подбирается
        так, чтобы в номере не было другого токена с тем же кодом, иначе
        поиск по паре (номер, код) стал бы неоднозначным.
        """
        window: DateRange = event.date_range.widen(self.grace_period, self.grace_period)
        code = await self._unique_code(event.room_id)

        token = AccessToken(
            id=generate_id(),
            room_id=event.room_id,
            booking_id=event.aggregate_id,
            code=code,
            valid_from=window.start,
            valid_to=window.end,
        )
        await self.token_repository.save(token)
        return token

    async def try_unlock(
        self, room_id: str, code: Union[str, AccessCode], now: datetime
    ) -> AccessResult:
        """
        Проверяет попытку открыть дверь.

        Неверный номер и неверный код дают одинаковый ответ, чтобы
        не раскрывать, какая часть данных ошибочна.
        """
        token = await self.token_repository.find_by_room_and_code(room_id, str(code))
        if token is None:
            return AccessResult(granted=False, reason=REASON_NO_MATCHING_TOKEN)

        if not token.is_within_time_window(now):
            return AccessResult(granted=False, reason=REASON_OUTSIDE_TIME_WINDOW)

        return AccessResult(granted=True)

    async def _unique_code(self, room_id: str) -> AccessCode:
        for _ in range(MAX_CODE_ATTEMPTS):
            code = AccessCode.generate()
            existing = await self.token_repository.find_by_room_and_code(
                room_id, code.value
            )
            if existing is None:
                return code
        raise DomainException(
            f"Не удалось подобрать свободный код доступа для номера {room_id}"
        )
