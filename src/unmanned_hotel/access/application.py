"""
Прикладной слой контекста доступа.

Содержит DTO и сервис приложения для попыток открыть дверь
и просмотра выданных кодов.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..core.logging import StructuredLogger, get_logger
from ..shared_kernel import EntityId, ILogger, NotFoundException, now
from . import interfaces as ports
from .domain import AccessService, AccessToken


class UnlockRequest(BaseModel):
    """Запрос на открытие двери."""

    room_id: str = Field(..., min_length=1)
    code: str


class UnlockResultDTO(BaseModel):
    """Результат попытки открыть дверь."""

    granted: bool
    reason: Optional[str] = None


class AccessTokenDTO(BaseModel):
    """DTO для представления токена доступа."""

    id: EntityId
    room_id: str
    booking_id: EntityId
    code: str
    valid_from: datetime
    valid_to: datetime

    @classmethod
    def from_domain(cls, token: AccessToken) -> "AccessTokenDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=token.id,
            room_id=token.room_id,
            booking_id=token.booking_id,
            code=token.code.value,
            valid_from=token.valid_from,
            valid_to=token.valid_to,
        )


class AccessApplicationService:
    """Сервис приложения для работы с доступом в номера."""

    def __init__(
        self,
        repository: ports.IAccessTokenRepository,
        access_service: AccessService,
        logger: Optional[ILogger] = None,
    ):
        """Инициализирует сервис."""
        self._repository = repository
        self._access_service = access_service
        self._logger = logger or StructuredLogger(get_logger(__name__))

    async def unlock(
        self, request: UnlockRequest, at: Optional[datetime] = None
    ) -> UnlockResultDTO:
        """Пытается открыть дверь номера."""
        result = await self._access_service.try_unlock(
            request.room_id, request.code, at or now()
        )
        if result.granted:
            self._logger.info("Доступ разрешен", room_id=request.room_id)
        else:
            self._logger.warning(
                "Доступ запрещен", room_id=request.room_id, reason=result.reason
            )
        return UnlockResultDTO(granted=result.granted, reason=result.reason)

    async def list_tokens(self) -> List[AccessTokenDTO]:
        """Возвращает все выданные токены."""
        tokens = await self._repository.find_all()
        return [AccessTokenDTO.from_domain(token) for token in tokens]

    async def get_token_for_booking(self, booking_id: EntityId) -> AccessTokenDTO:
        """Возвращает токен, выданный для бронирования."""
        token = await self._repository.find_by_booking_id(booking_id)
        if token is None:
            raise NotFoundException("Токен доступа для бронирования", booking_id)
        return AccessTokenDTO.from_domain(token)
