"""
Интерфейсы (порты) для контекста доступа.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ..shared_kernel import EntityId
from .domain import AccessToken


class IAccessTokenRepository(Protocol):
    """Интерфейс репозитория для токенов доступа."""

    async def save(self, token: AccessToken) -> None: ...
    async def find_by_id(self, token_id: EntityId) -> Optional[AccessToken]: ...
    async def find_by_room_and_code(
        self, room_id: str, code: str
    ) -> Optional[AccessToken]: ...
    async def find_by_booking_id(
        self, booking_id: EntityId
    ) -> Optional[AccessToken]: ...
    async def find_all(self) -> List[AccessToken]: ...
