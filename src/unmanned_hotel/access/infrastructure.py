"""
Инфраструктурный слой контекста доступа.
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel

from ..shared_kernel import EntityId, JsonFileStore
from . import interfaces as ports
from .domain import AccessCode, AccessToken


class InMemoryAccessTokenRepository(ports.IAccessTokenRepository):
    """Реализация репозитория токенов доступа в памяти."""

    def __init__(self):
        self._tokens: Dict[EntityId, AccessToken] = {}

    async def save(self, token: AccessToken) -> None:
        self._tokens[token.id] = token

    async def find_by_id(self, token_id: EntityId) -> Optional[AccessToken]:
        return self._tokens.get(token_id)

    async def find_by_room_and_code(
        self, room_id: str, code: str
    ) -> Optional[AccessToken]:
        for token in self._tokens.values():
            if token.room_id == room_id and token.code.value == code:
                return token
        return None

    async def find_by_booking_id(self, booking_id: EntityId) -> Optional[AccessToken]:
        for token in self._tokens.values():
            if token.booking_id == booking_id:
                return token
        return None

    async def find_all(self) -> List[AccessToken]:
        return list(self._tokens.values())

    def clear(self) -> None:
        """Удаляет все токены (для тестов)."""
        self._tokens.clear()


class AccessTokenRecord(BaseModel):
    """Запись токена доступа в JSON-файле."""

    id: EntityId
    room_id: str
    booking_id: EntityId
    code: str
    valid_from: datetime
    valid_to: datetime

    @classmethod
    def from_domain(cls, token: AccessToken) -> "AccessTokenRecord":
        return cls(
            id=token.id,
            room_id=token.room_id,
            booking_id=token.booking_id,
            code=token.code.value,
            valid_from=token.valid_from,
            valid_to=token.valid_to,
        )

    def to_domain(self) -> AccessToken:
        return AccessToken(
            id=self.id,
            room_id=self.room_id,
            booking_id=self.booking_id,
            code=AccessCode.from_string(self.code),
            valid_from=self.valid_from,
            valid_to=self.valid_to,
        )


class JsonFileAccessTokenRepository(InMemoryAccessTokenRepository):
    """Репозиторий токенов с копией данных в JSON-файле."""

    def __init__(self, file_path: Union[str, Path]):
        super().__init__()
        self._store = JsonFileStore(file_path)
        for item in self._store.load():
            token = AccessTokenRecord.model_validate(item).to_domain()
            self._tokens[token.id] = token

    async def save(self, token: AccessToken) -> None:
        await super().save(token)
        self._store.save(
            [
                AccessTokenRecord.from_domain(t).model_dump(mode="json")
                for t in self._tokens.values()
            ]
        )
