"""
DTO общего ядра для внешних слоев (API, отладочная панель).
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from .domain import DomainEvent


class EventDTO(BaseModel):
    """Краткое представление опубликованного события."""

    event_id: UUID
    event_type: str
    occurred_at: datetime
    aggregate_id: UUID

    @classmethod
    def from_domain(cls, event: DomainEvent) -> "EventDTO":
        """Создает DTO из доменного события."""
        return cls(
            event_id=event.event_id,
            event_type=event.event_type,
            occurred_at=event.occurred_at,
            aggregate_id=event.aggregate_id,
        )
