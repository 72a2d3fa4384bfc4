"""
Интерфейсы (порты) общего ядра.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, List, Protocol, Type, Union

from .domain import DomainEvent

# Обработчик события: корутина, принимающая событие
EventHandler = Callable[[DomainEvent], Awaitable[None]]

# Подписка возможна по строковому тегу или по классу события
EventKey = Union[str, Type[DomainEvent]]


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IEventBus(Protocol):
    """Интерфейс для шины событий."""

    async def publish(self, event: DomainEvent) -> None: ...
    async def publish_all(self, events: List[DomainEvent]) -> None: ...
    def subscribe(self, event_type: EventKey, handler: EventHandler) -> None: ...
    def recent_events(self, limit: int = 50) -> List[DomainEvent]: ...
