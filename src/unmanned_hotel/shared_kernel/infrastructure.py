"""
Инфраструктура общего ядра: диспетчер событий и файловое хранилище.
"""

import inspect
import json
from collections import deque
from pathlib import Path
from typing import Any, Deque, Dict, List, Optional, Union

from ..core.logging import StructuredLogger, get_logger
from .domain import DomainEvent
from .interfaces import EventHandler, EventKey, ILogger


def event_tag(event_type: EventKey) -> str:
    """Приводит класс события или строку к тегу для подписки."""
    if isinstance(event_type, str):
        return event_type
    return event_type.event_type


class EventDispatcher:
    """
    Диспетчер доменных событий в рамках одного процесса.

    Обработчики вызываются последовательно в порядке регистрации,
    каждый дожидается завершения предыдущего. Ошибка обработчика
    прерывает доставку и передается вызывающему ``publish``; уже
    выполненные обработчики не откатываются.
    """

    def __init__(
        self,
        history_limit: Optional[int] = None,
        logger: Optional[ILogger] = None,
    ):
        self._handlers: Dict[str, List[EventHandler]] = {}
        self._history: Deque[DomainEvent] = deque(maxlen=history_limit)
        self._logger = logger or StructuredLogger(get_logger(__name__))

    def subscribe(self, event_type: EventKey, handler: EventHandler) -> None:
        """Подписывает обработчик на события указанного типа."""
        tag = event_tag(event_type)
        self._handlers.setdefault(tag, []).append(handler)
        self._logger.debug(
            f"Подписан обработчик на событие {tag}",
            handler=getattr(handler, "__name__", repr(handler)),
        )

    async def publish(self, event: DomainEvent) -> None:
        """Публикует событие всем подписанным обработчикам."""
        self._history.append(event)
        # Копия списка: подписка во время доставки не влияет на текущий вызов
        handlers = list(self._handlers.get(event.event_type, []))
        self._logger.info(
            f"Публикация события {event.event_type}",
            event_id=str(event.event_id),
            aggregate_id=str(event.aggregate_id),
            handlers=len(handlers),
        )

        for handler in handlers:
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                self._logger.error(
                    f"Ошибка в обработчике события {event.event_type}",
                    event_id=str(event.event_id),
                    error=str(e),
                )
                raise

    async def publish_all(self, events: List[DomainEvent]) -> None:
        """Публикует события по очереди."""
        for event in events:
            await self.publish(event)

    def recent_events(self, limit: int = 50) -> List[DomainEvent]:
        """Возвращает последние ``limit`` событий, самое новое в конце."""
        if limit <= 0:
            return []
        return list(self._history)[-limit:]

    def handlers_for(self, event_type: EventKey) -> List[EventHandler]:
        return list(self._handlers.get(event_tag(event_type), []))

    def clear_history(self) -> None:
        """Очищает историю событий (для тестов)."""
        self._history.clear()

    def reset(self) -> None:
        """Сбрасывает подписки и историю (для тестов)."""
        self._handlers.clear()
        self._history.clear()


class JsonFileStore:
    """Хранение списка записей в JSON-файле."""

    def __init__(self, file_path: Union[str, Path]):
        """
        Инициализирует хранилище.

        Args:
            file_path: Путь к JSON-файлу с данными
        """
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> List[Dict[str, Any]]:
        """Загружает записи из JSON-файла."""
        if not self._file_path.exists():
            return []

        with open(self._file_path, "r", encoding="utf-8") as f:
            raw_data = f.read()

        if not raw_data.strip():
            return []

        return json.loads(raw_data)

    def save(self, items: List[Dict[str, Any]]) -> None:
        """Сохраняет записи в JSON-файл."""
        # Создаем директорию, если она не существует
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self._file_path, "w", encoding="utf-8") as f:
            json.dump(items, f, indent=2, ensure_ascii=False, default=str)
