"""
Настройка логирования.

Используется стандартный модуль ``logging``: человекочитаемый формат
для разработки и JSON для сбора логов. ``StructuredLogger`` реализует
порт ``ILogger`` и передает контекст сообщения как структурированные поля.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

PACKAGE_LOGGER = "unmanned_hotel"


class JSONFormatter(logging.Formatter):
    """Форматирует записи лога в одну строку JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info and record.exc_info[0] is not None:
            log_obj["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        context = getattr(record, "context", None)
        if context:
            log_obj.update(context)

        return json.dumps(log_obj, default=str, ensure_ascii=False)


class ContextFormatter(logging.Formatter):
    """Текстовый формат, дописывающий контекст в конец строки."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = getattr(record, "context", None)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items())
            message = f"{message} | {pairs}"
        return message


def setup_logging(level: str = "INFO", json_format: bool = False) -> logging.Logger:
    """
    Настраивает логгер пакета.

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
        json_format: Выводить ли записи в формате JSON

    Returns:
        Настроенный логгер пакета
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            ContextFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Возвращает логгер модуля (обычно ``__name__``)."""
    return logging.getLogger(name)


class StructuredLogger:
    """Реализация порта ``ILogger`` поверх стандартного ``logging``."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or get_logger(PACKAGE_LOGGER)

    def _log(self, level: int, message: str, context: Dict[str, Any]) -> None:
        self._logger.log(level, message, extra={"context": context})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)
