"""
Модуль контекста доступа (Access Context).

Выдает шестизначные коды доступа к номерам по событию подтверждения
бронирования и проверяет попытки открыть дверь.
"""

from . import application, domain, event_handlers, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "event_handlers",
    "infrastructure",
    "interfaces",
]
