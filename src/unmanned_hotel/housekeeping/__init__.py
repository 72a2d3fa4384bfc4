"""
Модуль контекста уборки (Housekeeping Context).

Планирует уборку номеров по событию выезда гостя и ведет
жизненный цикл задач на уборку.
"""

from . import application, domain, event_handlers, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "event_handlers",
    "infrastructure",
    "interfaces",
]
