"""Сквозная инфраструктура: конфигурация и логирование."""

from .config import HotelSettings, get_settings
from .logging import StructuredLogger, get_logger, setup_logging

__all__ = [
    "HotelSettings",
    "get_settings",
    "StructuredLogger",
    "get_logger",
    "setup_logging",
]
