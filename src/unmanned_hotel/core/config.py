"""
Настройки приложения.

Значения читаются из переменных окружения с префиксом ``HOTEL_``
(и из файла ``.env``, если он есть).
"""

from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HotelSettings(BaseSettings):
    """Настройки ядра отеля."""

    model_config = SettingsConfigDict(
        env_prefix="HOTEL_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    environment: str = Field(default="development")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_json: bool = Field(default=False)

    # Хранилище
    storage_backend: Literal["memory", "json"] = Field(default="memory")
    data_dir: Path = Field(default=Path(".data"))

    # Диспетчер событий
    event_history_limit: Optional[int] = Field(default=1000, gt=0)
    recent_events_limit: int = Field(default=50, gt=0)

    # Правила предметной области
    access_grace_period_minutes: int = Field(default=60, ge=0)
    cleaning_delay_hours: float = Field(default=3.0, ge=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        """Уровень логирования принимается в любом регистре."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def access_grace_period(self) -> timedelta:
        """Запас времени до заезда и после выезда для кода доступа."""
        return timedelta(minutes=self.access_grace_period_minutes)

    @property
    def cleaning_delay(self) -> timedelta:
        """Задержка между выездом и плановой уборкой."""
        return timedelta(hours=self.cleaning_delay_hours)


@lru_cache
def get_settings() -> HotelSettings:
    """Возвращает закешированный экземпляр настроек."""
    return HotelSettings()
