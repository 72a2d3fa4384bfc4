"""
Корень композиции приложения.

Создает репозитории, доменные сервисы и диспетчер событий один раз
и связывает контексты подписками на события. Контексты не знают
друг о друге: единственная связь между ними: диспетчер.
"""

from dataclasses import dataclass
from functools import partial
from typing import List, Optional

from .access.application import AccessApplicationService
from .access.domain import AccessService
from .access.event_handlers import on_booking_confirmed
from .access.infrastructure import (
    InMemoryAccessTokenRepository,
    JsonFileAccessTokenRepository,
)
from .access.interfaces import IAccessTokenRepository
from .booking.application import BookingApplicationService
from .booking.events import BookingCheckedOut, BookingConfirmed
from .booking.infrastructure import InMemoryBookingRepository, JsonFileBookingRepository
from .booking.interfaces import IBookingRepository
from .core.config import HotelSettings, get_settings
from .core.logging import StructuredLogger, get_logger, setup_logging
from .housekeeping.application import HousekeepingApplicationService
from .housekeeping.domain import HousekeepingService
from .housekeeping.event_handlers import on_booking_checked_out
from .housekeeping.infrastructure import (
    InMemoryCleaningTaskRepository,
    JsonFileCleaningTaskRepository,
)
from .housekeeping.interfaces import ICleaningTaskRepository
from .shared_kernel import EventDispatcher
from .shared_kernel.application import EventDTO


@dataclass
class HotelApp:
    """Собранное приложение: все компоненты, созданные корнем композиции."""

    settings: HotelSettings
    event_bus: EventDispatcher
    booking_repository: IBookingRepository
    access_token_repository: IAccessTokenRepository
    cleaning_task_repository: ICleaningTaskRepository
    access_service: AccessService
    housekeeping_service: HousekeepingService
    bookings: BookingApplicationService
    access: AccessApplicationService
    housekeeping: HousekeepingApplicationService

    def recent_events(self, limit: Optional[int] = None) -> List[EventDTO]:
        """Последние опубликованные события для отладочной панели."""
        if limit is None:
            limit = self.settings.recent_events_limit
        return [EventDTO.from_domain(e) for e in self.event_bus.recent_events(limit)]


def _create_repositories(settings: HotelSettings):
    if settings.storage_backend == "json":
        data_dir = settings.data_dir
        return (
            JsonFileBookingRepository(data_dir / "bookings.json"),
            JsonFileAccessTokenRepository(data_dir / "access-tokens.json"),
            JsonFileCleaningTaskRepository(data_dir / "cleaning-tasks.json"),
        )
    return (
        InMemoryBookingRepository(),
        InMemoryAccessTokenRepository(),
        InMemoryCleaningTaskRepository(),
    )


def bootstrap_app(
    settings: Optional[HotelSettings] = None, configure_logging: bool = True
) -> HotelApp:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(level=settings.log_level, json_format=settings.log_json)
    logger = StructuredLogger(get_logger(__name__))

    # 1. Хранилища: у каждого сервиса свой репозиторий
    booking_repo, token_repo, task_repo = _create_repositories(settings)

    # 2. Шина событий
    event_bus = EventDispatcher(history_limit=settings.event_history_limit)

    # 3. Доменные сервисы
    access_service = AccessService(
        token_repo, grace_period=settings.access_grace_period
    )
    housekeeping_service = HousekeepingService(
        task_repo, cleaning_delay=settings.cleaning_delay
    )

    # 4. Подписываем обработчики на события до обработки первых запросов
    event_bus.subscribe(
        BookingConfirmed, partial(on_booking_confirmed, service=access_service)
    )
    event_bus.subscribe(
        BookingCheckedOut,
        partial(on_booking_checked_out, service=housekeeping_service),
    )

    logger.info(
        "Приложение собрано",
        storage_backend=settings.storage_backend,
        environment=settings.environment,
    )

    return HotelApp(
        settings=settings,
        event_bus=event_bus,
        booking_repository=booking_repo,
        access_token_repository=token_repo,
        cleaning_task_repository=task_repo,
        access_service=access_service,
        housekeeping_service=housekeeping_service,
        bookings=BookingApplicationService(booking_repo, event_bus),
        access=AccessApplicationService(token_repo, access_service),
        housekeeping=HousekeepingApplicationService(task_repo),
    )
