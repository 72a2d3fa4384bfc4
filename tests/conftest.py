"""
Конфигурация тестов для pytest.
Добавляет каталог src в PYTHONPATH и объявляет общие фикстуры.
"""
import sys
from pathlib import Path

import pytest

# Добавляем каталог с исходниками в PYTHONPATH
src_dir = str(Path(__file__).parent.parent / "src")
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from unmanned_hotel.core.config import HotelSettings  # noqa: E402
from unmanned_hotel.shared_kernel import DateRange, EventDispatcher  # noqa: E402

from .factories import RecordingLogger, dec  # noqa: E402


@pytest.fixture
def stay() -> DateRange:
    """Проживание с 20 декабря 15:00 до 22 декабря 11:00."""
    return DateRange(dec(20, 15), dec(22, 11))


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def dispatcher(recording_logger) -> EventDispatcher:
    return EventDispatcher(logger=recording_logger)


@pytest.fixture
def settings(tmp_path) -> HotelSettings:
    """Настройки для тестов, не зависящие от окружения."""
    return HotelSettings(
        _env_file=None,
        environment="test",
        storage_backend="memory",
        data_dir=tmp_path / "data",
    )
