"""
Тесты для репозиториев бронирований.
"""

import json
from uuid import uuid4

from tests.factories import dec
from unmanned_hotel.booking.domain import Booking, BookingStatus
from unmanned_hotel.booking.infrastructure import (
    InMemoryBookingRepository,
    JsonFileBookingRepository,
)
from unmanned_hotel.shared_kernel import DateRange


class TestInMemoryBookingRepository:
    async def test_find_by_room_and_date_range(self):
        repository = InMemoryBookingRepository()
        overlapping = Booking(uuid4(), "101", "Анна", DateRange(dec(20), dec(22)))
        other_room = Booking(uuid4(), "102", "Борис", DateRange(dec(20), dec(22)))
        adjacent = Booking(uuid4(), "101", "Вера", DateRange(dec(22), dec(24)))
        cancelled = Booking(uuid4(), "101", "Глеб", DateRange(dec(21), dec(23)))
        cancelled.cancel()
        for booking in (overlapping, other_room, adjacent, cancelled):
            await repository.save(booking)

        found = await repository.find_by_room_and_date_range(
            "101", DateRange(dec(21), dec(22))
        )

        assert found == [overlapping]

    async def test_find_by_id_missing(self):
        assert await InMemoryBookingRepository().find_by_id(uuid4()) is None


class TestJsonFileBookingRepository:
    async def test_bookings_survive_reload(self, tmp_path):
        path = tmp_path / "bookings.json"
        repository = JsonFileBookingRepository(path)
        booking = Booking(uuid4(), "101", "Анна", DateRange(dec(20, 15), dec(22, 11)))
        booking.check_out(dec(22, 10))
        await repository.save(booking)

        reloaded = JsonFileBookingRepository(path)
        restored = await reloaded.find_by_id(booking.id)

        assert restored is not None
        assert restored.status == BookingStatus.CHECKED_OUT
        assert restored.date_range == booking.date_range
        assert restored.uncommitted_events() == []

    async def test_file_contents(self, tmp_path):
        path = tmp_path / "nested" / "bookings.json"
        repository = JsonFileBookingRepository(path)
        booking = Booking(uuid4(), "101", "Анна", DateRange(dec(20), dec(22)))
        await repository.save(booking)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data[0]["id"] == str(booking.id)
        assert data[0]["status"] == "Confirmed"

    def test_missing_or_empty_file(self, tmp_path):
        path = tmp_path / "bookings.json"
        assert JsonFileBookingRepository(path)._bookings == {}
        path.write_text("  ", encoding="utf-8")
        assert JsonFileBookingRepository(path)._bookings == {}
