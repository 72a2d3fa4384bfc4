"""
Тесты для сервиса приложения контекста бронирования.
"""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from tests.factories import RecordingLogger, dec
from unmanned_hotel.booking.application import (
    BookingApplicationService,
    CheckOutBookingRequest,
    CreateBookingRequest,
)
from unmanned_hotel.booking.domain import BookingStatus
from unmanned_hotel.booking.events import BookingCheckedOut, BookingConfirmed
from unmanned_hotel.booking.infrastructure import InMemoryBookingRepository
from unmanned_hotel.shared_kernel import (
    InvalidRangeError,
    InvalidTransitionError,
    NotFoundException,
    OverlappingBookingError,
)


@pytest.fixture
def repository():
    return InMemoryBookingRepository()


@pytest.fixture
def service(repository, dispatcher):
    return BookingApplicationService(repository, dispatcher, logger=RecordingLogger())


def _request(room_id="101", guest_id="Анна", check_in=None, check_out=None):
    return CreateBookingRequest(
        room_id=room_id,
        guest_id=guest_id,
        check_in=check_in or dec(20, 15),
        check_out=check_out or dec(22, 11),
    )


class TestCreateBooking:
    async def test_create_publishes_confirmation(self, service, repository, dispatcher):
        dto = await service.create_booking(_request())

        assert dto.status == BookingStatus.CONFIRMED
        assert dto.check_in == dec(20, 15)
        assert dto.check_out == dec(22, 11)

        published = dispatcher.recent_events()
        assert len(published) == 1
        assert isinstance(published[0], BookingConfirmed)
        assert published[0].aggregate_id == dto.id

        # После публикации буфер агрегата пуст
        booking = await repository.find_by_id(dto.id)
        assert booking.uncommitted_events() == []

    async def test_overlapping_booking_publishes_nothing(self, service, dispatcher):
        await service.create_booking(_request())

        with pytest.raises(OverlappingBookingError):
            await service.create_booking(
                _request(check_in=dec(21, 15), check_out=dec(23, 11))
            )

        assert len(dispatcher.recent_events()) == 1

    async def test_invalid_range(self, service):
        with pytest.raises(InvalidRangeError):
            await service.create_booking(
                _request(check_in=dec(22, 11), check_out=dec(20, 15))
            )

    def test_request_requires_room(self):
        with pytest.raises(ValidationError):
            CreateBookingRequest(
                room_id="", guest_id="Анна", check_in=dec(20), check_out=dec(21)
            )

    @pytest.mark.parametrize(
        "check_in, check_out",
        [
            ("2025-12-20T15:00:00", "2025-12-22T11:00:00Z"),
            ("2025-12-20T15:00:00Z", "2025-12-22T11:00:00"),
        ],
    )
    def test_request_requires_timezone(self, check_in, check_out):
        with pytest.raises(ValidationError):
            CreateBookingRequest(
                room_id="101", guest_id="Анна", check_in=check_in, check_out=check_out
            )

    def test_request_accepts_offsets(self):
        request = CreateBookingRequest(
            room_id="101",
            guest_id="Анна",
            check_in="2025-12-20T18:00:00+03:00",
            check_out="2025-12-22T11:00:00Z",
        )
        assert request.check_in == dec(20, 15)


class TestCheckOut:
    def test_check_out_time_requires_timezone(self):
        with pytest.raises(ValidationError):
            CheckOutBookingRequest(
                booking_id=uuid4(), check_out_time="2025-12-22T10:00:00"
            )

    async def test_check_out_publishes_event(self, service, dispatcher):
        dto = await service.create_booking(_request())

        result = await service.check_out(
            CheckOutBookingRequest(booking_id=dto.id, check_out_time=dec(22, 10))
        )

        assert result.status == BookingStatus.CHECKED_OUT
        last = dispatcher.recent_events()[-1]
        assert isinstance(last, BookingCheckedOut)
        assert last.check_out_time == dec(22, 10)

    async def test_check_out_uses_current_time_by_default(self, service, dispatcher):
        dto = await service.create_booking(_request())

        await service.check_out(CheckOutBookingRequest(booking_id=dto.id))

        last = dispatcher.recent_events()[-1]
        assert last.check_out_time.tzinfo is not None

    async def test_check_out_twice_fails(self, service, dispatcher):
        dto = await service.create_booking(_request())
        request = CheckOutBookingRequest(booking_id=dto.id, check_out_time=dec(22, 10))
        await service.check_out(request)

        with pytest.raises(InvalidTransitionError):
            await service.check_out(request)

        assert len(dispatcher.recent_events()) == 2

    async def test_check_out_unknown_booking(self, service):
        with pytest.raises(NotFoundException):
            await service.check_out(CheckOutBookingRequest(booking_id=uuid4()))


class TestCancelAndQueries:
    async def test_cancel_publishes_nothing(self, service, dispatcher):
        dto = await service.create_booking(_request())

        result = await service.cancel_booking(dto.id)

        assert result.status == BookingStatus.CANCELLED
        assert len(dispatcher.recent_events()) == 1

    async def test_cancelled_room_can_be_booked_again(self, service):
        dto = await service.create_booking(_request())
        await service.cancel_booking(dto.id)

        again = await service.create_booking(_request(guest_id="Борис"))
        assert again.guest_id == "Борис"

    async def test_get_and_list(self, service):
        first = await service.create_booking(_request(room_id="101"))
        second = await service.create_booking(_request(room_id="102"))

        assert (await service.get_booking(first.id)).room_id == "101"
        assert [b.id for b in await service.list_bookings()] == [first.id, second.id]

    async def test_get_unknown_booking(self, service):
        with pytest.raises(NotFoundException):
            await service.get_booking(uuid4())
