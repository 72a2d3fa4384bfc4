from ..booking.events import BookingCheckedOut
from .domain import HousekeepingService


async def on_booking_checked_out(
    event: BookingCheckedOut, service: HousekeepingService
) -> None:
    """Обработчик события выезда гостя."""
    await service.schedule_cleaning_from_checkout(event)
