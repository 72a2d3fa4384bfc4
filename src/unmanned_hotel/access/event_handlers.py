from ..booking.events import BookingConfirmed
from .domain import AccessService


async def on_booking_confirmed(event: BookingConfirmed, service: AccessService) -> None:
    """Обработчик события подтверждения бронирования."""
    await service.generate_token_from_booking(event)
