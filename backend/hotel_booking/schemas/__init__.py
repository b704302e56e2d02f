from hotel_booking.schemas.booking import (
    BookingCreate,
    BookingCreatedResponse,
    BookingResponse,
    RoomResponse,
)

__all__ = [
    "BookingCreate", "BookingCreatedResponse", "BookingResponse", "RoomResponse",
]
