"""
Booking endpoints. Domain errors raised by the service are translated
to HTTP responses by the handlers in hotel_booking.core.errors.
"""

from fastapi import APIRouter, Depends, status

from hotel_booking.api.deps import get_booking_service
from hotel_booking.core.security import get_current_user_id
from hotel_booking.schemas.booking import BookingCreate, BookingCreatedResponse, BookingResponse
from hotel_booking.services.booking_service import BookingService

router = APIRouter(prefix="/booking", tags=["Booking"])


@router.get("", response_model=BookingResponse)
async def get_user_booking(
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Return the authenticated user's booking together with its room."""
    return await service.get_booking(user_id)


@router.post("", response_model=BookingCreatedResponse, status_code=status.HTTP_201_CREATED)
async def book_room(
    booking_data: BookingCreate,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """
    Book a hotel room.

    403 when the user's ticket does not grant a hotel room or the room is
    full, 404 when the room does not exist, 400 for a non-positive room id.
    """
    booking = await service.booking_room_by_id(user_id, booking_data.room_id)
    return BookingCreatedResponse(booking_id=booking.id)
