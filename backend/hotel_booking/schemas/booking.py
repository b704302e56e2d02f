"""
Pydantic schemas for booking request/response validation.

`room_id` is deliberately unconstrained here: non-positive ids reach the
service and are answered with BadRequestError (400) instead of a 422.
"""

from datetime import datetime
from pydantic import BaseModel


class BookingCreate(BaseModel):
    room_id: int


class BookingCreatedResponse(BaseModel):
    booking_id: int


class RoomResponse(BaseModel):
    id: int
    name: str
    capacity: int
    hotel_id: int

    model_config = {"from_attributes": True}


class BookingResponse(BaseModel):
    id: int
    user_id: int
    room_id: int
    created_at: datetime | None = None
    room: RoomResponse

    model_config = {"from_attributes": True}
