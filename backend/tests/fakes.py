"""
In-memory implementations of the repository interfaces, used by the API
tests so the real BookingService runs without a database.
"""

from typing import Optional

from hotel_booking.models import Booking, Enrollment, Room, Ticket
from hotel_booking.services.interfaces import (
    BookingRepository,
    EnrollmentRepository,
    RoomRepository,
    TicketRepository,
)


class InMemoryEnrollmentRepository(EnrollmentRepository):

    def __init__(self):
        self.enrollments: list[Enrollment] = []

    async def find_with_address_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        return next((e for e in self.enrollments if e.user_id == user_id), None)


class InMemoryTicketRepository(TicketRepository):

    def __init__(self):
        self.tickets: list[Ticket] = []

    async def find_ticket_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        return next((t for t in self.tickets if t.enrollment_id == enrollment_id), None)


class InMemoryRoomRepository(RoomRepository):

    def __init__(self):
        self.rooms: dict[int, Room] = {}

    def add(self, room: Room) -> Room:
        self.rooms[room.id] = room
        return room

    async def find_by_id(self, room_id: int) -> Optional[Room]:
        return self.rooms.get(room_id)


class InMemoryBookingRepository(BookingRepository):

    def __init__(self, rooms: InMemoryRoomRepository):
        self.rooms = rooms
        self.bookings: list[Booking] = []

    async def find_by_room_id(self, room_id: int) -> list[Booking]:
        return [b for b in self.bookings if b.room_id == room_id]

    async def find_by_user_id(self, user_id: int) -> Optional[Booking]:
        matches = [b for b in self.bookings if b.user_id == user_id]
        return matches[-1] if matches else None

    async def create(self, *, room_id: int, user_id: int) -> Booking:
        booking = Booking(
            id=len(self.bookings) + 1,
            room_id=room_id,
            user_id=user_id,
            room=self.rooms.rooms.get(room_id),
        )
        self.bookings.append(booking)
        return booking
