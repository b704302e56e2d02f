"""
Data-access interfaces consumed by the booking service.

The service depends only on these abstractions so the checks can run
against SQLAlchemy repositories in production and against mocks or
in-memory fakes in tests.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hotel_booking.models import Booking, Enrollment, Room, Ticket


class EnrollmentRepository(ABC):

    @abstractmethod
    async def find_with_address_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        """Return the user's enrollment with its addresses loaded, or None."""
        pass


class TicketRepository(ABC):

    @abstractmethod
    async def find_ticket_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        """Return the enrollment's ticket with its TicketType loaded, or None."""
        pass


class RoomRepository(ABC):

    @abstractmethod
    async def find_by_id(self, room_id: int) -> Optional[Room]:
        pass


class BookingRepository(ABC):

    @abstractmethod
    async def find_by_room_id(self, room_id: int) -> list[Booking]:
        """All current bookings of a room; its length is the room's occupancy."""
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> Optional[Booking]:
        """The user's booking with its Room loaded, or None."""
        pass

    @abstractmethod
    async def create(self, *, room_id: int, user_id: int) -> Booking:
        pass
