"""
Hotel room booking: eligibility and capacity checks.

A booking is created only after two gates pass, in this order:

  1. Eligibility: the user has an enrollment, and the enrollment's ticket
     is PAID, in-person (not remote) and includes the hotel.
  2. Capacity: the room exists and its current number of bookings is
     below `Room.capacity`.

Eligibility runs first, so a user who cannot book at all always gets
CannotBookingError even when the room is also missing or full.

Every failure is raised immediately as a BookingAppError subclass and is
never retried. The capacity check is a read followed by an insert; the
invariant under concurrent requests is left to the database transaction.
"""

from hotel_booking.core.errors import BadRequestError, CannotBookingError, NotFoundError
from hotel_booking.core.logging import get_logger
from hotel_booking.core.metrics import (
    booking_latency,
    record_booking_attempt,
    record_booking_rejection,
)
from hotel_booking.models import Booking
from hotel_booking.services.interfaces import (
    BookingRepository,
    EnrollmentRepository,
    RoomRepository,
    TicketRepository,
)

logger = get_logger(__name__)


class BookingService:

    def __init__(
        self,
        enrollments: EnrollmentRepository,
        tickets: TicketRepository,
        rooms: RoomRepository,
        bookings: BookingRepository,
    ):
        self.enrollments = enrollments
        self.tickets = tickets
        self.rooms = rooms
        self.bookings = bookings

    def _reject(self, reason: str, **context) -> CannotBookingError:
        logger.warning("booking_rejected", reason=reason, **context)
        record_booking_rejection(reason)
        return CannotBookingError()

    async def check_enrollment_ticket(self, user_id: int) -> None:
        """Raise CannotBookingError unless the user holds a ticket that grants a hotel room."""
        enrollment = await self.enrollments.find_with_address_by_user_id(user_id)
        if not enrollment:
            raise self._reject("no_enrollment", user_id=user_id)

        ticket = await self.tickets.find_ticket_by_enrollment_id(enrollment.id)
        if not ticket:
            raise self._reject("no_ticket", user_id=user_id, enrollment_id=enrollment.id)
        if not ticket.is_paid:
            raise self._reject("ticket_not_paid", user_id=user_id, ticket_id=ticket.id)
        if ticket.ticket_type.is_remote:
            raise self._reject("ticket_remote", user_id=user_id, ticket_id=ticket.id)
        if not ticket.ticket_type.includes_hotel:
            raise self._reject("ticket_without_hotel", user_id=user_id, ticket_id=ticket.id)

    async def check_valid_booking(self, room_id: int) -> None:
        """Raise NotFoundError for an unknown room, CannotBookingError for a full one."""
        room = await self.rooms.find_by_id(room_id)
        if not room:
            logger.info("room_not_found", room_id=room_id)
            raise NotFoundError()

        bookings = await self.bookings.find_by_room_id(room_id)
        if len(bookings) >= room.capacity:
            raise self._reject(
                "room_full",
                room_id=room_id,
                capacity=room.capacity,
                occupied=len(bookings),
            )

    async def booking_room_by_id(self, user_id: int, room_id: int) -> Booking:
        """Validate the request and create a booking of `room_id` for `user_id`."""
        if isinstance(room_id, bool) or not isinstance(room_id, int) or room_id <= 0:
            record_booking_attempt("bad_request")
            logger.info("booking_bad_request", user_id=user_id, room_id=room_id)
            raise BadRequestError()

        with booking_latency.time():
            try:
                await self.check_enrollment_ticket(user_id)
                await self.check_valid_booking(room_id)
            except CannotBookingError:
                record_booking_attempt("rejected")
                raise
            except NotFoundError:
                record_booking_attempt("not_found")
                raise

            booking = await self.bookings.create(room_id=room_id, user_id=user_id)

        record_booking_attempt("created")
        logger.info(
            "booking_created",
            booking_id=booking.id,
            user_id=user_id,
            room_id=room_id,
        )
        return booking

    async def get_booking(self, user_id: int) -> Booking:
        booking = await self.bookings.find_by_user_id(user_id)
        if not booking:
            logger.info("booking_not_found", user_id=user_id)
            raise NotFoundError()
        return booking
