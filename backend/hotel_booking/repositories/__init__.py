"""
SQLAlchemy implementations of the booking data-access interfaces.
Repositories never commit; the request-scoped session owns the transaction.
"""

from .booking_repository import SqlBookingRepository
from .enrollment_repository import SqlEnrollmentRepository
from .room_repository import SqlRoomRepository
from .ticket_repository import SqlTicketRepository

__all__ = [
    'SqlBookingRepository',
    'SqlEnrollmentRepository',
    'SqlRoomRepository',
    'SqlTicketRepository',
]
