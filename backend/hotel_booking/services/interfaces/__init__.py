"""
Service interfaces for dependency inversion.
Allows swapping data-access implementations without changing business logic.
"""

from .repositories import (
    BookingRepository,
    EnrollmentRepository,
    RoomRepository,
    TicketRepository,
)

__all__ = [
    'BookingRepository',
    'EnrollmentRepository',
    'RoomRepository',
    'TicketRepository',
]
