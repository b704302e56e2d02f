"""
Dependency wiring: builds a BookingService over the request's DB session.
Tests replace `get_booking_service` through `app.dependency_overrides`.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.db.session import get_db
from hotel_booking.repositories import (
    SqlBookingRepository,
    SqlEnrollmentRepository,
    SqlRoomRepository,
    SqlTicketRepository,
)
from hotel_booking.services.booking_service import BookingService


def get_booking_service(db: AsyncSession = Depends(get_db)) -> BookingService:
    return BookingService(
        enrollments=SqlEnrollmentRepository(db),
        tickets=SqlTicketRepository(db),
        rooms=SqlRoomRepository(db),
        bookings=SqlBookingRepository(db),
    )
