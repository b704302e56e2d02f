"""
Domain errors raised by the booking service.

Services never build HTTP responses themselves; each error carries a
`name`, a human readable `message` and the status code the API layer
answers with (see `register_exception_handlers`).
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from hotel_booking.core.logging import get_logger

logger = get_logger(__name__)


class BookingAppError(Exception):
    """Base class for every error the booking flow reports to its caller."""

    name: str = "BookingAppError"
    default_message: str = "Unexpected booking error"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"name": self.name, "message": self.message}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class NotFoundError(BookingAppError):
    name = "NotFoundError"
    default_message = "No result for this search!"
    status_code = status.HTTP_404_NOT_FOUND


class BadRequestError(BookingAppError):
    name = "BadRequestError"
    default_message = "Bad Request!"
    status_code = status.HTTP_400_BAD_REQUEST


class CannotBookingError(BookingAppError):
    name = "CannotBookingError"
    default_message = "Cannot booking this room! Overcapacity!"
    status_code = status.HTTP_403_FORBIDDEN


async def booking_error_handler(request: Request, exc: BookingAppError) -> JSONResponse:
    logger.info(
        "booking_error_response",
        error=exc.name,
        status_code=exc.status_code,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingAppError, booking_error_handler)
