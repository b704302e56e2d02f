"""
Pytest fixtures for the booking service and API.

Unit tests get a BookingService whose repositories are AsyncMocks shaped
by the repository interfaces. API tests run the real service over
in-memory repositories, wired into the app via dependency_overrides.
Repository tests use a throwaway in-memory SQLite database per test.
"""

from types import SimpleNamespace
from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from hotel_booking.api.deps import get_booking_service
from hotel_booking.core.security import create_access_token
from hotel_booking.db.base import Base
from hotel_booking.db.session import get_db
from hotel_booking.main import app
from hotel_booking.services.booking_service import BookingService
from hotel_booking.services.interfaces import (
    BookingRepository,
    EnrollmentRepository,
    RoomRepository,
    TicketRepository,
)
from hotel_booking.models import User
from tests.factories import make_user
from tests.fakes import (
    InMemoryBookingRepository,
    InMemoryEnrollmentRepository,
    InMemoryRoomRepository,
    InMemoryTicketRepository,
)


@pytest.fixture
def repos() -> SimpleNamespace:
    """Interface-shaped async mocks; every lookup returns None/[] until a test says otherwise."""
    enrollments = AsyncMock(spec=EnrollmentRepository)
    enrollments.find_with_address_by_user_id.return_value = None
    tickets = AsyncMock(spec=TicketRepository)
    tickets.find_ticket_by_enrollment_id.return_value = None
    rooms = AsyncMock(spec=RoomRepository)
    rooms.find_by_id.return_value = None
    bookings = AsyncMock(spec=BookingRepository)
    bookings.find_by_room_id.return_value = []
    bookings.find_by_user_id.return_value = None
    return SimpleNamespace(enrollments=enrollments, tickets=tickets, rooms=rooms, bookings=bookings)


@pytest.fixture
def booking_service(repos: SimpleNamespace) -> BookingService:
    return BookingService(
        enrollments=repos.enrollments,
        tickets=repos.tickets,
        rooms=repos.rooms,
        bookings=repos.bookings,
    )


@pytest.fixture
def store() -> SimpleNamespace:
    rooms = InMemoryRoomRepository()
    return SimpleNamespace(
        enrollments=InMemoryEnrollmentRepository(),
        tickets=InMemoryTicketRepository(),
        rooms=rooms,
        bookings=InMemoryBookingRepository(rooms),
    )


@pytest_asyncio.fixture(scope="function")
async def client(store: SimpleNamespace) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose BookingService runs over the in-memory store."""

    def override_get_booking_service():
        return BookingService(
            enrollments=store.enrollments,
            tickets=store.tickets,
            rooms=store.rooms,
            bookings=store.bookings,
        )

    app.dependency_overrides[get_booking_service] = override_get_booking_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def user() -> User:
    return make_user(id=1)


@pytest.fixture
def user_id(user: User) -> int:
    return user.id


@pytest.fixture
def auth_headers(user_id: int) -> dict:
    token = create_access_token(data={"sub": str(user_id)})
    return {"Authorization": f"Bearer {token}"}


# SQLite in memory lives as long as its single connection, hence StaticPool
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield session, then drop tables for isolation."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client over the real repository wiring; only the DB session is swapped."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
