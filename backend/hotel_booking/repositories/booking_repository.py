from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from hotel_booking.models import Booking
from hotel_booking.services.interfaces import BookingRepository


class SqlBookingRepository(BookingRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_room_id(self, room_id: int) -> list[Booking]:
        result = await self.db.execute(
            select(Booking).where(Booking.room_id == room_id)
        )
        return list(result.scalars().all())

    async def find_by_user_id(self, user_id: int) -> Optional[Booking]:
        result = await self.db.execute(
            select(Booking)
            .options(joinedload(Booking.room))
            .where(Booking.user_id == user_id)
            .order_by(Booking.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def create(self, *, room_id: int, user_id: int) -> Booking:
        booking = Booking(room_id=room_id, user_id=user_id)
        self.db.add(booking)
        await self.db.flush()
        await self.db.refresh(booking)
        return booking
