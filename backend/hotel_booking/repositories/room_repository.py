from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.models import Room
from hotel_booking.services.interfaces import RoomRepository


class SqlRoomRepository(RoomRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, room_id: int) -> Optional[Room]:
        return await self.db.get(Room, room_id)
