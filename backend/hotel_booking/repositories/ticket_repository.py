from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from hotel_booking.models import Ticket
from hotel_booking.services.interfaces import TicketRepository


class SqlTicketRepository(TicketRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_ticket_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        result = await self.db.execute(
            select(Ticket)
            .options(joinedload(Ticket.ticket_type))
            .where(Ticket.enrollment_id == enrollment_id)
            # An enrollment may hold several tickets; the newest one decides
            .order_by(Ticket.id.desc())
            .limit(1)
        )
        return result.scalars().first()
