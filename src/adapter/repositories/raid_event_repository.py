"""SQLAlchemy implementation of RaidEventRepository"""

from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.raid_event_repository import RaidEventRepository
from src.domain.raid_event import RaidEvent, EventStatus


class SqlAlchemyRaidEventRepository(RaidEventRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, event_id: int, for_update: bool = False) -> Optional[RaidEvent]:
        """
        Retrieve event by ID with optional row-level locking

        Lifecycle use cases lock the event first, which serializes every call
        mutation inside that event.
        """
        stmt = select(RaidEvent).where(RaidEvent.id == event_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, event: RaidEvent) -> RaidEvent:
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def update(self, event: RaidEvent) -> RaidEvent:
        self.session.add(event)
        await self.session.flush()
        return event

    async def list(self, status: Optional[EventStatus] = None) -> List[RaidEvent]:
        stmt = select(RaidEvent)
        if status is not None:
            stmt = stmt.where(RaidEvent.status == status)
        stmt = stmt.order_by(RaidEvent.created_at.desc(), RaidEvent.id.desc())

        result = await self.session.execute(stmt)
        return list(result.scalars().all())
