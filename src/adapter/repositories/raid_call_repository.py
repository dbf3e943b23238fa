"""SQLAlchemy implementation of RaidCallRepository"""

from typing import Dict, List, Optional
from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.raid_call_repository import RaidCallRepository
from src.domain.raid_call import RaidCall


class SqlAlchemyRaidCallRepository(RaidCallRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, call_id: int) -> Optional[RaidCall]:
        stmt = select(RaidCall).where(RaidCall.id == call_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_event(self, event_id: int) -> List[RaidCall]:
        stmt = (
            select(RaidCall)
            .where(RaidCall.event_id == event_id)
            .order_by(RaidCall.sort_order, RaidCall.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_max_sort_order(self, event_id: int) -> int:
        stmt = select(func.max(RaidCall.sort_order)).where(RaidCall.event_id == event_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def create(self, call: RaidCall) -> RaidCall:
        self.session.add(call)
        await self.session.flush()
        await self.session.refresh(call)
        return call

    async def update(self, call: RaidCall) -> RaidCall:
        self.session.add(call)
        await self.session.flush()
        return call

    async def delete(self, call: RaidCall) -> None:
        await self.session.delete(call)
        await self.session.flush()

    async def update_sort_orders(self, sort_orders: Dict[int, int]) -> None:
        for call_id, sort_order in sort_orders.items():
            await self.session.execute(
                update(RaidCall)
                .where(RaidCall.id == call_id)
                .values(sort_order=sort_order)
                .execution_options(synchronize_session="fetch")
            )
        await self.session.flush()
