"""SQLAlchemy implementation of RaidTemplateRepository"""

from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.raid_template_repository import RaidTemplateRepository
from src.domain.raid_template import RaidTemplate


class SqlAlchemyRaidTemplateRepository(RaidTemplateRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_name(self, name: str) -> Optional[RaidTemplate]:
        stmt = select(RaidTemplate).where(RaidTemplate.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(self) -> List[RaidTemplate]:
        stmt = select(RaidTemplate).order_by(RaidTemplate.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def save(self, template: RaidTemplate) -> RaidTemplate:
        self.session.add(template)
        await self.session.flush()
        return template

    async def delete(self, template: RaidTemplate) -> None:
        await self.session.delete(template)
        await self.session.flush()
