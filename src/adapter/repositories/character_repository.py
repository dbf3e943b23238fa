"""SQLAlchemy implementation of CharacterRepository"""

from typing import Dict, Iterable, List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.character_repository import CharacterRepository
from src.domain.character import Character


class SqlAlchemyCharacterRepository(CharacterRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_name(self, name: str) -> Optional[Character]:
        stmt = select(Character).where(Character.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_names(self, names: Iterable[str]) -> Dict[str, Character]:
        names = list(names)
        if not names:
            return {}

        stmt = select(Character).where(Character.name.in_(names))
        result = await self.session.execute(stmt)
        return {character.name: character for character in result.scalars().all()}

    async def get_by_account_ids(self, account_ids: Iterable[str]) -> List[Character]:
        account_ids = list(account_ids)
        if not account_ids:
            return []

        stmt = select(Character).where(Character.owner_account_id.in_(account_ids))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
