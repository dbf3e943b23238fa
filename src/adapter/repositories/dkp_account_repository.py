"""SQLAlchemy implementation of DkpAccountRepository

Provides persistence for DkpAccount entities with pessimistic locking support
to prevent lost updates during concurrent credits.
"""

from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.dkp_account_repository import DkpAccountRepository
from src.domain.dkp_account import DkpAccount


class SqlAlchemyDkpAccountRepository(DkpAccountRepository):
    """
    SQLAlchemy implementation of DkpAccountRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE
    - In-database increments (earned_dkp = earned_dkp + delta)
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_account_id(self, account_id: str, for_update: bool = False) -> Optional[DkpAccount]:
        """
        Retrieve ledger row by account ID with optional row-level locking

        Args:
            account_id: Account identifier
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            DkpAccount if found, None otherwise
        """
        stmt = select(DkpAccount).where(DkpAccount.account_id == account_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, account: DkpAccount) -> DkpAccount:
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def increment_earned(self, account_id: str, delta: int) -> None:
        """
        Increment earned_dkp in place

        Note:
            Should be called within a transaction with the row already locked
        """
        stmt = (
            update(DkpAccount)
            .where(DkpAccount.account_id == account_id)
            .values(
                earned_dkp=DkpAccount.earned_dkp + delta,
                updated_at=datetime.now(timezone.utc),
            )
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def get_all(self) -> List[DkpAccount]:
        stmt = select(DkpAccount).order_by(DkpAccount.account_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
