"""DKP Account Repository Interface

Defines the contract for DKP ledger persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.dkp_account import DkpAccount


class DkpAccountRepository(ABC):
    """
    Repository interface for DkpAccount persistence

    Methods use pessimistic locking (SELECT FOR UPDATE) so concurrent credits
    to the same account serialize.
    """

    @abstractmethod
    async def get_by_account_id(self, account_id: str, for_update: bool = False) -> Optional[DkpAccount]:
        """
        Retrieve ledger row by account ID

        Args:
            account_id: Account identifier
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            DkpAccount if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, account: DkpAccount) -> DkpAccount:
        """Create a new ledger row"""
        pass

    @abstractmethod
    async def increment_earned(self, account_id: str, delta: int) -> None:
        """
        Add delta to earned_dkp in the database

        Args:
            account_id: Account identifier
            delta: Signed amount added to the stored value
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[DkpAccount]:
        """Retrieve every ledger row"""
        pass
