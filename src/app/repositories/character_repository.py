"""Character Repository Interface

Read-only view of the census used to resolve character names to accounts.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional
from src.domain.character import Character


class CharacterRepository(ABC):
    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Character]:
        """Retrieve a character by exact name"""
        pass

    @abstractmethod
    async def get_by_names(self, names: Iterable[str]) -> Dict[str, Character]:
        """
        Bulk lookup for reconciliation

        Returns:
            Mapping of name to Character for every name that exists
        """
        pass

    @abstractmethod
    async def get_by_account_ids(self, account_ids: Iterable[str]) -> List[Character]:
        """All characters owned by the given accounts"""
        pass
