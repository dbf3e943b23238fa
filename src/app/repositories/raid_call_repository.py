"""Raid Call Repository Interface"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from src.domain.raid_call import RaidCall


class RaidCallRepository(ABC):
    @abstractmethod
    async def get_by_id(self, call_id: int) -> Optional[RaidCall]:
        pass

    @abstractmethod
    async def list_by_event(self, event_id: int) -> List[RaidCall]:
        """Calls of an event ordered by sort_order, then ID"""
        pass

    @abstractmethod
    async def get_max_sort_order(self, event_id: int) -> int:
        """Highest sort_order in the event, 0 when it has no calls"""
        pass

    @abstractmethod
    async def create(self, call: RaidCall) -> RaidCall:
        pass

    @abstractmethod
    async def update(self, call: RaidCall) -> RaidCall:
        pass

    @abstractmethod
    async def delete(self, call: RaidCall) -> None:
        pass

    @abstractmethod
    async def update_sort_orders(self, sort_orders: Dict[int, int]) -> None:
        """
        Assign sort_order values in bulk

        Args:
            sort_orders: Mapping of call ID to its new sort_order
        """
        pass
