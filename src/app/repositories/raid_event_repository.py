"""Raid Event Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.raid_event import RaidEvent, EventStatus


class RaidEventRepository(ABC):
    @abstractmethod
    async def get_by_id(self, event_id: int, for_update: bool = False) -> Optional[RaidEvent]:
        """
        Retrieve an event by ID

        Args:
            event_id: Event ID
            for_update: If True, lock the row so lifecycle operations on the
                event serialize

        Returns:
            RaidEvent if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, event: RaidEvent) -> RaidEvent:
        pass

    @abstractmethod
    async def update(self, event: RaidEvent) -> RaidEvent:
        pass

    @abstractmethod
    async def list(self, status: Optional[EventStatus] = None) -> List[RaidEvent]:
        """Events newest first, optionally filtered by status"""
        pass
