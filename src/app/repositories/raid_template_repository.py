"""Raid Template Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.raid_template import RaidTemplate


class RaidTemplateRepository(ABC):
    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[RaidTemplate]:
        pass

    @abstractmethod
    async def list(self) -> List[RaidTemplate]:
        """Templates ordered by name"""
        pass

    @abstractmethod
    async def save(self, template: RaidTemplate) -> RaidTemplate:
        """Insert or update a template"""
        pass

    @abstractmethod
    async def delete(self, template: RaidTemplate) -> None:
        pass
