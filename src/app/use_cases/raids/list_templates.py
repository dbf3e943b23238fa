"""ListRaidTemplates Use Case"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.raid_template_repository import RaidTemplateRepository
from .dtos import RaidTemplateDTO


class ListRaidTemplates:
    def __init__(self, template_repo: RaidTemplateRepository):
        self.template_repo = template_repo

    async def execute(self) -> Result[List[RaidTemplateDTO]]:
        templates = await self.template_repo.list()
        return Return.ok(
            [RaidTemplateDTO(name=t.name, type=t.type, modifier=t.modifier) for t in templates]
        )
