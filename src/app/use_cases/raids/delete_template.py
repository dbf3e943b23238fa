"""DeleteRaidTemplate Use Case

Existing calls keep their own raid name and modifier; only future lookups
are affected.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.raid_template_repository import RaidTemplateRepository
from .dtos import OkResponseDTO

logger = logging.getLogger(__name__)


class DeleteRaidTemplate:
    def __init__(self, uow: UnitOfWork, template_repo: RaidTemplateRepository):
        self.uow = uow
        self.template_repo = template_repo

    async def execute(self, name: str) -> Result[OkResponseDTO]:
        try:
            template = await self.template_repo.get_by_name(name)
            if template is None:
                return Return.err(
                    Error(code="TEMPLATE_NOT_FOUND", message=f"Raid template {name} not found")
                )

            await self.template_repo.delete(template)
            await self.uow.commit()

            logger.info(f"Raid template '{name}' deleted")
            return Return.ok(OkResponseDTO())

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_TEMPLATE_FAILED",
                    message="Failed to delete raid template",
                    reason=str(e),
                )
            )
