"""SaveRaidTemplate Use Case

Creates a raid template, or updates type/modifier of an existing one.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.raid_template_repository import RaidTemplateRepository
from src.domain.raid_template import RaidTemplate
from .dtos import RaidTemplateDTO, SaveTemplateCommandDTO
from .errors import validation_error

logger = logging.getLogger(__name__)


class SaveRaidTemplate:
    def __init__(self, uow: UnitOfWork, template_repo: RaidTemplateRepository):
        self.uow = uow
        self.template_repo = template_repo

    async def execute(self, command: SaveTemplateCommandDTO) -> Result[RaidTemplateDTO]:
        name = command.name.strip()
        if not name:
            return Return.err(validation_error("Template name must not be blank"))

        try:
            template = await self.template_repo.get_by_name(name)
            if template is None and command.create is False:
                return Return.err(
                    Error(code="TEMPLATE_NOT_FOUND", message=f"Raid template {name} not found")
                )
            if template is not None and command.create is True:
                return Return.err(
                    Error(code="TEMPLATE_EXISTS", message=f"Raid template {name} already exists")
                )

            if template is None:
                if command.modifier is None:
                    return Return.err(validation_error("A new template needs a modifier"))
                template = RaidTemplate(name=name, type=command.type, modifier=command.modifier)
            else:
                if command.type is not None:
                    template.type = command.type
                if command.modifier is not None:
                    template.modifier = command.modifier

            template = await self.template_repo.save(template)
            await self.uow.commit()

            logger.info(f"Raid template '{template.name}' saved ({template.modifier} DKP)")
            return Return.ok(
                RaidTemplateDTO(name=template.name, type=template.type, modifier=template.modifier)
            )

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="SAVE_TEMPLATE_FAILED",
                    message="Failed to save raid template",
                    reason=str(e),
                )
            )
