"""CreateEvent Use Case

Opens a new raid event in the active state.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.raid_event_repository import RaidEventRepository
from src.domain.raid_event import RaidEvent, EventStatus
from .dtos import CreateEventCommandDTO, RaidEventDTO, to_event_dto
from .errors import validation_error

logger = logging.getLogger(__name__)


class CreateEvent:
    def __init__(self, uow: UnitOfWork, event_repo: RaidEventRepository):
        self.uow = uow
        self.event_repo = event_repo

    async def execute(self, command: CreateEventCommandDTO) -> Result[RaidEventDTO]:
        name = command.name.strip()
        if not name:
            return Return.err(validation_error("Event name must not be blank"))

        try:
            event = await self.event_repo.create(
                RaidEvent(name=name, status=EventStatus.ACTIVE, created_by=command.created_by)
            )
            await self.uow.commit()

            logger.info(f"Raid event {event.id} '{event.name}' created by {command.created_by}")
            return Return.ok(to_event_dto(event))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_EVENT_FAILED",
                    message="Failed to create raid event",
                    reason=str(e),
                )
            )
