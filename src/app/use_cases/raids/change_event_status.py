"""ChangeEventStatus Use Case

Drives the raid event state machine:

    active --close--> closed --reopen--> active
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.raid_event_repository import RaidEventRepository
from src.domain.raid_event import EventStatus
from .dtos import ChangeEventStatusCommandDTO, RaidEventDTO, to_event_dto
from .errors import event_not_found

logger = logging.getLogger(__name__)


class ChangeEventStatus:
    """
    Use Case: Close or reopen a raid event

    Business Rules:
    1. The event row is locked so no call mutation races the transition
    2. Moving to the current status is an invalid transition
    3. Closing stamps closed_at, reopening clears it
    """

    def __init__(self, uow: UnitOfWork, event_repo: RaidEventRepository):
        self.uow = uow
        self.event_repo = event_repo

    async def execute(self, command: ChangeEventStatusCommandDTO) -> Result[RaidEventDTO]:
        try:
            event = await self.event_repo.get_by_id(command.event_id, for_update=True)
            if not event:
                return Return.err(event_not_found(command.event_id))

            if not event.can_transition_to(command.status):
                return Return.err(
                    Error(
                        code="INVALID_EVENT_TRANSITION",
                        message=f"Raid event {event.id} is already {event.status.value}",
                    )
                )

            if command.status == EventStatus.CLOSED:
                event.close()
            else:
                event.reopen()

            await self.event_repo.update(event)
            await self.uow.commit()

            logger.info(f"Raid event {event.id} is now {event.status.value}")
            return Return.ok(to_event_dto(event))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CHANGE_EVENT_STATUS_FAILED",
                    message="Failed to change raid event status",
                    reason=str(e),
                )
            )

    async def close(self, event_id: int) -> Result[RaidEventDTO]:
        return await self.execute(
            ChangeEventStatusCommandDTO(event_id=event_id, status=EventStatus.CLOSED)
        )

    async def reopen(self, event_id: int) -> Result[RaidEventDTO]:
        return await self.execute(
            ChangeEventStatusCommandDTO(event_id=event_id, status=EventStatus.ACTIVE)
        )
