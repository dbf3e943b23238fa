"""ReorderCalls Use Case

Pure metadata operation: no ledger interaction.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.raid_event_repository import RaidEventRepository
from src.app.repositories.raid_call_repository import RaidCallRepository
from .dtos import ReorderCallsCommandDTO, OkResponseDTO
from .errors import event_not_found

logger = logging.getLogger(__name__)


class ReorderCalls:
    """
    Use Case: Reorder the calls of an event

    Business Rules:
    1. call_ids must be a permutation of the event's current call IDs:
       no partial lists, no duplicates, no foreign IDs
    2. sort_order becomes the 1-based position in call_ids
    3. Allowed on closed events
    4. Applied in one transaction, so readers never see a half-applied order
    """

    def __init__(
        self,
        uow: UnitOfWork,
        event_repo: RaidEventRepository,
        call_repo: RaidCallRepository,
    ):
        self.uow = uow
        self.event_repo = event_repo
        self.call_repo = call_repo

    async def execute(self, command: ReorderCallsCommandDTO) -> Result[OkResponseDTO]:
        try:
            event = await self.event_repo.get_by_id(command.event_id, for_update=True)
            if not event:
                return Return.err(event_not_found(command.event_id))

            calls = await self.call_repo.list_by_event(event.id)
            current_ids = {call.id for call in calls}
            requested_ids = list(command.call_ids)

            if len(requested_ids) != len(set(requested_ids)) or set(requested_ids) != current_ids:
                return Return.err(
                    Error(
                        code="INVALID_CALL_ORDER",
                        message="Call IDs must list every call of the event exactly once",
                        reason=f"expected={sorted(current_ids)}, got={requested_ids}",
                    )
                )

            await self.call_repo.update_sort_orders(
                {call_id: position for position, call_id in enumerate(requested_ids, start=1)}
            )
            await self.uow.commit()

            logger.info(f"Reordered {len(requested_ids)} calls in raid event {event.id}")
            return Return.ok(OkResponseDTO())

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="REORDER_CALLS_FAILED",
                    message="Failed to reorder raid calls",
                    reason=str(e),
                )
            )
