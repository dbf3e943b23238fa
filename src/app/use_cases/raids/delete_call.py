"""DeleteCall Use Case

Removes a raid call and reverses every credit it granted.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.dkp_ledger import DkpLedger
from src.app.repositories.raid_event_repository import RaidEventRepository
from src.app.repositories.raid_call_repository import RaidCallRepository
from src.app.repositories.attendance_repository import AttendanceRepository
from .dtos import OkResponseDTO
from .errors import event_not_found, event_closed, call_not_found

logger = logging.getLogger(__name__)


class DeleteCall:
    """
    Use Case: Delete a raid call

    Flow:
    1. Lock event and check it is active
    2. Reverse each linked account's credit (apply -modifier)
    3. Delete linked attendance records and links
    4. Delete the call row
    5. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        event_repo: RaidEventRepository,
        call_repo: RaidCallRepository,
        attendance_repo: AttendanceRepository,
        ledger: DkpLedger,
    ):
        self.uow = uow
        self.event_repo = event_repo
        self.call_repo = call_repo
        self.attendance_repo = attendance_repo
        self.ledger = ledger

    async def execute(self, event_id: int, call_id: int) -> Result[OkResponseDTO]:
        try:
            event = await self.event_repo.get_by_id(event_id, for_update=True)
            if not event:
                return Return.err(event_not_found(event_id))
            if not event.is_active:
                return Return.err(event_closed(event))

            call = await self.call_repo.get_by_id(call_id)
            if not call or call.event_id != event.id:
                return Return.err(call_not_found(event_id, call_id))

            modifier = call.modifier
            records = await self.attendance_repo.get_by_call(call.id)
            for record in records:
                await self.ledger.apply_delta(record.account_id, -record.modifier)

            await self.attendance_repo.delete_by_call(call.id)
            await self.call_repo.delete(call)

            await self.uow.commit()

            logger.info(
                f"Raid call {call_id} deleted from event {event_id}, "
                f"reversed {modifier} DKP for {len(records)} accounts"
            )
            return Return.ok(OkResponseDTO())

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete raid call {call_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_CALL_FAILED",
                    message="Failed to delete raid call",
                    reason=str(e),
                )
            )
