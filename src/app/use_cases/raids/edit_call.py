"""EditCall Use Case

Renames a call and/or changes its modifier, moving every linked account's
balance by the modifier difference.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.dkp_ledger import DkpLedger
from src.app.repositories.raid_event_repository import RaidEventRepository
from src.app.repositories.raid_call_repository import RaidCallRepository
from src.app.repositories.attendance_repository import AttendanceRepository
from .dtos import EditCallCommandDTO, EditCallResponseDTO
from .errors import validation_error, event_not_found, event_closed, call_not_found

logger = logging.getLogger(__name__)


class EditCall:
    """
    Use Case: Edit a raid call

    Business Rules:
    1. The event must exist and be active (closed events are frozen)
    2. Each linked account receives new_modifier - old_modifier once
    3. Raid name and modifier snapshots of every linked record are rewritten
    4. The call row is updated last, in the same transaction
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

    async def execute(self, command: EditCallCommandDTO) -> Result[EditCallResponseDTO]:
        if command.raid_name is None and command.modifier is None:
            return Return.err(validation_error("Provide a raid name or a modifier to update"))

        raid_name = command.raid_name.strip() if command.raid_name is not None else None
        if raid_name is not None and not raid_name:
            return Return.err(validation_error("Raid name must not be blank"))

        try:
            event = await self.event_repo.get_by_id(command.event_id, for_update=True)
            if not event:
                return Return.err(event_not_found(command.event_id))
            if not event.is_active:
                return Return.err(event_closed(event))

            call = await self.call_repo.get_by_id(command.call_id)
            if not call or call.event_id != event.id:
                return Return.err(call_not_found(command.event_id, command.call_id))

            new_raid_name = raid_name if raid_name is not None else call.raid_name
            new_modifier = command.modifier if command.modifier is not None else call.modifier

            # One record per account per call, so this is one delta per account
            records = await self.attendance_repo.get_by_call(call.id)
            for record in records:
                await self.ledger.apply_delta(record.account_id, new_modifier - record.modifier)

            await self.attendance_repo.update_snapshots(call.id, new_raid_name, new_modifier)

            old_modifier = call.modifier
            call.raid_name = new_raid_name
            call.modifier = new_modifier
            await self.call_repo.update(call)

            await self.uow.commit()

            logger.info(
                f"Raid call {call.id} edited: '{new_raid_name}', modifier {old_modifier} -> "
                f"{new_modifier} across {len(records)} accounts"
            )
            return Return.ok(EditCallResponseDTO(raid_name=new_raid_name, modifier=new_modifier))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to edit raid call {command.call_id}: {e}")
            return Return.err(
                Error(
                    code="EDIT_CALL_FAILED",
                    message="Failed to edit raid call",
                    reason=str(e),
                )
            )
