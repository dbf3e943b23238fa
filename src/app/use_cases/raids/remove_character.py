"""RemoveCharacterFromCall Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.dkp_ledger import DkpLedger
from src.app.repositories.raid_event_repository import RaidEventRepository
from src.app.repositories.raid_call_repository import RaidCallRepository
from src.app.repositories.attendance_repository import AttendanceRepository
from .dtos import CallCharacterCommandDTO, OkResponseDTO
from .errors import validation_error, event_not_found, event_closed, call_not_found

logger = logging.getLogger(__name__)


class RemoveCharacterFromCall:
    """
    Use Case: Remove a character's credit from a call

    Reverses the record's modifier on its account, then deletes the record
    and its link.
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

    async def execute(self, command: CallCharacterCommandDTO) -> Result[OkResponseDTO]:
        character_name = command.character_name.strip()
        if not character_name:
            return Return.err(validation_error("Character name must not be blank"))

        try:
            event = await self.event_repo.get_by_id(command.event_id, for_update=True)
            if not event:
                return Return.err(event_not_found(command.event_id))
            if not event.is_active:
                return Return.err(event_closed(event))

            call = await self.call_repo.get_by_id(command.call_id)
            if not call or call.event_id != event.id:
                return Return.err(call_not_found(command.event_id, command.call_id))

            record = await self.attendance_repo.get_by_call_and_character(call.id, character_name)
            if not record:
                return Return.err(
                    Error(
                        code="ATTENDANCE_NOT_FOUND",
                        message=f"{character_name} is not on raid call {call.id}",
                    )
                )

            await self.ledger.apply_delta(record.account_id, -record.modifier)
            await self.attendance_repo.delete(record)

            await self.uow.commit()

            logger.info(f"{character_name} ({record.account_id}) removed from raid call {call.id}")
            return Return.ok(OkResponseDTO())

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to remove {character_name} from raid call {command.call_id}: {e}")
            return Return.err(
                Error(
                    code="REMOVE_CHARACTER_FAILED",
                    message="Failed to remove character from raid call",
                    reason=str(e),
                )
            )
