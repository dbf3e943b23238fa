"""AddCharacterToCall Use Case

Manual officer credit: one character, one attendance row, one delta.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.attendance_reconciler import AttendanceReconciler
from src.app.repositories.raid_event_repository import RaidEventRepository
from src.app.repositories.raid_call_repository import RaidCallRepository
from src.app.repositories.attendance_repository import AttendanceRepository
from src.app.repositories.character_repository import CharacterRepository
from .dtos import CallCharacterCommandDTO, AddCharacterResponseDTO
from .errors import validation_error, event_not_found, event_closed, call_not_found

logger = logging.getLogger(__name__)


class AddCharacterToCall:
    """
    Use Case: Add a character to an existing call

    Business Rules:
    1. The event must exist and be active
    2. The character must exist in the census and be owned by an account
    3. The owning account must not already be credited by this call,
       through this character or any other
    4. Credit uses the call's current raid name and modifier
    """

    def __init__(
        self,
        uow: UnitOfWork,
        event_repo: RaidEventRepository,
        call_repo: RaidCallRepository,
        character_repo: CharacterRepository,
        attendance_repo: AttendanceRepository,
        reconciler: AttendanceReconciler,
    ):
        self.uow = uow
        self.event_repo = event_repo
        self.call_repo = call_repo
        self.character_repo = character_repo
        self.attendance_repo = attendance_repo
        self.reconciler = reconciler

    async def execute(self, command: CallCharacterCommandDTO) -> Result[AddCharacterResponseDTO]:
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

            character = await self.character_repo.get_by_name(character_name)
            if not character:
                return Return.err(
                    Error(
                        code="CHARACTER_NOT_FOUND",
                        message=f"{character_name} does not exist in the census",
                    )
                )
            if not character.owner_account_id:
                return Return.err(
                    Error(
                        code="CHARACTER_NOT_REGISTERED",
                        message=f"{character_name} is not registered to an account",
                    )
                )

            account_id = character.owner_account_id
            existing = await self.attendance_repo.get_by_call_and_account(call.id, account_id)
            if existing:
                return Return.err(
                    Error(
                        code="CHARACTER_ALREADY_ADDED",
                        message=f"Account of {character_name} is already on call {call.id}",
                        reason=f"credited through {existing.character_name}",
                    )
                )

            await self.reconciler.record(
                call_id=call.id,
                account_id=account_id,
                character_name=character.name,
                raid_name=call.raid_name,
                modifier=call.modifier,
            )
            await self.uow.commit()

            logger.info(f"{character.name} ({account_id}) added to raid call {call.id}")
            return Return.ok(
                AddCharacterResponseDTO(character_name=character.name, account_id=account_id)
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to add {character_name} to raid call {command.call_id}: {e}")
            return Return.err(
                Error(
                    code="ADD_CHARACTER_FAILED",
                    message="Failed to add character to raid call",
                    reason=str(e),
                )
            )
