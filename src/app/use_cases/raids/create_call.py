"""CreateCall Use Case

Records a raid call from a pasted who log and credits every attending
account, all inside one transaction.
"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.attendance_reconciler import AttendanceReconciler
from src.app.services.who_log_parser import parse_who_log
from src.app.repositories.raid_event_repository import RaidEventRepository
from src.app.repositories.raid_call_repository import RaidCallRepository
from src.app.repositories.raid_template_repository import RaidTemplateRepository
from src.domain.raid_call import RaidCall
from .dtos import CreateCallCommandDTO, CreateCallResponseDTO, to_call_dto
from .errors import validation_error, event_not_found, event_closed

logger = logging.getLogger(__name__)


class CreateCall:
    """
    Use Case: Create a raid call

    Business Rules:
    1. The event must exist and be active
    2. A missing modifier is the raid name itself when it is a number,
       otherwise the modifier of the raid template of the same name
    3. The call is appended after the event's current last call
    4. Each registered account in the log is credited exactly once
    5. Unregistered players are reported back, never raised

    Flow:
    1. Lock event (SELECT FOR UPDATE) and check status
    2. Resolve modifier
    3. Parse who log
    4. Create call row
    5. Reconcile sightings (attendance rows + ledger deltas)
    6. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        event_repo: RaidEventRepository,
        call_repo: RaidCallRepository,
        template_repo: RaidTemplateRepository,
        reconciler: AttendanceReconciler,
        rejected_players_limit: Optional[int] = None,
    ):
        self.uow = uow
        self.event_repo = event_repo
        self.call_repo = call_repo
        self.template_repo = template_repo
        self.reconciler = reconciler
        self.rejected_players_limit = rejected_players_limit

    async def execute(self, command: CreateCallCommandDTO) -> Result[CreateCallResponseDTO]:
        raid_name = command.raid_name.strip()
        if not raid_name:
            return Return.err(validation_error("Raid name must not be blank"))

        try:
            # Step 1: Lock event and check it accepts new calls
            event = await self.event_repo.get_by_id(command.event_id, for_update=True)
            if not event:
                return Return.err(event_not_found(command.event_id))
            if not event.is_active:
                return Return.err(event_closed(event))

            # Step 2: Resolve modifier
            modifier = command.modifier
            if modifier is None:
                modifier = await self._resolve_modifier(raid_name)
                if modifier is None:
                    return Return.err(
                        Error(
                            code="UNKNOWN_RAID",
                            message=f"{raid_name} not found in raid templates",
                            reason="Provide a modifier or create a raid template first",
                        )
                    )

            # Step 3: Parse who log
            sightings = parse_who_log(command.who_log)

            # Step 4: Create call row at the end of the event
            sort_order = await self.call_repo.get_max_sort_order(event.id) + 1
            call = await self.call_repo.create(
                RaidCall(
                    event_id=event.id,
                    raid_name=raid_name,
                    modifier=modifier,
                    who_log=command.who_log,
                    sort_order=sort_order,
                    created_by=command.created_by,
                )
            )

            # Step 5: Attendance rows and ledger credits
            result = await self.reconciler.reconcile(call.id, sightings, raid_name, modifier)

            # Step 6: Commit
            await self.uow.commit()

            logger.info(
                f"Raid call {call.id} '{raid_name}' ({modifier} DKP) created in event {event.id}: "
                f"{len(result.recorded)} recorded, {len(result.rejected)} rejected"
            )

            rejected_players = result.rejected
            if self.rejected_players_limit is not None:
                rejected_players = rejected_players[: self.rejected_players_limit]

            return Return.ok(
                CreateCallResponseDTO(
                    call=to_call_dto(call),
                    recorded=len(result.recorded),
                    rejected=len(result.rejected),
                    rejected_players=rejected_players,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create raid call in event {command.event_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_CALL_FAILED",
                    message="Failed to create raid call",
                    reason=str(e),
                )
            )

    async def _resolve_modifier(self, raid_name: str) -> Optional[int]:
        try:
            return int(raid_name)
        except ValueError:
            pass
        template = await self.template_repo.get_by_name(raid_name)
        if template is not None:
            return template.modifier
        return None
