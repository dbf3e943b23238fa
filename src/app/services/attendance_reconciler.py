"""Attendance Reconciler

Classifies who-log sightings against the census and credits each attending
account once per call.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel
from src.app.repositories.attendance_repository import AttendanceRepository
from src.app.repositories.character_repository import CharacterRepository
from src.app.services.dkp_ledger import DkpLedger
from src.app.services.who_log_parser import Sighting
from src.domain.attendance_record import AttendanceRecord

logger = logging.getLogger(__name__)

NOT_REGISTERED = "Not registered"


class RecordedAttendee(BaseModel):
    account_id: str
    character_name: str
    attendance_id: int


class RejectedPlayer(BaseModel):
    name: str
    reason: str


class ReconciliationResult(BaseModel):
    recorded: List[RecordedAttendee] = []
    rejected: List[RejectedPlayer] = []


class AttendanceReconciler:
    """
    Turns sightings into attendance records and ledger credits

    Rules:
    1. Unknown character, or one with no owning account: rejected as "Not registered"
    2. An account already credited in this call is skipped silently, so the
       first sighting in log order wins
    3. Otherwise one AttendanceRecord is linked to the call and the account
       is credited with the modifier

    Nothing is committed here; the calling use case owns the transaction.
    """

    def __init__(
        self,
        character_repo: CharacterRepository,
        attendance_repo: AttendanceRepository,
        ledger: DkpLedger,
    ):
        self.character_repo = character_repo
        self.attendance_repo = attendance_repo
        self.ledger = ledger

    async def reconcile(
        self,
        call_id: int,
        sightings: List[Sighting],
        raid_name: str,
        modifier: int,
    ) -> ReconciliationResult:
        result = ReconciliationResult()
        if not sightings:
            return result

        census = await self.character_repo.get_by_names({s.name for s in sightings})
        seen = set()

        for sighting in sightings:
            character = census.get(sighting.name)
            if character is None or not character.owner_account_id:
                result.rejected.append(RejectedPlayer(name=sighting.name, reason=NOT_REGISTERED))
                continue

            account_id = character.owner_account_id
            if account_id in seen:
                continue
            seen.add(account_id)

            recorded = await self.record(
                call_id=call_id,
                account_id=account_id,
                character_name=sighting.name,
                raid_name=raid_name,
                modifier=modifier,
                timestamp=sighting.timestamp,
            )
            result.recorded.append(recorded)

        logger.debug(
            f"Reconciled call {call_id}: {len(result.recorded)} recorded, "
            f"{len(result.rejected)} rejected"
        )
        return result

    async def record(
        self,
        call_id: int,
        account_id: str,
        character_name: str,
        raid_name: str,
        modifier: int,
        timestamp: Optional[datetime] = None,
    ) -> RecordedAttendee:
        """Credit a single account: one linked record plus one ledger delta"""
        record = AttendanceRecord(
            timestamp=timestamp or datetime.now(timezone.utc),
            raid_name=raid_name,
            character_name=character_name,
            account_id=account_id,
            modifier=modifier,
        )
        created = await self.attendance_repo.create_for_call(call_id, record)
        await self.ledger.apply_delta(account_id, modifier)

        return RecordedAttendee(
            account_id=account_id,
            character_name=character_name,
            attendance_id=created.id,
        )
