"""ListEvents Use Case

Read-only event listing with per-event call and member totals.
"""

from typing import List, Optional
from libs.result import Result, Return
from src.app.repositories.raid_event_repository import RaidEventRepository
from src.app.repositories.raid_call_repository import RaidCallRepository
from src.app.repositories.attendance_repository import AttendanceRepository
from src.domain.raid_event import EventStatus
from .dtos import EventSummaryDTO


class ListEvents:
    def __init__(
        self,
        event_repo: RaidEventRepository,
        call_repo: RaidCallRepository,
        attendance_repo: AttendanceRepository,
    ):
        self.event_repo = event_repo
        self.call_repo = call_repo
        self.attendance_repo = attendance_repo

    async def execute(self, status: Optional[EventStatus] = None) -> Result[List[EventSummaryDTO]]:
        events = await self.event_repo.list(status)

        summaries = []
        for event in events:
            calls = await self.call_repo.list_by_event(event.id)
            records_by_call = await self.attendance_repo.get_by_calls([call.id for call in calls])
            members = {
                record.account_id
                for records in records_by_call.values()
                for record in records
            }

            summaries.append(
                EventSummaryDTO(
                    id=event.id,
                    name=event.name,
                    status=event.status,
                    created_by=event.created_by,
                    created_at=event.created_at,
                    closed_at=event.closed_at,
                    call_count=len(calls),
                    total_dkp=sum(call.modifier for call in calls),
                    member_count=len(members),
                )
            )

        return Return.ok(summaries)
