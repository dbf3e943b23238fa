"""GetEventDetail Use Case

Builds the attendance matrix of one event: its calls in order, who each call
credited, and per-account presence and points.
"""

from typing import Dict, List
from libs.result import Result, Return
from src.app.repositories.raid_event_repository import RaidEventRepository
from src.app.repositories.raid_call_repository import RaidCallRepository
from src.app.repositories.attendance_repository import AttendanceRepository
from src.app.repositories.character_repository import CharacterRepository
from src.domain.character import Character, CharacterStatus
from .dtos import (
    CallAttendeeDTO,
    CallDetailDTO,
    EventDetailDTO,
    EventMemberDTO,
    to_call_dto,
    to_event_dto,
)
from .errors import event_not_found


class GetEventDetail:
    def __init__(
        self,
        event_repo: RaidEventRepository,
        call_repo: RaidCallRepository,
        attendance_repo: AttendanceRepository,
        character_repo: CharacterRepository,
    ):
        self.event_repo = event_repo
        self.call_repo = call_repo
        self.attendance_repo = attendance_repo
        self.character_repo = character_repo

    async def execute(self, event_id: int) -> Result[EventDetailDTO]:
        event = await self.event_repo.get_by_id(event_id)
        if not event:
            return Return.err(event_not_found(event_id))

        calls = await self.call_repo.list_by_event(event.id)
        records_by_call = await self.attendance_repo.get_by_calls([call.id for call in calls])

        all_records = [record for records in records_by_call.values() for record in records]
        census = await self.character_repo.get_by_names({r.character_name for r in all_records})
        mains = self._mains_by_account(
            await self.character_repo.get_by_account_ids({r.account_id for r in all_records})
        )

        call_details: List[CallDetailDTO] = []
        members: Dict[str, EventMemberDTO] = {}

        for call in calls:
            records = records_by_call.get(call.id, [])
            attendees = []
            for record in records:
                character = census.get(record.character_name)
                attendees.append(
                    CallAttendeeDTO(
                        character_name=record.character_name,
                        account_id=record.account_id,
                        character_class=character.character_class if character else None,
                    )
                )

                member = members.get(record.account_id)
                if member is None:
                    main = mains.get(record.account_id)
                    member = EventMemberDTO(
                        account_id=record.account_id,
                        main_character=main.name if main else None,
                        main_class=main.character_class if main else None,
                        calls_present=[],
                        total_dkp=0,
                    )
                    members[record.account_id] = member
                member.calls_present.append(call.id)
                member.total_dkp += record.modifier

            call_details.append(
                CallDetailDTO(
                    **to_call_dto(call).model_dump(),
                    recorded_count=len(records),
                    attendees=attendees,
                )
            )

        return Return.ok(
            EventDetailDTO(
                event=to_event_dto(event),
                calls=call_details,
                members=sorted(members.values(), key=lambda m: (-m.total_dkp, m.account_id)),
            )
        )

    @staticmethod
    def _mains_by_account(characters: List[Character]) -> Dict[str, Character]:
        mains: Dict[str, Character] = {}
        for character in characters:
            if character.status == CharacterStatus.MAIN:
                mains[character.owner_account_id] = character
        return mains
