"""Data Transfer Objects for Raid Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from src.app.services.attendance_reconciler import RejectedPlayer
from src.domain.raid_event import EventStatus


class CreateEventCommandDTO(BaseModel):
    name: str = Field(..., description="Event display name")
    created_by: str = Field(..., description="Acting officer")


class ChangeEventStatusCommandDTO(BaseModel):
    event_id: int
    status: EventStatus = Field(..., description="Target status (active or closed)")


class RaidEventDTO(BaseModel):
    id: int
    name: str
    status: EventStatus
    created_by: str
    created_at: datetime
    closed_at: Optional[datetime] = None


class EventSummaryDTO(RaidEventDTO):
    """Event row for listings"""

    call_count: int = Field(..., description="Number of calls in the event")
    total_dkp: int = Field(..., description="Sum of call modifiers")
    member_count: int = Field(..., description="Distinct accounts credited by any call")


class CreateCallCommandDTO(BaseModel):
    """
    Command DTO for creating a raid call

    When modifier is omitted it is resolved from the raid template with the
    same name, or from the raid name itself when that is a number.
    """

    event_id: int
    raid_name: str = Field(..., description="Raid target name")
    modifier: Optional[int] = Field(default=None, description="Points per attending account")
    who_log: str = Field(default="", description="Pasted /who output")
    created_by: str = Field(..., description="Acting officer")

    class Config:
        json_schema_extra = {
            "example": {
                "event_id": 1,
                "raid_name": "Vulak`Aerr",
                "modifier": 2,
                "who_log": "[Thu May 25 22:10:50 2023] [60 Warlock] Azrosaurus (Iksar) <Ex Astra>",
                "created_by": "officer_123",
            }
        }


class RaidCallDTO(BaseModel):
    id: int
    event_id: int
    raid_name: str
    modifier: int
    sort_order: int
    created_by: str
    created_at: datetime


class CreateCallResponseDTO(BaseModel):
    """
    Response DTO for call creation

    Rejections are a normal outcome and are reported here, not as errors.
    """

    call: RaidCallDTO
    recorded: int = Field(..., description="Accounts credited by this call")
    rejected: int = Field(..., description="Sightings that could not be credited")
    rejected_players: List[RejectedPlayer] = Field(default_factory=list)


class EditCallCommandDTO(BaseModel):
    event_id: int
    call_id: int
    raid_name: Optional[str] = None
    modifier: Optional[int] = None


class EditCallResponseDTO(BaseModel):
    raid_name: str
    modifier: int


class OkResponseDTO(BaseModel):
    ok: bool = True


class CallCharacterCommandDTO(BaseModel):
    """Command DTO for manually adding or removing a character on a call"""

    event_id: int
    call_id: int
    character_name: str


class AddCharacterResponseDTO(BaseModel):
    character_name: str
    account_id: str


class ReorderCallsCommandDTO(BaseModel):
    event_id: int
    call_ids: List[int] = Field(..., description="Every call ID of the event in the new order")


class CallAttendeeDTO(BaseModel):
    character_name: str
    account_id: str
    character_class: Optional[str] = None


class CallDetailDTO(RaidCallDTO):
    recorded_count: int
    attendees: List[CallAttendeeDTO]


class EventMemberDTO(BaseModel):
    """One row of the event attendance matrix"""

    account_id: str
    main_character: Optional[str] = None
    main_class: Optional[str] = None
    calls_present: List[int] = Field(..., description="IDs of the calls that credited this account")
    total_dkp: int = Field(..., description="Points earned in this event")


class EventDetailDTO(BaseModel):
    event: RaidEventDTO
    calls: List[CallDetailDTO]
    members: List[EventMemberDTO]


class RaidTemplateDTO(BaseModel):
    name: str
    type: Optional[str] = None
    modifier: int


class SaveTemplateCommandDTO(BaseModel):
    """
    Command DTO for saving a raid template

    create=True only inserts, create=False only updates, None does either.
    """

    name: str
    type: Optional[str] = None
    modifier: Optional[int] = None
    create: Optional[bool] = None


def to_event_dto(event) -> RaidEventDTO:
    return RaidEventDTO(
        id=event.id,
        name=event.name,
        status=event.status,
        created_by=event.created_by,
        created_at=event.created_at,
        closed_at=event.closed_at,
    )


def to_call_dto(call) -> RaidCallDTO:
    return RaidCallDTO(
        id=call.id,
        event_id=call.event_id,
        raid_name=call.raid_name,
        modifier=call.modifier,
        sort_order=call.sort_order,
        created_by=call.created_by,
        created_at=call.created_at,
    )
