"""Raid event, call and template use cases"""
from .create_event import CreateEvent
from .change_event_status import ChangeEventStatus
from .create_call import CreateCall
from .edit_call import EditCall
from .delete_call import DeleteCall
from .add_character import AddCharacterToCall
from .remove_character import RemoveCharacterFromCall
from .reorder_calls import ReorderCalls
from .list_events import ListEvents
from .get_event_detail import GetEventDetail
from .list_templates import ListRaidTemplates
from .save_template import SaveRaidTemplate
from .delete_template import DeleteRaidTemplate
from .dtos import (
    CreateEventCommandDTO,
    ChangeEventStatusCommandDTO,
    RaidEventDTO,
    EventSummaryDTO,
    CreateCallCommandDTO,
    CreateCallResponseDTO,
    RaidCallDTO,
    EditCallCommandDTO,
    EditCallResponseDTO,
    OkResponseDTO,
    CallCharacterCommandDTO,
    AddCharacterResponseDTO,
    ReorderCallsCommandDTO,
    CallAttendeeDTO,
    CallDetailDTO,
    EventMemberDTO,
    EventDetailDTO,
    RaidTemplateDTO,
    SaveTemplateCommandDTO,
)

__all__ = [
    "CreateEvent",
    "ChangeEventStatus",
    "CreateCall",
    "EditCall",
    "DeleteCall",
    "AddCharacterToCall",
    "RemoveCharacterFromCall",
    "ReorderCalls",
    "ListEvents",
    "GetEventDetail",
    "ListRaidTemplates",
    "SaveRaidTemplate",
    "DeleteRaidTemplate",
    "CreateEventCommandDTO",
    "ChangeEventStatusCommandDTO",
    "RaidEventDTO",
    "EventSummaryDTO",
    "CreateCallCommandDTO",
    "CreateCallResponseDTO",
    "RaidCallDTO",
    "EditCallCommandDTO",
    "EditCallResponseDTO",
    "OkResponseDTO",
    "CallCharacterCommandDTO",
    "AddCharacterResponseDTO",
    "ReorderCallsCommandDTO",
    "CallAttendeeDTO",
    "CallDetailDTO",
    "EventMemberDTO",
    "EventDetailDTO",
    "RaidTemplateDTO",
    "SaveTemplateCommandDTO",
]
