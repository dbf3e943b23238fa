from .base import BaseModel, utc_now
from .character import Character, CharacterStatus
from .dkp_account import DkpAccount
from .attendance_record import AttendanceRecord
from .raid_event import RaidEvent, EventStatus
from .raid_call import RaidCall
from .raid_call_attendance import RaidCallAttendance
from .raid_template import RaidTemplate

__all__ = [
    "BaseModel",
    "utc_now",
    "Character",
    "CharacterStatus",
    "DkpAccount",
    "AttendanceRecord",
    "RaidEvent",
    "EventStatus",
    "RaidCall",
    "RaidCallAttendance",
    "RaidTemplate",
]
