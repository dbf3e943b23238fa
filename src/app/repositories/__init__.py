from .character_repository import CharacterRepository
from .dkp_account_repository import DkpAccountRepository
from .attendance_repository import AttendanceRepository
from .raid_event_repository import RaidEventRepository
from .raid_call_repository import RaidCallRepository
from .raid_template_repository import RaidTemplateRepository

__all__ = [
    "CharacterRepository",
    "DkpAccountRepository",
    "AttendanceRepository",
    "RaidEventRepository",
    "RaidCallRepository",
    "RaidTemplateRepository",
]
