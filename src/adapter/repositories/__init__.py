from .character_repository import SqlAlchemyCharacterRepository
from .dkp_account_repository import SqlAlchemyDkpAccountRepository
from .attendance_repository import SqlAlchemyAttendanceRepository
from .raid_event_repository import SqlAlchemyRaidEventRepository
from .raid_call_repository import SqlAlchemyRaidCallRepository
from .raid_template_repository import SqlAlchemyRaidTemplateRepository

__all__ = [
    "SqlAlchemyCharacterRepository",
    "SqlAlchemyDkpAccountRepository",
    "SqlAlchemyAttendanceRepository",
    "SqlAlchemyRaidEventRepository",
    "SqlAlchemyRaidCallRepository",
    "SqlAlchemyRaidTemplateRepository",
]
