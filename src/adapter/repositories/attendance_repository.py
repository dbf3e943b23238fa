"""SQLAlchemy implementation of AttendanceRepository

Attendance records are always written and removed together with their
raid_call_attendance link rows.
"""

from collections import defaultdict
from typing import Dict, List, Optional
from sqlalchemy import delete, func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.attendance_repository import AttendanceRepository
from src.domain.attendance_record import AttendanceRecord
from src.domain.raid_call_attendance import RaidCallAttendance


class SqlAlchemyAttendanceRepository(AttendanceRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _linked_to(self, call_id: int):
        return (
            select(AttendanceRecord)
            .join(RaidCallAttendance, RaidCallAttendance.attendance_id == AttendanceRecord.id)
            .where(RaidCallAttendance.call_id == call_id)
        )

    async def create_for_call(self, call_id: int, record: AttendanceRecord) -> AttendanceRecord:
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)

        link = RaidCallAttendance(
            call_id=call_id,
            attendance_id=record.id,
            account_id=record.account_id,
        )
        self.session.add(link)
        await self.session.flush()
        return record

    async def get_by_call(self, call_id: int) -> List[AttendanceRecord]:
        stmt = self._linked_to(call_id).order_by(AttendanceRecord.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_calls(self, call_ids: List[int]) -> Dict[int, List[AttendanceRecord]]:
        grouped: Dict[int, List[AttendanceRecord]] = defaultdict(list)
        if not call_ids:
            return grouped

        stmt = (
            select(RaidCallAttendance.call_id, AttendanceRecord)
            .join(AttendanceRecord, RaidCallAttendance.attendance_id == AttendanceRecord.id)
            .where(RaidCallAttendance.call_id.in_(call_ids))
            .order_by(AttendanceRecord.id)
        )
        result = await self.session.execute(stmt)
        for call_id, record in result.all():
            grouped[call_id].append(record)
        return grouped

    async def get_by_call_and_account(self, call_id: int, account_id: str) -> Optional[AttendanceRecord]:
        stmt = self._linked_to(call_id).where(RaidCallAttendance.account_id == account_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_call_and_character(self, call_id: int, character_name: str) -> Optional[AttendanceRecord]:
        stmt = self._linked_to(call_id).where(AttendanceRecord.character_name == character_name)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def _attendance_ids(self, call_id: int) -> List[int]:
        stmt = select(RaidCallAttendance.attendance_id).where(RaidCallAttendance.call_id == call_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update_snapshots(self, call_id: int, raid_name: str, modifier: int) -> int:
        attendance_ids = await self._attendance_ids(call_id)
        if not attendance_ids:
            return 0

        stmt = (
            update(AttendanceRecord)
            .where(AttendanceRecord.id.in_(attendance_ids))
            .values(raid_name=raid_name, modifier=modifier)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return len(attendance_ids)

    async def delete(self, record: AttendanceRecord) -> None:
        await self.session.execute(
            delete(RaidCallAttendance).where(RaidCallAttendance.attendance_id == record.id)
        )
        await self.session.delete(record)
        await self.session.flush()

    async def delete_by_call(self, call_id: int) -> int:
        attendance_ids = await self._attendance_ids(call_id)
        if not attendance_ids:
            return 0

        await self.session.execute(
            delete(RaidCallAttendance).where(RaidCallAttendance.call_id == call_id)
        )
        await self.session.execute(
            delete(AttendanceRecord)
            .where(AttendanceRecord.id.in_(attendance_ids))
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
        return len(attendance_ids)

    async def sum_linked_modifiers_by_account(self) -> Dict[str, int]:
        stmt = (
            select(AttendanceRecord.account_id, func.sum(AttendanceRecord.modifier))
            .join(RaidCallAttendance, RaidCallAttendance.attendance_id == AttendanceRecord.id)
            .group_by(AttendanceRecord.account_id)
        )
        result = await self.session.execute(stmt)
        return {account_id: int(total or 0) for account_id, total in result.all()}
