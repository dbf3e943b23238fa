"""Raid Call Attendance Link

Join between a raid call and the attendance records it credited. The
account_id copy backs the one-link-per-(call, account) constraint.
"""

from sqlmodel import Field, Column
from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from src.domain.base import BaseModel


class RaidCallAttendance(BaseModel, table=True):
    """
    Raid Call Attendance - Links a call to one credited attendance record

    Domain Rules:
    - (call_id, account_id) is unique: an account is credited at most once per call
    - Rows are removed together with their attendance record
    """

    __tablename__ = "raid_call_attendance"
    __table_args__ = (
        UniqueConstraint('call_id', 'account_id', name='uq_raid_call_attendance_call_account'),
    )

    call_id: int = Field(
        sa_column=Column(Integer, ForeignKey("raid_calls.id", ondelete="CASCADE"), primary_key=True),
    )

    attendance_id: int = Field(
        sa_column=Column(Integer, ForeignKey("attendance.id", ondelete="CASCADE"), primary_key=True),
    )

    account_id: str = Field(sa_column=Column(String(64), nullable=False))
