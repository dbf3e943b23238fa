"""Attendance Record Domain Entity

Snapshot of one (account, call) credit. Raid name and modifier are copied at
write time so renaming a character or a raid later does not rewrite history;
only an explicit call edit updates them.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, Integer, String
from src.domain.base import BaseModel, utc_now


class AttendanceRecord(BaseModel, table=True):
    """
    Attendance Record - One credited sighting

    Domain Rules:
    - Created only by attendance reconciliation or a manual add
    - Deleted when its call is deleted or the account is removed from the call
    - modifier is the point value credited to the account by this record
    """

    __tablename__ = "attendance"
    __table_args__ = (
        Index('ix_attendance_account_id', 'account_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )

    timestamp: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        description="When the character was seen (from the who log)"
    )

    raid_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Raid name snapshot"
    )

    character_name: str = Field(
        sa_column=Column(String(64), nullable=False),
        description="Character name snapshot"
    )

    account_id: str = Field(
        sa_column=Column(String(64), nullable=False),
        description="Credited account"
    )

    modifier: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Modifier snapshot"
    )
