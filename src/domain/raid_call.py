"""Raid Call Domain Entity

One recorded encounter within a raid event, carrying its own point modifier.
The pasted who log is retained for audit.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from src.domain.base import BaseModel, utc_now


class RaidCall(BaseModel, table=True):
    """
    Raid Call - Attendance snapshot for one encounter

    Domain Rules:
    - Belongs to exactly one RaidEvent
    - sort_order is 1-based and dense after a reorder
    - modifier is credited once per distinct attending account
    """

    __tablename__ = "raid_calls"
    __table_args__ = (
        Index('ix_raid_calls_event_sort', 'event_id', 'sort_order'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )

    event_id: int = Field(
        sa_column=Column(Integer, ForeignKey("raid_events.id", ondelete="CASCADE"), nullable=False),
        description="Owning raid event"
    )

    raid_name: str = Field(sa_column=Column(String(255), nullable=False))

    modifier: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Points credited per attending account (may be negative)"
    )

    who_log: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Raw pasted who log, kept for audit"
    )

    sort_order: int = Field(default=1)

    created_by: str = Field(sa_column=Column(String(64), nullable=False))

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
