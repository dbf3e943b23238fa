"""Raid Event Domain Entity

Container for an ordered sequence of raid calls with an open/closed
lifecycle:

    active --close--> closed --reopen--> active

Closed events reject every call mutation except reordering.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, Integer, String
from src.domain.base import BaseModel, utc_now


class EventStatus(str, Enum):
    """Raid event lifecycle states"""
    ACTIVE = "active"
    CLOSED = "closed"


class RaidEvent(BaseModel, table=True):
    """
    Raid Event - Groups the calls of one raid night

    Domain Rules:
    - Starts active
    - close() is only legal from active, reopen() only from closed
    - closed_at is set while closed and cleared on reopen
    """

    __tablename__ = "raid_events"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )

    name: str = Field(sa_column=Column(String(255), nullable=False))

    status: EventStatus = Field(default=EventStatus.ACTIVE, index=True)

    created_by: str = Field(sa_column=Column(String(64), nullable=False))

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    closed_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    @property
    def is_active(self) -> bool:
        return self.status == EventStatus.ACTIVE

    def can_transition_to(self, status: EventStatus) -> bool:
        return status != self.status

    def close(self) -> None:
        if self.status != EventStatus.ACTIVE:
            raise ValueError(f"Event {self.id} is already closed")
        self.status = EventStatus.CLOSED
        self.closed_at = utc_now()

    def reopen(self) -> None:
        if self.status != EventStatus.CLOSED:
            raise ValueError(f"Event {self.id} is not closed")
        self.status = EventStatus.ACTIVE
        self.closed_at = None
