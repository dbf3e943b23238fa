"""Character Domain Entity

Census row mapping a character name to its owning account. Maintained by the
roster subsystem; the attendance engine only reads it to resolve identity.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, Integer, String
from src.domain.base import BaseModel, utc_now


class CharacterStatus(str, Enum):
    """Census status of a character"""
    MAIN = "Main"
    ALT = "Alt"
    BOT = "Bot"
    DROPPED = "Dropped"


class Character(BaseModel, table=True):
    """
    Character - Census entry

    Domain Rules:
    - name is unique across the whole system
    - owner_account_id may be empty for characters nobody has claimed yet;
      such characters are reported as "Not registered" during attendance
    - At most one non-Dropped Main per account (enforced by the roster owner)
    """

    __tablename__ = "characters"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )

    name: str = Field(
        sa_column=Column(String(64), unique=True, index=True, nullable=False),
        description="Character name (unique)"
    )

    owner_account_id: Optional[str] = Field(
        default=None,
        index=True,
        description="Owning account, None when unclaimed"
    )

    character_class: Optional[str] = Field(default=None)

    level: Optional[int] = Field(default=None)

    status: CharacterStatus = Field(default=CharacterStatus.MAIN)

    last_modified: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
