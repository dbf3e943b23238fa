"""DKP Account Domain Entity

Per-account point totals. earned_dkp is an accumulator: it is only ever
changed by DkpLedger.apply_delta, never written as an absolute value.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, Integer, String
from src.domain.base import BaseModel, utc_now


class DkpAccount(BaseModel, table=True):
    """
    DKP Account - Earned/spent totals for one account

    Domain Rules:
    - One row per account (account_id is unique)
    - earned_dkp equals the sum of modifier snapshots over every attendance
      record linked to the account through a raid call
    - earned_dkp may go negative when penalty calls (negative modifier) apply
    - spent_dkp is owned by the loot subsystem
    """

    __tablename__ = "dkp_accounts"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, primary_key=True, autoincrement=True),
    )

    account_id: str = Field(
        sa_column=Column(String(64), unique=True, index=True, nullable=False),
        description="Account identifier (unique - one ledger row per account)"
    )

    earned_dkp: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Points earned from raid attendance"
    )

    spent_dkp: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Points spent on items"
    )

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        description="Last ledger update timestamp"
    )

    @property
    def current_dkp(self) -> int:
        return self.earned_dkp - self.spent_dkp
