"""Shared base for all table entities"""

from datetime import datetime, timezone
from sqlmodel import SQLModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    """Common parent so every entity registers on the same SQLModel metadata"""
    pass
