"""Raid Template Domain Entity

Catalogue of known raid targets and their default modifier, used when a call
is created without an explicit modifier.
"""

from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import Integer, String
from src.domain.base import BaseModel


class RaidTemplate(BaseModel, table=True):
    __tablename__ = "raid_templates"

    name: str = Field(sa_column=Column(String(255), primary_key=True))

    type: Optional[str] = Field(default=None, sa_column=Column(String(64), nullable=True))

    modifier: int = Field(sa_column=Column(Integer, nullable=False))
