"""Request schemas for Raid API

Pydantic models for validating incoming HTTP requests.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, StrictInt
from src.domain.raid_event import EventStatus


class CreateEventRequestSchema(BaseModel):
    name: str = Field(..., min_length=1, description="Event display name")


class UpdateEventRequestSchema(BaseModel):
    """Used for PATCH /raids/events/{event_id} (close / reopen)"""

    status: EventStatus


class CreateCallRequestSchema(BaseModel):
    """
    Request schema for creating a raid call

    Used for POST /raids/events/{event_id}/calls endpoint.
    """

    raid_name: str = Field(..., min_length=1, description="Raid target name")
    modifier: Optional[StrictInt] = Field(
        default=None,
        description="Points per attending account; omitted means use the raid template",
    )
    who_log: str = Field(default="", description="Pasted /who output")

    class Config:
        json_schema_extra = {
            "example": {
                "raid_name": "Vulak`Aerr",
                "modifier": 2,
                "who_log": "[Thu May 25 22:10:50 2023] [60 Warlock] Azrosaurus (Iksar) <Ex Astra>",
            }
        }


class EditCallRequestSchema(BaseModel):
    raid_name: Optional[str] = Field(default=None, description="New raid name")
    modifier: Optional[StrictInt] = Field(default=None, description="New modifier")


class CallCharacterRequestSchema(BaseModel):
    character_name: str = Field(..., min_length=1, description="Census character name")


class ReorderCallsRequestSchema(BaseModel):
    call_ids: List[int] = Field(..., description="Every call ID of the event in the new order")


class SaveTemplateRequestSchema(BaseModel):
    name: str = Field(..., min_length=1)
    type: Optional[str] = None
    modifier: StrictInt


class UpdateTemplateRequestSchema(BaseModel):
    type: Optional[str] = None
    modifier: Optional[StrictInt] = None
