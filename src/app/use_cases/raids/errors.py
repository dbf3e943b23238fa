"""Error builders shared by the raid use cases"""

from libs.result import Error
from src.domain.raid_event import RaidEvent


def validation_error(message: str) -> Error:
    return Error(code="VALIDATION_ERROR", message=message)


def event_not_found(event_id: int) -> Error:
    return Error(code="EVENT_NOT_FOUND", message=f"Raid event {event_id} not found")


def event_closed(event: RaidEvent) -> Error:
    return Error(
        code="EVENT_CLOSED",
        message=f"Raid event {event.id} is closed",
        reason="Reopen the event before changing its calls",
    )


def call_not_found(event_id: int, call_id: int) -> Error:
    return Error(
        code="CALL_NOT_FOUND",
        message=f"Raid call {call_id} not found in event {event_id}",
    )
