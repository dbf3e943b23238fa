"""Raid API Routes

FastAPI routes for raid events, raid calls and raid templates. Every route
requires an officer actor.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.auth import Actor, require_officer
from src.api.error import ClientError
from src.api.schemas.raid_request import (
    CallCharacterRequestSchema,
    CreateCallRequestSchema,
    CreateEventRequestSchema,
    EditCallRequestSchema,
    ReorderCallsRequestSchema,
    SaveTemplateRequestSchema,
    UpdateEventRequestSchema,
    UpdateTemplateRequestSchema,
)
from src.app.services.attendance_reconciler import AttendanceReconciler
from src.app.services.dkp_ledger import DkpLedger
from src.app.use_cases.raids import (
    AddCharacterToCall,
    ChangeEventStatus,
    CreateCall,
    CreateEvent,
    DeleteCall,
    DeleteRaidTemplate,
    EditCall,
    GetEventDetail,
    ListEvents,
    ListRaidTemplates,
    RemoveCharacterFromCall,
    ReorderCalls,
    SaveRaidTemplate,
)
from src.app.use_cases.raids.dtos import (
    AddCharacterResponseDTO,
    CallCharacterCommandDTO,
    ChangeEventStatusCommandDTO,
    CreateCallCommandDTO,
    CreateCallResponseDTO,
    CreateEventCommandDTO,
    EditCallCommandDTO,
    EditCallResponseDTO,
    EventDetailDTO,
    EventSummaryDTO,
    OkResponseDTO,
    RaidEventDTO,
    RaidTemplateDTO,
    ReorderCallsCommandDTO,
    SaveTemplateCommandDTO,
)
from src.adapter.repositories import (
    SqlAlchemyAttendanceRepository,
    SqlAlchemyCharacterRepository,
    SqlAlchemyDkpAccountRepository,
    SqlAlchemyRaidCallRepository,
    SqlAlchemyRaidEventRepository,
    SqlAlchemyRaidTemplateRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.domain.raid_event import EventStatus

router = APIRouter(prefix="/raids", tags=["Raids"])


def _ledger(session: AsyncSession) -> DkpLedger:
    return DkpLedger(SqlAlchemyDkpAccountRepository(session))


def _reconciler(session: AsyncSession) -> AttendanceReconciler:
    return AttendanceReconciler(
        character_repo=SqlAlchemyCharacterRepository(session),
        attendance_repo=SqlAlchemyAttendanceRepository(session),
        ledger=_ledger(session),
    )


def _unwrap(result):
    if result.is_err():
        raise ClientError(result.error)
    return result.value


# ---------------------------------------------------------------- events


@router.get("/events", response_model=List[EventSummaryDTO])
async def list_events(
    status: Optional[EventStatus] = None,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    """List raid events, newest first, optionally filtered by status."""
    use_case = ListEvents(
        SqlAlchemyRaidEventRepository(session),
        SqlAlchemyRaidCallRepository(session),
        SqlAlchemyAttendanceRepository(session),
    )
    return _unwrap(await use_case.execute(status))


@router.post("/events", response_model=RaidEventDTO, status_code=status.HTTP_201_CREATED)
async def create_event(
    request: CreateEventRequestSchema,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    use_case = CreateEvent(SqlAlchemyUnitOfWork(session), SqlAlchemyRaidEventRepository(session))
    command = CreateEventCommandDTO(name=request.name, created_by=actor.id)
    return _unwrap(await use_case.execute(command))


@router.get("/events/{event_id}", response_model=EventDetailDTO)
async def get_event(
    event_id: int,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    """Event with its calls in order and the per-account attendance matrix."""
    use_case = GetEventDetail(
        SqlAlchemyRaidEventRepository(session),
        SqlAlchemyRaidCallRepository(session),
        SqlAlchemyAttendanceRepository(session),
        SqlAlchemyCharacterRepository(session),
    )
    return _unwrap(await use_case.execute(event_id))


@router.patch(
    "/events/{event_id}",
    response_model=RaidEventDTO,
    responses={409: {"description": "Event already in the requested status"}},
)
async def update_event_status(
    event_id: int,
    request: UpdateEventRequestSchema,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    """
    Close or reopen a raid event.

    **Request body:**
    - `status`: `closed` to close, `active` to reopen
    """
    use_case = ChangeEventStatus(SqlAlchemyUnitOfWork(session), SqlAlchemyRaidEventRepository(session))
    command = ChangeEventStatusCommandDTO(event_id=event_id, status=request.status)
    return _unwrap(await use_case.execute(command))


# ---------------------------------------------------------------- calls


@router.post(
    "/events/{event_id}/calls",
    response_model=CreateCallResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"description": "Event not found"},
        409: {"description": "Event is closed"},
    },
)
async def create_call(
    event_id: int,
    request: CreateCallRequestSchema,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    """
    Record a raid call from a pasted /who log.

    Every registered account in the log is credited `modifier` DKP once;
    unregistered players are listed in `rejected_players`.

    **Example request:**
    ```json
    {
      "raid_name": "Vulak`Aerr",
      "modifier": 2,
      "who_log": "[Thu May 25 22:10:50 2023] [60 Warlock] Azrosaurus (Iksar) <Ex Astra>"
    }
    ```
    """
    use_case = CreateCall(
        uow=SqlAlchemyUnitOfWork(session),
        event_repo=SqlAlchemyRaidEventRepository(session),
        call_repo=SqlAlchemyRaidCallRepository(session),
        template_repo=SqlAlchemyRaidTemplateRepository(session),
        reconciler=_reconciler(session),
        rejected_players_limit=ApplicationConfig.REJECTED_PLAYERS_LIMIT,
    )
    command = CreateCallCommandDTO(
        event_id=event_id,
        raid_name=request.raid_name,
        modifier=request.modifier,
        who_log=request.who_log,
        created_by=actor.id,
    )
    return _unwrap(await use_case.execute(command))


@router.patch("/events/{event_id}/calls/{call_id}", response_model=EditCallResponseDTO)
async def edit_call(
    event_id: int,
    call_id: int,
    request: EditCallRequestSchema,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    use_case = EditCall(
        uow=SqlAlchemyUnitOfWork(session),
        event_repo=SqlAlchemyRaidEventRepository(session),
        call_repo=SqlAlchemyRaidCallRepository(session),
        attendance_repo=SqlAlchemyAttendanceRepository(session),
        ledger=_ledger(session),
    )
    command = EditCallCommandDTO(
        event_id=event_id,
        call_id=call_id,
        raid_name=request.raid_name,
        modifier=request.modifier,
    )
    return _unwrap(await use_case.execute(command))


@router.delete("/events/{event_id}/calls/{call_id}", response_model=OkResponseDTO)
async def delete_call(
    event_id: int,
    call_id: int,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    use_case = DeleteCall(
        uow=SqlAlchemyUnitOfWork(session),
        event_repo=SqlAlchemyRaidEventRepository(session),
        call_repo=SqlAlchemyRaidCallRepository(session),
        attendance_repo=SqlAlchemyAttendanceRepository(session),
        ledger=_ledger(session),
    )
    return _unwrap(await use_case.execute(event_id, call_id))


@router.post(
    "/events/{event_id}/calls/{call_id}/add",
    response_model=AddCharacterResponseDTO,
    responses={409: {"description": "Account already on the call, or event closed"}},
)
async def add_character(
    event_id: int,
    call_id: int,
    request: CallCharacterRequestSchema,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    use_case = AddCharacterToCall(
        uow=SqlAlchemyUnitOfWork(session),
        event_repo=SqlAlchemyRaidEventRepository(session),
        call_repo=SqlAlchemyRaidCallRepository(session),
        character_repo=SqlAlchemyCharacterRepository(session),
        attendance_repo=SqlAlchemyAttendanceRepository(session),
        reconciler=_reconciler(session),
    )
    command = CallCharacterCommandDTO(
        event_id=event_id, call_id=call_id, character_name=request.character_name
    )
    return _unwrap(await use_case.execute(command))


@router.delete("/events/{event_id}/calls/{call_id}/remove", response_model=OkResponseDTO)
async def remove_character(
    event_id: int,
    call_id: int,
    request: CallCharacterRequestSchema,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    use_case = RemoveCharacterFromCall(
        uow=SqlAlchemyUnitOfWork(session),
        event_repo=SqlAlchemyRaidEventRepository(session),
        call_repo=SqlAlchemyRaidCallRepository(session),
        attendance_repo=SqlAlchemyAttendanceRepository(session),
        ledger=_ledger(session),
    )
    command = CallCharacterCommandDTO(
        event_id=event_id, call_id=call_id, character_name=request.character_name
    )
    return _unwrap(await use_case.execute(command))


@router.put("/events/{event_id}/calls/order", response_model=OkResponseDTO)
async def reorder_calls(
    event_id: int,
    request: ReorderCallsRequestSchema,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    """Reorder calls; `call_ids` must list every call of the event exactly once."""
    use_case = ReorderCalls(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyRaidEventRepository(session),
        SqlAlchemyRaidCallRepository(session),
    )
    command = ReorderCallsCommandDTO(event_id=event_id, call_ids=request.call_ids)
    return _unwrap(await use_case.execute(command))


# ---------------------------------------------------------------- templates


@router.get("/templates", response_model=List[RaidTemplateDTO])
async def list_templates(
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    use_case = ListRaidTemplates(SqlAlchemyRaidTemplateRepository(session))
    return _unwrap(await use_case.execute())


@router.post("/templates", response_model=RaidTemplateDTO, status_code=status.HTTP_201_CREATED)
async def create_template(
    request: SaveTemplateRequestSchema,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    use_case = SaveRaidTemplate(SqlAlchemyUnitOfWork(session), SqlAlchemyRaidTemplateRepository(session))
    command = SaveTemplateCommandDTO(
        name=request.name, type=request.type, modifier=request.modifier, create=True
    )
    return _unwrap(await use_case.execute(command))


@router.patch("/templates/{name}", response_model=RaidTemplateDTO)
async def update_template(
    name: str,
    request: UpdateTemplateRequestSchema,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    use_case = SaveRaidTemplate(SqlAlchemyUnitOfWork(session), SqlAlchemyRaidTemplateRepository(session))
    command = SaveTemplateCommandDTO(
        name=name, type=request.type, modifier=request.modifier, create=False
    )
    return _unwrap(await use_case.execute(command))


@router.delete("/templates/{name}", response_model=OkResponseDTO)
async def delete_template(
    name: str,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    use_case = DeleteRaidTemplate(SqlAlchemyUnitOfWork(session), SqlAlchemyRaidTemplateRepository(session))
    return _unwrap(await use_case.execute(name))
