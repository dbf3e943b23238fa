"""Unit tests for ChangeEventStatus and ReorderCalls"""

import pytest
from unittest.mock import AsyncMock

from src.app.use_cases.raids.change_event_status import ChangeEventStatus
from src.app.use_cases.raids.dtos import ChangeEventStatusCommandDTO, ReorderCallsCommandDTO
from src.app.use_cases.raids.reorder_calls import ReorderCalls
from src.domain.raid_call import RaidCall
from src.domain.raid_event import EventStatus, RaidEvent


@pytest.fixture
def mock_event_repo():
    repo = AsyncMock()
    repo.get_by_id.return_value = RaidEvent(id=1, name="Sky Night", created_by="officer_1")
    return repo


@pytest.fixture
def mock_call_repo():
    repo = AsyncMock()
    repo.list_by_event.return_value = [
        RaidCall(id=cid, event_id=1, raid_name=f"Call {cid}", modifier=1, sort_order=pos, created_by="o")
        for pos, cid in enumerate([11, 12, 13], start=1)
    ]
    return repo


@pytest.mark.asyncio
class TestChangeEventStatus:
    async def test_close_active_event(self, mock_uow, mock_event_repo):
        # Act
        result = await ChangeEventStatus(mock_uow, mock_event_repo).close(1)

        # Assert
        assert result.is_ok()
        assert result.value.status == EventStatus.CLOSED
        assert result.value.closed_at is not None
        mock_event_repo.get_by_id.assert_awaited_once_with(1, for_update=True)
        mock_uow.commit.assert_awaited_once()

    async def test_reopen_closed_event(self, mock_uow, mock_event_repo):
        # Arrange
        mock_event_repo.get_by_id.return_value = RaidEvent(
            id=1, name="Sky Night", created_by="officer_1", status=EventStatus.CLOSED
        )

        # Act
        result = await ChangeEventStatus(mock_uow, mock_event_repo).reopen(1)

        # Assert
        assert result.is_ok()
        assert result.value.status == EventStatus.ACTIVE
        assert result.value.closed_at is None

    async def test_same_status_is_invalid_transition(self, mock_uow, mock_event_repo):
        # Act
        result = await ChangeEventStatus(mock_uow, mock_event_repo).execute(
            ChangeEventStatusCommandDTO(event_id=1, status=EventStatus.ACTIVE)
        )

        # Assert
        assert result.error.code == "INVALID_EVENT_TRANSITION"
        mock_event_repo.update.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    async def test_missing_event(self, mock_uow, mock_event_repo):
        # Arrange
        mock_event_repo.get_by_id.return_value = None

        # Act
        result = await ChangeEventStatus(mock_uow, mock_event_repo).close(42)

        # Assert
        assert result.error.code == "EVENT_NOT_FOUND"


@pytest.mark.asyncio
class TestReorderCalls:
    async def test_reorder_assigns_positions(self, mock_uow, mock_event_repo, mock_call_repo):
        # Act
        result = await ReorderCalls(mock_uow, mock_event_repo, mock_call_repo).execute(
            ReorderCallsCommandDTO(event_id=1, call_ids=[13, 11, 12])
        )

        # Assert
        assert result.is_ok()
        mock_call_repo.update_sort_orders.assert_awaited_once_with({13: 1, 11: 2, 12: 3})
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.parametrize(
        "call_ids",
        [
            [11, 12],
            [11, 12, 13, 99],
            [11, 12, 12],
            [11, 12, 99],
        ],
    )
    async def test_invalid_permutation_is_rejected(
        self, mock_uow, mock_event_repo, mock_call_repo, call_ids
    ):
        # Act
        result = await ReorderCalls(mock_uow, mock_event_repo, mock_call_repo).execute(
            ReorderCallsCommandDTO(event_id=1, call_ids=call_ids)
        )

        # Assert
        assert result.error.code == "INVALID_CALL_ORDER"
        mock_call_repo.update_sort_orders.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    async def test_reorder_allowed_on_closed_event(self, mock_uow, mock_event_repo, mock_call_repo):
        # Arrange
        mock_event_repo.get_by_id.return_value = RaidEvent(
            id=1, name="Sky Night", created_by="officer_1", status=EventStatus.CLOSED
        )

        # Act
        result = await ReorderCalls(mock_uow, mock_event_repo, mock_call_repo).execute(
            ReorderCallsCommandDTO(event_id=1, call_ids=[12, 13, 11])
        )

        # Assert
        assert result.is_ok()
