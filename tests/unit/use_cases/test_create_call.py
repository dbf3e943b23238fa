"""Unit tests for CreateCall use case"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.attendance_reconciler import (
    ReconciliationResult,
    RecordedAttendee,
    RejectedPlayer,
)
from src.app.use_cases.raids.create_call import CreateCall
from src.app.use_cases.raids.dtos import CreateCallCommandDTO
from src.domain.raid_call import RaidCall
from src.domain.raid_event import EventStatus, RaidEvent
from src.domain.raid_template import RaidTemplate

WHO_LOG = "\n".join([
    "[Thu May 25 22:10:50 2023] [60 Warlock] Alpha (Iksar) <Ex Astra>",
    "[Thu May 25 22:10:50 2023] [60 Cleric] Stranger (Dwarf) <Other Guild>",
])


@pytest.fixture
def mock_event_repo():
    repo = AsyncMock()
    repo.get_by_id.return_value = RaidEvent(id=1, name="Sky Night", created_by="officer_1")
    return repo


@pytest.fixture
def mock_call_repo():
    repo = AsyncMock()
    repo.get_max_sort_order.return_value = 2

    async def create(call: RaidCall):
        call.id = 10
        return call

    repo.create = AsyncMock(side_effect=create)
    return repo


@pytest.fixture
def mock_template_repo():
    repo = AsyncMock()
    repo.get_by_name.return_value = None
    return repo


@pytest.fixture
def mock_reconciler():
    reconciler = MagicMock()
    reconciler.reconcile = AsyncMock(
        return_value=ReconciliationResult(
            recorded=[RecordedAttendee(account_id="acct-a", character_name="Alpha", attendance_id=1)],
            rejected=[RejectedPlayer(name="Stranger", reason="Not registered")],
        )
    )
    return reconciler


@pytest.fixture
def use_case(mock_uow, mock_event_repo, mock_call_repo, mock_template_repo, mock_reconciler):
    return CreateCall(
        uow=mock_uow,
        event_repo=mock_event_repo,
        call_repo=mock_call_repo,
        template_repo=mock_template_repo,
        reconciler=mock_reconciler,
    )


def _command(**kwargs) -> CreateCallCommandDTO:
    values = dict(event_id=1, raid_name="Vox", modifier=2, who_log=WHO_LOG, created_by="officer_1")
    values.update(kwargs)
    return CreateCallCommandDTO(**values)


@pytest.mark.asyncio
class TestCreateCall:
    async def test_create_call_success(self, use_case, mock_uow, mock_event_repo, mock_call_repo, mock_reconciler):
        """
        GIVEN an active event and a who log with one registered player
        WHEN a call is created
        THEN the call is appended, sightings are reconciled and the transaction commits
        """
        # Act
        result = await use_case.execute(_command())

        # Assert
        assert result.is_ok()
        assert result.value.call.id == 10
        assert result.value.call.sort_order == 3
        assert result.value.recorded == 1
        assert result.value.rejected == 1
        assert result.value.rejected_players[0].name == "Stranger"

        mock_event_repo.get_by_id.assert_awaited_once_with(1, for_update=True)
        call_id, sightings, raid_name, modifier = mock_reconciler.reconcile.await_args.args
        assert call_id == 10
        assert [s.name for s in sightings] == ["Alpha", "Stranger"]
        assert raid_name == "Vox"
        assert modifier == 2
        mock_uow.commit.assert_awaited_once()

    async def test_closed_event_is_rejected(self, use_case, mock_uow, mock_event_repo, mock_call_repo):
        # Arrange
        mock_event_repo.get_by_id.return_value = RaidEvent(
            id=1, name="Sky Night", created_by="officer_1", status=EventStatus.CLOSED
        )

        # Act
        result = await use_case.execute(_command())

        # Assert
        assert result.is_err()
        assert result.error.code == "EVENT_CLOSED"
        mock_call_repo.create.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()
        mock_uow.rollback.assert_not_awaited()

    async def test_event_not_found(self, use_case, mock_event_repo):
        # Arrange
        mock_event_repo.get_by_id.return_value = None

        # Act
        result = await use_case.execute(_command())

        # Assert
        assert result.is_err()
        assert result.error.code == "EVENT_NOT_FOUND"

    async def test_modifier_from_template(self, use_case, mock_template_repo, mock_reconciler):
        # Arrange
        mock_template_repo.get_by_name.return_value = RaidTemplate(name="Vox", type="Dragon", modifier=5)

        # Act
        result = await use_case.execute(_command(modifier=None))

        # Assert
        assert result.is_ok()
        assert result.value.call.modifier == 5
        assert mock_reconciler.reconcile.await_args.args[3] == 5

    async def test_numeric_raid_name_is_modifier(self, use_case):
        # Act
        result = await use_case.execute(_command(raid_name="3", modifier=None))

        # Assert
        assert result.is_ok()
        assert result.value.call.modifier == 3

    async def test_numeric_raid_name_wins_over_template(self, use_case, mock_template_repo):
        """
        GIVEN a template that happens to be named "3" with modifier 7
        WHEN a call named "3" is created without a modifier
        THEN the raid name itself is the modifier and no template is looked up
        """
        # Arrange
        mock_template_repo.get_by_name.return_value = RaidTemplate(name="3", type="Misc", modifier=7)

        # Act
        result = await use_case.execute(_command(raid_name="3", modifier=None))

        # Assert
        assert result.is_ok()
        assert result.value.call.modifier == 3
        mock_template_repo.get_by_name.assert_not_awaited()

    async def test_unknown_raid_without_modifier(self, use_case, mock_uow, mock_call_repo):
        # Act
        result = await use_case.execute(_command(raid_name="Mystery", modifier=None))

        # Assert
        assert result.is_err()
        assert result.error.code == "UNKNOWN_RAID"
        mock_call_repo.create.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    async def test_blank_raid_name(self, use_case, mock_event_repo):
        # Act
        result = await use_case.execute(_command(raid_name="   "))

        # Assert
        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        mock_event_repo.get_by_id.assert_not_awaited()

    async def test_rejected_players_are_capped(
        self, mock_uow, mock_event_repo, mock_call_repo, mock_template_repo, mock_reconciler
    ):
        # Arrange
        mock_reconciler.reconcile.return_value = ReconciliationResult(
            rejected=[RejectedPlayer(name=f"P{i}", reason="Not registered") for i in range(5)]
        )
        use_case = CreateCall(
            mock_uow, mock_event_repo, mock_call_repo, mock_template_repo, mock_reconciler,
            rejected_players_limit=2,
        )

        # Act
        result = await use_case.execute(_command())

        # Assert
        assert result.value.rejected == 5
        assert [p.name for p in result.value.rejected_players] == ["P0", "P1"]

    async def test_rollback_on_failure(self, use_case, mock_uow, mock_reconciler):
        # Arrange
        mock_reconciler.reconcile.side_effect = Exception("Database error")

        # Act
        result = await use_case.execute(_command())

        # Assert
        assert result.is_err()
        assert result.error.code == "CREATE_CALL_FAILED"
        assert "Database error" in result.error.reason
        mock_uow.rollback.assert_awaited_once()
        mock_uow.commit.assert_not_awaited()
