"""Unit tests for DkpLedger"""

import pytest
from unittest.mock import AsyncMock

from src.app.services.dkp_ledger import DkpLedger
from src.domain.dkp_account import DkpAccount


@pytest.fixture
def mock_account_repo():
    return AsyncMock()


@pytest.mark.asyncio
class TestDkpLedger:
    async def test_credit_existing_account(self, mock_account_repo):
        # Arrange
        mock_account_repo.get_by_account_id.return_value = DkpAccount(id=1, account_id="acct-a", earned_dkp=10)
        ledger = DkpLedger(mock_account_repo)

        # Act
        await ledger.apply_delta("acct-a", 3)

        # Assert
        mock_account_repo.get_by_account_id.assert_awaited_once_with("acct-a", for_update=True)
        mock_account_repo.create.assert_not_awaited()
        mock_account_repo.increment_earned.assert_awaited_once_with("acct-a", 3)

    async def test_first_credit_opens_account(self, mock_account_repo):
        # Arrange
        mock_account_repo.get_by_account_id.return_value = None
        ledger = DkpLedger(mock_account_repo)

        # Act
        await ledger.apply_delta("acct-new", 2)

        # Assert
        created = mock_account_repo.create.await_args.args[0]
        assert created.account_id == "acct-new"
        mock_account_repo.increment_earned.assert_awaited_once_with("acct-new", 2)

    async def test_reversal_is_negative_delta(self, mock_account_repo):
        # Arrange
        mock_account_repo.get_by_account_id.return_value = DkpAccount(id=1, account_id="acct-a", earned_dkp=1)
        ledger = DkpLedger(mock_account_repo)

        # Act
        await ledger.apply_delta("acct-a", -3)

        # Assert
        mock_account_repo.increment_earned.assert_awaited_once_with("acct-a", -3)

    async def test_zero_delta_is_noop(self, mock_account_repo):
        # Act
        await DkpLedger(mock_account_repo).apply_delta("acct-a", 0)

        # Assert
        mock_account_repo.get_by_account_id.assert_not_awaited()
        mock_account_repo.increment_earned.assert_not_awaited()
