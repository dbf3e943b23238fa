"""Unit tests for ReconcileLedger and GetBalance use cases"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.dkp.get_balance import GetBalance
from src.app.use_cases.dkp.reconcile_ledger import ReconcileLedger
from src.domain.dkp_account import DkpAccount


@pytest.fixture
def mock_account_repo():
    """Mock DKP account repository"""
    return MagicMock()


@pytest.fixture
def mock_attendance_repo():
    """Mock attendance repository"""
    return MagicMock()


@pytest.fixture
def reconcile_use_case(mock_account_repo, mock_attendance_repo):
    return ReconcileLedger(
        account_repo=mock_account_repo,
        attendance_repo=mock_attendance_repo,
    )


@pytest.mark.asyncio
class TestReconcileLedger:
    async def test_balanced_ledger(self, reconcile_use_case, mock_account_repo, mock_attendance_repo):
        """
        Given: Every account's earned DKP matches its linked attendance
        When: Reconciliation runs
        Then: No discrepancies are reported
        """
        # Arrange
        mock_account_repo.get_all = AsyncMock(return_value=[
            DkpAccount(id=1, account_id="acct-a", earned_dkp=5),
            DkpAccount(id=2, account_id="acct-b", earned_dkp=2),
        ])
        mock_attendance_repo.sum_linked_modifiers_by_account = AsyncMock(
            return_value={"acct-a": 5, "acct-b": 2}
        )

        # Act
        result = await reconcile_use_case.execute()

        # Assert
        assert result.is_ok()
        assert result.value.total_accounts_checked == 2
        assert result.value.discrepancies_found == 0
        assert result.value.discrepancies == []

    async def test_detects_drift(self, reconcile_use_case, mock_account_repo, mock_attendance_repo):
        """
        Given: One account drifted and one is credited without a ledger row
        When: Reconciliation runs
        Then: Both are reported with signed discrepancies
        """
        # Arrange
        mock_account_repo.get_all = AsyncMock(return_value=[
            DkpAccount(id=1, account_id="acct-a", earned_dkp=7),
        ])
        mock_attendance_repo.sum_linked_modifiers_by_account = AsyncMock(
            return_value={"acct-a": 5, "acct-z": 3}
        )

        # Act
        result = await reconcile_use_case.execute()

        # Assert
        response = result.value
        assert response.discrepancies_found == 2
        by_account = {d.account_id: d for d in response.discrepancies}
        assert by_account["acct-a"].discrepancy == 2
        assert by_account["acct-z"].earned_dkp == 0
        assert by_account["acct-z"].discrepancy == -3

    async def test_repository_failure(self, reconcile_use_case, mock_account_repo):
        # Arrange
        mock_account_repo.get_all = AsyncMock(side_effect=Exception("connection lost"))

        # Act
        result = await reconcile_use_case.execute()

        # Assert
        assert result.is_err()
        assert result.error.code == "RECONCILIATION_FAILED"
        assert "connection lost" in result.error.reason


@pytest.mark.asyncio
class TestGetBalance:
    async def test_returns_totals(self, mock_account_repo):
        # Arrange
        mock_account_repo.get_by_account_id = AsyncMock(
            return_value=DkpAccount(id=1, account_id="acct-a", earned_dkp=12, spent_dkp=4)
        )

        # Act
        result = await GetBalance(mock_account_repo).execute("acct-a")

        # Assert
        assert result.is_ok()
        assert result.value.earned_dkp == 12
        assert result.value.spent_dkp == 4
        assert result.value.current_dkp == 8

    async def test_unknown_account(self, mock_account_repo):
        # Arrange
        mock_account_repo.get_by_account_id = AsyncMock(return_value=None)

        # Act
        result = await GetBalance(mock_account_repo).execute("acct-x")

        # Assert
        assert result.error.code == "ACCOUNT_NOT_FOUND"
