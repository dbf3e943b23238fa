"""Get Balance Use Case

Retrieves an account's current DKP totals.
"""

from libs.result import Result, Return, Error
from src.app.repositories.dkp_account_repository import DkpAccountRepository
from src.app.use_cases.dkp.dtos import BalanceResponseDTO


class GetBalance:
    """
    Get Balance Use Case

    Read-only operation that retrieves the DKP totals for a given account.
    """

    def __init__(self, account_repo: DkpAccountRepository):
        """
        Initialize GetBalance use case

        Args:
            account_repo: Repository for accessing DKP accounts
        """
        self.account_repo = account_repo

    async def execute(self, account_id: str) -> Result[BalanceResponseDTO]:
        """
        Execute get balance operation

        Args:
            account_id: The account identifier

        Returns:
            Result[BalanceResponseDTO]: Success with balance data or error

        Errors:
            ACCOUNT_NOT_FOUND: Account has no DKP ledger row
        """
        account = await self.account_repo.get_by_account_id(account_id)

        if not account:
            return Return.err(
                Error(
                    code="ACCOUNT_NOT_FOUND",
                    message=f"No DKP ledger found for account {account_id}",
                )
            )

        return Return.ok(
            BalanceResponseDTO(
                account_id=account.account_id,
                earned_dkp=account.earned_dkp,
                spent_dkp=account.spent_dkp,
                current_dkp=account.current_dkp,
                last_updated=account.updated_at,
            )
        )
