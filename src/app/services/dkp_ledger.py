"""DKP Ledger

Pure accumulator over DkpAccount.earned_dkp. Reversal is apply_delta with the
negated amount; the ledger never reads a balance to compute a new one.
"""

import logging
from src.app.repositories.dkp_account_repository import DkpAccountRepository
from src.domain.dkp_account import DkpAccount

logger = logging.getLogger(__name__)


class DkpLedger:
    """
    Applies point deltas inside the caller's transaction

    The account row is locked before the increment so concurrent deltas to
    one account serialize; deltas to different accounts do not contend.
    Accounts without a ledger row get one with zero balances on first credit.
    """

    def __init__(self, account_repo: DkpAccountRepository):
        self.account_repo = account_repo

    async def apply_delta(self, account_id: str, delta: int) -> None:
        if delta == 0:
            return

        account = await self.account_repo.get_by_account_id(account_id, for_update=True)
        if account is None:
            logger.info(f"Opening DKP ledger row for account {account_id}")
            await self.account_repo.create(DkpAccount(account_id=account_id))

        await self.account_repo.increment_earned(account_id, delta)
