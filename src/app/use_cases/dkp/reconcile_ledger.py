"""ReconcileLedger Use Case

Checks every account's earned_dkp against the attendance records linked to it
through raid calls, and reports any drift.
"""

import logging
import time
from datetime import datetime, timezone
from libs.result import Result, Return, Error
from src.app.repositories.dkp_account_repository import DkpAccountRepository
from src.app.repositories.attendance_repository import AttendanceRepository
from .dtos import LedgerDiscrepancyDTO, ReconciliationResultDTO

logger = logging.getLogger(__name__)


class ReconcileLedger:
    """
    Use Case: Reconcile DKP ledger against attendance

    Business Rules:
    1. earned_dkp must equal the sum of modifier snapshots over all
       call-linked attendance records of the account
    2. Accounts credited by attendance but missing a ledger row count as
       discrepancies with earned_dkp 0
    3. Does NOT modify any data (read-only reconciliation)
    """

    def __init__(
        self,
        account_repo: DkpAccountRepository,
        attendance_repo: AttendanceRepository,
    ):
        self.account_repo = account_repo
        self.attendance_repo = attendance_repo

    async def execute(self) -> Result[ReconciliationResultDTO]:
        """
        Execute ledger reconciliation

        Returns:
            Result[ReconciliationResultDTO]: Reconciliation result with any discrepancies
        """
        start_time = time.time()
        reconciliation_time = datetime.now(timezone.utc)

        try:
            logger.info("Starting DKP ledger reconciliation")

            accounts = await self.account_repo.get_all()
            attendance_sums = await self.attendance_repo.sum_linked_modifiers_by_account()

            earned_by_account = {account.account_id: account.earned_dkp for account in accounts}
            account_ids = sorted(set(earned_by_account) | set(attendance_sums))

            discrepancies: list[LedgerDiscrepancyDTO] = []
            for account_id in account_ids:
                earned = earned_by_account.get(account_id, 0)
                attendance_sum = attendance_sums.get(account_id, 0)
                if earned == attendance_sum:
                    continue

                discrepancies.append(
                    LedgerDiscrepancyDTO(
                        account_id=account_id,
                        earned_dkp=earned,
                        attendance_sum=attendance_sum,
                        discrepancy=earned - attendance_sum,
                    )
                )
                logger.warning(
                    f"Discrepancy found for account {account_id}: "
                    f"earned_dkp={earned}, attendance_sum={attendance_sum}, "
                    f"discrepancy={earned - attendance_sum}"
                )

            execution_time_ms = int((time.time() - start_time) * 1000)

            response = ReconciliationResultDTO(
                total_accounts_checked=len(account_ids),
                discrepancies_found=len(discrepancies),
                discrepancies=discrepancies,
                reconciliation_time=reconciliation_time,
                execution_time_ms=execution_time_ms,
            )

            if discrepancies:
                logger.warning(
                    f"Reconciliation complete. Found {len(discrepancies)} discrepancies "
                    f"out of {len(account_ids)} accounts in {execution_time_ms}ms"
                )
            else:
                logger.info(
                    f"Reconciliation complete. All {len(account_ids)} accounts balanced "
                    f"in {execution_time_ms}ms"
                )

            return Return.ok(response)

        except Exception as e:
            logger.error(f"DKP ledger reconciliation failed: {e}")
            return Return.err(
                Error(
                    code="RECONCILIATION_FAILED",
                    message="Failed to reconcile DKP ledger",
                    reason=str(e),
                )
            )
