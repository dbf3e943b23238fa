"""DKP API Routes

Read-only ledger routes: account balances and the reconciliation audit.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.auth import Actor, require_officer
from src.api.error import ClientError
from src.app.use_cases.dkp import (
    BalanceResponseDTO,
    GetBalance,
    ReconcileLedger,
    ReconciliationResultDTO,
)
from src.adapter.repositories import SqlAlchemyAttendanceRepository, SqlAlchemyDkpAccountRepository
from src.depends import get_session

router = APIRouter(prefix="/dkp", tags=["DKP"])


@router.get(
    "/accounts/{account_id}",
    response_model=BalanceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Account ledger not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "ACCOUNT_NOT_FOUND",
                            "message": "No DKP ledger found for account 1842"
                        }
                    }
                }
            }
        }
    }
)
async def get_balance(
    account_id: str,
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    """
    Get current DKP totals for an account.

    **Returns:**
    - 200: Balance retrieved successfully
    - 404: Account ledger not found
    """
    use_case = GetBalance(SqlAlchemyDkpAccountRepository(session))
    result = await use_case.execute(account_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)

    return result.value


@router.get("/reconciliation", response_model=ReconciliationResultDTO)
async def reconcile_ledger(
    session: AsyncSession = Depends(get_session),
    actor: Actor = Depends(require_officer),
):
    """
    Compare every account's earned DKP with its linked attendance records.

    Read-only; discrepancies are reported and logged, never repaired.
    """
    use_case = ReconcileLedger(
        SqlAlchemyDkpAccountRepository(session),
        SqlAlchemyAttendanceRepository(session),
    )
    result = await use_case.execute()

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return result.value
