"""Data Transfer Objects for DKP Use Cases"""

from datetime import datetime
from typing import List
from pydantic import BaseModel, Field


class BalanceResponseDTO(BaseModel):
    """
    Response DTO for get balance operation

    Returned by GetBalance use case.
    """

    account_id: str = Field(..., description="Account identifier")
    earned_dkp: int = Field(..., description="Points earned from attendance")
    spent_dkp: int = Field(..., description="Points spent on items")
    current_dkp: int = Field(..., description="earned_dkp - spent_dkp")
    last_updated: datetime = Field(..., description="Timestamp of last ledger update")

    class Config:
        json_schema_extra = {
            "example": {
                "account_id": "184201928371",
                "earned_dkp": 142,
                "spent_dkp": 90,
                "current_dkp": 52,
                "last_updated": "2024-01-01T00:00:00Z"
            }
        }


class LedgerDiscrepancyDTO(BaseModel):
    """An account whose earned_dkp disagrees with its linked attendance"""

    account_id: str
    earned_dkp: int = Field(..., description="Stored ledger value")
    attendance_sum: int = Field(..., description="Sum of linked attendance modifiers")
    discrepancy: int = Field(..., description="earned_dkp - attendance_sum")


class ReconciliationResultDTO(BaseModel):
    total_accounts_checked: int
    discrepancies_found: int
    discrepancies: List[LedgerDiscrepancyDTO]
    reconciliation_time: datetime
    execution_time_ms: int
