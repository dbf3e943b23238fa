"""DKP ledger use cases"""
from .get_balance import GetBalance
from .reconcile_ledger import ReconcileLedger
from .dtos import (
    BalanceResponseDTO,
    LedgerDiscrepancyDTO,
    ReconciliationResultDTO,
)

__all__ = [
    "GetBalance",
    "ReconcileLedger",
    "BalanceResponseDTO",
    "LedgerDiscrepancyDTO",
    "ReconciliationResultDTO",
]
