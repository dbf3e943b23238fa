from .unit_of_work import UnitOfWork
from .dkp_ledger import DkpLedger
from .attendance_reconciler import AttendanceReconciler, ReconciliationResult
from .who_log_parser import Sighting, parse_who_log

__all__ = [
    "UnitOfWork",
    "DkpLedger",
    "AttendanceReconciler",
    "ReconciliationResult",
    "Sighting",
    "parse_who_log",
]
