"""Operator jobs for the DKP ledger"""
from .dkp_reconciler import DkpReconcilerWorker

__all__ = ["DkpReconcilerWorker"]
