# Path: rosetta_verify/process/reconciliation/__init__.py
"""
Reconciliation

Intended vs. observed operations and signers.
"""

from .intent_reconciler import IntentReconciler

__all__ = ['IntentReconciler']
