# Path: rosetta_verify/process/__init__.py
"""
Process Layer

- grouping: related operations into transfer groups
- balance: per-block balance deltas
- matcher: operations against descriptions
- comparison: cross-description constraints
- reconciliation: intended vs. observed operations and signers
"""

from .grouping import OperationGrouper, group_operations
from .balance import BalanceAggregator, ExemptOperation
from .comparison import ComparisonValidator
from .matcher import DescriptorMatcher
from .reconciliation import IntentReconciler

__all__ = [
    'OperationGrouper',
    'group_operations',
    'BalanceAggregator',
    'ExemptOperation',
    'ComparisonValidator',
    'DescriptorMatcher',
    'IntentReconciler',
]
