# Path: rosetta_verify/process/balance/__init__.py
"""
Balance Aggregation

Per-block net balance deltas, with reorg rollback support.
"""

from .balance_aggregator import BalanceAggregator, ExemptOperation

__all__ = ['BalanceAggregator', 'ExemptOperation']
