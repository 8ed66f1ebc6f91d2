# Path: rosetta_verify/process/grouping/__init__.py
"""
Operation Grouping

Clusters related operations of a transaction into transfer groups.
"""

from .operation_grouper import OperationGrouper, group_operations

__all__ = ['OperationGrouper', 'group_operations']
