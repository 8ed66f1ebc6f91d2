# Path: rosetta_verify/constants.py
"""
System-Wide Constants for rosetta_verify

Central repository for constant values used across the verification core.

Constants are organized by category:
- Metadata Value Kinds
- Coin Actions
- Operation Statuses
- Grouping
- Comparison
- JSON Keys
"""

from enum import Enum
from typing import Final


# ==============================================================================
# METADATA VALUE KINDS
# ==============================================================================

class ValueKind(str, Enum):
    """
    Closed set of value kinds a metadata requirement can ask for.

    NUMBER excludes booleans. OBJECT accepts mappings and lists.
    """
    STRING = 'string'
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    OBJECT = 'object'

    def __str__(self) -> str:
        return self.value


# ==============================================================================
# COIN ACTIONS
# ==============================================================================

class CoinAction(str, Enum):
    """Coin lifecycle actions carried by UTXO-style operations."""
    COIN_CREATED = 'coin_created'
    COIN_SPENT = 'coin_spent'

    def __str__(self) -> str:
        return self.value


# ==============================================================================
# OPERATION STATUSES
# ==============================================================================

DEFAULT_SUCCESSFUL_STATUSES: Final[tuple] = ('SUCCESS',)
"""Statuses treated as successful when no network table is supplied."""

DEFAULT_FAILED_STATUSES: Final[tuple] = ('FAILURE',)
"""Statuses treated as unsuccessful when no network table is supplied."""


# ==============================================================================
# GROUPING
# ==============================================================================

EMPTY_GROUP_TYPE: Final[str] = ''
"""Group type used once a group holds operations of differing types."""

DEFAULT_GROUP_KEY: Final[int] = 0
"""Group assignment of an operation that has not been processed yet."""


# ==============================================================================
# COMPARISON
# ==============================================================================

EXPECTED_OPPOSITES_LENGTH: Final[int] = 2
"""Number of description indices in an opposite_amounts pair."""

MIN_ADDRESS_COMPARISON_OPS: Final[int] = 2
"""Minimum operations needed for an equal_addresses check."""


# ==============================================================================
# JSON KEYS (Rosetta wire names)
# ==============================================================================

KEY_OPERATION_IDENTIFIER: Final[str] = 'operation_identifier'
KEY_RELATED_OPERATIONS: Final[str] = 'related_operations'
KEY_SUB_ACCOUNT: Final[str] = 'sub_account'
KEY_COIN_CHANGE: Final[str] = 'coin_change'
KEY_BLOCK_IDENTIFIER: Final[str] = 'block_identifier'
KEY_PARENT_BLOCK_IDENTIFIER: Final[str] = 'parent_block_identifier'
KEY_TRANSACTION_IDENTIFIER: Final[str] = 'transaction_identifier'
KEY_ACCOUNT_IDENTIFIER: Final[str] = 'account_identifier'


__all__ = [
    'ValueKind',
    'CoinAction',
    'DEFAULT_SUCCESSFUL_STATUSES',
    'DEFAULT_FAILED_STATUSES',
    'EMPTY_GROUP_TYPE',
    'DEFAULT_GROUP_KEY',
    'EXPECTED_OPPOSITES_LENGTH',
    'MIN_ADDRESS_COMPARISON_OPS',
    'KEY_OPERATION_IDENTIFIER',
    'KEY_RELATED_OPERATIONS',
    'KEY_SUB_ACCOUNT',
    'KEY_COIN_CHANGE',
    'KEY_BLOCK_IDENTIFIER',
    'KEY_PARENT_BLOCK_IDENTIFIER',
    'KEY_TRANSACTION_IDENTIFIER',
    'KEY_ACCOUNT_IDENTIFIER',
]
