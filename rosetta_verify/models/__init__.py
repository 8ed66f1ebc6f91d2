# Path: rosetta_verify/models/__init__.py
"""
Data Models

- rosetta: raw records (operations, transactions, blocks, signing payloads)
- descriptions: declarative operation shapes and constraints
- results: operation groups, balance changes, matches
"""

from .rosetta import (
    Currency,
    Amount,
    SubAccountIdentifier,
    AccountIdentifier,
    OperationIdentifier,
    CoinChange,
    OperationStatus,
    Operation,
    Transaction,
    BlockIdentifier,
    Block,
    SigningPayload,
)

from .descriptions import (
    MetadataDescription,
    AccountDescription,
    AmountDescription,
    OperationDescription,
    Descriptions,
)

from .results import (
    OperationGroup,
    BalanceChange,
    Match,
)

__all__ = [
    # Raw records
    'Currency',
    'Amount',
    'SubAccountIdentifier',
    'AccountIdentifier',
    'OperationIdentifier',
    'CoinChange',
    'OperationStatus',
    'Operation',
    'Transaction',
    'BlockIdentifier',
    'Block',
    'SigningPayload',
    # Descriptions
    'MetadataDescription',
    'AccountDescription',
    'AmountDescription',
    'OperationDescription',
    'Descriptions',
    # Results
    'OperationGroup',
    'BalanceChange',
    'Match',
]
