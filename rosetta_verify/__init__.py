# Path: rosetta_verify/__init__.py
"""
rosetta_verify

Verification core for blockchain operations: groups related operations,
nets per-block balance changes, matches operations against declarative
descriptions, and reconciles intended operations and signers with what
was observed.

Example:
    from rosetta_verify import RosettaParser, Transaction

    parser = RosettaParser()
    groups = parser.group_operations(Transaction.from_dict(payload))
"""

from .core.errors import ParserError, AsserterError
from .constants import ValueKind, CoinAction
from .models import (
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
    MetadataDescription,
    AccountDescription,
    AmountDescription,
    OperationDescription,
    Descriptions,
    OperationGroup,
    BalanceChange,
    Match,
)
from .tools import AmountSign, OperationAsserter, structural_hash
from .parser import RosettaParser

__version__ = '1.0.0'

__all__ = [
    'ParserError',
    'AsserterError',
    'ValueKind',
    'CoinAction',
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
    'MetadataDescription',
    'AccountDescription',
    'AmountDescription',
    'OperationDescription',
    'Descriptions',
    'OperationGroup',
    'BalanceChange',
    'Match',
    'AmountSign',
    'OperationAsserter',
    'structural_hash',
    'RosettaParser',
]
