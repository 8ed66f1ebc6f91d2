# Path: rosetta_verify/tools/__init__.py
"""
Verification Tools

Collaborators the process layer depends on:
- amounts: Decimal arithmetic on string-encoded values
- sign: AmountSign requirements and two-valued number sign
- hashing: structural hash for equality of records
- asserter: operation success predicate and string-list checks

Import order matters: asserter depends on the models package, which
depends on sign.
"""

from .amounts import parse_value, add_values, negate_value, amount_value
from .sign import AmountSign
from .hashing import structural_hash
from .asserter import OperationAsserter

__all__ = [
    'parse_value',
    'add_values',
    'negate_value',
    'amount_value',
    'AmountSign',
    'structural_hash',
    'OperationAsserter',
]
