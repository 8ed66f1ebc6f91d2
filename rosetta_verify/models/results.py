# Path: rosetta_verify/models/results.py
"""
Result Models

Structures produced by the verification core:
- OperationGroup: operations clustered through related_operations
- BalanceChange: net change of one (account, currency) in a block
- Match: operations that satisfied one OperationDescription
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from .rosetta import AccountIdentifier, BlockIdentifier, Currency, Operation


@dataclass
class OperationGroup:
    """
    A cluster of related operations.

    Attributes:
        type: Common operation type, or '' once members differ
        operations: Members, sorted by index in grouper output
        currencies: Distinct currencies seen among members
        nil_amount_present: Whether the most recently added member had no amount.
            This is a last-write flag, not "any member lacks an amount".
    """
    type: str
    operations: list[Operation] = field(default_factory=list)
    currencies: list[Currency] = field(default_factory=list)
    nil_amount_present: bool = False

    @property
    def indices(self) -> list[int]:
        """Indices of member operations, in member order."""
        return [op.index for op in self.operations]

    def __len__(self) -> int:
        return len(self.operations)


@dataclass
class BalanceChange:
    """
    Net change of one account's balance in one currency for a block.

    Attributes:
        account: Account whose balance changed
        currency: Currency of the change
        block: Block the change is attributed to (parent block on removal)
        difference: Signed arbitrary-precision sum, as a string
    """
    account: AccountIdentifier
    currency: Currency
    block: BlockIdentifier
    difference: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'account_identifier': self.account.to_dict(),
            'currency': self.currency.to_dict(),
            'block_identifier': self.block.to_dict(),
            'difference': self.difference,
        }


@dataclass
class Match:
    """
    Operations that satisfied one OperationDescription.

    amounts is index-aligned with operations; an entry is None when the
    matched operation carries no amount.
    """
    operations: list[Operation] = field(default_factory=list)
    amounts: list[Optional[Decimal]] = field(default_factory=list)

    def add(self, operation: Operation, amount: Optional[Decimal]) -> None:
        """Append a matched operation and its extracted amount."""
        self.operations.append(operation)
        self.amounts.append(amount)

    def first(self) -> tuple[Optional[Operation], Optional[Decimal]]:
        """
        Return the first matched operation and its amount.

        Returns:
            (operation, amount), or (None, None) when nothing matched
        """
        if not self.operations:
            return None, None
        return self.operations[0], self.amounts[0]

    def __len__(self) -> int:
        return len(self.operations)


__all__ = [
    'OperationGroup',
    'BalanceChange',
    'Match',
]
