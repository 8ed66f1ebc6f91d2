# Path: rosetta_verify/process/balance/balance_aggregator.py
"""
Balance Aggregator

Nets the balance changes of a block per (account, currency).

An operation contributes only when it executed successfully, carries
both an account and an amount, and is not exempt. When the block is
being removed (a reorg rollback) each amount is negated and the change
is attributed to the parent block.
"""

from typing import Callable, Optional

from ...core.logger.ipo_logging import get_process_logger
from ...models.results import BalanceChange
from ...models.rosetta import Block, Operation
from ...tools.amounts import add_values, negate_value
from ...tools.asserter import OperationAsserter
from ...tools.hashing import structural_hash


ExemptOperation = Callable[[Operation], bool]


class BalanceAggregator:
    """
    Computes per-account balance deltas for a block.

    Example:
        aggregator = BalanceAggregator(asserter)
        for change in aggregator.balance_changes(block, block_removed=False):
            print(change.account.address, change.difference)
    """

    def __init__(
        self,
        asserter: OperationAsserter,
        exempt_func: Optional[ExemptOperation] = None,
    ):
        """
        Initialize aggregator.

        Args:
            asserter: Success predicate for operations
            exempt_func: Returns True for operations to leave out
        """
        self.logger = get_process_logger('balance')
        self.asserter = asserter
        self.exempt_func = exempt_func

    def skip_operation(self, operation: Operation) -> bool:
        """
        Decide whether an operation is left out of balance changes.

        Raises:
            AsserterError: If the asserter cannot evaluate the status
        """
        if not self.asserter.operation_successful(operation):
            self.logger.debug(f"Skipping unsuccessful operation {operation.index}")
            return True

        if operation.account is None:
            self.logger.debug(f"Skipping operation {operation.index}: missing account")
            return True

        if operation.amount is None:
            self.logger.debug(f"Skipping operation {operation.index}: missing amount")
            return True

        if self.exempt_func is not None and self.exempt_func(operation):
            self.logger.debug(f"Skipping exempt operation {operation.index}")
            return True

        return False

    def balance_changes(self, block: Block, block_removed: bool) -> list[BalanceChange]:
        """
        Net all balance changes in a block.

        Args:
            block: Block whose transactions are folded in
            block_removed: Treat the block as orphaned (negate, attribute to parent)

        Returns:
            One BalanceChange per distinct (account, currency), in order
            of first appearance
        """
        changes: dict[str, BalanceChange] = {}
        block_identifier = (
            block.parent_block_identifier if block_removed else block.block_identifier
        )

        for tx in block.transactions:
            for op in tx.operations:
                if self.skip_operation(op):
                    continue

                value = negate_value(op.amount.value) if block_removed else op.amount.value
                key = f'{structural_hash(op.account)}/{structural_hash(op.amount.currency)}'

                change = changes.get(key)
                if change is None:
                    changes[key] = BalanceChange(
                        account=op.account,
                        currency=op.amount.currency,
                        block=block_identifier,
                        difference=add_values('0', value),
                    )
                else:
                    change.difference = add_values(change.difference, value)

        self.logger.info(
            f"Block {block.block_identifier.index}: {len(changes)} balance changes"
            f"{' (removed)' if block_removed else ''}"
        )
        return list(changes.values())


__all__ = ['BalanceAggregator', 'ExemptOperation']
