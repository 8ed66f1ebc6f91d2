# Path: rosetta_verify/process/comparison/comparison_validator.py
"""
Comparison Validator

Enforces the cross-description constraints of a Descriptions object
over the Match list produced by the descriptor matcher:

- equal_amounts: every operation matched by the listed descriptions
  carries the same amount value
- equal_addresses: every operation matched by the listed descriptions
  has an account with the same address
- opposite_amounts: two descriptions whose matches are internally
  equal, and whose representative amounts have opposite sign and equal
  magnitude

Every index is checked with match_index_valid() before it is
dereferenced. Failures raise ParserError; lower-level messages are
wrapped with the name of the constraint that failed.
"""

from typing import Callable, Optional

from ...constants import EXPECTED_OPPOSITES_LENGTH, MIN_ADDRESS_COMPARISON_OPS
from ...core.errors import ParserError
from ...core.logger.ipo_logging import get_process_logger
from ...models.descriptions import Descriptions
from ...models.results import Match
from ...models.rosetta import Operation
from ...tools.amounts import amount_value
from ...tools.sign import AmountSign


OperationsCheck = Callable[[list[Operation]], None]


class ComparisonValidator:
    """
    Validates equal/opposite amount and equal address constraints.

    Example:
        validator = ComparisonValidator()
        validator.comparison_match(descriptions, matches)
    """

    def __init__(self):
        """Initialize validator."""
        self.logger = get_process_logger('comparison')

    # ==========================================================================
    # INDEX CHECKS
    # ==========================================================================

    def match_index_valid(self, matches: list[Optional[Match]], index: int) -> None:
        """
        Ensure an index resolves to a populated match slot.

        Raises:
            ParserError: If index is not an integer, out of range, or unmatched
        """
        if not isinstance(index, int) or isinstance(index, bool):
            raise ParserError('Index must be a number')

        if index < 0 or index >= len(matches):
            raise ParserError(f'Match index {index} out of range')

        if matches[index] is None:
            raise ParserError(f'Match index {index} is null')

    def check_ops(
        self,
        batches: list[list[int]],
        matches: list[Optional[Match]],
        check: OperationsCheck,
    ) -> None:
        """
        Run a check over the operations of each batch of description indices.

        Args:
            batches: Groups of description indices
            matches: Match slots, index-aligned with the descriptions
            check: Called with the concatenated operations of one batch

        Raises:
            ParserError: If an index is invalid or the check fails
        """
        for batch in batches:
            ops: list[Operation] = []

            for index in batch:
                try:
                    self.match_index_valid(matches, index)
                except ParserError as exc:
                    raise ParserError(f'{exc}: index {index} not valid') from exc

                ops.extend(matches[index].operations)

            check(ops)

    # ==========================================================================
    # OPERATION CHECKS
    # ==========================================================================

    def equal_amounts(self, operations: list[Operation]) -> None:
        """
        Ensure all operations carry the same amount value.

        Raises:
            ParserError: On an empty list, a missing amount, or differing values
        """
        if not operations:
            raise ParserError('cannot check equality of 0 operations')

        base = operations[0]
        base_value = self._operation_value(base)

        for op in operations[1:]:
            if self._operation_value(op) != base_value:
                raise ParserError(
                    f'{op.amount.value} is not equal to {base.amount.value}'
                )

    def opposite_amounts(self, operation_a: Operation, operation_b: Operation) -> None:
        """
        Ensure two operations have opposite signs and equal magnitude.

        Raises:
            ParserError: On a missing amount, matching signs, or differing magnitude
        """
        value_a = self._operation_value(operation_a)
        value_b = self._operation_value(operation_b)

        if AmountSign.of(value_a) == AmountSign.of(value_b):
            raise ParserError(f'{value_a} and {value_b} have the same sign')

        if value_a.copy_abs() != value_b.copy_abs():
            raise ParserError(f'{value_a} and {value_b} are not equal')

    def equal_addresses(self, operations: list[Operation]) -> None:
        """
        Ensure all operations have accounts with the same address.

        Raises:
            ParserError: On fewer than two operations, a missing account,
                or differing addresses
        """
        if len(operations) < MIN_ADDRESS_COMPARISON_OPS:
            raise ParserError(
                f'Cannot check address equality of {len(operations)} operations'
            )

        base: Optional[str] = None

        for op in operations:
            if op.account is None:
                raise ParserError('account is nil')

            if base is None:
                base = op.account.address
                continue

            if op.account.address != base:
                raise ParserError(f'{base} is not equal to {op.account.address}')

    # ==========================================================================
    # DESCRIPTION CONSTRAINTS
    # ==========================================================================

    def comparison_match(
        self,
        descriptions: Descriptions,
        matches: list[Optional[Match]],
    ) -> None:
        """
        Enforce all cross-description constraints.

        Args:
            descriptions: Holds equal_amounts, equal_addresses, opposite_amounts
            matches: Match slots produced by the descriptor matcher

        Raises:
            ParserError: If any constraint is not met
        """
        try:
            self.check_ops(descriptions.equal_amounts, matches, self.equal_amounts)
        except ParserError as exc:
            raise ParserError(f'{exc}: operation amounts are not equal') from exc

        try:
            self.check_ops(descriptions.equal_addresses, matches, self.equal_addresses)
        except ParserError as exc:
            raise ParserError(f'{exc}: operation addresses are not equal') from exc

        for pair in descriptions.opposite_amounts:
            if len(pair) != EXPECTED_OPPOSITES_LENGTH:
                raise ParserError(f'Cannot check opposites of {len(pair)} operations')

            for index in pair:
                try:
                    self.match_index_valid(matches, index)
                except ParserError as exc:
                    raise ParserError(f'{exc}: opposite amounts comparison error') from exc

            side_a = matches[pair[0]].operations
            side_b = matches[pair[1]].operations

            self.equal_amounts(side_a)
            self.equal_amounts(side_b)

            self.opposite_amounts(side_a[0], side_b[0])

        self.logger.debug(
            f"Comparison constraints met: {len(descriptions.equal_amounts)} equal amounts, "
            f"{len(descriptions.equal_addresses)} equal addresses, "
            f"{len(descriptions.opposite_amounts)} opposite amounts"
        )

    def _operation_value(self, op: Operation):
        """Numeric amount of an operation, with its index on failure."""
        if op.amount is None:
            raise ParserError(f'operation {op.index} has no amount to compare')
        return amount_value(op.amount)


__all__ = ['ComparisonValidator', 'OperationsCheck']
