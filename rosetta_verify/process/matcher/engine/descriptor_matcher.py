# Path: rosetta_verify/process/matcher/engine/descriptor_matcher.py
"""
Descriptor Matcher

The matching engine that pairs raw operations with ordered
OperationDescriptions.

Each operation is tried against the descriptions in order. The first
description whose type, account, amount, metadata and coin action
requirements are all satisfied receives the operation in its Match slot.
A description takes a single operation unless it allows repeats.

After every operation has been tried, each non-optional description must
hold a match, and the cross-description constraints are enforced by the
ComparisonValidator.
"""

from typing import Optional

from ....core.errors import ParserError
from ....core.logger.ipo_logging import get_process_logger
from ....models.descriptions import Descriptions, OperationDescription
from ....models.results import Match
from ....models.rosetta import Operation
from ....tools.amounts import amount_value
from ...comparison import ComparisonValidator
from ..evaluators import (
    AccountEvaluator,
    AmountEvaluator,
    MetadataEvaluator,
    CoinActionEvaluator,
)


class DescriptorMatcher:
    """
    Matches operations against Descriptions.

    Example:
        matcher = DescriptorMatcher()
        matches = matcher.match_operations(descriptions, operations)
        sender, amount = matches[0].first()
    """

    def __init__(self, comparison_validator: Optional[ComparisonValidator] = None):
        """
        Initialize matcher.

        Args:
            comparison_validator: Validator for cross-description constraints
        """
        self.logger = get_process_logger('matcher.engine')
        self.comparison_validator = comparison_validator or ComparisonValidator()

        self.account_evaluator = AccountEvaluator()
        self.amount_evaluator = AmountEvaluator()
        self.metadata_evaluator = MetadataEvaluator()
        self.coin_action_evaluator = CoinActionEvaluator()

    def operation_match(
        self,
        operation: Operation,
        descriptions: list[OperationDescription],
        matches: list[Optional[Match]],
    ) -> bool:
        """
        Place an operation in the first description it satisfies.

        Args:
            operation: Operation to place
            descriptions: Ordered operation descriptions
            matches: Match slots, index-aligned with descriptions; updated in place

        Returns:
            True if the operation was placed, False otherwise
        """
        for i, description in enumerate(descriptions):
            if matches[i] is not None and not description.allow_repeats:
                continue

            if description.type and description.type != operation.type:
                continue

            try:
                self.account_evaluator.evaluate(description.account, operation.account)
                self.amount_evaluator.evaluate(description.amount, operation.amount)
                self.metadata_evaluator.evaluate(description.metadata, operation.metadata)
                self.coin_action_evaluator.evaluate(
                    description.coin_action, operation.coin_change
                )
            except ParserError as exc:
                self.logger.debug(
                    f"Operation {operation.index} does not match description {i}: {exc}"
                )
                continue

            if matches[i] is None:
                matches[i] = Match()

            amount = amount_value(operation.amount) if operation.amount is not None else None
            matches[i].add(operation, amount)

            self.logger.debug(f"Operation {operation.index} matched description {i}")
            return True

        return False

    def match_operations(
        self,
        descriptions: Descriptions,
        operations: list[Operation],
    ) -> list[Optional[Match]]:
        """
        Match operations against descriptions and enforce their constraints.

        Args:
            descriptions: Operation descriptions and comparison constraints,
                or their mapping form
            operations: Operations to match

        Returns:
            One entry per description; None for an optional description
            that matched nothing

        Raises:
            ParserError: If inputs are malformed, an operation or
                description is left unmatched, or a constraint fails
        """
        if not isinstance(operations, list):
            raise ParserError('operations must be a list')

        if not isinstance(descriptions, Descriptions):
            descriptions = Descriptions.from_dict(descriptions)

        if not operations:
            raise ParserError('Unable to match anything to zero operations')

        operation_descriptions = descriptions.operation_descriptions
        if not operation_descriptions:
            raise ParserError('No descriptions to match')

        matches: list[Optional[Match]] = [None] * len(operation_descriptions)

        for i, op in enumerate(operations):
            found = self.operation_match(op, operation_descriptions, matches)
            if not found and descriptions.err_unmatched:
                raise ParserError(f'Unable to find match for operation at index {i}')

        for i, match in enumerate(matches):
            if match is None and not operation_descriptions[i].optional:
                raise ParserError(f'Could not find match for description {i}')

        try:
            self.comparison_validator.comparison_match(descriptions, matches)
        except ParserError as exc:
            raise ParserError(f'{exc}: group descriptions not met') from exc

        self.logger.info(
            f"Matched {len(operations)} operations to "
            f"{sum(1 for m in matches if m is not None)}/{len(matches)} descriptions"
        )
        return matches


__all__ = ['DescriptorMatcher']
