# Path: rosetta_verify/parser.py
"""
Rosetta Parser

Single entry point over the verification core:
- group_operations: cluster related operations of a transaction
- balance_changes: net balance deltas of a block
- match_operations: match operations against Descriptions
- load_descriptions: named Descriptions kept as YAML files
- expected_operations / expected_signers: intent reconciliation

Each call is a pure, synchronous computation over the records passed in;
the parser keeps no state between calls beyond its collaborators.

Example:
    parser = RosettaParser.from_config()
    groups = parser.group_operations(transaction)
    matches = parser.match_operations(descriptions, transaction.operations)
    parser.expected_signers(payloads, observed_signers)
"""

from pathlib import Path
from typing import Optional

from .config_loader import ConfigLoader
from .core.errors import ParserError
from .core.logger.ipo_logging import get_output_logger, setup_ipo_logging
from .models.descriptions import Descriptions
from .models.results import BalanceChange, Match, OperationGroup
from .models.rosetta import Block, Operation, SigningPayload, Transaction
from .process.balance import BalanceAggregator, ExemptOperation
from .process.grouping import OperationGrouper
from .process.matcher import DescriptionLoader, DescriptorMatcher
from .process.reconciliation import IntentReconciler
from .tools.asserter import OperationAsserter


class RosettaParser:
    """
    Facade over grouping, balance, matching and reconciliation.

    Args:
        asserter: Success predicate and string-list checks
        exempt_func: Returns True for operations to leave out of balances
        strict_related_operations: Reject related_operations that point
            at operations not grouped yet
        descriptions_dir: Directory of YAML descriptions for load_descriptions
    """

    def __init__(
        self,
        asserter: Optional[OperationAsserter] = None,
        exempt_func: Optional[ExemptOperation] = None,
        strict_related_operations: bool = False,
        descriptions_dir: Optional[Path] = None,
    ):
        self.logger = get_output_logger('parser')
        self.asserter = asserter or OperationAsserter()
        self.exempt_func = exempt_func

        self.grouper = OperationGrouper(strict_related_operations)
        self.aggregator = BalanceAggregator(self.asserter, exempt_func)
        self.matcher = DescriptorMatcher()
        self.reconciler = IntentReconciler(self.asserter)
        self.description_loader = (
            DescriptionLoader(descriptions_dir) if descriptions_dir is not None else None
        )

    @classmethod
    def from_config(
        cls,
        config: Optional[ConfigLoader] = None,
        exempt_func: Optional[ExemptOperation] = None,
        setup_logging: bool = False,
    ) -> 'RosettaParser':
        """
        Build a parser from configuration.

        The asserter's status table comes from successful_statuses and
        failed_statuses; the grouping policy from strict_related_operations;
        named descriptions from descriptions_dir.

        Args:
            config: Configuration, the ConfigLoader singleton when None
            exempt_func: Returns True for operations to leave out of balances
            setup_logging: Install IPO logging from log_dir, log_level and
                log_console first; debug forces the DEBUG level
        """
        config = config or ConfigLoader()

        if setup_logging:
            log_level = config.get('log_level', 'INFO')
            if config.get('debug', False):
                log_level = 'DEBUG'
            setup_ipo_logging(
                log_dir=config.get('log_dir'),
                log_level=log_level,
                console_output=config.get('log_console', True),
            )

        asserter = OperationAsserter.from_status_lists(
            config.get('successful_statuses'),
            config.get('failed_statuses'),
        )
        parser = cls(
            asserter=asserter,
            exempt_func=exempt_func,
            strict_related_operations=config.get('strict_related_operations', False),
            descriptions_dir=config.get('descriptions_dir'),
        )
        parser.logger.info(
            f"Parser configured for {config.get('environment', 'development')} environment"
        )
        return parser

    @property
    def strict_related_operations(self) -> bool:
        """Whether forward related_operations are rejected."""
        return self.grouper.strict_related_operations

    def group_operations(self, transaction: Transaction) -> list[OperationGroup]:
        """Group related operations of a transaction."""
        groups = self.grouper.group_operations(transaction)
        self.logger.info(
            f"Transaction {transaction.transaction_identifier}: {len(groups)} operation groups"
        )
        return groups

    def skip_operation(self, operation: Operation) -> bool:
        """Whether an operation is left out of balance changes."""
        return self.aggregator.skip_operation(operation)

    def balance_changes(self, block: Block, block_removed: bool = False) -> list[BalanceChange]:
        """Net balance changes of a block."""
        return self.aggregator.balance_changes(block, block_removed)

    def match_operations(
        self,
        descriptions: Descriptions,
        operations: list[Operation],
    ) -> list[Optional[Match]]:
        """Match operations against descriptions and their constraints."""
        return self.matcher.match_operations(descriptions, operations)

    def load_descriptions(self, name: str) -> Descriptions:
        """
        Get named Descriptions from the descriptions directory.

        Raises:
            ParserError: If no directory is configured or no file defines the name
        """
        if self.description_loader is None:
            raise ParserError('No descriptions directory configured')
        return self.description_loader.get(name)

    def expected_operation(self, intent: Operation, observed: Operation) -> None:
        """Ensure an observed operation matches an intended one."""
        self.reconciler.expected_operation(intent, observed)

    def expected_operations(
        self,
        intents: list[Operation],
        observed: list[Operation],
        err_extra: bool = False,
        confirm_success: bool = False,
    ) -> None:
        """Ensure every intended operation was observed."""
        self.reconciler.expected_operations(intents, observed, err_extra, confirm_success)

    def expected_signers(
        self,
        intent_payloads: list[SigningPayload],
        observed_signers: list[str],
    ) -> None:
        """Ensure the observed signers are exactly the intended signers."""
        self.reconciler.expected_signers(intent_payloads, observed_signers)


__all__ = ['RosettaParser']
