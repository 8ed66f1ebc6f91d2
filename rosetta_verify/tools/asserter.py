# Path: rosetta_verify/tools/asserter.py
"""
Operation Asserter

Success predicate and string-list checks consumed by the parser.

The network declares which operation statuses exist and whether each
counts as successful; operation_successful() looks an operation's
status up in that table.
"""

from typing import Iterable, Optional

from ..constants import DEFAULT_FAILED_STATUSES, DEFAULT_SUCCESSFUL_STATUSES
from ..core.errors import AsserterError
from ..core.logger.ipo_logging import get_process_logger
from ..models.rosetta import Operation, OperationStatus


class OperationAsserter:
    """
    Evaluates operation success against a declared status table.

    Example:
        asserter = OperationAsserter([
            OperationStatus('SUCCESS', True),
            OperationStatus('REVERTED', False),
        ])
        asserter.operation_successful(op)
    """

    def __init__(self, operation_statuses: Optional[Iterable[OperationStatus]] = None):
        """
        Initialize asserter.

        Args:
            operation_statuses: Declared statuses; defaults to SUCCESS / FAILURE
        """
        self.logger = get_process_logger('asserter')

        if operation_statuses is None:
            operation_statuses = [
                OperationStatus(s, True) for s in DEFAULT_SUCCESSFUL_STATUSES
            ] + [
                OperationStatus(s, False) for s in DEFAULT_FAILED_STATUSES
            ]

        self._statuses: dict[str, bool] = {}
        for status in operation_statuses:
            if status.status in self._statuses:
                raise AsserterError(f'operation status {status.status} declared twice')
            self._statuses[status.status] = status.successful

    @classmethod
    def from_status_lists(
        cls,
        successful: Iterable[str],
        failed: Iterable[str] = (),
    ) -> 'OperationAsserter':
        """Build an asserter from plain lists of status names."""
        return cls(
            [OperationStatus(s, True) for s in successful]
            + [OperationStatus(s, False) for s in failed]
        )

    @property
    def statuses(self) -> dict[str, bool]:
        """Declared status table (status -> successful)."""
        return dict(self._statuses)

    def operation_successful(self, operation: Operation) -> bool:
        """
        Report whether an operation executed successfully.

        Raises:
            AsserterError: If the status is missing or not declared
        """
        if not operation.status:
            raise AsserterError(
                f'operation {operation.index} has no status'
            )

        if operation.status not in self._statuses:
            raise AsserterError(
                f'operation {operation.index} status {operation.status} is not declared'
            )

        return self._statuses[operation.status]

    def string_array(self, label: str, values: list[str]) -> None:
        """
        Ensure a list of strings has no empty entries and no duplicates.

        Raises:
            AsserterError: On an empty string or a duplicate
        """
        seen = set()
        for value in values:
            if not value:
                raise AsserterError(f'{label} has an empty string')
            if value in seen:
                raise AsserterError(f'{label} contains a duplicate {value}')
            seen.add(value)


__all__ = ['OperationAsserter']
