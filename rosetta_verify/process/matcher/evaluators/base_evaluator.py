# Path: rosetta_verify/process/matcher/evaluators/base_evaluator.py
"""
Base Evaluator

Abstract base class for shape evaluators.
Defines the interface that all evaluators must implement.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from ....core.logger.ipo_logging import get_process_logger


class BaseEvaluator(ABC):
    """
    Abstract base class for shape evaluators.

    Each evaluator checks one part of an OperationDescription:
    - AccountEvaluator: account and sub-account shape
    - AmountEvaluator: amount presence, sign and currency
    - MetadataEvaluator: required metadata keys and value kinds
    - CoinActionEvaluator: required coin action

    evaluate() returns None when the value satisfies the requirement
    and raises ParserError with a descriptive message otherwise.

    Example:
        evaluator = AmountEvaluator()
        evaluator.evaluate(description.amount, operation.amount)
    """

    def __init__(self):
        """Initialize evaluator."""
        self.logger: logging.Logger = get_process_logger(
            f'matcher.evaluators.{self.evaluator_type}'
        )

    @property
    @abstractmethod
    def evaluator_type(self) -> str:
        """Return the type name of this evaluator."""
        pass

    @abstractmethod
    def evaluate(self, requirement: Any, value: Any) -> None:
        """
        Check a value against a requirement.

        Args:
            requirement: Part of an OperationDescription (None for no requirement)
            value: Corresponding part of the operation

        Raises:
            ParserError: If the value does not satisfy the requirement
        """
        pass


__all__ = ['BaseEvaluator']
