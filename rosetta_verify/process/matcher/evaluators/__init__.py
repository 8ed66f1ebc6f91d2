# Path: rosetta_verify/process/matcher/evaluators/__init__.py
"""
Shape Evaluators

One evaluator per part of an OperationDescription. Each raises
ParserError when the operation does not have the described shape.
"""

from .base_evaluator import BaseEvaluator
from .metadata_evaluator import MetadataEvaluator, value_matches_kind
from .account_evaluator import AccountEvaluator
from .amount_evaluator import AmountEvaluator
from .coin_action_evaluator import CoinActionEvaluator

__all__ = [
    'BaseEvaluator',
    'MetadataEvaluator',
    'value_matches_kind',
    'AccountEvaluator',
    'AmountEvaluator',
    'CoinActionEvaluator',
]
