# Path: rosetta_verify/process/matcher/__init__.py
"""
Descriptor Matcher

Pairs raw operations with declarative operation descriptions.

Components:
- evaluators: one shape check per description part
- engine: DescriptorMatcher, the matching loop, and DescriptionLoader

Example:
    from rosetta_verify.process.matcher import DescriptorMatcher

    matches = DescriptorMatcher().match_operations(descriptions, operations)
"""

from .evaluators import (
    BaseEvaluator,
    AccountEvaluator,
    AmountEvaluator,
    MetadataEvaluator,
    CoinActionEvaluator,
    value_matches_kind,
)
from .engine import DescriptorMatcher, DescriptionLoader

__all__ = [
    'BaseEvaluator',
    'AccountEvaluator',
    'AmountEvaluator',
    'MetadataEvaluator',
    'CoinActionEvaluator',
    'value_matches_kind',
    'DescriptorMatcher',
    'DescriptionLoader',
]
