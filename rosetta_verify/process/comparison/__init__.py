# Path: rosetta_verify/process/comparison/__init__.py
"""
Comparison Validator

Cross-description constraints over matched operations.
"""

from .comparison_validator import ComparisonValidator, OperationsCheck

__all__ = ['ComparisonValidator', 'OperationsCheck']
