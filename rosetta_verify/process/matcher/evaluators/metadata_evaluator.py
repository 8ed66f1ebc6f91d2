# Path: rosetta_verify/process/matcher/evaluators/metadata_evaluator.py
"""
Metadata Evaluator

Checks that required metadata keys are present with values of the
declared kind. Kinds form a closed set checked structurally:

    string  -> str
    number  -> int, float, Decimal (booleans excluded)
    boolean -> bool
    object  -> mapping or list
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional

from ....constants import ValueKind
from ....core.errors import ParserError
from ....models.descriptions import MetadataDescription
from .base_evaluator import BaseEvaluator


def value_matches_kind(value: Any, kind: ValueKind) -> bool:
    """Check a metadata value against a value kind."""
    if kind is ValueKind.STRING:
        return isinstance(value, str)
    if kind is ValueKind.NUMBER:
        return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)
    if kind is ValueKind.BOOLEAN:
        return isinstance(value, bool)
    if kind is ValueKind.OBJECT:
        return isinstance(value, (Mapping, list))
    return False


class MetadataEvaluator(BaseEvaluator):
    """Evaluates metadata requirements."""

    @property
    def evaluator_type(self) -> str:
        return 'metadata'

    def evaluate(
        self,
        requirement: list[MetadataDescription],
        value: Optional[dict],
    ) -> None:
        """
        Check metadata against a list of key requirements.

        A key whose value is None counts as absent.

        Raises:
            ParserError: If a key is missing or its value has the wrong kind
        """
        if not requirement:
            return

        metadata = value or {}

        for req in requirement:
            found = metadata.get(req.key)

            if found is None:
                raise ParserError(f'{req.key} not present in metadata')

            if not value_matches_kind(found, ValueKind(req.value_kind)):
                raise ParserError(f'{req.key} value is not of type {ValueKind(req.value_kind)}')


__all__ = ['MetadataEvaluator', 'value_matches_kind']
