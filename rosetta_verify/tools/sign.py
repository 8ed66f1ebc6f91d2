# Path: rosetta_verify/tools/sign.py
"""
Amount Sign

Sign requirements for amount descriptions, and the two-valued sign of a
number used when comparing opposite amounts.

A description may ask for ANY sign, or for a strictly NEGATIVE or
POSITIVE value; the *_OR_ZERO variants also accept zero. The sign of a
number itself has exactly two values: NEGATIVE below zero, POSITIVE
otherwise.
"""

from decimal import Decimal
from enum import Enum
from typing import Union

from .amounts import amount_value, parse_value


class AmountSign(str, Enum):
    """Required sign of an amount."""
    ANY = 'any'
    NEGATIVE = 'negative'
    POSITIVE = 'positive'
    NEGATIVE_OR_ZERO = 'negative_or_zero'
    POSITIVE_OR_ZERO = 'positive_or_zero'

    @classmethod
    def of(cls, value: Union[Decimal, int, str]) -> 'AmountSign':
        """Two-valued sign of a number."""
        return cls.NEGATIVE if parse_value(value) < 0 else cls.POSITIVE

    def match(self, amount) -> bool:
        """
        Check whether an Amount satisfies this sign.

        Raises:
            ParserError: If the amount value is malformed
        """
        if self is AmountSign.ANY:
            return True

        numeric = amount_value(amount)

        if self is AmountSign.NEGATIVE:
            return numeric < 0
        if self is AmountSign.POSITIVE:
            return numeric > 0
        if self is AmountSign.NEGATIVE_OR_ZERO:
            return numeric <= 0
        return numeric >= 0

    def __str__(self) -> str:
        return self.value


__all__ = ['AmountSign']
