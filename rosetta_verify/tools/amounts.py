# Path: rosetta_verify/tools/amounts.py
"""
Amount Arithmetic

Arbitrary-precision arithmetic on string-encoded amount values.

Amount values travel as decimal strings ("-1500") so that no precision
is lost to floating point; all arithmetic goes through Decimal.
"""

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, InvalidOperation
from typing import Union

from ..core.errors import ParserError


# Sums and negations never round
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def parse_value(value: Union[str, int, Decimal]) -> Decimal:
    """
    Parse an amount value into a Decimal.

    Raises:
        ParserError: If value is not a finite number
    """
    if isinstance(value, bool):
        raise ParserError(f'{value!r} is not a valid amount value')

    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ParserError(f'{value!r} is not a valid amount value') from exc

    if not parsed.is_finite():
        raise ParserError(f'{value!r} is not a valid amount value')

    return parsed


def _format(value: Decimal) -> str:
    """Format a Decimal without exponent notation."""
    if value.is_zero():
        value = abs(value)
    return format(value, 'f')


def add_values(a: str, b: str) -> str:
    """Add two string-encoded values and return the sum as a string."""
    return _format(_EXACT.add(parse_value(a), parse_value(b)))


def negate_value(a: str) -> str:
    """Negate a string-encoded value."""
    return _format(_EXACT.minus(parse_value(a)))


def amount_value(amount) -> Decimal:
    """
    Extract the numeric value of an Amount.

    Args:
        amount: Amount record (anything with a .value)

    Raises:
        ParserError: If amount is missing or its value is malformed
    """
    if amount is None:
        raise ParserError('amount value cannot be nil')
    return parse_value(amount.value)


__all__ = [
    'parse_value',
    'add_values',
    'negate_value',
    'amount_value',
]
