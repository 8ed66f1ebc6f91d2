# Path: rosetta_verify/process/matcher/evaluators/amount_evaluator.py
"""
Amount Evaluator

Checks an operation's amount against an AmountDescription: presence
must agree with exists both ways, the value must satisfy the required
sign, and a required currency must have the same structural hash.
"""

from typing import Optional

from ....core.errors import ParserError
from ....models.descriptions import AmountDescription
from ....models.rosetta import Amount
from ....tools.hashing import structural_hash
from ....tools.sign import AmountSign
from .base_evaluator import BaseEvaluator


class AmountEvaluator(BaseEvaluator):
    """Evaluates amount requirements."""

    @property
    def evaluator_type(self) -> str:
        return 'amount'

    def evaluate(
        self,
        requirement: Optional[AmountDescription],
        value: Optional[Amount],
    ) -> None:
        """
        Check an amount against an AmountDescription.

        Raises:
            ParserError: If the amount does not have the described shape
        """
        if requirement is None:
            return

        if value is None:
            if requirement.exists:
                raise ParserError('amount is missing')
            return

        if not requirement.exists:
            raise ParserError('amount is populated')

        sign = AmountSign(requirement.sign)
        if not sign.match(value):
            raise ParserError(f'amount sign of {value.value} was not {sign}')

        if requirement.currency is None:
            return

        if value.currency is None or (
            structural_hash(value.currency) != structural_hash(requirement.currency)
        ):
            raise ParserError(
                f'Currency {requirement.currency.symbol} is not '
                f'{value.currency.symbol if value.currency else None}'
            )


__all__ = ['AmountEvaluator']
