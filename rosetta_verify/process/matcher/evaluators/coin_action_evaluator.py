# Path: rosetta_verify/process/matcher/evaluators/coin_action_evaluator.py
"""
Coin Action Evaluator

Checks that an operation's coin change carries the required coin action.
"""

from typing import Optional, Union

from ....constants import CoinAction
from ....core.errors import ParserError
from ....models.rosetta import CoinChange
from .base_evaluator import BaseEvaluator


class CoinActionEvaluator(BaseEvaluator):
    """Evaluates coin action requirements."""

    @property
    def evaluator_type(self) -> str:
        return 'coin_action'

    def evaluate(
        self,
        requirement: Optional[Union[CoinAction, str]],
        value: Optional[CoinChange],
    ) -> None:
        """
        Check a coin change against a required coin action.

        Raises:
            ParserError: If the coin change is missing or has another action
        """
        if not requirement:
            return

        required = str(requirement)

        if value is None:
            raise ParserError(f'coin change is nil but expected {required}')

        if value.coin_action != required:
            raise ParserError(
                f'coin_action is {value.coin_action} but expected {required}'
            )


__all__ = ['CoinActionEvaluator']
