# Path: rosetta_verify/process/matcher/evaluators/account_evaluator.py
"""
Account Evaluator

Checks an operation's account against an AccountDescription:
- no description: anything goes
- no account: fine unless the description requires one
- sub-account presence must agree with sub_account_exists both ways
- a non-empty sub_account_address must match exactly
- sub_account_metadata_keys must be present with matching kinds
"""

from typing import Optional

from ....core.errors import ParserError
from ....models.descriptions import AccountDescription
from ....models.rosetta import AccountIdentifier
from .base_evaluator import BaseEvaluator
from .metadata_evaluator import MetadataEvaluator


class AccountEvaluator(BaseEvaluator):
    """Evaluates account requirements."""

    def __init__(self):
        super().__init__()
        self._metadata = MetadataEvaluator()

    @property
    def evaluator_type(self) -> str:
        return 'account'

    def evaluate(
        self,
        requirement: Optional[AccountDescription],
        value: Optional[AccountIdentifier],
    ) -> None:
        """
        Check an account against an AccountDescription.

        Raises:
            ParserError: If the account does not have the described shape
        """
        if requirement is None:
            return

        if value is None:
            if requirement.exists:
                raise ParserError('Account is missing')
            return

        if value.sub_account is None:
            if requirement.sub_account_exists:
                raise ParserError('sub_account_identifier is missing')
            return

        if not requirement.sub_account_exists:
            raise ParserError('sub_account is populated')

        if (
            requirement.sub_account_address
            and value.sub_account.address != requirement.sub_account_address
        ):
            raise ParserError(
                f'sub_account_identifier.address is {value.sub_account.address} '
                f'not {requirement.sub_account_address}'
            )

        try:
            self._metadata.evaluate(
                requirement.sub_account_metadata_keys,
                value.sub_account.metadata,
            )
        except ParserError as exc:
            raise ParserError(f'{exc}: account metadata keys mismatch') from exc


__all__ = ['AccountEvaluator']
