# Path: rosetta_verify/process/reconciliation/intent_reconciler.py
"""
Intent Reconciler

Compares what was intended against what was observed:
- operations: each intended operation must be observed with the same
  account, amount and type (metadata and coin action are ignored)
- signers: the observed signers must be exactly the intended signers

Matching of observed operations is greedy: each observed operation
takes the first intent it satisfies that has not been taken yet.
"""

import json
from typing import Optional

from ...core.errors import AsserterError, ParserError
from ...core.logger.ipo_logging import get_process_logger
from ...models.rosetta import Operation, SigningPayload
from ...tools.asserter import OperationAsserter
from ...tools.hashing import structural_hash


class IntentReconciler:
    """
    Reconciles intended operations and signers with observed ones.

    Example:
        reconciler = IntentReconciler(asserter)
        reconciler.expected_operations(intents, observed, err_extra=True)
        reconciler.expected_signers(payloads, ['addr1', 'addr2'])
    """

    def __init__(self, asserter: Optional[OperationAsserter] = None):
        """
        Initialize reconciler.

        Args:
            asserter: Success predicate and string-list checks
        """
        self.logger = get_process_logger('reconciliation')
        self.asserter = asserter or OperationAsserter()

    def expected_operation(self, intent: Operation, observed: Operation) -> None:
        """
        Ensure an observed operation matches an intended one.

        Raises:
            ParserError: If account, amount or type differ
        """
        if structural_hash(intent.account) != structural_hash(observed.account):
            raise ParserError(
                f'Intended Account {intent.account} did not '
                f'match observed account {observed.account}'
            )

        if structural_hash(intent.amount) != structural_hash(observed.amount):
            raise ParserError(
                f'Intended amount {intent.amount} did not '
                f'match observed amount {observed.amount}'
            )

        if intent.type != observed.type:
            raise ParserError(
                f'Intended type {intent.type} did not '
                f'match observed type {observed.type}'
            )

    def expected_operations(
        self,
        intents: list[Operation],
        observed: list[Operation],
        err_extra: bool = False,
        confirm_success: bool = False,
    ) -> None:
        """
        Ensure every intended operation was observed.

        Args:
            intents: Intended operations
            observed: Observed operations
            err_extra: Fail on an observed operation matching no intent
            confirm_success: Fail if a matched observed operation did not succeed

        Raises:
            ParserError: On non-list input, an extra operation (err_extra),
                unmatched intents, or unsuccessful matches (confirm_success)
        """
        if not isinstance(intents, list):
            raise ParserError('intent operations must be a list')

        if not isinstance(observed, list):
            raise ParserError('observed operations must be a list')

        matched = [False] * len(intents)
        failed_matches: list[Operation] = []

        for obs in observed:
            found = False

            for i, intent in enumerate(intents):
                if matched[i]:
                    continue

                try:
                    self.expected_operation(intent, obs)
                except ParserError:
                    continue

                if confirm_success:
                    try:
                        successful = self.asserter.operation_successful(obs)
                    except AsserterError as exc:
                        raise ParserError(
                            f'Unable to check operation success: {exc}'
                        ) from exc

                    if not successful:
                        failed_matches.append(obs)

                matched[i] = True
                found = True
                self.logger.debug(f"Observed operation {obs.index} matched intent {i}")
                break

            if not found and err_extra:
                raise ParserError(
                    f'Found extra operation: {json.dumps(obs.to_dict(), sort_keys=True)}'
                )

        missing = [i for i, done in enumerate(matched) if not done]
        failed = [op.index for op in failed_matches]

        if missing:
            message = f'Could not intent match {missing}'
            if failed:
                message = f'{message}: found matching ops with unsuccessful status: {failed}'
            raise ParserError(message)

        if failed:
            raise ParserError(f'found matching ops with unsuccessful status: {failed}')

        self.logger.info(
            f"Reconciled {len(intents)} intended operations against "
            f"{len(observed)} observed operations"
        )

    def expected_signers(
        self,
        intent_payloads: list[SigningPayload],
        observed_signers: list[str],
    ) -> None:
        """
        Ensure the observed signers are exactly the intended signers.

        Args:
            intent_payloads: Signing payloads naming the intended signers
            observed_signers: Signer addresses found in the transaction

        Raises:
            ParserError: On non-list input, duplicate observed signers,
                a missing intended signer, or unexpected signers
        """
        if not isinstance(intent_payloads, list):
            raise ParserError('intent signing payloads must be a list')

        if not isinstance(observed_signers, list):
            raise ParserError('observed signers must be a list')

        try:
            self.asserter.string_array('observed signers', observed_signers)
        except AsserterError as exc:
            raise ParserError(f'Found duplicate signer: {exc}') from exc

        intended = dict.fromkeys(payload.signer for payload in intent_payloads)

        seen = set()
        unmatched: list[str] = []

        for signer in observed_signers:
            if signer in intended:
                seen.add(signer)
            else:
                unmatched.append(signer)

        for signer in intended:
            if signer not in seen:
                raise ParserError(f'Could not find match for intended signer: {signer}')

        if unmatched:
            raise ParserError(f'Found unexpected signers: {json.dumps(unmatched)}')

        self.logger.debug(f"Signers reconciled: {len(intended)}")


__all__ = ['IntentReconciler']
