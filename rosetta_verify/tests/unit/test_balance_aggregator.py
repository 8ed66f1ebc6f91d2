# Path: rosetta_verify/tests/unit/test_balance_aggregator.py
"""
Unit Tests for BalanceAggregator

Tests per-block balance deltas including:
- Netting per (account, currency)
- Skipping unsuccessful, incomplete and exempt operations
- Block removal (negation and parent attribution)
"""

import pytest

from fixtures.sample_data import ETH, create_block, create_operation, create_transaction

from rosetta_verify.core.errors import AsserterError
from rosetta_verify.process.balance import BalanceAggregator
from rosetta_verify.tools import OperationAsserter


@pytest.fixture
def aggregator():
    """Provide an aggregator with the default status table."""
    return BalanceAggregator(OperationAsserter())


def _by_address(changes):
    return {c.account.address: c.difference for c in changes}


class TestBalanceChanges:
    """Test netting of balance changes."""

    def test_nets_per_account(self, aggregator, sample_block):
        """Changes should be summed per account and skip failed operations."""
        changes = aggregator.balance_changes(sample_block, block_removed=False)

        assert _by_address(changes) == {'A': '-12.5', 'B': '10', 'C': '2.5'}

    def test_order_of_first_appearance(self, aggregator, sample_block):
        """Changes should come out in order of first appearance."""
        changes = aggregator.balance_changes(sample_block, block_removed=False)

        assert [c.account.address for c in changes] == ['A', 'B', 'C']

    def test_attributed_to_block(self, aggregator, sample_block):
        """Changes should carry the block's own identifier."""
        changes = aggregator.balance_changes(sample_block, block_removed=False)

        assert all(c.block.index == 100 for c in changes)

    def test_currencies_kept_apart(self, aggregator):
        """The same account in two currencies should yield two changes."""
        block = create_block([create_transaction([
            create_operation(0, address='A', value='5'),
            create_operation(1, address='A', value='7', currency=ETH),
        ])])

        changes = aggregator.balance_changes(block, block_removed=False)

        assert [(c.currency.symbol, c.difference) for c in changes] == [
            ('BTC', '5'), ('ETH', '7'),
        ]

    def test_precision_preserved(self, aggregator):
        """Large and fractional values should be summed exactly."""
        block = create_block([create_transaction([
            create_operation(0, address='A', value='123456789012345678901234567890'),
            create_operation(1, address='A', value='0.000000000000000001'),
        ])])

        changes = aggregator.balance_changes(block, block_removed=False)

        assert changes[0].difference == '123456789012345678901234567890.000000000000000001'

    def test_single_value_normalized(self, aggregator):
        """A lone change should be formatted like a summed one."""
        block = create_block([create_transaction([
            create_operation(0, address='A', value='1E+2'),
            create_operation(1, address='B', value='-0'),
        ])])

        changes = aggregator.balance_changes(block, block_removed=False)

        assert [c.difference for c in changes] == ['100', '0']

    def test_to_dict_shape(self, aggregator, sample_block):
        """to_dict should emit Rosetta-style keys."""
        change = aggregator.balance_changes(sample_block, block_removed=False)[0]

        data = change.to_dict()

        assert data['account_identifier'] == {'address': 'A'}
        assert data['block_identifier'] == {'index': 100, 'hash': 'block100'}
        assert data['difference'] == '-12.5'


class TestBlockRemoved:
    """Test reorg rollback handling."""

    def test_removed_block_negates_changes(self, aggregator, sample_block):
        """Removed-block deltas should be exact negations per key."""
        added = aggregator.balance_changes(sample_block, block_removed=False)
        removed = aggregator.balance_changes(sample_block, block_removed=True)

        assert _by_address(removed) == {'A': '12.5', 'B': '-10', 'C': '-2.5'}
        for a, r in zip(added, removed):
            assert a.account == r.account
            assert a.currency == r.currency

    def test_removed_block_uses_parent(self, aggregator, sample_block):
        """Removed-block changes should be attributed to the parent block."""
        removed = aggregator.balance_changes(sample_block, block_removed=True)

        assert all(c.block.hash == 'block99' for c in removed)

    def test_zero_sum_is_not_negative(self, aggregator):
        """A net zero change should read '0' in both directions."""
        block = create_block([create_transaction([
            create_operation(0, address='A', value='5'),
            create_operation(1, address='A', value='-5'),
        ])])

        assert aggregator.balance_changes(block, True)[0].difference == '0'
        assert aggregator.balance_changes(block, False)[0].difference == '0'


class TestSkipOperation:
    """Test the skip predicate."""

    def test_unsuccessful_skipped(self, aggregator):
        """Operations with a failed status should be skipped."""
        assert aggregator.skip_operation(
            create_operation(0, address='A', value='1', status='FAILURE')
        )

    def test_missing_account_skipped(self, aggregator):
        """Operations without an account should be skipped."""
        assert aggregator.skip_operation(create_operation(0, value='1'))

    def test_missing_amount_skipped(self, aggregator):
        """Operations without an amount should be skipped."""
        assert aggregator.skip_operation(create_operation(0, address='A'))

    def test_exempt_skipped(self):
        """Operations the exemption predicate accepts should be skipped."""
        aggregator = BalanceAggregator(
            OperationAsserter(), exempt_func=lambda op: op.type == 'reward'
        )

        assert aggregator.skip_operation(
            create_operation(0, op_type='reward', address='A', value='1')
        )
        assert not aggregator.skip_operation(create_operation(0, address='A', value='1'))

    def test_exempt_not_consulted_for_failed(self):
        """The exemption predicate should only see otherwise eligible operations."""
        seen = []
        aggregator = BalanceAggregator(
            OperationAsserter(), exempt_func=lambda op: seen.append(op.index) or False
        )

        aggregator.skip_operation(create_operation(0, address='A', value='1', status='FAILURE'))
        aggregator.skip_operation(create_operation(1, address='A', value='1'))

        assert seen == [1]

    def test_unknown_status_raises(self, aggregator):
        """An undeclared status should propagate the asserter error."""
        with pytest.raises(AsserterError, match='not declared'):
            aggregator.skip_operation(
                create_operation(0, address='A', value='1', status='PENDING')
            )
