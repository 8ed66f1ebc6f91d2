# Path: rosetta_verify/tests/unit/test_tools.py
"""
Unit Tests for Verification Tools

Tests the collaborators used by the process layer:
- Decimal amount arithmetic
- Structural hash
- AmountSign
- OperationAsserter
"""

from decimal import Decimal

import pytest

from fixtures.sample_data import BTC, create_account, create_operation

from rosetta_verify.core.errors import AsserterError, ParserError
from rosetta_verify.models import Amount, Currency, OperationStatus
from rosetta_verify.tools import (
    AmountSign,
    OperationAsserter,
    add_values,
    amount_value,
    negate_value,
    parse_value,
    structural_hash,
)


class TestAmounts:
    """Test Decimal amount arithmetic."""

    def test_add(self):
        """Values should be added exactly."""
        assert add_values('0.1', '0.2') == '0.3'

    def test_add_negative(self):
        """Negative values should be added."""
        assert add_values('-10', '2.5') == '-7.5'

    def test_add_beyond_default_precision(self):
        """Sums wider than 28 digits should not be rounded."""
        assert add_values('1' + '0' * 40, '1') == '1' + '0' * 39 + '1'

    def test_negate(self):
        """Negation should flip the sign."""
        assert negate_value('-12.5') == '12.5'
        assert negate_value('3') == '-3'

    def test_negate_zero(self):
        """Negated zero should not carry a sign."""
        assert negate_value('0') == '0'

    def test_no_exponent_notation(self):
        """Results should be plain decimal strings."""
        assert add_values('1E+3', '0') == '1000'

    def test_parse_rejects_garbage(self):
        """Non-numeric values should raise ParserError."""
        with pytest.raises(ParserError, match='not a valid amount value'):
            parse_value('ten')

    def test_parse_rejects_non_finite(self):
        """Infinity and NaN should raise ParserError."""
        with pytest.raises(ParserError):
            parse_value('Infinity')
        with pytest.raises(ParserError):
            parse_value('NaN')

    def test_parse_rejects_bool(self):
        """Booleans should not be accepted as numbers."""
        with pytest.raises(ParserError):
            parse_value(True)

    def test_amount_value(self):
        """amount_value should read the value of an Amount."""
        assert amount_value(Amount(value='-42', currency=BTC)) == Decimal('-42')

    def test_amount_value_missing(self):
        """A missing amount should raise ParserError."""
        with pytest.raises(ParserError, match='cannot be nil'):
            amount_value(None)


class TestStructuralHash:
    """Test structural hashing."""

    def test_equal_records_equal_hash(self):
        """Structurally equal records should hash the same."""
        assert structural_hash(create_account('A')) == structural_hash(create_account('A'))

    def test_different_records_differ(self):
        """Different records should hash differently."""
        assert structural_hash(create_account('A')) != structural_hash(create_account('B'))

    def test_key_order_irrelevant(self):
        """Mapping key order should not affect the hash."""
        assert structural_hash({'a': 1, 'b': 2}) == structural_hash({'b': 2, 'a': 1})

    def test_none_members_dropped(self):
        """A record should hash like its dictionary form without None members."""
        currency = Currency(symbol='BTC', decimals=8, metadata=None)

        assert structural_hash(currency) == structural_hash({'symbol': 'BTC', 'decimals': 8})

    def test_metadata_counts(self):
        """Metadata should be part of the hash."""
        plain = Currency(symbol='BTC', decimals=8)
        tagged = Currency(symbol='BTC', decimals=8, metadata={'issuer': 'x'})

        assert structural_hash(plain) != structural_hash(tagged)

    def test_none_value(self):
        """None should hash to a stable value."""
        assert structural_hash(None) == structural_hash(None)
        assert structural_hash(None) != structural_hash(create_account('A'))


class TestAmountSign:
    """Test AmountSign requirements."""

    @pytest.mark.parametrize('sign, value, expected', [
        (AmountSign.ANY, '-1', True),
        (AmountSign.NEGATIVE, '-1', True),
        (AmountSign.NEGATIVE, '0', False),
        (AmountSign.POSITIVE, '1', True),
        (AmountSign.POSITIVE, '0', False),
        (AmountSign.NEGATIVE_OR_ZERO, '0', True),
        (AmountSign.NEGATIVE_OR_ZERO, '1', False),
        (AmountSign.POSITIVE_OR_ZERO, '0', True),
        (AmountSign.POSITIVE_OR_ZERO, '-1', False),
    ])
    def test_match(self, sign, value, expected):
        """Each sign should accept exactly its values."""
        assert sign.match(Amount(value=value, currency=BTC)) is expected

    def test_of_is_two_valued(self):
        """The sign of a number is NEGATIVE below zero, POSITIVE otherwise."""
        assert AmountSign.of('-0.01') is AmountSign.NEGATIVE
        assert AmountSign.of('0') is AmountSign.POSITIVE
        assert AmountSign.of(Decimal('7')) is AmountSign.POSITIVE

    def test_str(self):
        """str() should give the wire value."""
        assert str(AmountSign.NEGATIVE_OR_ZERO) == 'negative_or_zero'

    def test_any_skips_parsing(self):
        """ANY should accept even a malformed value."""
        assert AmountSign.ANY.match(Amount(value='??', currency=BTC))


class TestOperationAsserter:
    """Test the operation success predicate."""

    def test_default_table(self):
        """SUCCESS and FAILURE should be declared by default."""
        asserter = OperationAsserter()

        assert asserter.statuses == {'SUCCESS': True, 'FAILURE': False}

    def test_successful(self):
        """A successful status should report True."""
        assert OperationAsserter().operation_successful(create_operation(0, status='SUCCESS'))

    def test_unsuccessful(self):
        """A failed status should report False."""
        assert not OperationAsserter().operation_successful(
            create_operation(0, status='FAILURE')
        )

    def test_missing_status(self):
        """An operation without a status should raise AsserterError."""
        with pytest.raises(AsserterError, match='has no status'):
            OperationAsserter().operation_successful(create_operation(0, status=None))

    def test_custom_table(self):
        """A network-declared table should be honored."""
        asserter = OperationAsserter([
            OperationStatus('OK', True),
            OperationStatus('REVERTED', False),
        ])

        assert asserter.operation_successful(create_operation(0, status='OK'))
        with pytest.raises(AsserterError, match='not declared'):
            asserter.operation_successful(create_operation(0, status='SUCCESS'))

    def test_status_declared_twice(self):
        """Declaring a status twice should fail."""
        with pytest.raises(AsserterError, match='declared twice'):
            OperationAsserter.from_status_lists(['OK'], ['OK'])

    def test_string_array_ok(self):
        """Distinct non-empty strings should pass."""
        OperationAsserter().string_array('signers', ['a', 'b'])

    def test_string_array_duplicate(self):
        """Duplicates should fail."""
        with pytest.raises(AsserterError, match='duplicate a'):
            OperationAsserter().string_array('signers', ['a', 'b', 'a'])

    def test_string_array_empty_entry(self):
        """Empty strings should fail."""
        with pytest.raises(AsserterError, match='empty string'):
            OperationAsserter().string_array('signers', ['a', ''])

    def test_errors_are_value_errors(self):
        """Domain errors should be catchable as ValueError."""
        assert issubclass(AsserterError, ValueError)
        assert issubclass(ParserError, ValueError)
