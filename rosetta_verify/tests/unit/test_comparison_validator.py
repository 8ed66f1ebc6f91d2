# Path: rosetta_verify/tests/unit/test_comparison_validator.py
"""
Unit Tests for ComparisonValidator

Tests cross-description constraints including:
- Match index validation
- Equal amounts and equal addresses
- Opposite amounts
- Error message wrapping
"""

import pytest

from fixtures.sample_data import create_operation

from rosetta_verify.core.errors import ParserError
from rosetta_verify.models import Descriptions, Match
from rosetta_verify.process.comparison import ComparisonValidator
from rosetta_verify.tools import amount_value


@pytest.fixture
def validator():
    """Provide a comparison validator."""
    return ComparisonValidator()


def _match(*operations):
    match = Match()
    for op in operations:
        match.add(op, amount_value(op.amount) if op.amount else None)
    return match


class TestMatchIndexValid:
    """Test index validation."""

    def test_valid_index(self, validator):
        """An index of a populated slot should pass."""
        validator.match_index_valid([_match(create_operation(0, value='1'))], 0)

    def test_non_integer(self, validator):
        """A non-integer index should fail."""
        with pytest.raises(ParserError, match='Index must be a number'):
            validator.match_index_valid([None], '0')

    def test_boolean_is_not_an_index(self, validator):
        """Booleans should not pass as indices."""
        with pytest.raises(ParserError, match='Index must be a number'):
            validator.match_index_valid([None], False)

    def test_out_of_range(self, validator):
        """An index past the end should fail."""
        with pytest.raises(ParserError, match='Match index 3 out of range'):
            validator.match_index_valid([None], 3)

    def test_negative_out_of_range(self, validator):
        """Negative indices should not wrap around."""
        with pytest.raises(ParserError, match='Match index -1 out of range'):
            validator.match_index_valid([_match(create_operation(0, value='1'))], -1)

    def test_empty_slot(self, validator):
        """An index of an unmatched slot should fail."""
        with pytest.raises(ParserError, match='Match index 0 is null'):
            validator.match_index_valid([None], 0)


class TestEqualAmounts:
    """Test equal amount checks."""

    def test_equal_values(self, validator):
        """Numerically equal values should pass."""
        validator.equal_amounts([
            create_operation(0, value='5'),
            create_operation(1, value='5.00'),
        ])

    def test_unequal_values(self, validator):
        """Differing values should fail naming both values."""
        with pytest.raises(ParserError, match='6 is not equal to 5'):
            validator.equal_amounts([
                create_operation(0, value='5'),
                create_operation(1, value='6'),
            ])

    def test_empty(self, validator):
        """An empty list should fail."""
        with pytest.raises(ParserError, match='cannot check equality of 0 operations'):
            validator.equal_amounts([])

    def test_amountless_operation(self, validator):
        """An operation without an amount should fail descriptively."""
        with pytest.raises(ParserError, match='operation 1 has no amount'):
            validator.equal_amounts([
                create_operation(0, value='5'),
                create_operation(1),
            ])


class TestEqualAddresses:
    """Test equal address checks."""

    def test_same_address(self, validator):
        """Operations on one address should pass."""
        validator.equal_addresses([
            create_operation(0, address='A'),
            create_operation(1, address='A'),
        ])

    def test_different_address(self, validator):
        """Operations on different addresses should fail."""
        with pytest.raises(ParserError, match='A is not equal to B'):
            validator.equal_addresses([
                create_operation(0, address='A'),
                create_operation(1, address='B'),
            ])

    def test_single_operation(self, validator):
        """Fewer than two operations should fail."""
        with pytest.raises(ParserError, match='address equality of 1 operations'):
            validator.equal_addresses([create_operation(0, address='A')])

    def test_missing_account(self, validator):
        """An operation without an account should fail."""
        with pytest.raises(ParserError, match='account is nil'):
            validator.equal_addresses([
                create_operation(0, address='A'),
                create_operation(1),
            ])


class TestOppositeAmounts:
    """Test opposite amount checks."""

    def test_opposite(self, validator):
        """Opposite signs and equal magnitude should pass."""
        validator.opposite_amounts(
            create_operation(0, value='-3.5'),
            create_operation(1, value='3.50'),
        )

    def test_same_sign(self, validator):
        """Same signs should fail."""
        with pytest.raises(ParserError, match='have the same sign'):
            validator.opposite_amounts(
                create_operation(0, value='3'),
                create_operation(1, value='3'),
            )

    def test_zero_counts_as_positive(self, validator):
        """Zero and a positive value should have the same sign."""
        with pytest.raises(ParserError, match='have the same sign'):
            validator.opposite_amounts(
                create_operation(0, value='0'),
                create_operation(1, value='1'),
            )

    def test_magnitude_differs(self, validator):
        """Different magnitudes should fail."""
        with pytest.raises(ParserError, match='-3 and 4 are not equal'):
            validator.opposite_amounts(
                create_operation(0, value='-3'),
                create_operation(1, value='4'),
            )


class TestComparisonMatch:
    """Test the combined constraint pass."""

    def test_all_constraints_met(self, validator):
        """A consistent set of matches should pass every constraint."""
        matches = [
            _match(create_operation(0, address='A', value='-5')),
            _match(create_operation(1, address='B', value='5')),
            _match(create_operation(2, address='A', value='-5')),
        ]
        descriptions = Descriptions(
            equal_amounts=[[0, 2]],
            equal_addresses=[[0, 2]],
            opposite_amounts=[[0, 1]],
        )

        validator.comparison_match(descriptions, matches)

    def test_equal_amounts_wrapped(self, validator):
        """Equal amount failures should name the constraint."""
        matches = [
            _match(create_operation(0, value='1')),
            _match(create_operation(1, value='2')),
        ]

        with pytest.raises(ParserError, match='operation amounts are not equal$'):
            validator.comparison_match(Descriptions(equal_amounts=[[0, 1]]), matches)

    def test_invalid_index_wrapped(self, validator):
        """Index failures inside a batch should name the index."""
        matches = [_match(create_operation(0, value='1'))]

        with pytest.raises(ParserError) as exc_info:
            validator.comparison_match(Descriptions(equal_addresses=[[0, 4]]), matches)

        assert str(exc_info.value) == (
            'Match index 4 out of range: index 4 not valid: '
            'operation addresses are not equal'
        )

    def test_opposite_pair_length(self, validator):
        """Opposite constraints must name exactly two descriptions."""
        with pytest.raises(ParserError, match='Cannot check opposites of 3 operations'):
            validator.comparison_match(Descriptions(opposite_amounts=[[0, 1, 2]]), [])

    def test_opposite_missing_slot_wrapped(self, validator):
        """An unmatched opposite slot should be reported as a comparison error."""
        matches = [_match(create_operation(0, value='1')), None]

        with pytest.raises(ParserError, match='is null: opposite amounts comparison error'):
            validator.comparison_match(Descriptions(opposite_amounts=[[0, 1]]), matches)

    def test_opposite_sides_must_be_internally_equal(self, validator):
        """Each side of an opposite pair should hold equal amounts."""
        matches = [
            _match(create_operation(0, value='-1'), create_operation(2, value='-2')),
            _match(create_operation(1, value='1')),
        ]

        with pytest.raises(ParserError, match='-2 is not equal to -1'):
            validator.comparison_match(Descriptions(opposite_amounts=[[0, 1]]), matches)
