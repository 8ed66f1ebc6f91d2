# Path: rosetta_verify/models/descriptions.py
"""
Operation Description Models

Pydantic models for the declarative shapes that raw operations are
matched against. They are built in code or loaded from YAML files by
DescriptionLoader.

A Descriptions object holds an ordered list of OperationDescription
patterns plus cross-description constraints:
- equal_amounts: groups of description indices whose matched amounts must be equal
- opposite_amounts: pairs of description indices whose amounts must be opposite
- equal_addresses: groups of description indices whose accounts must share an address
- err_unmatched: fail if any operation matches no description

Flags, strings and indices are strict: "false" is not a boolean and
True is not an index. Enum fields accept their string values.

Example:
    descriptions = Descriptions(
        operation_descriptions=[
            OperationDescription(
                type='transfer',
                account=AccountDescription(exists=True),
                amount=AmountDescription(exists=True, sign=AmountSign.NEGATIVE),
            ),
            OperationDescription(
                type='transfer',
                account=AccountDescription(exists=True),
                amount=AmountDescription(exists=True, sign=AmountSign.POSITIVE),
            ),
        ],
        opposite_amounts=[[0, 1]],
    )
"""

from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from ..constants import CoinAction, ValueKind
from ..core.errors import ParserError
from ..tools.sign import AmountSign
from .rosetta import Currency


# =============================================================================
# SHAPE REQUIREMENTS
# =============================================================================

class MetadataDescription(BaseModel):
    """A metadata key that must be present with a value of the given kind."""
    model_config = ConfigDict(extra='forbid')

    key: StrictStr = Field(
        description="Metadata key that must be present"
    )
    value_kind: ValueKind = Field(
        description="Kind the value must have"
    )


class AccountDescription(BaseModel):
    """Expected shape of an operation's account."""
    model_config = ConfigDict(extra='forbid')

    exists: StrictBool = Field(
        default=False,
        description="The operation must carry an account"
    )
    sub_account_exists: StrictBool = Field(
        default=False,
        description="The account must carry a sub-account (and must not otherwise)"
    )
    sub_account_address: StrictStr = Field(
        default='',
        description="Exact sub-account address required, when non-empty"
    )
    sub_account_metadata_keys: list[MetadataDescription] = Field(
        default_factory=list,
        description="Metadata the sub-account must carry"
    )


class AmountDescription(BaseModel):
    """Expected shape of an operation's amount."""
    model_config = ConfigDict(extra='forbid')

    exists: StrictBool = Field(
        default=False,
        description="The operation must carry an amount (and must not otherwise)"
    )
    sign: AmountSign = Field(
        default=AmountSign.ANY,
        description="Required sign of the amount value"
    )
    currency: Optional[Currency] = Field(
        default=None,
        description="Required currency, compared by structural hash"
    )

    @field_validator('currency', mode='before')
    @classmethod
    def load_currency(cls, value: Any) -> Any:
        """Build a Currency from its wire mapping."""
        if not isinstance(value, dict):
            return value
        try:
            return Currency.from_dict(value)
        except (KeyError, TypeError) as e:
            raise ValueError(f'invalid currency {value}: {e!r}') from e


class OperationDescription(BaseModel):
    """Expected shape of one operation."""
    model_config = ConfigDict(extra='forbid')

    type: StrictStr = Field(
        default='',
        description="Required operation type, empty for any"
    )
    account: Optional[AccountDescription] = Field(
        default=None,
        description="Account requirements, None for no requirement"
    )
    amount: Optional[AmountDescription] = Field(
        default=None,
        description="Amount requirements, None for no requirement"
    )
    metadata: list[MetadataDescription] = Field(
        default_factory=list,
        description="Metadata keys the operation must carry"
    )
    coin_action: Optional[CoinAction] = Field(
        default=None,
        description="Required coin action, None for no requirement"
    )
    optional: StrictBool = Field(
        default=False,
        description="Missing match is not an error"
    )
    allow_repeats: StrictBool = Field(
        default=False,
        description="Several operations may match this description"
    )


# =============================================================================
# DESCRIPTIONS (main model)
# =============================================================================

class Descriptions(BaseModel):
    """
    Ordered operation descriptions plus cross-description constraints.

    Index lists refer to positions in operation_descriptions. Field
    assignment is validated too, so a Descriptions object cannot be
    given a malformed constraint after construction.
    """
    model_config = ConfigDict(extra='forbid', validate_assignment=True)

    operation_descriptions: list[OperationDescription] = Field(
        default_factory=list,
        description="Ordered patterns operations are matched against"
    )
    equal_amounts: list[list[StrictInt]] = Field(
        default_factory=list,
        description="Description indices whose amounts must be equal"
    )
    opposite_amounts: list[list[StrictInt]] = Field(
        default_factory=list,
        description="Description index pairs whose amounts must be opposite"
    )
    equal_addresses: list[list[StrictInt]] = Field(
        default_factory=list,
        description="Description indices whose accounts must share an address"
    )
    err_unmatched: StrictBool = Field(
        default=False,
        description="Fail if any operation matches no description"
    )

    @classmethod
    def from_dict(cls, data: Any) -> 'Descriptions':
        """
        Create from dictionary.

        Raises:
            ParserError: If the data does not have the Descriptions shape
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ParserError(f"Invalid descriptions: {summarize_errors(e)}") from e


def summarize_errors(error: ValidationError) -> str:
    """One line per failing field, as 'a.0.b: message'."""
    return '; '.join(
        f"{'.'.join(str(part) for part in detail['loc']) or 'descriptions'}: {detail['msg']}"
        for detail in error.errors()
    )


__all__ = [
    'MetadataDescription',
    'AccountDescription',
    'AmountDescription',
    'OperationDescription',
    'Descriptions',
]
