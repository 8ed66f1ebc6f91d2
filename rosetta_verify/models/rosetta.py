# Path: rosetta_verify/models/rosetta.py
"""
Rosetta Record Models

Typed dataclasses for the raw records the verification core consumes:
accounts, amounts, operations, transactions, blocks and signing payloads.

Records are assumed to be schema-valid already. from_dict() accepts the
snake_case JSON shapes used on the wire; to_dict() emits the same shape
with absent (None) members dropped, which is what the structural hash
fingerprints.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..constants import (
    KEY_ACCOUNT_IDENTIFIER,
    KEY_BLOCK_IDENTIFIER,
    KEY_COIN_CHANGE,
    KEY_OPERATION_IDENTIFIER,
    KEY_PARENT_BLOCK_IDENTIFIER,
    KEY_RELATED_OPERATIONS,
    KEY_SUB_ACCOUNT,
    KEY_TRANSACTION_IDENTIFIER,
)
from ..core.logger.ipo_logging import get_input_logger


logger = get_input_logger('models.rosetta')


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop members whose value is None."""
    return {k: v for k, v in data.items() if v is not None}


# ==============================================================================
# ACCOUNTS AND AMOUNTS
# ==============================================================================

@dataclass
class Currency:
    """
    Currency of an amount.

    Attributes:
        symbol: Ticker-like symbol (e.g., "BTC")
        decimals: Number of decimal places in the atomic unit
        metadata: Network-specific details
    """
    symbol: str
    decimals: int
    metadata: Optional[dict] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return _compact({
            'symbol': self.symbol,
            'decimals': self.decimals,
            'metadata': self.metadata,
        })

    @classmethod
    def from_dict(cls, data: dict) -> 'Currency':
        """Create from dictionary."""
        return cls(
            symbol=data['symbol'],
            decimals=data['decimals'],
            metadata=data.get('metadata'),
        )


@dataclass
class Amount:
    """
    Signed amount in atomic units.

    Attributes:
        value: Arbitrary-precision integer encoded as a string (e.g., "-1500")
        currency: Currency of the value
        metadata: Network-specific details
    """
    value: str
    currency: Currency
    metadata: Optional[dict] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return _compact({
            'value': self.value,
            'currency': self.currency.to_dict(),
            'metadata': self.metadata,
        })

    @classmethod
    def from_dict(cls, data: dict) -> 'Amount':
        """Create from dictionary."""
        return cls(
            value=data['value'],
            currency=Currency.from_dict(data['currency']),
            metadata=data.get('metadata'),
        )


@dataclass
class SubAccountIdentifier:
    """Sub-account of an account (e.g., staked or vesting balance)."""
    address: str
    metadata: Optional[dict] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return _compact({'address': self.address, 'metadata': self.metadata})

    @classmethod
    def from_dict(cls, data: dict) -> 'SubAccountIdentifier':
        """Create from dictionary."""
        return cls(address=data['address'], metadata=data.get('metadata'))


@dataclass
class AccountIdentifier:
    """
    Uniquely identifies an account within a network.

    Attributes:
        address: Account address
        sub_account: Optional sub-account
        metadata: Network-specific details
    """
    address: str
    sub_account: Optional[SubAccountIdentifier] = None
    metadata: Optional[dict] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return _compact({
            'address': self.address,
            KEY_SUB_ACCOUNT: self.sub_account.to_dict() if self.sub_account else None,
            'metadata': self.metadata,
        })

    @classmethod
    def from_dict(cls, data: dict) -> 'AccountIdentifier':
        """Create from dictionary."""
        sub_account = data.get(KEY_SUB_ACCOUNT)
        return cls(
            address=data['address'],
            sub_account=SubAccountIdentifier.from_dict(sub_account) if sub_account else None,
            metadata=data.get('metadata'),
        )


# ==============================================================================
# OPERATIONS
# ==============================================================================

@dataclass
class OperationIdentifier:
    """Position of an operation within its transaction."""
    index: int
    network_index: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return _compact({'index': self.index, 'network_index': self.network_index})

    @classmethod
    def from_dict(cls, data: dict) -> 'OperationIdentifier':
        """Create from dictionary."""
        return cls(index=data['index'], network_index=data.get('network_index'))


@dataclass
class CoinChange:
    """Creation or spend of a coin (UTXO) by an operation."""
    coin_identifier: str
    coin_action: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'coin_identifier': {'identifier': self.coin_identifier},
            'coin_action': self.coin_action,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CoinChange':
        """Create from dictionary."""
        identifier = data.get('coin_identifier') or {}
        return cls(
            coin_identifier=identifier.get('identifier', ''),
            coin_action=data['coin_action'],
        )


@dataclass
class OperationStatus:
    """A status a network may assign to operations, and whether it counts as success."""
    status: str
    successful: bool

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {'status': self.status, 'successful': self.successful}

    @classmethod
    def from_dict(cls, data: dict) -> 'OperationStatus':
        """Create from dictionary."""
        return cls(status=data['status'], successful=bool(data['successful']))


@dataclass
class Operation:
    """
    One balance-changing or informational record within a transaction.

    Attributes:
        operation_identifier: Index of this operation in its transaction
        type: Network-specific operation type (e.g., "transfer")
        status: Execution status, absent for construction intents
        account: Affected account, if any
        amount: Balance change, if any
        coin_change: Coin created or spent, if any
        related_operations: Identifiers of operations this one depends on
        metadata: Network-specific details
    """
    operation_identifier: OperationIdentifier
    type: str
    status: Optional[str] = None
    account: Optional[AccountIdentifier] = None
    amount: Optional[Amount] = None
    coin_change: Optional[CoinChange] = None
    related_operations: list[OperationIdentifier] = field(default_factory=list)
    metadata: Optional[dict] = None

    @property
    def index(self) -> int:
        """Index of this operation in its transaction."""
        return self.operation_identifier.index

    @property
    def coin_action(self) -> Optional[str]:
        """Coin action of the coin change, if any."""
        return self.coin_change.coin_action if self.coin_change else None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return _compact({
            KEY_OPERATION_IDENTIFIER: self.operation_identifier.to_dict(),
            KEY_RELATED_OPERATIONS: (
                [r.to_dict() for r in self.related_operations]
                if self.related_operations else None
            ),
            'type': self.type,
            'status': self.status,
            'account': self.account.to_dict() if self.account else None,
            'amount': self.amount.to_dict() if self.amount else None,
            KEY_COIN_CHANGE: self.coin_change.to_dict() if self.coin_change else None,
            'metadata': self.metadata,
        })

    @classmethod
    def from_dict(cls, data: dict) -> 'Operation':
        """
        Create an Operation from its JSON shape.

        Args:
            data: Dictionary with operation fields

        Returns:
            Operation instance
        """
        account = data.get('account')
        amount = data.get('amount')
        coin_change = data.get(KEY_COIN_CHANGE)
        return cls(
            operation_identifier=OperationIdentifier.from_dict(data[KEY_OPERATION_IDENTIFIER]),
            type=data.get('type', ''),
            status=data.get('status'),
            account=AccountIdentifier.from_dict(account) if account else None,
            amount=Amount.from_dict(amount) if amount else None,
            coin_change=CoinChange.from_dict(coin_change) if coin_change else None,
            related_operations=[
                OperationIdentifier.from_dict(r)
                for r in data.get(KEY_RELATED_OPERATIONS) or []
            ],
            metadata=data.get('metadata'),
        )


# ==============================================================================
# TRANSACTIONS AND BLOCKS
# ==============================================================================

@dataclass
class Transaction:
    """Ordered sequence of operations under one transaction hash."""
    transaction_identifier: str
    operations: list[Operation] = field(default_factory=list)
    metadata: Optional[dict] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return _compact({
            KEY_TRANSACTION_IDENTIFIER: {'hash': self.transaction_identifier},
            'operations': [op.to_dict() for op in self.operations],
            'metadata': self.metadata,
        })

    @classmethod
    def from_dict(cls, data: dict) -> 'Transaction':
        """Create from dictionary."""
        identifier = data.get(KEY_TRANSACTION_IDENTIFIER) or {}
        operations = [Operation.from_dict(op) for op in data.get('operations') or []]
        logger.debug(
            f"Loaded transaction {identifier.get('hash', '')} "
            f"with {len(operations)} operations"
        )
        return cls(
            transaction_identifier=identifier.get('hash', ''),
            operations=operations,
            metadata=data.get('metadata'),
        )


@dataclass
class BlockIdentifier:
    """Height and hash of a block."""
    index: int
    hash: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {'index': self.index, 'hash': self.hash}

    @classmethod
    def from_dict(cls, data: dict) -> 'BlockIdentifier':
        """Create from dictionary."""
        return cls(index=data['index'], hash=data['hash'])


@dataclass
class Block:
    """
    A block and the transactions it contains.

    Attributes:
        block_identifier: This block
        parent_block_identifier: The block this one builds on
        transactions: Transactions in block order
        timestamp: Milliseconds since the epoch
        metadata: Network-specific details
    """
    block_identifier: BlockIdentifier
    parent_block_identifier: BlockIdentifier
    transactions: list[Transaction] = field(default_factory=list)
    timestamp: Optional[int] = None
    metadata: Optional[dict] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return _compact({
            KEY_BLOCK_IDENTIFIER: self.block_identifier.to_dict(),
            KEY_PARENT_BLOCK_IDENTIFIER: self.parent_block_identifier.to_dict(),
            'timestamp': self.timestamp,
            'transactions': [tx.to_dict() for tx in self.transactions],
            'metadata': self.metadata,
        })

    @classmethod
    def from_dict(cls, data: dict) -> 'Block':
        """Create from dictionary."""
        return cls(
            block_identifier=BlockIdentifier.from_dict(data[KEY_BLOCK_IDENTIFIER]),
            parent_block_identifier=BlockIdentifier.from_dict(data[KEY_PARENT_BLOCK_IDENTIFIER]),
            transactions=[Transaction.from_dict(tx) for tx in data.get('transactions') or []],
            timestamp=data.get('timestamp'),
            metadata=data.get('metadata'),
        )


# ==============================================================================
# SIGNING
# ==============================================================================

@dataclass
class SigningPayload:
    """
    Bytes an account is expected to sign.

    account_identifier supersedes the older bare address when both are set.
    """
    address: Optional[str] = None
    account_identifier: Optional[AccountIdentifier] = None
    hex_bytes: str = ''
    signature_type: Optional[str] = None

    @property
    def signer(self) -> Optional[str]:
        """Address expected to sign this payload."""
        if self.account_identifier is not None:
            return self.account_identifier.address
        return self.address

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return _compact({
            'address': self.address,
            KEY_ACCOUNT_IDENTIFIER: (
                self.account_identifier.to_dict() if self.account_identifier else None
            ),
            'hex_bytes': self.hex_bytes,
            'signature_type': self.signature_type,
        })

    @classmethod
    def from_dict(cls, data: dict) -> 'SigningPayload':
        """Create from dictionary."""
        account = data.get(KEY_ACCOUNT_IDENTIFIER)
        return cls(
            address=data.get('address'),
            account_identifier=AccountIdentifier.from_dict(account) if account else None,
            hex_bytes=data.get('hex_bytes', ''),
            signature_type=data.get('signature_type'),
        )


__all__ = [
    'Currency',
    'Amount',
    'SubAccountIdentifier',
    'AccountIdentifier',
    'OperationIdentifier',
    'CoinChange',
    'OperationStatus',
    'Operation',
    'Transaction',
    'BlockIdentifier',
    'Block',
    'SigningPayload',
]
