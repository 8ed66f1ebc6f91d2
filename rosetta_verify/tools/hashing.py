# Path: rosetta_verify/tools/hashing.py
"""
Structural Hash

Stable fingerprint of structured values (accounts, currencies, amounts)
so they can be compared for equality regardless of key order.

Records are reduced to plain JSON (dataclasses through to_dict(), None
members dropped), serialized canonically with sorted keys, and digested
with SHA-256.
"""

import hashlib
import json
from decimal import Decimal
from enum import Enum
from typing import Any


def _canonical(value: Any) -> Any:
    """Reduce a value to plain JSON types."""
    if hasattr(value, 'to_dict'):
        return _canonical(value.to_dict())
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, dict):
        return {str(k): _canonical(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_canonical(v) for v in value]
    return value


def structural_hash(value: Any) -> str:
    """
    Compute the structural hash of a value.

    Args:
        value: Record, mapping, list or scalar

    Returns:
        Hex digest; equal for structurally equal values
    """
    payload = json.dumps(
        _canonical(value),
        sort_keys=True,
        separators=(',', ':'),
        ensure_ascii=False,
    )
    return hashlib.sha256(payload.encode('utf-8')).hexdigest()


__all__ = ['structural_hash']
