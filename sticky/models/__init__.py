"""
Record models and the pure decision logic of the store.

- Records and keyed records (base)
- Identity strategies (identity)
- Store actions (actions)
- Store statistics (stats)
"""

from .base import Record, KeyedRecord, entity_name
from .identity import EqualityIdentity, KeyIdentity, IdentityStrategy, identity_for
from .actions import (
    Insert,
    ReplaceAt,
    RemoveAt,
    NoOp,
    StoreAction,
    StoreResult,
    compute_upsert_action,
    compute_delete_action,
)
from .stats import StoreStats

__all__ = [
    # Base
    "Record",
    "KeyedRecord",
    "entity_name",
    # Identity
    "EqualityIdentity",
    "KeyIdentity",
    "IdentityStrategy",
    "identity_for",
    # Actions
    "Insert",
    "ReplaceAt",
    "RemoveAt",
    "NoOp",
    "StoreAction",
    "StoreResult",
    "compute_upsert_action",
    "compute_delete_action",
    # Stats
    "StoreStats",
]
