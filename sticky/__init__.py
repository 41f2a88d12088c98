"""
Sticky - typed document persistence.

Usage:
    from typing import ClassVar

    from sticky import StickyStore, KeyedRecord

    class Setting(KeyedRecord):
        key_field: ClassVar[str] = "name"
        name: str
        value: str

    store = StickyStore()
    store.upsert(Setting(name="theme", value="dark"))
    settings = store.load(Setting)
"""

from .cache import CollectionCache
from .config import LogStyle, StickyConfiguration
from .errors import (
    ConfigError,
    DecodeError,
    DecodeErrorKind,
    EncodeError,
    StickyError,
    StoreError,
    StoreWriteError,
)
from .log import LogLevel, StickyLogger
from .models import (
    EqualityIdentity,
    Insert,
    KeyIdentity,
    KeyedRecord,
    NoOp,
    Record,
    RemoveAt,
    ReplaceAt,
    StoreResult,
    StoreStats,
    entity_name,
    identity_for,
)
from .notifications import ChangeNotifier
from .store import StickyStore, configure_store, get_store

__all__ = [
    "StickyStore",
    "get_store",
    "configure_store",
    "Record",
    "KeyedRecord",
    "entity_name",
    "EqualityIdentity",
    "KeyIdentity",
    "identity_for",
    "Insert",
    "ReplaceAt",
    "RemoveAt",
    "NoOp",
    "StoreResult",
    "StoreStats",
    "CollectionCache",
    "ChangeNotifier",
    "StickyConfiguration",
    "LogStyle",
    "StickyLogger",
    "LogLevel",
    "StickyError",
    "ConfigError",
    "DecodeError",
    "DecodeErrorKind",
    "StoreError",
    "EncodeError",
    "StoreWriteError",
]
