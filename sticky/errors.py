"""
Exception hierarchy.

Decode failures are non-fatal (the store logs them and treats the
collection as absent). Store failures abort the current mutation.
"""

from enum import Enum
from typing import Optional


class StickyError(Exception):
    """Base for all sticky failures."""


class ConfigError(StickyError):
    """Invalid configuration value."""


class DecodeErrorKind(str, Enum):
    """Classification of a decode failure."""
    KEY_NOT_FOUND = "key_not_found"
    DATA_CORRUPTED = "data_corrupted"
    TYPE_MISMATCH = "type_mismatch"
    VALUE_NOT_FOUND = "value_not_found"
    UNKNOWN = "unknown"


class DecodeError(StickyError):
    """Stored bytes could not be decoded into a collection."""

    def __init__(self, kind: DecodeErrorKind, context: str = "", cause: Optional[Exception] = None):
        self.kind = kind
        self.context = context
        self.cause = cause
        super().__init__(f"{kind.value}: {context}" if context else kind.value)


class StoreError(StickyError):
    """A mutation could not be persisted."""


class EncodeError(StoreError):
    """Collection could not be serialized."""


class StoreWriteError(StoreError):
    """Serialized collection could not be written to disk."""
