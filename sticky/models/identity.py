"""
Identity resolution - where does a candidate record already live?

Two strategies, chosen per record type:
    EqualityIdentity  first element == candidate
    KeyIdentity       first element whose key == candidate's key
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Type, Union

from .base import KeyedRecord, Record


@dataclass(frozen=True)
class EqualityIdentity:
    """Match on full structural equality."""

    def resolve(self, collection: Optional[Sequence[Record]], candidate: Record) -> Optional[int]:
        for index, element in enumerate(collection or ()):
            if element == candidate:
                return index
        return None


@dataclass(frozen=True)
class KeyIdentity:
    """Match on an extracted key, ignoring all other fields."""
    key_of: Callable[[Record], Any]

    def resolve(self, collection: Optional[Sequence[Record]], candidate: Record) -> Optional[int]:
        wanted = self.key_of(candidate)
        keys = [self.key_of(element) for element in (collection or ())]
        for index, key in enumerate(keys):
            if key == wanted:
                return index
        return None


IdentityStrategy = Union[EqualityIdentity, KeyIdentity]


def _record_key(record: KeyedRecord) -> Any:
    return record.record_key


def identity_for(record_type: Type[Record]) -> IdentityStrategy:
    """Default strategy for a record type: by key if it is keyed."""
    if issubclass(record_type, KeyedRecord):
        return KeyIdentity(_record_key)
    return EqualityIdentity()
