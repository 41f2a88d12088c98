"""
Collection cache - decoded collections keyed by type name.

Once an entry is warm it stays warm for the lifetime of the cache; disk
is only read again when the entry is missing or empty.
"""

import threading
from typing import Optional, Sequence

from sticky.models import Record


class CollectionCache:
    """Thread-safe map of type name -> collection."""

    def __init__(self):
        self._stored: dict[str, list[Record]] = {}
        self._lock = threading.Lock()

    def get(self, type_name: str) -> Optional[list[Record]]:
        with self._lock:
            return self._stored.get(type_name)

    def populate_if_empty(self, type_name: str, collection: Sequence[Record]) -> bool:
        """
        Set the entry only if the type has never been cached.

        First writer wins: a decode racing with a write must not clobber
        the newer collection, even when that collection is empty.
        Returns True if the entry was set.
        """
        with self._lock:
            if type_name in self._stored:
                return False
            self._stored[type_name] = list(collection)
            return True

    def store(self, type_name: str, collection: Sequence[Record]) -> None:
        """Replace the entry after a successful write."""
        with self._lock:
            self._stored[type_name] = list(collection)

    def type_names(self) -> list[str]:
        with self._lock:
            return sorted(self._stored)

    def __contains__(self, type_name: str) -> bool:
        with self._lock:
            return bool(self._stored.get(type_name))

    def __len__(self) -> int:
        with self._lock:
            return len(self._stored)
