"""
Store statistics.
"""

import threading
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, PrivateAttr


class StoreStats(BaseModel):
    """
    Counters for one StickyStore.

    Updates take the stats' own lock: cache hits and notifications are
    recorded outside the per-type store lock.
    """
    writes: int = 0
    no_ops: int = 0
    notifications: int = 0
    cache_hits: int = 0
    decode_failures: int = 0
    write_failures: int = 0

    last_write: Optional[datetime] = None
    last_error: Optional[datetime] = None
    last_error_message: Optional[str] = None

    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)

    def record_write(self) -> None:
        with self._lock:
            self.writes += 1
            self.last_write = datetime.now()

    def record_no_op(self) -> None:
        with self._lock:
            self.no_ops += 1

    def record_notification(self) -> None:
        with self._lock:
            self.notifications += 1

    def record_cache_hit(self) -> None:
        with self._lock:
            self.cache_hits += 1

    def record_decode_failure(self, message: Optional[str] = None) -> None:
        with self._lock:
            self.decode_failures += 1
            self._record_error(message)

    def record_write_failure(self, message: Optional[str] = None) -> None:
        with self._lock:
            self.write_failures += 1
            self._record_error(message)

    def _record_error(self, message: Optional[str]) -> None:
        self.last_error = datetime.now()
        self.last_error_message = message

    def to_dict(self) -> dict:
        with self._lock:
            return self.model_dump(mode="json")
