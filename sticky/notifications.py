"""
Change notifications - observers subscribe to a type name and are called
after every successful write to that type's collection.
"""

import threading
from typing import Callable, Optional

from .log import StickyLogger

Observer = Callable[[str], None]


class ChangeNotifier:
    """
    Fire-and-forget callback registry.

    Observer errors are logged and never reach the writer.
    """

    def __init__(self, logger: Optional[StickyLogger] = None):
        self._observers: dict[str, list[Observer]] = {}
        self._lock = threading.Lock()
        self._logger = logger or StickyLogger()

    def add_observer(self, type_name: str, callback: Observer) -> None:
        with self._lock:
            self._observers.setdefault(type_name, []).append(callback)

    def remove_observer(self, type_name: str, callback: Observer) -> None:
        with self._lock:
            callbacks = self._observers.get(type_name, [])
            if callback in callbacks:
                callbacks.remove(callback)

    def observers(self, type_name: str) -> list[Observer]:
        with self._lock:
            return list(self._observers.get(type_name, []))

    def notify(self, type_name: str) -> None:
        """Call every observer of type_name."""
        for cb in self.observers(type_name):
            try:
                cb(type_name)
            except Exception as e:
                self._logger.error(f"{type_name} observer failed: {e}")
