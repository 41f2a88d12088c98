"""
Collaborator interfaces - how the store talks to codecs and storage.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence, Type

from sticky.models import Record


class Codec(ABC):
    """Turns a whole collection into bytes and back."""

    @abstractmethod
    def encode(self, collection: Sequence[Record], record_type: Type[Record]) -> bytes:
        """Serialize a collection. Raises EncodeError."""
        pass

    @abstractmethod
    def decode(self, data: bytes, record_type: Type[Record]) -> list[Record]:
        """Deserialize a collection. Raises DecodeError."""
        pass


class FileBackend(ABC):
    """Byte storage, one blob per type name."""

    @abstractmethod
    def read(self, type_name: str) -> Optional[bytes]:
        """Stored bytes, or None if nothing has been written yet."""
        pass

    @abstractmethod
    def write(self, type_name: str, data: bytes) -> None:
        """Overwrite the blob. Raises OSError on failure."""
        pass

    @abstractmethod
    def path_for(self, type_name: str) -> Path:
        """Location of the blob (diagnostics and tests)."""
        pass
