"""
Repository layer - codecs and file backends behind small interfaces.

Usage:
    from sticky.repositories import JsonCodec, JsonFileBackend

    backend = JsonFileBackend(Path("data"))
    codec = JsonCodec()

Backends are swappable; the store only sees Codec and FileBackend.
"""

from .base import Codec, FileBackend
from .json_backend import JsonCodec, JsonFileBackend, WriteQueue, classify_validation_error

__all__ = [
    "Codec",
    "FileBackend",
    "JsonCodec",
    "JsonFileBackend",
    "WriteQueue",
    "classify_validation_error",
]
