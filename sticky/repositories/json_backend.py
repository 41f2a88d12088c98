"""
JSON backend - pydantic codec plus one .json file per record type.

Directory structure:
    {data_dir}/
        {TypeName}.json   - JSON array holding the full collection
"""

import threading
from pathlib import Path
from typing import Any, Optional, Sequence, Type

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from sticky.config import FILE_EXTENSION
from sticky.errors import DecodeError, DecodeErrorKind, EncodeError
from sticky.models import Record
from .base import Codec, FileBackend

_MISMATCH_TYPES = {"model_type", "model_attributes_type", "list_type", "dataclass_type"}


def classify_validation_error(error: ValidationError) -> DecodeError:
    """Map the first pydantic error onto a DecodeErrorKind with context."""
    details = error.errors()
    if not details:
        return DecodeError(DecodeErrorKind.UNKNOWN, str(error), cause=error)

    first = details[0]
    error_type = first.get("type", "")
    loc = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    context = f"{loc}: {first.get('msg', '')}"

    if error_type == "json_invalid":
        kind = DecodeErrorKind.DATA_CORRUPTED
    elif error_type == "missing":
        kind = DecodeErrorKind.KEY_NOT_FOUND
    elif "input" in first and first["input"] is None:
        kind = DecodeErrorKind.VALUE_NOT_FOUND
    elif error_type in _MISMATCH_TYPES or error_type.endswith(("_type", "_parsing")):
        kind = DecodeErrorKind.TYPE_MISMATCH
    else:
        kind = DecodeErrorKind.UNKNOWN

    return DecodeError(kind, context, cause=error)


class JsonCodec(Codec):
    """Encodes collections as indented JSON arrays via pydantic."""

    def __init__(self, indent: Optional[int] = 2):
        self.indent = indent
        self._adapters: dict[type, TypeAdapter] = {}
        self._lock = threading.Lock()

    def _adapter(self, record_type: Type[Record]) -> TypeAdapter:
        with self._lock:
            adapter = self._adapters.get(record_type)
            if adapter is None:
                adapter = TypeAdapter(list[record_type])
                self._adapters[record_type] = adapter
            return adapter

    def encode(self, collection: Sequence[Record], record_type: Type[Record]) -> bytes:
        try:
            return self._adapter(record_type).dump_json(list(collection), indent=self.indent)
        except PydanticSerializationError as e:
            raise EncodeError(f"Failed to encode {record_type.__name__}: {e}") from e

    def decode(self, data: bytes, record_type: Type[Record]) -> list[Record]:
        try:
            return self._adapter(record_type).validate_json(data)
        except ValidationError as e:
            raise classify_validation_error(e) from e


class WriteQueue:
    """Thread-safe write serialization."""

    def __init__(self):
        self._lock = threading.Lock()

    def write_bytes(self, path: Path, data: bytes) -> None:
        """Atomic write: temp file, then rename over the target."""
        with self._lock:
            path.parent.mkdir(parents=True, exist_ok=True)
            temp = path.with_suffix(FILE_EXTENSION + ".tmp")
            with open(temp, "wb") as f:
                f.write(data)
                f.flush()
            temp.replace(path)


class JsonFileBackend(FileBackend):
    """Stores each collection at {data_dir}/{type_name}.json."""

    def __init__(self, data_dir: Path, write_queue: Optional[WriteQueue] = None):
        self.data_dir = Path(data_dir)
        self._write_queue = write_queue or WriteQueue()

    def path_for(self, type_name: str) -> Path:
        return self.data_dir / f"{type_name}{FILE_EXTENSION}"

    def read(self, type_name: str) -> Optional[bytes]:
        path = self.path_for(type_name)
        if not path.exists():
            return None
        with open(path, "rb") as f:
            return f.read()

    def write(self, type_name: str, data: bytes) -> None:
        self._write_queue.write_bytes(self.path_for(type_name), data)

    def __repr__(self) -> str:
        return f"JsonFileBackend({str(self.data_dir)!r})"


def read_text(data: Any) -> str:
    """Best-effort text rendering of raw bytes for logs."""
    if data is None:
        return ""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="replace")
    return str(data)
