"""
Base record classes.

Every Record compares structurally (pydantic equality: same class, same
field values). KeyedRecord adds an identity key that is independent of
the remaining fields.
"""

from typing import Any, ClassVar, Optional, Type, Union

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """
    Base for all persisted records.

    Records are frozen: the store hands cached instances to callers, so
    they must not change underneath it.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",  # Older files may carry fields we dropped
    )


class KeyedRecord(Record):
    """
    A record with an explicit identity key.

    Set key_field to the name of the identifying field, or override
    record_key for composite keys.
    """
    key_field: ClassVar[Optional[str]] = None

    @property
    def record_key(self) -> Any:
        if not self.key_field:
            raise TypeError(f"{type(self).__name__} must set key_field or override record_key")
        return getattr(self, self.key_field)


def entity_name(record_type: Union[Type[Record], Record, str]) -> str:
    """Type name identifying a collection: its file and its cache entry."""
    if isinstance(record_type, str):
        return record_type
    if isinstance(record_type, Record):
        record_type = type(record_type)
    return record_type.__name__
