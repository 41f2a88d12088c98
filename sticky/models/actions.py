"""
Store actions - the computed effect of one mutation request.

Actions are plain values; materialize() builds the resulting collection
without touching the input list.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from .base import Record


@dataclass(frozen=True)
class Insert:
    record: Record

    def materialize(self, collection: Optional[Sequence[Record]]) -> list[Record]:
        return [*(collection or ()), self.record]


@dataclass(frozen=True)
class ReplaceAt:
    index: int
    record: Record

    def materialize(self, collection: Optional[Sequence[Record]]) -> list[Record]:
        result = list(collection or ())
        result[self.index] = self.record
        return result


@dataclass(frozen=True)
class RemoveAt:
    index: int

    def materialize(self, collection: Optional[Sequence[Record]]) -> list[Record]:
        result = list(collection or ())
        del result[self.index]
        return result


@dataclass(frozen=True)
class NoOp:
    reason: str = ""

    def materialize(self, collection: Optional[Sequence[Record]]) -> list[Record]:
        return list(collection or ())


StoreAction = Union[Insert, ReplaceAt, RemoveAt, NoOp]


def compute_upsert_action(
    collection: Optional[Sequence[Record]],
    record: Record,
    position: Optional[int],
) -> StoreAction:
    """
    Decide what an upsert does.

    A key match with changed non-key fields is a replace; only a fully
    equal record at the matched position is a no-op.
    """
    if position is None:
        return Insert(record)
    if collection[position] == record:
        return NoOp("unchanged")
    return ReplaceAt(position, record)


def compute_delete_action(position: Optional[int]) -> StoreAction:
    if position is None:
        return NoOp("not found")
    return RemoveAt(position)


@dataclass(frozen=True)
class StoreResult:
    """Outcome of upsert/delete. The write has finished by the time this exists."""
    type_name: str
    action: StoreAction

    @property
    def changed(self) -> bool:
        return not isinstance(self.action, NoOp)

    def after(self, completion: Callable[[], None]) -> "StoreResult":
        """Run a follow-up once the mutation is done (immediately)."""
        completion()
        return self
