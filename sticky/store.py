"""
Store engine - upsert/delete resolution and cache coherence.

Every mutation for a type name runs under that type's lock:
    load (cache first, else decode) -> resolve identity -> compute action
    -> encode -> write -> update cache -> notify

The cache is only updated after the write succeeds, so a failed write
leaves cache and disk agreeing on the pre-mutation state.
"""

import threading
from typing import Callable, Optional, Type, Union

from .cache import CollectionCache
from .config import LogStyle, StickyConfiguration
from .errors import DecodeError, EncodeError, StoreWriteError
from .log import StickyLogger
from .models import (
    IdentityStrategy,
    KeyIdentity,
    NoOp,
    Record,
    StoreAction,
    StoreResult,
    StoreStats,
    compute_delete_action,
    compute_upsert_action,
    entity_name,
    identity_for,
)
from .notifications import ChangeNotifier, Observer
from .repositories import Codec, FileBackend, JsonCodec, JsonFileBackend
from .repositories.json_backend import read_text

RecordType = Type[Record]


class StickyStore:
    """
    Typed document store: one JSON file and one cache entry per record type.

    Construct once per process and pass it around. Every collaborator can
    be swapped for tests or other storage.
    """

    def __init__(
        self,
        config: Optional[StickyConfiguration] = None,
        codec: Optional[Codec] = None,
        backend: Optional[FileBackend] = None,
        cache: Optional[CollectionCache] = None,
        notifier: Optional[ChangeNotifier] = None,
        logger: Optional[StickyLogger] = None,
    ):
        self.config = config or StickyConfiguration()
        self.logger = logger or StickyLogger(self.config.log_style)
        self.codec = codec or JsonCodec()
        self.backend = backend or JsonFileBackend(self.config.data_dir)
        self.cache = cache or CollectionCache()
        self.notifier = notifier or ChangeNotifier(self.logger)
        self.stats = StoreStats()
        self._locks: dict[str, threading.RLock] = {}
        self._locks_lock = threading.Lock()

    def _lock_for(self, type_name: str) -> threading.RLock:
        with self._locks_lock:
            lock = self._locks.get(type_name)
            if lock is None:
                lock = threading.RLock()
                self._locks[type_name] = lock
            return lock

    # === Reads ===

    def load(self, record_type: RecordType) -> Optional[list[Record]]:
        """Collection for record_type, or None if nothing is stored (or it can't be decoded)."""
        name = entity_name(record_type)
        cached = self.cache.get(name)
        if cached:
            self.stats.record_cache_hit()
            self.logger.debug(f"{name} read from cache")
            return list(cached)
        return self._decode(record_type, self.backend.read(name))

    def load_async(
        self,
        record_type: RecordType,
        completion: Callable[[Optional[list[Record]]], None],
    ) -> threading.Thread:
        """Load on a background thread and hand the result to completion."""
        thread = threading.Thread(
            target=lambda: completion(self.load(record_type)),
            daemon=True,
        )
        thread.start()
        return thread

    def _decode(self, record_type: RecordType, data: Optional[bytes]) -> Optional[list[Record]]:
        if not data:
            return None

        name = entity_name(record_type)
        try:
            decoded = self.codec.decode(data, record_type)
        except DecodeError as e:
            # Corrupt data reads as "no data"; the next write replaces the file
            self.stats.record_decode_failure(str(e))
            self.logger.error(
                f"{name}.load {e.kind.value} {e.context} "
                f"{name}: {read_text(data)}"
            )
            return None

        self.cache.populate_if_empty(name, decoded)
        return list(decoded)

    def exists(self, record: Record, identity: Optional[IdentityStrategy] = None) -> bool:
        """Is a matching record stored? Matching follows the identity strategy."""
        strategy = identity or identity_for(type(record))
        return strategy.resolve(self.load(type(record)), record) is not None

    # === Mutations ===

    def upsert(self, record: Record, identity: Optional[IdentityStrategy] = None) -> StoreResult:
        """
        Insert record, replace its stored match, or do nothing if unchanged.

        Keyed records match on key by default; everything else on equality.
        """
        record_type = type(record)
        name = entity_name(record_type)
        strategy = identity or identity_for(record_type)

        with self._lock_for(name):
            collection = self.load(record_type)
            how = "with key" if isinstance(strategy, KeyIdentity) else "without key"
            self.logger.debug(f"{name} saving {how}")
            position = strategy.resolve(collection, record)
            action = compute_upsert_action(collection, record, position)
            self.apply(action, record_type, collection)

        return StoreResult(name, action)

    def delete(self, record: Record, identity: Optional[IdentityStrategy] = None) -> StoreResult:
        """Remove the stored match of record. Missing records are a no-op."""
        record_type = type(record)
        name = entity_name(record_type)
        strategy = identity or identity_for(record_type)

        with self._lock_for(name):
            collection = self.load(record_type)
            self.logger.debug(f"{name} removing data {record!r}")
            position = strategy.resolve(collection, record)
            action = compute_delete_action(position)
            self.apply(action, record_type, collection)

        return StoreResult(name, action)

    def apply(
        self,
        action: StoreAction,
        record_type: RecordType,
        collection: Optional[list[Record]] = None,
    ) -> None:
        """
        Persist an action: encode, overwrite the file, update cache, notify.

        NoOp returns without I/O. Encode and write failures propagate as
        StoreError and leave the cache untouched.
        """
        name = entity_name(record_type)
        if isinstance(action, NoOp):
            self.stats.record_no_op()
            self.logger.debug(f"{name} no-op ({action.reason})")
            return

        with self._lock_for(name):
            if collection is None:
                collection = self.load(record_type)
            updated = action.materialize(collection)

            try:
                data = self.codec.encode(updated, record_type)
            except EncodeError as e:
                self.stats.record_write_failure(str(e))
                self.logger.error(f"{name}.apply {e}")
                raise

            try:
                self.backend.write(name, data)
            except OSError as e:
                self.stats.record_write_failure(str(e))
                self.logger.error(f"{name}.apply write failed: {e}")
                raise StoreWriteError(f"Failed to write {name}: {e}") from e

            self.cache.store(name, updated)
            self.stats.record_write()

        self.notifier.notify(name)
        self.stats.record_notification()

    # === Diagnostics ===

    def path(self, record_type: Union[RecordType, str]) -> str:
        return str(self.backend.path_for(entity_name(record_type)))

    def notification_name(self, record_type: Union[RecordType, str]) -> str:
        return entity_name(record_type)

    def observe(self, record_type: Union[RecordType, str], callback: Observer) -> None:
        self.notifier.add_observer(entity_name(record_type), callback)

    def stop_observing(self, record_type: Union[RecordType, str], callback: Observer) -> None:
        self.notifier.remove_observer(entity_name(record_type), callback)

    def dump_to_log(self, record_type: Union[RecordType, str]) -> Optional[threading.Thread]:
        """
        Log the raw stored file for a type (verbose logging only).

        With async_dump the dump runs on a background thread, which is returned.
        """
        name = entity_name(record_type)
        if self.config.log_style != LogStyle.VERBOSE:
            self.logger.warning(
                f"{name}.dump_to_log - enable verbose logging in StickyConfiguration to see stored data"
            )
            return None

        if self.config.async_dump:
            thread = threading.Thread(target=self._dump, args=(name,), daemon=True)
            thread.start()
            return thread

        self._dump(name)
        return None

    def _dump(self, type_name: str) -> None:
        data = self.backend.read(type_name)
        if data is None:
            return
        self.logger.info(f"{type_name}: {read_text(data)}")


# Default store - built lazily from the environment
_instance: Optional[StickyStore] = None
_init_lock = threading.Lock()


def get_store() -> StickyStore:
    """Get or create the process-wide default store."""
    global _instance
    with _init_lock:
        if _instance is None:
            _instance = StickyStore(StickyConfiguration.from_env())
        return _instance


def configure_store(store: Optional[StickyStore]) -> None:
    """Replace the default store. None forces a rebuild on next get_store()."""
    global _instance
    with _init_lock:
        _instance = store
