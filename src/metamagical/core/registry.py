"""Identity-keyed metadata registry."""

import os
import threading
import weakref
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .models import MetadataRecord, META_SYMBOL
from ..utils.assertions import assert_object
from ..utils.logging_config import get_logger

DEFAULT_SHARD_COUNT = 16


def _default_shard_count() -> int:
    raw = os.getenv('METAMAGICAL_REGISTRY_SHARDS')
    if raw is None:
        return DEFAULT_SHARD_COUNT
    try:
        shard_count = int(raw)
    except ValueError:
        shard_count = 0
    if shard_count < 1:
        get_logger('registry').warning(
            f"Ignoring invalid METAMAGICAL_REGISTRY_SHARDS={raw!r}, using {DEFAULT_SHARD_COUNT}"
        )
        return DEFAULT_SHARD_COUNT
    return shard_count


class _Shard:
    """A slice of the registry guarded by its own lock."""

    __slots__ = ('lock', 'entries', 'pending_removals')

    def __init__(self):
        self.lock = threading.Lock()
        # id(obj) -> (weak reference to obj, metadata record)
        self.entries: Dict[int, Tuple[weakref.ref, MetadataRecord]] = {}
        self.pending_removals: List[int] = []


class MetadataRegistry:
    """
    Registry associating runtime objects with metadata records.

    Keys are compared by identity and held weakly: an entry never keeps its
    object alive and disappears once the object is garbage-collected.
    Objects may also carry their own record under ``META_SYMBOL``; lookups
    merge that record with the registry's, the registry winning on conflict.
    """

    def __init__(self, assertion: Callable[[Any], None] = assert_object,
                 shards: Optional[int] = None):
        """
        Initialize the registry.

        Args:
            assertion: Precondition check run against every key object
            shards: Number of independently locked shards
        """
        self.logger = get_logger('registry')
        self.assertion = assertion
        shard_count = shards if shards is not None else _default_shard_count()
        if shard_count < 1:
            raise ValueError(f"Shard count must be positive, got {shard_count}")
        self._shards = [_Shard() for _ in range(shard_count)]

    def get(self, obj: Any) -> MetadataRecord:
        """
        Get all metadata associated with an object.

        Args:
            obj: Object to look up

        Returns:
            A new record merging the object's own metadata with the registry's
        """
        self._assert(obj)

        data: MetadataRecord = {}
        carried = self._carried_metadata(obj)
        # Anything other than a mapping is treated as no metadata
        if isinstance(carried, Mapping):
            data.update(carried)

        shard = self._shard_for(obj)
        with shard.lock:
            self._purge(shard)
            entry = self._live_entry(shard, obj)
            if entry is not None:
                data.update(entry[1])
        return data

    def set(self, obj: Any, key: str, value: Any) -> Any:
        """
        Associate a value with a metadata key of an object.

        Args:
            obj: Object to annotate
            key: Metadata key
            value: Metadata value

        Returns:
            The same object, for chaining
        """
        self._assert(obj)

        shard = self._shard_for(obj)
        with shard.lock:
            self._purge(shard)
            record = self._record_for_write(shard, obj)
            record[key] = value
        return obj

    def update(self, obj: Any, meta: Mapping[str, Any]) -> Any:
        """
        Shallow-merge a partial record into an object's metadata.

        Args:
            obj: Object to annotate
            meta: Keys and values to merge

        Returns:
            The same object, for chaining
        """
        self._assert(obj)
        # Materialize first so a bad mapping fails before the entry exists
        changes = dict(meta)

        shard = self._shard_for(obj)
        with shard.lock:
            self._purge(shard)
            record = self._record_for_write(shard, obj)
            record.update(changes)
        return obj

    def __contains__(self, obj: Any) -> bool:
        shard = self._shard_for(obj)
        with shard.lock:
            self._purge(shard)
            return self._live_entry(shard, obj) is not None

    def __len__(self) -> int:
        total = 0
        for shard in self._shards:
            with shard.lock:
                self._purge(shard)
                total += sum(1 for ref, _ in shard.entries.values() if ref() is not None)
        return total

    def _assert(self, obj: Any) -> None:
        try:
            self.assertion(obj)
        except Exception as e:
            self.logger.debug(f"Rejected metadata key of type {type(obj).__name__}: {e}")
            raise

    def _shard_for(self, obj: Any) -> _Shard:
        # Python objects are word-aligned, so drop the low bits
        return self._shards[(id(obj) >> 4) % len(self._shards)]

    @staticmethod
    def _carried_metadata(obj: Any) -> Optional[Mapping[str, Any]]:
        """Return the record the object carries as an own attribute, if any."""
        own = getattr(obj, '__dict__', None)
        if own is None:
            return None
        try:
            return own.get(META_SYMBOL)
        except AttributeError:
            return None

    @staticmethod
    def _live_entry(shard: _Shard, obj: Any) -> Optional[Tuple[weakref.ref, MetadataRecord]]:
        entry = shard.entries.get(id(obj))
        if entry is None or entry[0]() is not obj:
            return None
        return entry

    def _record_for_write(self, shard: _Shard, obj: Any) -> MetadataRecord:
        """Fetch or lazily create the record for obj. Caller holds the shard lock."""
        entry = self._live_entry(shard, obj)
        if entry is not None:
            return entry[1]

        key = id(obj)
        ref = weakref.ref(obj, self._make_eviction_callback(shard, key))
        record: MetadataRecord = {}
        shard.entries[key] = (ref, record)
        self.logger.debug(f"Created metadata entry for {type(obj).__name__} at {key:#x}")
        return record

    @staticmethod
    def _make_eviction_callback(shard: _Shard, key: int) -> Callable[[weakref.ref], None]:
        def evict(ref: weakref.ref) -> None:
            # The collector may run while this thread holds the lock
            if shard.lock.acquire(blocking=False):
                try:
                    entry = shard.entries.get(key)
                    if entry is not None and entry[0] is ref:
                        del shard.entries[key]
                finally:
                    shard.lock.release()
            else:
                shard.pending_removals.append(key)

        return evict

    def _purge(self, shard: _Shard) -> None:
        """Drop entries whose objects are gone. Caller holds the shard lock."""
        while shard.pending_removals:
            key = shard.pending_removals.pop()
            entry = shard.entries.get(key)
            if entry is not None and entry[0]() is None:
                del shard.entries[key]
                self.logger.debug(f"Evicted metadata entry at {key:#x}")
